"""
Named output channels for the THAC0 verbosity system.

A channel spec on the command line is ``NAME[:LEVEL]``::

    --show classify        # pin 'classify' to threshold 0
    --show suffix:3        # pin 'suffix' to threshold 3

The defaults below are generic. Applications swap in their own set at
startup (see branchver.channels).
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'config',       # Configuration loading and overrides
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'config':  'Configuration loading and overrides',
    'general': 'General output',
    'hint':    'Contextual tips and suggestions',
    'error':   'Error messages',
    'trace':   'Function call tracing',
}

# Off unless named with --show: init_output() pins them to -1.
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """A parsed channel spec."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``NAME[:LEVEL]`` into a ChannelConfig.

    Raises:
        ValueError: If LEVEL is present but not an integer.
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name.strip(), level=int(level) if level else 0)


def format_channel_list() -> str:
    """Format the known channels for ``--show`` with no argument."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
