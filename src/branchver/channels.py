"""branchver channel definitions for the THAC0 verbosity system.

Keeps log_lib project-agnostic: this module swaps log_lib's default
channel set for the one branchver actually emits on.

Usage:
    from branchver.channels import configure_branchver_channels
    configure_branchver_channels()   # before init_output()
"""

from branchver.lib.log_lib import channels as _ch


BRANCHVER_CHANNELS = {
    'branch',       # Reference stripping and trim patterns
    'classify',     # Final / pre-release decisions, patch bumps
    'suffix',       # Suffix composition and truncation
    'config',       # Configuration loading and resolution
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

BRANCHVER_CHANNEL_DESCRIPTIONS = {
    'branch':   'Branch name trimming (refs/..., trim patterns)',
    'classify': 'Final vs pre-release classification, patch bumps',
    'suffix':   'Suffix composition and truncation',
    'config':   'Configuration loading and resolution',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

BRANCHVER_OPT_IN_CHANNELS = {
    'trace',
}


def configure_branchver_channels():
    """Install the branchver channel set into log_lib.

    Call once at startup before init_output().
    """
    _ch.KNOWN_CHANNELS = BRANCHVER_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = BRANCHVER_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = BRANCHVER_OPT_IN_CHANNELS
