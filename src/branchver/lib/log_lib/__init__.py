"""
log_lib — THAC0 verbosity system with named channels.

Diagnostics for branchver go through here instead of print(), so the
version string on stdout is never mixed with chatter.

Public API:
    OutputManager       verbosity-gated writer (stderr by default)
    init_output         configure the singleton from CLI flags
    get_output          access the singleton
    Hint                hint dataclass
    register_hint(s)    add hints to the registry
    get_hint            look up a hint by ID
    ChannelConfig       parsed --show spec
    parse_channel_spec  "name[:level]" -> ChannelConfig
    trace               function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
    'trace',
]
