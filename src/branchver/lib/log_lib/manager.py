"""
OutputManager — the THAC0 verbosity core.

Emit rule: a message shows when ``level <= threshold``, where the
threshold is the channel override if one is set, else the global
verbosity. Threshold -4 is a hard wall: nothing is written.

    -v raises the threshold, -Q lowers it; they compose (-vv -Q == 1).
    --show classify:3 pins one channel regardless of the global level.
"""

import sys
from typing import Any, Dict, Optional, Set, TextIO

from .hints import get_hint
from . import channels as _channels


class OutputManager:
    """Verbosity-gated writer for diagnostics.

    Usage::

        out = OutputManager(verbosity=2)
        out.emit(2, "  trimmed: {branch}", channel='branch', branch="x")
        out.hint('suffix.truncated', 'result', limit=20)
        out.error("branch_name cannot be None")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Optional[Dict[str, int]] = None,
        file: Optional[TextIO] = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self._file = file
        self._shown_hints: Set[str] = set()

    @property
    def file(self) -> TextIO:
        # Resolved late so pytest's capsys sees writes to stderr.
        return self._file if self._file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Write message if level <= the channel's threshold.

        Args:
            level: Message level (higher = more verbose)
            message: str.format template
            channel: Output channel name
            **kwargs: Template values
        """
        threshold = self.threshold(channel)
        if threshold <= -4 or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session, if context and level allow."""
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= -4 or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def error(self, message: str) -> None:
        """Emit at level -3 on the 'error' channel."""
        self.emit(-3, message, channel='error')

    @property
    def shown_hints(self) -> Set[str]:
        """Hint IDs displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: Optional[list] = None,
                file: Optional[TextIO] = None) -> OutputManager:
    """Create the module-level OutputManager from CLI settings.

    Args:
        verbosity: Global threshold (0 default, >0 louder, <0 quieter)
        channels: ``--show`` specs, e.g. ['classify', 'suffix:3']
        file: Destination (default: stderr)

    Returns:
        The new OutputManager
    """
    global _manager

    overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        overrides[cfg.name] = cfg.level

    _manager = OutputManager(verbosity=verbosity, channel_overrides=overrides,
                             file=file)
    return _manager


def get_output() -> OutputManager:
    """Return the module-level OutputManager, creating a silent default."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
