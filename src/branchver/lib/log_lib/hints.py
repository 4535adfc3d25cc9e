"""
Hint dataclass and global registry.

Domain modules register their hints at import time; OutputManager.hint()
decides whether (and how often) one is shown.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Hint:
    """A templated tip shown in specific contexts.

    Attributes:
        id: Dot-namespaced identifier (e.g. 'suffix.truncated')
        message: Template with {var} placeholders for str.format()
        context: Where the hint applies: 'error', 'result', 'verbose'
        min_level: Minimum threshold on the 'hint' channel
        category: Grouping key
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. A duplicate ID replaces the earlier one."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register multiple hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> List[Hint]:
    """All registered hints in a category."""
    return [h for h in _HINTS.values() if h.category == category]
