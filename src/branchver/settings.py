"""Settings that control how a branch name becomes a version suffix.

Two flat records:

    VersionSettings         legacy NuGet track (single ``-xxxx`` suffix)
    VersionSettingsSemVer2  SemVer 2.0.0 track; the same fields plus
                            ``hash`` and ``branch_change_number``

``VersionSettingsSemVer2`` is a superset struct, not a subclass. Use
``VersionSettingsSemVer2.from_settings()`` to extend an existing
``VersionSettings`` and ``.base()`` to go the other way.

Both are frozen: build one per version computation and throw it away.
"""

from dataclasses import dataclass, fields
from typing import Optional, Sequence, Tuple


# A branch matching none of these is a pre-release branch.
DEFAULT_PRE_RELEASE_FILTERS: Tuple[str, ...] = ("^master$", "^release/")

# Literal substrings removed when filter_git_references is on.
GIT_REFERENCE_PREFIXES: Tuple[str, ...] = (
    "refs/heads/",
    "refs/tags/",
    "refs/remotes/",
)

DEFAULT_BRANCH_PREFIX = "b-"


def _as_tuple(value):
    """Freeze a list of patterns; None stays None."""
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class VersionSettings:
    """How to convert a branch name to a legacy version suffix.

    Attributes:
        branch_name: Raw branch name, may carry ``refs/heads/`` etc.
            Required; None raises MissingBranchName when a version is built.
        pre_release_filters: Regexes (unanchored search) marking final
            branches. None opts out of final-branch detection entirely.
        filter_git_references: Strip the ``refs/...`` prefixes.
        trim_patterns: Literal substrings removed from the branch, in order.
        branch_prefix: Prepended when the branch has no ASCII letter, or
            always when ``always_apply_branch_prefix`` is set.
        always_apply_branch_prefix: Prefix every pre-release branch.
    """
    branch_name: Optional[str] = None
    pre_release_filters: Optional[Sequence[str]] = DEFAULT_PRE_RELEASE_FILTERS
    filter_git_references: bool = True
    trim_patterns: Optional[Sequence[str]] = None
    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    always_apply_branch_prefix: bool = False

    def __post_init__(self):
        object.__setattr__(self, "pre_release_filters",
                           _as_tuple(self.pre_release_filters))
        object.__setattr__(self, "trim_patterns",
                           _as_tuple(self.trim_patterns))


@dataclass(frozen=True)
class VersionSettingsSemVer2:
    """How to convert a branch name to a SemVer 2.0.0 suffix.

    Carries every ``VersionSettings`` field plus:

    Attributes:
        hash: Commit hash (or any build metadata), appended as ``.<hash>``
            on pre-release branches and as ``+<hash>`` on final ones.
        branch_change_number: Monotonic counter. Appended as ``.<n>`` on
            pre-release branches; added to the patch number on final ones.
    """
    branch_name: Optional[str] = None
    pre_release_filters: Optional[Sequence[str]] = DEFAULT_PRE_RELEASE_FILTERS
    filter_git_references: bool = True
    trim_patterns: Optional[Sequence[str]] = None
    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    always_apply_branch_prefix: bool = False
    hash: Optional[str] = None
    branch_change_number: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "pre_release_filters",
                           _as_tuple(self.pre_release_filters))
        object.__setattr__(self, "trim_patterns",
                           _as_tuple(self.trim_patterns))

    @classmethod
    def from_settings(cls, settings: VersionSettings, hash: Optional[str] = None,
                      branch_change_number: Optional[int] = None):
        """Extend legacy settings with SemVer 2.0.0 build metadata."""
        base = {f.name: getattr(settings, f.name) for f in fields(VersionSettings)}
        return cls(hash=hash, branch_change_number=branch_change_number, **base)

    def base(self) -> VersionSettings:
        """Return the legacy-track subset of these settings."""
        return VersionSettings(
            **{f.name: getattr(self, f.name) for f in fields(VersionSettings)}
        )
