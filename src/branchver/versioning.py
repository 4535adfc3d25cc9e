"""Public entry points: numeric version + branch-derived suffix.

    legacy_version(1, 0, 0, "refs/heads/master")              -> "1.0.0"
    legacy_version(1, 0, 0, "feature/x", build=7)             -> "1.0.0.7-feature-x"
    semver2_version(1, 0, 0, "refs/heads/master", hash="abc") -> "1.0.0+abc"

Every function here is pure. The only failure they raise themselves is
MissingBranchName; bad regexes propagate as ``re.error``.
"""

from branchver.branch import matches_any, trimmed_branch
from branchver.errors import MissingBranchName
from branchver.lib.log_lib import get_output, trace
from branchver.settings import VersionSettings, VersionSettingsSemVer2
from branchver.suffix import (
    LEGACY_MAX_LENGTH,
    SEMVER2_MAX_LENGTH,
    compose_suffix,
    compose_suffix_semver2,
    normalize_suffix,
    normalize_suffix_semver2,
    suffix_separator,
)


def compose_version(major, minor, patch, build=None):
    """Join the numeric components with dots (three, or four with build)."""
    if build is None:
        return f"{major}.{minor}.{patch}"
    return f"{major}.{minor}.{patch}.{build}"


def bump_patch(patch, branch, settings):
    """Add the branch change number to patch on a final branch.

    ``branch`` is the trimmed branch name. Pre-release branches, and
    settings without filters, leave the patch untouched.
    """
    if matches_any(branch, settings.pre_release_filters):
        bumped = patch + (settings.branch_change_number or 0)
        if bumped != patch:
            get_output().emit(2, "  patch: {old} -> {new} (final branch)",
                              channel='classify', old=patch, new=bumped)
        return bumped
    return patch


def _require_branch(settings):
    if settings.branch_name is None:
        raise MissingBranchName()


@trace
def legacy_version(major, minor, patch, settings, build=None):
    """Build a NuGet-compatible version from a branch.

    Args:
        major, minor, patch: Numeric components.
        settings: VersionSettings, or a bare branch name (defaults apply).
        build: Optional fourth component.

    Raises:
        MissingBranchName: If no branch name is given.
    """
    if isinstance(settings, VersionSettingsSemVer2):
        settings = settings.base()
    elif not isinstance(settings, VersionSettings):
        settings = VersionSettings(branch_name=settings)
    _require_branch(settings)

    version = compose_version(major, minor, patch, build)
    return f"{version}{compose_suffix(settings)}"


@trace
def semver2_version(major, minor, patch, settings, hash=None):
    """Build a SemVer 2.0.0 (NuGet 3+) version from a branch.

    Args:
        major, minor, patch: Numeric components. On a final branch the
            patch is bumped by ``settings.branch_change_number``.
        settings: VersionSettingsSemVer2, plain VersionSettings, or a
            bare branch name.
        hash: Commit hash; not allowed together with VersionSettingsSemVer2.

    Raises:
        MissingBranchName: If no branch name is given.
        TypeError: If hash is combined with VersionSettingsSemVer2.
    """
    if isinstance(settings, VersionSettingsSemVer2):
        if hash is not None:
            raise TypeError("pass hash inside VersionSettingsSemVer2, not both")
    elif isinstance(settings, VersionSettings):
        settings = VersionSettingsSemVer2.from_settings(settings, hash=hash)
    else:
        settings = VersionSettingsSemVer2(branch_name=settings, hash=hash)
    _require_branch(settings)

    patch = bump_patch(patch, trimmed_branch(settings), settings)
    version = compose_version(major, minor, patch)
    return f"{version}{compose_suffix_semver2(settings)}"


def version_with_suffix(major, minor, patch, suffix, build=None):
    """Build a legacy version from an explicit pre-release label.

    The label is cleaned like a branch suffix and capped at 20 characters.
    An empty result drops the separator.
    """
    version = compose_version(major, minor, patch, build)
    normalized = normalize_suffix(suffix, LEGACY_MAX_LENGTH)
    if not normalized:
        return version
    return f"{version}{suffix_separator()}{normalized}"


def semver2_with_suffix(major, minor, patch, suffix, prerelease=True):
    """Build a SemVer 2.0.0 version from an explicit label.

    ``prerelease=False`` treats the label as build metadata (``+label``).
    """
    version = compose_version(major, minor, patch)
    normalized = normalize_suffix_semver2(suffix, SEMVER2_MAX_LENGTH)
    if not normalized:
        return version
    return f"{version}{suffix_separator(prerelease)}{normalized}"
