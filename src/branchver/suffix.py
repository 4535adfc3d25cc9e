"""Version suffix composition for the legacy and SemVer 2.0.0 tracks.

Legacy track::

    pre-release  ->  "-" + [prefix] + branch, cleaned to [A-Za-z0-9-],
                     capped at 20 characters (separator included)
    final        ->  ""

SemVer 2.0.0 track::

    pre-release  ->  "-" + [prefix] + branch[:200] [+ ".<change>"] [+ ".<hash>"]
    final        ->  "+" + hash, or "" without a hash

The SemVer 2.0.0 body is cleaned to [A-Za-z0-9.] and capped at 255
characters. A ``+`` inside the branch name is just another character to
replace; it never becomes a second separator.
"""

import re

from branchver.branch import apply_branch_prefix, is_prerelease, trimmed_branch
from branchver.lib.log_lib import get_output


LEGACY_MAX_LENGTH = 20
SEMVER2_MAX_LENGTH = 255
SEMVER2_BRANCH_MAX_LENGTH = 200

_LEGACY_INVALID_RE = re.compile(r"[^A-Za-z0-9]")
_SEMVER2_INVALID_RE = re.compile(r"[^A-Za-z0-9.]")


def suffix_separator(prerelease=True):
    """``-`` introduces a pre-release label, ``+`` build metadata."""
    return "-" if prerelease else "+"


def _clean(suffix, invalid_re, max_length):
    normalized = invalid_re.sub("-", suffix)
    if len(normalized) > max_length:
        get_output().emit(2, "  suffix: truncated to {limit} characters",
                          channel='suffix', limit=max_length)
    return normalized[:max_length].rstrip("-")


def normalize_suffix(suffix, max_length=LEGACY_MAX_LENGTH):
    """Replace anything but letters and digits with ``-``, cap, strip trailing ``-``."""
    return _clean(suffix, _LEGACY_INVALID_RE, max_length)


def normalize_suffix_semver2(suffix, max_length=SEMVER2_MAX_LENGTH):
    """Like normalize_suffix() but dots survive."""
    return _clean(suffix, _SEMVER2_INVALID_RE, max_length)


def compose_suffix(settings):
    """Build the legacy suffix (``-branch`` or empty) for settings."""
    branch = trimmed_branch(settings)
    suffix = ""

    if is_prerelease(branch, settings.pre_release_filters):
        branch = apply_branch_prefix(branch, settings.branch_prefix,
                                     settings.always_apply_branch_prefix)
        suffix = f"{suffix_separator(True)}{branch}"

    suffix = normalize_suffix(suffix, LEGACY_MAX_LENGTH)
    get_output().emit(2, "  suffix: {suffix!r}", channel='suffix', suffix=suffix)
    return suffix


def compose_suffix_semver2(settings):
    """Build the SemVer 2.0.0 suffix (``-label``, ``+hash`` or empty)."""
    branch = trimmed_branch(settings)[:SEMVER2_BRANCH_MAX_LENGTH]
    prerelease = is_prerelease(branch, settings.pre_release_filters)
    separator = suffix_separator(prerelease)

    if prerelease:
        body = apply_branch_prefix(branch, settings.branch_prefix,
                                   settings.always_apply_branch_prefix)
        if settings.branch_change_number is not None:
            body += f".{settings.branch_change_number}"
        if settings.hash is not None:
            body += f".{settings.hash}"
    else:
        body = settings.hash if settings.hash is not None else ""

    if not body:
        return ""

    suffix = separator + normalize_suffix_semver2(body, SEMVER2_MAX_LENGTH)
    get_output().emit(2, "  suffix: {suffix!r}", channel='suffix', suffix=suffix)
    return suffix
