"""Branch name normalization and final/pre-release classification.

Everything here operates on the *trimmed* branch name: the raw name with
``refs/heads/``-style prefixes removed and the caller's trim patterns cut
out. Trim patterns are literal text, not regexes. The pre-release filters
are regexes, tested with an unanchored search against the trimmed name.
"""

import re

from branchver.errors import MissingBranchName
from branchver.lib.log_lib import get_output
from branchver.settings import GIT_REFERENCE_PREFIXES


_LETTER_RE = re.compile(r"[A-Za-z]")


def trim_git_references(branch):
    """Remove every ``refs/heads/``, ``refs/tags/`` and ``refs/remotes/``."""
    for ref in GIT_REFERENCE_PREFIXES:
        branch = branch.replace(ref, "")
    return branch


def normalize_branch(branch_name, filter_git_references=True, trim_patterns=None):
    """Return the trimmed branch name.

    Args:
        branch_name: Raw branch name as supplied by the build system.
        filter_git_references: Strip git reference prefixes first.
        trim_patterns: Literal substrings removed, each in turn, from the
            progressively trimmed name.

    Raises:
        MissingBranchName: If branch_name is None.
    """
    if branch_name is None:
        raise MissingBranchName()

    branch = branch_name
    if filter_git_references:
        branch = trim_git_references(branch)

    if trim_patterns is not None:
        for pattern in trim_patterns:
            branch = branch.replace(pattern, "")

    if branch != branch_name:
        get_output().emit(3, "  branch: {raw!r} -> {trimmed!r}",
                          channel='branch', raw=branch_name, trimmed=branch)
    return branch


def trimmed_branch(settings):
    """normalize_branch() driven by a settings object."""
    return normalize_branch(
        settings.branch_name,
        settings.filter_git_references,
        settings.trim_patterns,
    )


def matches_any(branch, filters):
    """True if any filter regex matches somewhere in branch."""
    if filters is None:
        return False
    for pattern in filters:
        if re.search(pattern, branch):
            get_output().emit(3, "  classify: {branch!r} matches {pattern!r}",
                              channel='classify', branch=branch, pattern=pattern)
            return True
    return False


def is_final(branch, filters):
    """True if branch is a final (release) branch.

    A branch is final when it matches at least one filter. With
    ``filters=None`` nothing is ever final.
    """
    if filters is None:
        return False
    final = matches_any(branch, filters)
    get_output().emit(2, "  classify: {branch!r} is {kind}",
                      channel='classify', branch=branch,
                      kind="final" if final else "pre-release")
    return final


def is_prerelease(branch, filters):
    """Inverse of is_final()."""
    return not is_final(branch, filters)


def needs_prefix(branch):
    """True when branch has no ASCII letter and can't stand alone as a label."""
    return _LETTER_RE.search(branch) is None


def apply_branch_prefix(branch, branch_prefix, always=False):
    """Prepend branch_prefix when needed (or always, if asked)."""
    if always or needs_prefix(branch):
        return f"{branch_prefix}{branch}"
    return branch
