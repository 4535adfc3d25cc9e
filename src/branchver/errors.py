"""Exceptions raised by branchver.

Only one condition is treated as an error: a missing branch name.
Bad regular expressions surface as ``re.error`` straight from the
pattern engine, and version components are never validated.
"""


class BranchverError(Exception):
    """Base class for branchver errors."""


class MissingBranchName(BranchverError, ValueError):
    """Raised when a version is requested without a branch name."""

    def __init__(self, message="branch_name cannot be None"):
        super().__init__(message)
