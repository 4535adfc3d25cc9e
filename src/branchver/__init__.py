"""branchver — version strings from branch names.

Turns a source-control branch name (plus optional commit hash and
change counter) into a NuGet/SemVer-friendly version string that
build pipelines can stamp onto packages.
"""

from branchver._version import __version__, __app_name__
from branchver.errors import BranchverError, MissingBranchName
from branchver.settings import VersionSettings, VersionSettingsSemVer2
from branchver.versioning import (
    compose_version,
    legacy_version,
    semver2_version,
    semver2_with_suffix,
    version_with_suffix,
)

__all__ = [
    "__version__", "__app_name__",
    "BranchverError", "MissingBranchName",
    "VersionSettings", "VersionSettingsSemVer2",
    "compose_version", "legacy_version", "semver2_version",
    "semver2_with_suffix", "version_with_suffix",
]
