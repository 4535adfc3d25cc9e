"""branchver semver2 — SemVer 2.0.0 version from a branch.

    branchver semver2 1 0 0 --branch refs/heads/feature/login --hash abcd --change-number 12
    1.0.0-feature-login.12.abcd

    branchver semver2 1 0 0 --branch refs/heads/master --hash abcd
    1.0.0+abcd

On a final branch the change number is added to the patch instead:

    branchver semver2 1 0 3 --branch release/v1 --change-number 5
    1.0.8
"""

import argparse
import re

from branchver.branch import matches_any, trimmed_branch
from branchver.config import explicit_settings, settings_from_args
from branchver.errors import BranchverError
from branchver.lib.log_lib import get_output
from branchver.output import print_error, print_version
from branchver.settings import VersionSettingsSemVer2
from branchver.suffix import SEMVER2_BRANCH_MAX_LENGTH
from branchver.versioning import semver2_version


def register(subparsers, parents):
    """Register the 'semver2' subcommand."""
    p = subparsers.add_parser(
        "semver2",
        parents=parents,
        help="SemVer 2.0.0 version with pre-release label and build metadata",
        description=(
            "Build MAJOR.MINOR.PATCH with a '-branch[.N][.HASH]' label on\n"
            "pre-release branches, or '+HASH' on final branches. On a final\n"
            "branch --change-number is added to PATCH."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("major", type=int)
    p.add_argument("minor", type=int)
    p.add_argument("patch", type=int)
    p.add_argument("--branch", "-b", metavar="NAME",
                   help="Branch name, e.g. refs/heads/feature/x (required)")
    p.add_argument("--hash", metavar="HASH", default=None,
                   help="Commit hash or other build metadata")
    p.add_argument("--change-number", dest="branch_change_number", type=int,
                   metavar="N", default=None,
                   help="Monotonic per-branch build counter")
    p.set_defaults(func=run)


def run(args):
    """Execute the semver2 command."""
    settings = settings_from_args(
        args, VersionSettingsSemVer2,
        hash=args.hash, branch_change_number=args.branch_change_number,
    )
    try:
        version = semver2_version(args.major, args.minor, args.patch, settings)
    except (BranchverError, re.error) as e:
        print_error(str(e))
        return 1

    print_version(version)
    _show_hints(args, settings)
    return 0


def _show_hints(args, settings):
    out = get_output()
    branch = trimmed_branch(settings)
    if matches_any(branch[:SEMVER2_BRANCH_MAX_LENGTH], settings.pre_release_filters):
        out.hint('branch.final', 'verbose', branch=branch)
        if settings.branch_change_number is None:
            out.hint('semver2.change_number', 'result')
    elif len(branch) > SEMVER2_BRANCH_MAX_LENGTH:
        out.hint('suffix.truncated', 'result', limit=SEMVER2_BRANCH_MAX_LENGTH)
    if args.pre_release_filters:
        out.hint('filters.anchored', 'verbose')
    if explicit_settings(args):
        out.hint('config.remember', 'result')
