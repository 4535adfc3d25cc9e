"""branchver legacy — NuGet version with a single ``-branch`` label.

    branchver legacy 1 0 0 --branch refs/heads/feature/login
    1.0.0-feature-login

    branchver legacy 1 0 0 7 --branch refs/heads/master
    1.0.0.7
"""

import argparse
import re

from branchver.branch import apply_branch_prefix, matches_any, trimmed_branch
from branchver.config import explicit_settings, settings_from_args
from branchver.errors import BranchverError
from branchver.lib.log_lib import get_output
from branchver.output import print_error, print_version
from branchver.settings import VersionSettings
from branchver.suffix import LEGACY_MAX_LENGTH
from branchver.versioning import legacy_version


def register(subparsers, parents):
    """Register the 'legacy' subcommand."""
    p = subparsers.add_parser(
        "legacy",
        parents=parents,
        help="Version with a legacy NuGet pre-release label",
        description=(
            "Build MAJOR.MINOR.PATCH[.BUILD] plus a '-branch' label capped at\n"
            "20 characters. Final branches (matching a --filter) get no label."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("major", type=int)
    p.add_argument("minor", type=int)
    p.add_argument("patch", type=int)
    p.add_argument("build", type=int, nargs="?", default=None)
    p.add_argument("--branch", "-b", metavar="NAME",
                   help="Branch name, e.g. refs/heads/feature/x (required)")
    p.set_defaults(func=run)


def run(args):
    """Execute the legacy command."""
    settings = settings_from_args(args, VersionSettings)
    try:
        version = legacy_version(args.major, args.minor, args.patch,
                                 settings, build=args.build)
    except (BranchverError, re.error) as e:
        print_error(str(e))
        return 1

    print_version(version)
    _show_hints(args, settings)
    return 0


def _show_hints(args, settings):
    out = get_output()
    branch = trimmed_branch(settings)
    if matches_any(branch, settings.pre_release_filters):
        out.hint('branch.final', 'verbose', branch=branch)
    else:
        label = apply_branch_prefix(branch, settings.branch_prefix,
                                    settings.always_apply_branch_prefix)
        if len(label) + 1 > LEGACY_MAX_LENGTH:
            out.hint('suffix.truncated', 'result', limit=LEGACY_MAX_LENGTH)
    if args.pre_release_filters:
        out.hint('filters.anchored', 'verbose')
    if explicit_settings(args):
        out.hint('config.remember', 'result')
