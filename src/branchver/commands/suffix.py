"""branchver suffix — version from an explicit label instead of a branch.

    branchver suffix 1 0 0 beta1
    1.0.0-beta1

    branchver suffix 1 0 0 build.42 --semver2 --final
    1.0.0+build.42
"""

import argparse

from branchver.output import print_version
from branchver.versioning import semver2_with_suffix, version_with_suffix


def register(subparsers, parents):
    """Register the 'suffix' subcommand.

    Takes no version-settings flags, so ``parents`` is not used.
    """
    p = subparsers.add_parser(
        "suffix",
        help="Version with an explicit pre-release label",
        description=(
            "Clean LABEL the same way a branch name is cleaned and append it.\n"
            "Legacy labels are capped at 20 characters, --semver2 labels at 255."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("major", type=int)
    p.add_argument("minor", type=int)
    p.add_argument("patch", type=int)
    p.add_argument("label", metavar="LABEL")
    p.add_argument("--build", type=int, metavar="N", default=None,
                   help="Fourth version component (legacy only)")
    p.add_argument("--semver2", action="store_true", default=False,
                   help="Use the SemVer 2.0.0 rules (dots kept, 255 characters)")
    p.add_argument("--final", action="store_true", default=False,
                   help="With --semver2: emit LABEL as '+' build metadata")
    p.set_defaults(func=run, parser=p)


def run(args):
    """Execute the suffix command."""
    if args.semver2 and args.build is not None:
        args.parser.error("--build cannot be combined with --semver2")
    if args.final and not args.semver2:
        args.parser.error("--final requires --semver2")

    if args.semver2:
        version = semver2_with_suffix(args.major, args.minor, args.patch,
                                      args.label, prerelease=not args.final)
    else:
        version = version_with_suffix(args.major, args.minor, args.patch,
                                      args.label, build=args.build)
    print_version(version)
    return 0
