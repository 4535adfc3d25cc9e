"""Main CLI entry point for branchver.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  branchver -vv semver2 1 2 0 --branch main      # works
  branchver semver2 1 2 0 --branch main -vv      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from branchver._version import BASE_VERSION, PIP_VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.branchver/config.json)"},
}


def _flag_kwargs(kwargs):
    return {k: v for k, v in kwargs.items() if k != "aliases"}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        global_parser.add_argument(flag, *kwargs.get("aliases", []),
                                   **_flag_kwargs(kwargs))

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by the branch-driven subcommands)
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for version-settings flags.

    Every default is None so unset flags fall through to the config files.
    """
    common = argparse.ArgumentParser(add_help=False)
    group = common.add_argument_group("version settings")
    group.add_argument("--filter", dest="pre_release_filters", action="append",
                       metavar="REGEX", default=None,
                       help="Final-branch regex, repeatable "
                            "(default: ^master$ and ^release/)")
    group.add_argument("--no-filter", action="store_true", default=False,
                       help="Treat every branch as pre-release")
    group.add_argument("--trim", dest="trim_patterns", action="append",
                       metavar="TEXT", default=None,
                       help="Literal text to cut from the branch, repeatable")
    group.add_argument("--no-git-refs", dest="filter_git_references",
                       action="store_const", const=False, default=None,
                       help="Keep refs/heads/, refs/tags/, refs/remotes/")
    group.add_argument("--branch-prefix", metavar="PREFIX", default=None,
                       help="Prefix for branches without letters (default: b-)")
    group.add_argument("--always-prefix", dest="always_apply_branch_prefix",
                       action="store_const", const=True, default=None,
                       help="Apply the branch prefix to every pre-release branch")
    group.add_argument("--project-dir", metavar="PATH", default=None,
                       help="Where to start looking for .branchver.json")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules."""
    from branchver.commands import init, legacy, semver2, suffix
    return [legacy, semver2, suffix, init]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="branchver",
        description="branchver — version strings from branch names",
        epilog=(
            "Run 'branchver <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"branchver {BASE_VERSION} ({PIP_VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, *kwargs.get("aliases", []),
                            **_flag_kwargs(kwargs))

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the branchver CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 1 = error, 2 = usage).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from branchver.channels import configure_branchver_channels
    from branchver.lib.log_lib import format_channel_list, init_output
    configure_branchver_channels()

    # Bare --show lists channels and exits
    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError:
        print(f"branchver: error: bad --show spec: {channels}", file=sys.stderr)
        return 2
    import branchver.hints  # noqa: F401  (registers hints)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(remaining)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    # Dispatch
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
