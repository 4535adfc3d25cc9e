"""branchver init — remember version-settings flags in a config file.

Writes the settings flags given on the command line to .branchver.json
in the project directory (or to the global config with --global), so
later runs need nothing but --branch:

    branchver init --trim feature/ --filter '^main$' --filter '^release/'
    branchver semver2 1 4 0 --branch "$CI_BRANCH" --hash "$CI_SHA"

Existing keys not mentioned on the command line are kept unless
--replace is given.
"""

import argparse
import json
from pathlib import Path

from branchver.config import (
    PROJECT_CONFIG_NAME, explicit_settings, find_project_config,
    get_global_config_path, load_json, save_global_config, save_project_config,
)
from branchver.output import print_dry, print_ok, print_warn


def register(subparsers, parents):
    """Register the 'init' subcommand."""
    p = subparsers.add_parser(
        "init",
        parents=parents,
        help="Save version-settings flags to .branchver.json",
        description=(
            "Store --filter, --trim, --branch-prefix and friends in\n"
            ".branchver.json (or the global config with --global)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--global", dest="global_config", action="store_true",
                   default=False,
                   help="Write the global config instead of .branchver.json")
    p.add_argument("--replace", action="store_true", default=False,
                   help="Discard keys already in the file")
    p.add_argument("--dry-run", action="store_true", default=False,
                   help="Show what would be written without writing it")
    p.set_defaults(func=run)


def _target_path(args):
    """Global config, --project-dir, nearest .branchver.json, or cwd."""
    if args.global_config:
        return get_global_config_path(args.config)
    if args.project_dir:
        return Path(args.project_dir) / PROJECT_CONFIG_NAME
    return find_project_config() or Path.cwd() / PROJECT_CONFIG_NAME


def run(args):
    """Execute the init command."""
    updates = explicit_settings(args)
    if not updates:
        print_warn("No settings flags given; nothing to save.")
        return 1

    target = _target_path(args)
    data = {} if args.replace else load_json(target)
    data.update(updates)

    if args.dry_run:
        print_dry(f"Would write {target}:")
        print(json.dumps(data, indent=2))
        return 0

    if args.global_config:
        written = save_global_config(data, target)
    else:
        written = save_project_config(data, target.parent)
    print_ok(f"Saved {', '.join(sorted(updates))} to {written}")
    return 0
