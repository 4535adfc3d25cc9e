"""User-facing message helpers for branchver commands.

The version string itself is printed plainly to stdout by each command.
These helpers cover everything else and respect the THAC0 quiet axis.
"""

import sys

from branchver.lib.log_lib import get_output


def _should_print():
    """Status lines are WARNING-level (-2): hidden at -QQQ and below."""
    return get_output().verbosity >= -2


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}")


def print_dry(msg):
    """Print a dry-run message."""
    if _should_print():
        print(f"  [DRY RUN] {msg}")


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error to stderr via the 'error' channel (level -3)."""
    get_output().error(f"  ERROR: {msg}")


def print_version(version):
    """Write a computed version to stdout. Never filtered."""
    sys.stdout.write(f"{version}\n")
