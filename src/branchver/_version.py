"""
Version information for branchver.

This file is the canonical source for version numbers.
Bump MAJOR, MINOR, PATCH below; PHASE marks an unfinished feature set.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.3.0-beta
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "branchver"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    - 0.3.0-alpha -> 0.3.0a0
    - 0.3.0-beta  -> 0.3.0b0
    - 0.3.0-rc1   -> 0.3.0rc1
    - 0.3.0       -> 0.3.0
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_base_version()

# For convenience in imports
BASE_VERSION = __version__
PIP_VERSION = get_pip_version()
