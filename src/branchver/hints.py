"""branchver hints for the THAC0 verbosity system.

Shown on stderr after a version is printed, at most once per session.
Import this module to register them.
"""

from branchver.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='suffix.truncated',
        message=('  Tip: the branch was cut to fit {limit} characters. '
                 'Use --trim to drop noise like "feature/".'),
        context={'result'},
        min_level=0,
        category='suffix',
    ),
    Hint(
        id='branch.final',
        message='  Note: {branch!r} is a final branch, so no pre-release label was added.',
        context={'verbose'},
        min_level=1,
        category='branch',
    ),
    Hint(
        id='semver2.change_number',
        message=('  Tip: pass --change-number on release branches to bump the '
                 'patch number between builds.'),
        context={'result'},
        min_level=1,
        category='semver2',
    ),
    Hint(
        id='filters.anchored',
        message=('  Note: --filter patterns match anywhere in the branch; '
                 'use ^ and $ to anchor them.'),
        context={'verbose'},
        min_level=1,
        category='config',
    ),
    Hint(
        id='config.remember',
        message=('  Tip: "branchver init" saves these flags to .branchver.json '
                 'so future runs need only --branch.'),
        context={'result'},
        min_level=1,
        category='config',
    ),
)
