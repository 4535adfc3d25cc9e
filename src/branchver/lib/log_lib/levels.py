"""
THAC0 verbosity levels.

Plain integers; the names only document intent. A message shows when

    message.level <= threshold

where the threshold is the channel override or the global verbosity.

    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2       -1      0       1     2      3
    wall  errors warnings minimal default info  config debug
"""

DEBUG = 3          # Per-step pipeline detail, tracing
CONFIG = 2         # Resolved settings, classification decisions
INFO = 1           # Extra context around the result
DEFAULT = 0        # Result-context hints

MINIMAL = -1       # Suppress hints
WARNING = -2       # Warnings only
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall: exit code only
