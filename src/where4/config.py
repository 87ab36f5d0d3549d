"""Runtime defaults for the Where4 codec.

Environment:
    WHERE4_PRECISION      Words per address / digits per axis (default: 4)
    WHERE4_SNAP_EPSILON   Tolerance for snapping decoded fractions to 1.0 (default: 1e-9)
"""

import os

# Past 8 base-50 digits a double no longer resolves the next digit.
MIN_PRECISION = 1
MAX_PRECISION = 8

# One latitude syllable + one longitude syllable.
WORD_LENGTH = 4


def check_precision(precision: int) -> int:
    """Return ``precision`` if usable, else raise ValueError."""
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise ValueError(f"Precision must be an integer, got {precision!r}")
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ValueError(
            f"Precision must be {MIN_PRECISION}-{MAX_PRECISION}, got {precision}"
        )
    return precision


DEFAULT_PRECISION = check_precision(int(os.environ.get("WHERE4_PRECISION", "4")))
SNAP_EPSILON = float(os.environ.get("WHERE4_SNAP_EPSILON", "1e-9"))
