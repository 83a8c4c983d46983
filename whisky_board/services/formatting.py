from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

"""Display formatting for scores and integers.

Scores: one decimal with a comma separator (``8,5``), ties rounded up so
9.25 shows as ``9,3``. Age/ABV: rounded to an integer. Absent values
render as an em-dash.
"""

PLACEHOLDER = "—"

_ONE_DECIMAL = Decimal("0.1")


def format_score(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    # repr gives the shortest decimal form, so 9.25 is an exact tie here
    rounded = Decimal(repr(float(value))).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded:f}".replace(".", ",")


def format_int(value: float | None) -> str:
    """Round half up: ``12.5`` -> ``13``, ``-2.5`` -> ``-2``."""
    if value is None:
        return PLACEHOLDER
    return str(math.floor(value + 0.5))
