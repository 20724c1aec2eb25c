"""Small numeric helpers shared by the point pipeline.

The seed asset and the derivation keys were defined in terms of
JavaScript number formatting and rounding. These helpers reproduce that
behaviour exactly so derived ids, values and categories agree with the
reference data:

- ``js_round`` rounds halves toward positive infinity (``Math.round``),
  whereas builtin ``round`` rounds halves to even.
- ``format_fixed`` formats like ``Number.prototype.toFixed``: it rounds
  the exact binary value of the float, ties away from zero. A literal
  ``-0.0`` prints as ``0``, while small negatives that round to zero keep
  their sign (``-1e-7`` gives ``-0.000000``).
"""

from __future__ import annotations

import decimal
import math
from typing import Any


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def js_round(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def format_fixed(value: float, digits: int) -> str:
    """Format ``value`` with exactly ``digits`` decimals.

    Args:
        value: Finite number to format.
        digits: Number of digits after the decimal point.

    Returns:
        Fixed-point string representation.
    """
    if value == 0:
        value = 0.0
    quantum = decimal.Decimal(1).scaleb(-digits)
    rounded = decimal.Decimal(value).quantize(
        quantum,
        rounding=decimal.ROUND_HALF_UP,
    )
    return f"{rounded:f}"


def round_fixed(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals using ``format_fixed``."""
    return float(format_fixed(value, digits))


def is_finite_number(value: Any) -> bool:
    """Return True for finite ints and floats (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range, which JSON.parse reads as Infinity
        return False
