"""Unit tests for points_explorer.utils.numeric helpers.

Covers JavaScript-compatible rounding and fixed-point formatting, which
the derivation keys and seed asset depend on.

See Also:
    - backend/points_explorer/utils/numeric.py for the implementation.
"""

from __future__ import annotations

import math

import pytest

from points_explorer.utils import numeric


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.5, 3),
        (-2.5, -2),
        (-0.5, 0),
        (0.49999999999999994, 0),
        (1.4, 1),
        (-1.6, -2),
        (7, 7),
    ],
)
def test_js_round(value: float, expected: int) -> None:
    """Halves round toward positive infinity like Math.round."""
    assert numeric.js_round(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "1.000000"),
        (-122.45, "-122.450000"),
        (0.0078125, "0.007813"),
        (-0.0078125, "-0.007813"),
        (-0.0, "0.000000"),
        (-1e-9, "-0.000000"),
        (37.78123449, "37.781234"),
        (37.78123451, "37.781235"),
    ],
)
def test_format_fixed(value: float, expected: str) -> None:
    """Formatting follows Number.prototype.toFixed."""
    assert numeric.format_fixed(value, 6) == expected


def test_round_fixed() -> None:
    """round_fixed returns the float of the formatted value."""
    assert numeric.round_fixed(1.23456789, 3) == 1.235


def test_clamp() -> None:
    """Values are clamped into the closed interval."""
    assert numeric.clamp(5, 0, 3) == 3
    assert numeric.clamp(-5, 0, 3) == 0
    assert numeric.clamp(2, 0, 3) == 2


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, True),
        (1.5, True),
        (math.inf, False),
        (math.nan, False),
        (True, False),
        ("1", False),
        (None, False),
        (10**400, False),
        (-(10**400), False),
    ],
)
def test_is_finite_number(value: object, expected: bool) -> None:
    """Only finite ints and floats count as numbers."""
    assert numeric.is_finite_number(value) is expected
