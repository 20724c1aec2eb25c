"""Seeded 32-bit pseudo-random number generator.

This module provides a mulberry32 generator: a single 32-bit word of
state, advanced by a fixed odd increment and mixed with two rounds of
multiply-xor-shift. Every intermediate value is masked to 32 bits so the
stream is identical to the reference JavaScript implementation that
produced the seed asset, on any platform.

Example:
    Draw a reproducible stream:
        >>> from points_explorer.utils.prng import mulberry32
        >>> rng = mulberry32(1337)
        >>> first = rng()
        >>> assert 0.0 <= first < 1.0
        >>> assert mulberry32(1337)() == first
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 4294967296
_INCREMENT = 0x6D2B79F5


def imul32(a: int, b: int) -> int:
    """Multiply two integers keeping the low 32 bits (unsigned)."""
    return (a * b) & UINT32_MASK


def mulberry32(seed: int) -> Callable[[], float]:
    """Create a mulberry32 generator for ``seed``.

    The returned function yields floats in ``[0, 1)``. The sequence depends
    only on the seed and on the number of calls made so far; it can only be
    restarted by creating a new generator with the same seed.

    Args:
        seed: Integer seed. Values outside the unsigned 32-bit range are
            reduced modulo 2**32.

    Returns:
        Zero-argument callable producing the next float of the stream.
    """
    state = seed & UINT32_MASK

    def next_float() -> float:
        nonlocal state
        state = (state + _INCREMENT) & UINT32_MASK
        t = imul32(state ^ (state >> 15), 1 | state)
        t = ((t + imul32(t ^ (t >> 7), 61 | t)) & UINT32_MASK) ^ t
        return ((t ^ (t >> 14)) & UINT32_MASK) / UINT32_RANGE

    return next_float
