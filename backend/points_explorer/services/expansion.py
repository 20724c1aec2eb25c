"""Deterministic point expansion.

This module amplifies a small normalized seed set into a large dataset.
A single mulberry32 generator, seeded once with
``settings.expansion_rng_seed``, is consumed sequentially for the whole
run, so the draw order (and therefore the output) is fixed for a given
seed set, target count and configuration.

For output index ``i`` the base point is ``seed[i % len(seed)]``. Three
draws are taken per point, in this order:

1. longitude jitter ``(draw() - 0.5) * span``
2. latitude jitter ``(draw() - 0.5) * span``
3. value drift ``js_round((draw() * 2 - 1) * max_abs_drift)``

Positions are clamped to the configured longitude/latitude bounds and
values to the value bounds. Ids are ``<base id>_<i>`` so they stay unique
even though base points repeat.

Example:
    Expand a single seed point:
        >>> from points_explorer.core.config import Settings
        >>> from points_explorer.core.models import Point
        >>> from points_explorer.services.expansion import expand_points
        >>> seed = [Point(id="s", position=(1.0, 2.0), value=50, category="alpha")]
        >>> collection = expand_points(seed, target_count=3, settings=Settings())
        >>> [p.id for p in collection]
        ['s_0', 's_1', 's_2']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from points_explorer.core import errors
from points_explorer.core import models
from points_explorer.utils import numeric
from points_explorer.utils.prng import mulberry32

if TYPE_CHECKING:
    from collections.abc import Sequence

    from points_explorer.core import config


def expand_points(
    seed_points: Sequence[models.Point],
    *,
    target_count: int,
    settings: config.Settings,
) -> models.PointCollection:
    """Expand ``seed_points`` to exactly ``target_count`` points.

    Args:
        seed_points: Normalized seed set (non-empty).
        target_count: Number of points to produce (positive integer). It may
            be smaller than the seed set, in which case only a prefix of the
            seed is used.
        settings: Application settings with bounds, jitter span, drift
            bound and the expansion PRNG seed.

    Returns:
        PointCollection of ``target_count`` points with the observed value
        domain attached.

    Raises:
        InvalidArgumentError: If ``target_count`` is not a positive integer
            or ``seed_points`` is empty.
    """
    if (
        isinstance(target_count, bool)
        or not isinstance(target_count, int)
        or target_count <= 0
    ):
        raise errors.InvalidArgumentError("target_count must be positive")
    if not seed_points:
        raise errors.InvalidArgumentError("seed_points must not be empty")

    rng = mulberry32(settings.expansion_rng_seed)
    span = settings.expansion_jitter_span_degrees
    max_drift = settings.expansion_value_drift_max_abs
    seed_count = len(seed_points)

    out: list[models.Point] = []
    min_value = settings.value_max
    max_value = settings.value_min

    for i in range(target_count):
        base = seed_points[i % seed_count]

        jitter_lng = (rng() - 0.5) * span
        jitter_lat = (rng() - 0.5) * span
        longitude = numeric.clamp(
            base.position[0] + jitter_lng,
            settings.min_longitude,
            settings.max_longitude,
        )
        latitude = numeric.clamp(
            base.position[1] + jitter_lat,
            settings.min_latitude,
            settings.max_latitude,
        )

        drift = numeric.js_round((rng() * 2 - 1) * max_drift)
        value = int(
            numeric.clamp(
                base.value + drift,
                settings.value_min,
                settings.value_max,
            )
        )

        min_value = min(min_value, value)
        max_value = max(max_value, value)

        out.append(
            models.Point(
                id=f"{base.id}_{i}",
                position=(longitude, latitude),
                value=value,
                category=base.category,
            )
        )

    return models.PointCollection(
        items=tuple(out),
        value_domain=models.ValueDomain(min_value, max_value),
    )
