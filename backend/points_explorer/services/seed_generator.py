"""Offline generation of the seed points asset.

The seed asset is a small JSON array of points scattered around a center
coordinate. It is produced once with a fixed PRNG seed and served as a
static file. To exercise the normalizer's derivation logic, some records
deliberately omit fields: ``id`` on every 7th record, ``category`` on
every 9th and ``value`` on every 11th (counting from record 0).

Example:
    Regenerate the asset:
        >>> from points_explorer.core.config import get_settings
        >>> from points_explorer.services import seed_generator
        >>> settings = get_settings()
        >>> points = seed_generator.generate_seed_points(settings)
        >>> seed_generator.write_seed_points(points, settings.seed_points_path)
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from points_explorer.core import errors
from points_explorer.utils import numeric
from points_explorer.utils.prng import mulberry32

if TYPE_CHECKING:
    import pathlib

    from points_explorer.core import config

DROP_ID_EVERY = 7
DROP_CATEGORY_EVERY = 9
DROP_VALUE_EVERY = 11


def generate_seed_points(
    settings: config.Settings,
    count: int | None = None,
) -> list[dict[str, Any]]:
    """Generate seed records deterministically.

    Three draws are taken per record, in order: longitude offset, latitude
    offset, value. Draws are taken even for fields that are later dropped,
    so the stream stays aligned across records.

    Args:
        settings: Application settings (center, jitter, bounds, categories,
            PRNG seed, coordinate precision).
        count: Number of records; defaults to ``settings.seed_point_count``.

    Returns:
        List of JSON-ready seed records.

    Raises:
        InvalidArgumentError: If ``count`` is not positive.
    """
    count = settings.seed_point_count if count is None else count
    if count <= 0:
        raise errors.InvalidArgumentError("count must be positive")

    rng = mulberry32(settings.seed_rng_seed)
    categories = settings.categories
    digits = settings.coordinate_decimal_digits
    center = settings.seed_center
    value_span = settings.value_max - settings.value_min

    points: list[dict[str, Any]] = []
    for i in range(count):
        longitude = center.longitude + (rng() - 0.5) * settings.longitude_jitter
        latitude = center.latitude + (rng() - 0.5) * settings.latitude_jitter

        point: dict[str, Any] = {
            "position": [
                numeric.clamp(
                    numeric.round_fixed(longitude, digits),
                    settings.min_longitude,
                    settings.max_longitude,
                ),
                numeric.clamp(
                    numeric.round_fixed(latitude, digits),
                    settings.min_latitude,
                    settings.max_latitude,
                ),
            ],
            "id": f"seed_{i}",
            "value": numeric.js_round(rng() * value_span + settings.value_min),
            "category": categories[i % len(categories)].id,
        }

        if i % DROP_ID_EVERY == 0:
            del point["id"]
        if i % DROP_CATEGORY_EVERY == 0:
            del point["category"]
        if i % DROP_VALUE_EVERY == 0:
            del point["value"]

        points.append(point)

    return points


def write_seed_points(
    points: list[dict[str, Any]],
    path: pathlib.Path,
) -> None:
    """Write ``points`` as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(points, indent=2), encoding="utf-8")
