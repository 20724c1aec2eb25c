"""Seed point normalization.

This module validates raw seed records and fills in any missing fields.
The only required field is ``position``; ``id``, ``value`` and
``category`` are derived deterministically from a key built out of the
position, so the same seed asset always normalizes to the same points in
every process and on every run.

The derivation key formats longitude and latitude to six decimals and
joins them with a comma (``"-122.451234,37.781234"``). Derived fields hash
that key, salted per field:

- value: ``value_min + hash(key) % (value_max - value_min + 1)``
- category: ``categories[hash(key + "|cat") % len(categories)].id``
- id: ``pt_<index>_<hex(hash(key + "|id"))>``

Example:
    Normalize a partially populated seed:
        >>> from points_explorer.core.config import Settings
        >>> from points_explorer.services.normalize import normalize_seed_points
        >>> settings = Settings()
        >>> points = normalize_seed_points(
        ...     [{"position": [1, 2], "value": 10}, {"position": [3, 4]}],
        ...     categories=settings.categories,
        ...     settings=settings,
        ... )
        >>> points[0].value
        10
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from points_explorer.core import errors
from points_explorer.core import models
from points_explorer.utils import numeric
from points_explorer.utils.stable_hash import stable_hash32

if TYPE_CHECKING:
    from points_explorer.core import categories as categories_module
    from points_explorer.core import config

SEED_KEY_DECIMAL_DIGITS = 6


def build_seed_key(longitude: float, latitude: float) -> str:
    """Build the derivation key for a position."""
    return (
        f"{numeric.format_fixed(longitude, SEED_KEY_DECIMAL_DIGITS)},"
        f"{numeric.format_fixed(latitude, SEED_KEY_DECIMAL_DIGITS)}"
    )


def derive_value(seed_key: str, settings: config.Settings) -> int:
    span = settings.value_max - settings.value_min + 1
    return settings.value_min + stable_hash32(seed_key) % span


def derive_category(
    seed_key: str,
    categories: Sequence[categories_module.Category],
) -> str:
    index = stable_hash32(seed_key + "|cat") % len(categories)
    return categories[index].id


def derive_id(seed_key: str, index: int) -> str:
    return f"pt_{index}_{stable_hash32(seed_key + '|id'):x}"


def _parse_position(item: Any, index: int) -> models.Position:
    """Extract a validated ``(lng, lat)`` pair from a raw record.

    Raises:
        ValidationError: If the record has no position, or the position is
            not a sequence of exactly two finite numbers.
    """
    position = item.get("position") if isinstance(item, Mapping) else None
    if (
        not isinstance(position, Sequence)
        or isinstance(position, str | bytes)
        or len(position) != 2
        or not all(numeric.is_finite_number(v) for v in position)
    ):
        raise errors.ValidationError(
            f"seed point {index} missing valid position",
            index=index,
        )
    return (float(position[0]), float(position[1]))


def normalize_seed_points(
    raw: Any,
    *,
    categories: Sequence[categories_module.Category],
    settings: config.Settings,
) -> list[models.Point]:
    """Validate raw seed records and derive their missing fields.

    The output has the same length and order as ``raw``. Explicit values
    are kept (rounded half-up and clamped to the value bounds); explicit
    ids and categories are kept as given.

    Args:
        raw: Decoded seed asset; must be a list of records.
        categories: Ordered category registry used to derive categories.
        settings: Application settings providing the value bounds.

    Returns:
        List of canonical points.

    Raises:
        ValidationError: If ``raw`` is not a list, or any record lacks a
            valid position. No partial result is returned.
        InvalidArgumentError: If ``categories`` is empty.

    Example:
        Records without a position abort the whole call:
            >>> normalize_seed_points(
            ...     [{"id": "x"}], categories=cats, settings=settings
            ... )
            Traceback (most recent call last):
            ...
            ValidationError: seed point 0 missing valid position
    """
    if not isinstance(raw, list):
        raise errors.ValidationError("seed points must be an array")
    if not categories:
        raise errors.InvalidArgumentError(
            "categories must contain at least one item"
        )

    out: list[models.Point] = []
    for index, item in enumerate(raw):
        longitude, latitude = _parse_position(item, index)
        seed_key = build_seed_key(longitude, latitude)

        value = item.get("value")
        if not numeric.is_finite_number(value):
            value = derive_value(seed_key, settings)

        category = item.get("category")
        if not isinstance(category, str):
            category = derive_category(seed_key, categories)

        point_id = item.get("id")
        if not isinstance(point_id, str):
            point_id = derive_id(seed_key, index)

        out.append(
            models.Point(
                id=point_id,
                position=(longitude, latitude),
                value=int(
                    numeric.clamp(
                        numeric.js_round(value),
                        settings.value_min,
                        settings.value_max,
                    )
                ),
                category=category,
            )
        )

    return out
