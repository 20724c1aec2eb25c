"""Application settings and configuration management.

This module provides Pydantic-based settings management that loads
configuration from environment variables or a .env file. Settings cover
every numeric knob of the point pipeline (value and coordinate bounds,
seed and target counts, jitter spans, drift bound, PRNG seeds), the
category registry, where the seed asset lives, and HTTP concerns such as
CORS origins and the fetch timeout.

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from points_explorer.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.target_point_count)

    Environment variables can override defaults:
        >>> TARGET_POINT_COUNT=50000
        >>> EXPANSION_RNG_SEED=42
        >>> SEED_POINTS_URL=https://cdn.example.com/seed-points.json
        >>> CATEGORIES='[{"id": "a", "label": "A", "color": [1, 2, 3]}]'
"""

from __future__ import annotations

import functools
import pathlib
from typing import Self

import pydantic
import pydantic_settings

from points_explorer.core import categories as categories_module


class Coordinate(pydantic.BaseModel):
    """A longitude/latitude pair in degrees."""

    longitude: float = pydantic.Field(ge=-180, le=180)
    latitude: float = pydantic.Field(ge=-90, le=90)


class ViewState(pydantic.BaseModel):
    """Initial map camera handed to the presentation layer."""

    longitude: float = pydantic.Field(default=-122.45, ge=-180, le=180)
    latitude: float = pydantic.Field(default=37.78, ge=-90, le=90)
    zoom: float = pydantic.Field(default=10.5, ge=0)
    bearing: float = 0
    pitch: float = pydantic.Field(default=0, ge=0, le=85)


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    All settings can be overridden via environment variables or .env file.
    Numeric values must be finite; ranges are validated on construction so
    the generation and expansion algorithms always terminate and stay in
    bounds.

    Attributes:
        value_min: Lowest allowed point value.
        value_max: Highest allowed point value.
        min_longitude: Western clamp bound for generated positions.
        max_longitude: Eastern clamp bound for generated positions.
        min_latitude: Southern clamp bound for generated positions.
        max_latitude: Northern clamp bound for generated positions.
        seed_point_count: Number of records written by the seed generator.
        target_point_count: Size of the expanded dataset.
        coordinate_decimal_digits: Precision of generated seed coordinates.
        longitude_jitter: Seed generator spread around the center (degrees).
        latitude_jitter: Seed generator spread around the center (degrees).
        seed_center: Center of the generated seed cloud.
        seed_rng_seed: PRNG seed of the seed generator.
        expansion_rng_seed: PRNG seed of the point expander.
        expansion_jitter_span_degrees: Peak-to-peak jitter applied per
            expanded point; the maximum absolute jitter is half of it.
        expansion_value_drift_max_abs: Maximum absolute integer drift
            applied to the value of an expanded point.
        seed_points_path: Location of the static seed asset on disk.
        seed_points_url: When set, the seed asset is fetched over HTTP
            instead of being read from ``seed_points_path``.
        fetch_timeout_seconds: Timeout for the seed asset request.
        allow_origins: List of allowed CORS origins (["*"] allows all).
        log_level: Root logging level.
        categories: Ordered category registry (at least one entry).
        view_state: Initial map camera.

    Example:
        Create settings with custom values:
            >>> settings = Settings(
            ...     target_point_count=1000,
            ...     expansion_jitter_span_degrees=0.02,
            ... )

        Or use environment variables:
            >>> export TARGET_POINT_COUNT=1000
            >>> settings = Settings()  # Loads from environment
    """

    value_min: int = 0
    value_max: int = 100

    min_longitude: float = pydantic.Field(default=-180, ge=-180, le=180)
    max_longitude: float = pydantic.Field(default=180, ge=-180, le=180)
    min_latitude: float = pydantic.Field(default=-85, ge=-90, le=90)
    max_latitude: float = pydantic.Field(default=85, ge=-90, le=90)

    seed_point_count: int = pydantic.Field(default=500, gt=0)
    target_point_count: int = pydantic.Field(default=250_000, gt=0)

    coordinate_decimal_digits: int = pydantic.Field(default=6, ge=0, le=15)
    longitude_jitter: float = pydantic.Field(default=0.8, ge=0)
    latitude_jitter: float = pydantic.Field(default=0.6, ge=0)
    seed_center: Coordinate = Coordinate(longitude=-122.45, latitude=37.78)
    seed_rng_seed: int = 20260122

    expansion_rng_seed: int = 1337
    expansion_jitter_span_degrees: float = pydantic.Field(default=0.05, ge=0)
    expansion_value_drift_max_abs: int = pydantic.Field(default=14, ge=0)

    seed_points_path: pathlib.Path = pathlib.Path("public/seed-points.json")
    seed_points_url: pydantic.AnyHttpUrl | None = None
    fetch_timeout_seconds: float = pydantic.Field(default=10.0, gt=0)

    allow_origins: list[str] = ["*"]
    log_level: str = "INFO"

    categories: list[categories_module.Category] = pydantic.Field(
        default_factory=lambda: list(categories_module.DEFAULT_CATEGORIES),
        min_length=1,
    )
    view_state: ViewState = ViewState()

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        allow_inf_nan=False,
    )

    @pydantic.field_validator("categories")
    @classmethod
    def _unique_category_ids(
        cls,
        value: list[categories_module.Category],
    ) -> list[categories_module.Category]:
        """Reject registries that repeat a category id."""
        ids = [category.id for category in value]
        if len(ids) != len(set(ids)):
            raise ValueError("category ids must be unique")
        return value

    @pydantic.model_validator(mode="after")
    def _check_ranges(self) -> Self:
        """Ensure every lower bound does not exceed its upper bound."""
        pairs = (
            ("value_min", "value_max"),
            ("min_longitude", "max_longitude"),
            ("min_latitude", "max_latitude"),
        )
        for low, high in pairs:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self

    @property
    def category_ids(self) -> list[str]:
        """Category ids in registry order."""
        return [category.id for category in self.categories]


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the application. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with all configuration values populated.

    Example:
        The settings are cached, so multiple calls return the same instance:
            >>> settings1 = get_settings()
            >>> settings2 = get_settings()
            >>> assert settings1 is settings2  # Same instance
    """
    return Settings()
