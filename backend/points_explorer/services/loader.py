"""Seed asset loading and dataset preparation.

This module is the only part of the point pipeline that performs I/O. It
fetches the seed asset (over HTTP with httpx, or from disk during local
development), then runs the pure normalize and expand steps and returns
the session's single ``PointCollection``.

The fetch is the only suspension point: everything after the response
body is decoded is synchronous computation. There are no retries; a
failed fetch raises ``NetworkError`` and is left to the caller.

Example:
    Load the dataset at application startup:
        >>> from points_explorer.core.config import get_settings
        >>> from points_explorer.services.loader import load_and_prepare_points
        >>> collection = await load_and_prepare_points(settings=get_settings())
        >>> collection.value_domain
        ValueDomain(min=0, max=100)
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING, Any

import httpx

from points_explorer.core import errors
from points_explorer.core import logger as logger_module
from points_explorer.services import expansion, normalize

if TYPE_CHECKING:
    import pathlib

    from points_explorer.core import config
    from points_explorer.core import models

logger = logger_module.get_logger(__name__)


def prepare_points(
    raw: Any,
    *,
    settings: config.Settings,
) -> models.PointCollection:
    """Normalize decoded seed data and expand it to the target count.

    Args:
        raw: Decoded seed asset (a JSON array of seed records).
        settings: Application settings (categories, bounds, expansion).

    Returns:
        Expanded PointCollection with its value domain.

    Raises:
        ValidationError: If the seed data is malformed.
        InvalidArgumentError: If the seed set is empty.
    """
    started = time.perf_counter()
    normalized = normalize.normalize_seed_points(
        raw,
        categories=settings.categories,
        settings=settings,
    )
    collection = expansion.expand_points(
        normalized,
        target_count=settings.target_point_count,
        settings=settings,
    )
    logger.info(
        "Expanded %d seed points to %d (value domain %s..%s) in %.2fs",
        len(normalized),
        len(collection),
        collection.value_domain.min,
        collection.value_domain.max,
        time.perf_counter() - started,
    )
    return collection


async def fetch_seed_points(client: httpx.AsyncClient, url: str) -> Any:
    """Fetch and decode the seed asset.

    Args:
        client: HTTP client used for the request.
        url: Location of the seed asset.

    Returns:
        The decoded JSON body.

    Raises:
        NetworkError: If the request fails or the response status is not
            a success. Carries the status code and reason phrase.
        ValidationError: If the body is not valid JSON.
    """
    logger.info("Fetching seed points from %s", url)
    try:
        response = await client.get(
            url,
            headers={"Cache-Control": "no-store"},
            follow_redirects=True,
        )
    except httpx.HTTPError as exc:
        logger.error("Seed points request to %s failed: %s", url, exc)
        raise errors.NetworkError(
            None,
            str(exc) or type(exc).__name__,
            url,
        ) from exc

    if not response.is_success:
        logger.error(
            "Seed points request to %s returned %d %s",
            url,
            response.status_code,
            response.reason_phrase,
        )
        raise errors.NetworkError(
            response.status_code,
            response.reason_phrase,
            url,
        )

    try:
        return response.json()
    except json.JSONDecodeError as exc:
        raise errors.ValidationError(
            f"seed points at {url} are not valid JSON"
        ) from exc


async def load_and_prepare_points(
    *,
    settings: config.Settings,
    client: httpx.AsyncClient | None = None,
) -> models.PointCollection:
    """Fetch the seed asset from ``settings.seed_points_url`` and prepare it.

    Args:
        settings: Application settings; ``seed_points_url`` must be set.
        client: Optional HTTP client. When omitted, a client with
            ``settings.fetch_timeout_seconds`` is created and closed here.

    Returns:
        Expanded PointCollection.

    Raises:
        InvalidArgumentError: If no seed points URL is configured.
        NetworkError: If the fetch does not succeed.
        ValidationError: If the seed data is malformed.
    """
    if settings.seed_points_url is None:
        raise errors.InvalidArgumentError("seed_points_url is not configured")
    url = str(settings.seed_points_url)

    if client is None:
        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout_seconds,
        ) as own_client:
            raw = await fetch_seed_points(own_client, url)
    else:
        raw = await fetch_seed_points(client, url)

    return prepare_points(raw, settings=settings)


def load_points_from_path(
    path: pathlib.Path,
    *,
    settings: config.Settings,
) -> models.PointCollection:
    """Read the seed asset from disk and prepare it.

    Args:
        path: Path to the seed asset JSON file.
        settings: Application settings.

    Returns:
        Expanded PointCollection.

    Raises:
        FileNotFoundError: If the asset does not exist.
        ValidationError: If the file is not valid JSON or is malformed.
    """
    logger.info("Reading seed points from %s", path)
    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise errors.ValidationError(
            f"seed points at {path} are not valid JSON"
        ) from exc
    return prepare_points(raw, settings=settings)
