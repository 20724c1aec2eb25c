"""Point dataset and client configuration API endpoints.

This module exposes the session dataset to the map client: the
configuration it needs to build its UI (categories, value bounds, initial
view), the expanded points in pages, the value domain used to scale range
sliders, and a diagnostic count of the points a filter selection keeps.
It also serves the static seed asset the dataset is built from.

Example:
    Fetch the value domain and the first page of points:
        >>> response = client.get("/api/points/domain")
        >>> response.json()
        >>> # Returns: {"valueDomain": [0, 100]}

        >>> response = client.get("/api/points", params={"limit": 2})
        >>> response.json()["items"]
        >>> # Returns: [{"id": "seed_1_0", "position": [-122.4, 37.7],
        >>> #            "value": 42, "category": "beta"}, ...]
"""

from __future__ import annotations

from typing import Annotated, Any

import fastapi
from fastapi import responses

from points_explorer.core import config
from points_explorer.core import models
from points_explorer.services import filters, points_layer

router = fastapi.APIRouter(tags=["points"])

MAX_PAGE_SIZE = 10_000


def get_session(request: fastapi.Request) -> points_layer.PointsSession:
    """Resolve the session loaded at application startup.

    Args:
        request: Incoming request (injected by FastAPI).

    Returns:
        The PointsSession stored on ``app.state``.

    Raises:
        HTTPException: If the dataset has not been loaded (503).
    """
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise fastapi.HTTPException(
            status_code=503,
            detail="Point dataset not loaded",
        )
    return session


@router.get("/seed-points.json")
async def seed_points_asset(
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> responses.FileResponse:
    """Serve the static seed asset.

    Raises:
        HTTPException: If the asset has not been generated (404).
    """
    path = settings.seed_points_path
    if not path.is_file():
        raise fastapi.HTTPException(
            status_code=404,
            detail="Seed points asset not found",
        )
    return responses.FileResponse(
        path,
        media_type="application/json",
        headers={"Cache-Control": "no-store"},
    )


@router.get("/api/config")
async def client_config(
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Return what the map client needs to build its panels.

    Returns:
        Dictionary with the category registry, value bounds and the
        initial view state.
    """
    return {
        "categories": [
            category.model_dump(mode="json") for category in settings.categories
        ],
        "valueMin": settings.value_min,
        "valueMax": settings.value_max,
        "viewState": settings.view_state.model_dump(mode="json"),
    }


@router.get("/api/points")
async def list_points(
    session: points_layer.PointsSession = fastapi.Depends(get_session),  # noqa: B008
    offset: Annotated[int, fastapi.Query(ge=0)] = 0,
    limit: Annotated[int, fastapi.Query(ge=1, le=MAX_PAGE_SIZE)] = 1000,
) -> dict[str, Any]:
    """Return a page of the expanded dataset.

    Args:
        session: Loaded session (injected via FastAPI Depends).
        offset: Index of the first point to return.
        limit: Maximum number of points to return.

    Returns:
        Dictionary with ``total``, ``valueDomain``, ``offset``, ``limit``
        and the ``items`` of the page.
    """
    collection = session.collection
    return {
        "total": len(collection),
        "valueDomain": list(collection.value_domain),
        "offset": offset,
        "limit": limit,
        "items": [
            point.to_dict() for point in collection[offset : offset + limit]
        ],
    }


@router.get("/api/points/domain")
async def value_domain(
    session: points_layer.PointsSession = fastapi.Depends(get_session),  # noqa: B008
) -> dict[str, list[int]]:
    """Return the ``[min, max]`` value domain of the dataset."""
    return {"valueDomain": list(session.collection.value_domain)}


@router.get("/api/points/visible-count")
async def visible_count(
    value_min: float,
    value_max: float,
    category: Annotated[list[str] | None, fastapi.Query()] = None,
    session: points_layer.PointsSession = fastapi.Depends(get_session),  # noqa: B008
) -> dict[str, int]:
    """Count the points a filter selection keeps.

    Args:
        value_min: Inclusive lower value bound.
        value_max: Inclusive upper value bound.
        category: Selected category ids (repeat the parameter for several).
        session: Loaded session (injected via FastAPI Depends).

    Returns:
        Dictionary with ``visibleCount`` and the dataset ``total``.
    """
    state = models.FilterState(
        value_min=value_min,
        value_max=value_max,
        selected_category_ids=category or [],
    )
    return {
        "visibleCount": filters.count_visible(session.collection, state),
        "total": len(session.collection),
    }
