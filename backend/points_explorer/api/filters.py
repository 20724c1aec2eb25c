"""GPU filter update API endpoints for the points layer.

Each UI interaction (range slider move, category toggle) posts the full
filter selection. The selection is pushed to the session's points layer
through its ``FilterApplicator``; the dataset itself is never touched.

Handlers are ``async`` so they run on the event loop thread: the
applicator's alternating buffers are only ever mutated from one thread.

Example:
    Narrow the filter to one category:
        >>> response = client.post(
        ...     "/api/layers/points-layer/filters",
        ...     json={
        ...         "valueMin": 20,
        ...         "valueMax": 80,
        ...         "selectedCategoryIds": ["alpha"],
        ...     },
        ... )
        >>> response.json()
        >>> # Returns: {"filterRange": [20.0, 80.0],
        >>> #           "filterCategories": ["alpha"]}
"""

from __future__ import annotations

from typing import Any

import fastapi
import pydantic

from points_explorer.api import points as api_points
from points_explorer.core import models
from points_explorer.services import points_layer

router = fastapi.APIRouter(
    prefix=f"/api/layers/{points_layer.POINTS_LAYER_ID}/filters",
    tags=["filters"],
)


class FilterRequest(pydantic.BaseModel):
    """Filter selection posted by the map client."""

    model_config = pydantic.ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
    )

    value_min: float = pydantic.Field(alias="valueMin")
    value_max: float = pydantic.Field(alias="valueMax")
    selected_category_ids: list[str] = pydantic.Field(
        default_factory=list,
        alias="selectedCategoryIds",
    )

    def to_state(self) -> models.FilterState:
        return models.FilterState(
            value_min=self.value_min,
            value_max=self.value_max,
            selected_category_ids=self.selected_category_ids,
        )


@router.get("")
async def current_filters(
    session: points_layer.PointsSession = fastapi.Depends(api_points.get_session),  # noqa: B008
) -> dict[str, Any]:
    """Return the filter properties currently set on the points layer."""
    return session.layer.filter_props


@router.post("")
async def apply_filters(
    selection: FilterRequest,
    session: points_layer.PointsSession = fastapi.Depends(api_points.get_session),  # noqa: B008
) -> dict[str, Any]:
    """Push a filter selection to the points layer.

    Args:
        selection: The filter selection.
        session: Loaded session (injected via FastAPI Depends).

    Returns:
        The filter properties now set on the layer.
    """
    session.applicator.apply(selection.to_state())
    return session.layer.filter_props
