"""Points layer state and session wiring.

``PointsLayer`` is the backend's mirror of the scatterplot layer drawn by
the map client: an id plus a property bag. The dataset is attached once
under ``data`` and is never replaced; only the two GPU filter properties
change afterwards, pushed by the layer's ``FilterApplicator``.

``PointsSession`` bundles what lives for one application session: the
loaded collection, its layer and that layer's applicator.

Example:
    Build a session for a loaded collection:
        >>> session = build_session(collection, settings=settings)
        >>> session.applicator.apply(FilterState(20, 80, ["alpha"]))
        >>> session.layer.props["filterRange"]
        [20, 80]
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Protocol

from points_explorer.services import filters

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from points_explorer.core import categories as categories_module
    from points_explorer.core import config
    from points_explorer.core import models

POINTS_LAYER_ID = "points-layer"
DEFAULT_COLOR = (200, 200, 200, 200)
CATEGORY_ALPHA = 200


class SupportsSetProps(Protocol):
    def set_props(self, props: Mapping[str, Any]) -> None: ...


class PointsLayer:
    """Property bag of the points layer.

    Attributes:
        id: Layer identifier shared with the map client.
        props: Current layer properties.
    """

    def __init__(self, layer_id: str, props: Mapping[str, Any]) -> None:
        self.id = layer_id
        self.props: dict[str, Any] = dict(props)

    def set_props(self, props: Mapping[str, Any]) -> None:
        """Merge ``props`` into the current properties."""
        self.props.update(props)

    def apply_filter_props(
        self,
        filter_range: list[float],
        filter_categories: list[str],
    ) -> None:
        self.set_props(
            {
                "filterRange": filter_range,
                "filterCategories": filter_categories,
            }
        )

    @property
    def filter_props(self) -> dict[str, Any]:
        """The GPU filter properties currently set on the layer."""
        return {
            "filterRange": list(self.props["filterRange"]),
            "filterCategories": list(self.props["filterCategories"]),
        }


class SetPropsLayerAdapter:
    """Adapt any object with a ``set_props`` method to ``FilterTarget``."""

    def __init__(self, layer: SupportsSetProps) -> None:
        self.layer = layer

    def apply_filter_props(
        self,
        filter_range: list[float],
        filter_categories: list[str],
    ) -> None:
        self.layer.set_props(
            {
                "filterRange": filter_range,
                "filterCategories": filter_categories,
            }
        )


def category_color(
    category_id: str,
    categories: Sequence[categories_module.Category],
) -> tuple[int, int, int, int]:
    """Return the RGBA fill color for ``category_id``.

    Unknown ids fall back to a translucent grey.
    """
    for category in categories:
        if category.id == category_id:
            return (*category.color, CATEGORY_ALPHA)
    return DEFAULT_COLOR


def create_points_layer(
    collection: models.PointCollection,
    *,
    settings: config.Settings,
) -> PointsLayer:
    """Create the points layer with all filters initially open.

    Args:
        collection: The session dataset, attached by reference.
        settings: Application settings (value bounds, categories).

    Returns:
        PointsLayer whose ``filterRange`` spans the value bounds and whose
        ``filterCategories`` lists every configured category.
    """
    return PointsLayer(
        POINTS_LAYER_ID,
        {
            "data": collection.items,
            "radius": 10,
            "radiusUnits": "pixels",
            "radiusMinPixels": 2,
            "radiusMaxPixels": 14,
            "pickable": True,
            "autoHighlight": True,
            "filterSize": 1,
            "categorySize": 1,
            "filterRange": [settings.value_min, settings.value_max],
            "filterCategories": settings.category_ids,
        },
    )


@dataclasses.dataclass
class PointsSession:
    """Objects that live for one application session.

    Attributes:
        collection: The expanded dataset, loaded once.
        layer: The points layer holding the dataset.
        applicator: Sole writer of the layer's filter properties.
    """

    collection: models.PointCollection
    layer: PointsLayer
    applicator: filters.FilterApplicator


def build_session(
    collection: models.PointCollection,
    *,
    settings: config.Settings,
) -> PointsSession:
    """Create the layer and its applicator for ``collection``."""
    layer = create_points_layer(collection, settings=settings)
    return PointsSession(
        collection=collection,
        layer=layer,
        applicator=filters.FilterApplicator(layer),
    )
