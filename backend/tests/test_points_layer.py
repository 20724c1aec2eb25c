"""Unit tests for points layer state in points_explorer.services.points_layer.

See Also:
    - backend/points_explorer/services/points_layer.py for the implementation.
"""

from __future__ import annotations

from points_explorer.core import config
from points_explorer.core import models
from points_explorer.services import filters, points_layer


def _collection() -> models.PointCollection:
    items = (
        models.Point(id="a", position=(0.0, 0.0), value=10, category="alpha"),
        models.Point(id="b", position=(1.0, 1.0), value=90, category="beta"),
    )
    return models.PointCollection(items=items, value_domain=models.ValueDomain(10, 90))


def test_create_points_layer_initial_filters_open() -> None:
    """A new layer shows every value and every category."""
    settings = config.Settings()
    collection = _collection()

    layer = points_layer.create_points_layer(collection, settings=settings)

    assert layer.id == "points-layer"
    assert layer.props["data"] is collection.items
    assert layer.props["filterRange"] == [0, 100]
    assert layer.props["filterCategories"] == [
        "alpha",
        "beta",
        "gamma",
        "delta",
        "epsilon",
    ]
    assert layer.props["pickable"] is True


def test_set_props_merges() -> None:
    """set_props keeps keys that are not being updated."""
    layer = points_layer.PointsLayer("x", {"data": (), "radius": 10})

    layer.set_props({"radius": 4})

    assert layer.props == {"data": (), "radius": 4}


def test_layer_is_a_filter_target() -> None:
    """PointsLayer receives filter props directly from an applicator."""
    settings = config.Settings()
    layer = points_layer.create_points_layer(_collection(), settings=settings)
    applicator = filters.FilterApplicator(layer)

    applicator.apply(models.FilterState(20, 80, ["alpha"]))

    assert layer.props["filterRange"] == [20, 80]
    assert layer.props["filterCategories"] == ["alpha"]
    assert layer.filter_props == {
        "filterRange": [20, 80],
        "filterCategories": ["alpha"],
    }
    assert layer.filter_props["filterRange"] is not layer.props["filterRange"]


def test_build_session_wires_applicator_to_layer() -> None:
    """The session's applicator writes to the session's layer."""
    settings = config.Settings()
    collection = _collection()

    session = points_layer.build_session(collection, settings=settings)

    assert session.collection is collection
    assert session.applicator.target is session.layer
    assert session.layer.props["data"] is collection.items


def test_sessions_do_not_share_buffers() -> None:
    """Each layer instance gets its own applicator and buffers."""
    settings = config.Settings()
    one = points_layer.build_session(_collection(), settings=settings)
    two = points_layer.build_session(_collection(), settings=settings)

    one.applicator.apply(models.FilterState(1, 2, ["alpha"]))
    two.applicator.apply(models.FilterState(3, 4, ["beta"]))

    assert one.layer.props["filterRange"] == [1, 2]
    assert two.layer.props["filterRange"] == [3, 4]
    assert one.layer.props["filterRange"] is not two.layer.props["filterRange"]


def test_category_color() -> None:
    """Known categories get their color with alpha, unknown ones grey."""
    settings = config.Settings()

    assert points_layer.category_color("alpha", settings.categories) == (
        255,
        99,
        132,
        200,
    )
    assert points_layer.category_color("nope", settings.categories) == (
        200,
        200,
        200,
        200,
    )
