"""Unit tests for points_explorer.core.models domain models.

See Also:
    - backend/points_explorer/core/models.py for the implementation.
"""

from __future__ import annotations

import dataclasses

import pytest

from points_explorer.core import models


def test_point_to_dict() -> None:
    """Points serialize to the client JSON shape."""
    point = models.Point(id="p", position=(1.5, -2.0), value=7, category="alpha")

    assert point.to_dict() == {
        "id": "p",
        "position": [1.5, -2.0],
        "value": 7,
        "category": "alpha",
    }


def test_point_is_frozen() -> None:
    """Points cannot be mutated after creation."""
    point = models.Point(id="p", position=(0.0, 0.0), value=1, category="alpha")
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.value = 2  # type: ignore[misc]


def test_collection_sequence_protocol() -> None:
    """Collections support len, iteration and indexing."""
    items = (
        models.Point(id="a", position=(0.0, 0.0), value=1, category="alpha"),
        models.Point(id="b", position=(0.0, 0.0), value=5, category="beta"),
    )
    collection = models.PointCollection(
        items=items,
        value_domain=models.ValueDomain(1, 5),
    )

    assert len(collection) == 2
    assert list(collection) == list(items)
    assert collection[1] is items[1]
    assert collection[0:1] == items[0:1]
    assert collection.value_domain.min == 1
    assert collection.value_domain.max == 5


def test_collection_is_frozen() -> None:
    """The items reference of a collection cannot be replaced."""
    collection = models.PointCollection(
        items=(),
        value_domain=models.ValueDomain(0, 0),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        collection.items = ()  # type: ignore[misc]


def test_filter_state_defaults() -> None:
    """A filter state without categories selects none."""
    state = models.FilterState(value_min=0, value_max=100)
    assert list(state.selected_category_ids) == []
