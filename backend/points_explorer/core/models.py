"""Data models for points and filter state.

This module defines the canonical point record, the collection that the
loader produces once per session, and the transient filter state driven
by user interaction.

A ``PointCollection`` carries its ``value_domain`` explicitly next to the
items so the domain travels with the data and never has to be recomputed
when filters change. Both the collection and its points are frozen: once
loaded, neither the items tuple nor any element object is replaced.

Example:
    Build a small collection by hand:
        >>> from points_explorer.core.models import (
        ...     Point, PointCollection, ValueDomain,
        ... )
        >>> points = (
        ...     Point(id="a", position=(1.0, 2.0), value=10, category="alpha"),
        ...     Point(id="b", position=(1.1, 2.1), value=40, category="beta"),
        ... )
        >>> collection = PointCollection(
        ...     items=points,
        ...     value_domain=ValueDomain(10, 40),
        ... )
        >>> len(collection)
        2
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, NamedTuple, overload

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

Position = tuple[float, float]


class ValueDomain(NamedTuple):
    min: int
    max: int


@dataclasses.dataclass(frozen=True, slots=True)
class Point:
    """A canonical, fully populated point.

    Attributes:
        id: Identifier, unique within one generation run.
        position: ``(longitude, latitude)`` in degrees.
        value: Integer value within the configured bounds.
        category: Category id from the registry.
    """

    id: str
    position: Position
    value: int
    category: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape consumed by the presentation layer."""
        return {
            "id": self.id,
            "position": [self.position[0], self.position[1]],
            "value": self.value,
            "category": self.category,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class PointCollection:
    """An ordered, immutable sequence of points plus its value domain.

    Attributes:
        items: The points, in generation order.
        value_domain: Observed ``(min, max)`` of ``value`` across items.
    """

    items: tuple[Point, ...]
    value_domain: ValueDomain

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point, ...]: ...

    def __getitem__(self, index: int | slice) -> Point | tuple[Point, ...]:
        return self.items[index]


@dataclasses.dataclass
class FilterState:
    """User-selected filter parameters.

    Attributes:
        value_min: Inclusive lower bound on ``value``.
        value_max: Inclusive upper bound on ``value``.
        selected_category_ids: Categories to keep, in UI order.
    """

    value_min: float
    value_max: float
    selected_category_ids: Sequence[str] = ()
