"""GPU filter parameter updates for the points layer.

The rendering layer filters points on the GPU by comparing per-point
attributes against two small parameters: a ``[min, max]`` value range and
a list of selected category ids. Changing a filter must never touch the
dataset; only those two parameters are pushed to the layer.

The layer detects changes by reference identity, so handing it the same
list object mutated in place would go unnoticed, while allocating a new
list on every slider tick would churn memory. ``FilterApplicator`` keeps
two buffers for each parameter and alternates between them: each call
rewrites the buffer that was *not* used by the previous call and hands it
out. Consecutive calls always present different references, and the
number of live buffers stays at four for the lifetime of the layer.

The applicator assumes the layer diffs a new value only against the one
immediately before it. A layer that batched several updates before
diffing would need a deeper pool.

Example:
    Wire an applicator to a layer and push two updates:
        >>> from points_explorer.core.models import FilterState
        >>> applicator = FilterApplicator(layer)
        >>> applicator.apply(FilterState(20, 80, ["alpha"]))
        >>> applicator.apply(FilterState(0, 100, ["alpha", "beta"]))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from points_explorer.core import models


class FilterTarget(Protocol):
    """Capability interface of a layer that accepts GPU filter parameters."""

    def apply_filter_props(
        self,
        filter_range: list[float],
        filter_categories: list[str],
    ) -> None: ...


class FilterApplicator:
    """Push filter parameters to one layer through double-buffered lists.

    One applicator belongs to exactly one layer instance; it is the sole
    writer of that layer's ``filterRange`` and ``filterCategories``. It is
    not thread-safe and must be driven from a single thread (the event
    loop).

    Attributes:
        target: The layer receiving filter parameters.
        calls: Number of updates pushed so far.
    """

    def __init__(self, target: FilterTarget) -> None:
        """Allocate the two buffer pairs for ``target``."""
        self.target = target
        self.calls = 0
        self._ranges: tuple[list[float], list[float]] = ([0.0, 0.0], [0.0, 0.0])
        self._categories: tuple[list[str], list[str]] = ([], [])
        self._use_second = False

    def apply(self, state: models.FilterState) -> None:
        """Write ``state`` into the idle buffers and push them to the layer.

        Args:
            state: Current user filter selection.
        """
        self._use_second = not self._use_second
        slot = 1 if self._use_second else 0

        filter_range = self._ranges[slot]
        filter_range[0] = state.value_min
        filter_range[1] = state.value_max

        filter_categories = self._categories[slot]
        filter_categories[:] = state.selected_category_ids

        self.target.apply_filter_props(filter_range, filter_categories)
        self.calls += 1


def is_visible(point: models.Point, state: models.FilterState) -> bool:
    """CPU mirror of the GPU filter: inclusive range and category match."""
    return (
        state.value_min <= point.value <= state.value_max
        and point.category in state.selected_category_ids
    )


def count_visible(
    points: Iterable[models.Point],
    state: models.FilterState,
) -> int:
    """Count the points the GPU filter would keep for ``state``.

    Used for diagnostics only; the dataset handed to the layer is never
    filtered on the CPU.
    """
    selected = frozenset(state.selected_category_ids)
    low, high = state.value_min, state.value_max
    return sum(
        1
        for point in points
        if low <= point.value <= high and point.category in selected
    )
