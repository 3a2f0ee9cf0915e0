"""Insertion index from pointer position during a drag."""

from typing import Iterable, Protocol


class HasRegion(Protocol):
    """Anything with a screen-space y and height (Textual's Region fits)."""

    y: int
    height: int


def midpoint(region: HasRegion) -> int:
    """Vertical midpoint of a region in screen rows."""
    return region.y + region.height // 2


def insertion_index(pointer_y: int, regions: Iterable[HasRegion]) -> int:
    """Index at which a drop at pointer_y would land.

    regions are the visible items of the column in display order, without
    the item being dragged. The result is the position of the first item
    whose midpoint lies below the pointer, or the item count if none does.
    """
    count = 0
    for index, region in enumerate(regions):
        if pointer_y < midpoint(region):
            return index
        count = index + 1
    return count
