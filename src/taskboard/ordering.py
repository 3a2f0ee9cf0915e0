"""Rank ordering within columns.

Every column holds a dense, zero-based rank sequence: n items have ranks
0..n-1, and ascending rank is top-to-bottom display order. Both the
optimistic client mutation and the authoritative store reconciliation go
through place() so their arithmetic cannot drift apart.
"""

from collections import defaultdict
from typing import Iterable

from taskboard.models import Item


def column_items(items: Iterable[Item], column: str, exclude: Item | None = None) -> list[Item]:
    """Items in column sorted by rank, ties kept in collection order."""
    members = [item for item in items if item.column == column and item is not exclude]
    return sorted(members, key=lambda item: item.rank)


def clamp_index(index: int, size: int) -> int:
    """Clamp a target index to the insertable range [0, size]."""
    return max(0, min(index, size))


def renumber(items: list[Item], skip: int | None = None) -> None:
    """Assign ranks 0, 1, 2, ... in list order, leaving the rank skip unused."""
    rank = 0
    for item in items:
        if rank == skip:
            rank += 1
        item.rank = rank
        rank += 1


def place(items: list[Item], item: Item, column: str, index: int | None) -> int:
    """Put item into column at index, renumbering every affected column.

    index None appends at the end. An index past the end is clamped to it.
    The destination column's other items fill the ranks around the reserved
    slot; when the column changes the source column is closed up as well.
    Returns the rank the item ends up with.
    """
    source = item.column
    item.column = column
    others = column_items(items, column, exclude=item)
    slot = len(others) if index is None else clamp_index(index, len(others))
    item.rank = slot
    renumber(others, skip=slot)
    if source != column:
        renumber(column_items(items, source))
    return slot


def next_rank(items: Iterable[Item], column: str) -> int:
    """Rank for an item appended to the end of column."""
    return sum(1 for item in items if item.column == column)


def find_violations(items: Iterable[Item]) -> dict[str, list[int]]:
    """Return {column: sorted ranks} for every column that is not dense."""
    ranks: dict[str, list[int]] = defaultdict(list)
    for item in items:
        ranks[item.column].append(item.rank)
    violations = {}
    for column, column_ranks in ranks.items():
        column_ranks.sort()
        if column_ranks != list(range(len(column_ranks))):
            violations[column] = column_ranks
    return violations
