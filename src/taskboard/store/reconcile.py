"""Authoritative move reconciliation."""

from datetime import date

from taskboard.columns import ColumnSet
from taskboard.models import HistoryEntry, Item
from taskboard.ordering import place
from taskboard.store.errors import InvalidMove, ItemNotFound


def find_item(items: list[Item], item_id: str) -> Item:
    """Look up an item by id, raising ItemNotFound."""
    for item in items:
        if item.id == item_id:
            return item
    raise ItemNotFound(item_id)


def validate_move(columns: ColumnSet, column: str | None, index: int | None) -> None:
    """Reject unknown columns and anything but a non-negative int index."""
    if column is not None and column not in columns:
        raise InvalidMove(f"Unknown column '{column}'. Valid columns: {', '.join(columns.ids)}")
    if index is None:
        return
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidMove(f"Index must be an integer, got {index!r}")
    if index < 0:
        raise InvalidMove(f"Index must not be negative, got {index}")


def reconcile_move(
    items: list[Item],
    item_id: str,
    column: str | None = None,
    index: int | None = None,
    *,
    columns: ColumnSet,
    today: date | None = None,
) -> Item:
    """Apply a move to items in place and return the moved item.

    A column change appends a history entry and closes the gap in the source
    column. index is clamped to the destination size; with no index a column
    change appends at the end and a same-column move leaves ranks alone.
    Validation happens before anything is touched.
    """
    item = find_item(items, item_id)
    validate_move(columns, column, index)

    target = column if column is not None else item.column
    changed_column = target != item.column

    if changed_column:
        today = today or date.today()
        item.history.append(
            HistoryEntry(
                date=today.isoformat(),
                action=f"Moved from {columns.name(item.column)} to {columns.name(target)}",
            )
        )

    if changed_column or index is not None:
        place(items, item, target, index)

    return item
