"""Optimistic local moves, applied before the store confirms."""

from taskboard.models import Item, MoveIntent
from taskboard.ordering import place


def apply_optimistic_move(items: list[Item], intent: MoveIntent) -> Item | None:
    """Move an item in the local collection, in place.

    Uses the same placement arithmetic as the store, so the guess normally
    matches what the store will return. History is left to the store.
    Returns the moved item, or None if it is not in the local collection.
    """
    for item in items:
        if item.id == intent.item_id:
            place(items, item, intent.column, max(intent.index, 0))
            return item
    return None
