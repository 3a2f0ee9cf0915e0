"""Client-side board state with change notification."""

from __future__ import annotations

from typing import Callable, Iterable

from taskboard.models import Item
from taskboard.ordering import column_items

Callback = Callable[["BoardState"], None]


class BoardState:
    """The client's copy of the item collection.

    Owned by one orchestrator. Anything that changes the items calls
    changed() afterwards, which fires the watchers (the UI re-renders from
    there).
    """

    def __init__(self, items: Iterable[Item] = (), revision: str | None = None) -> None:
        self._items: list[Item] = list(items)
        self.revision = revision
        self._watchers: list[Callback] = []

    @property
    def items(self) -> list[Item]:
        return self._items

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback after every change. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)

    def changed(self) -> None:
        """Notify watchers that the items changed."""
        for callback in list(self._watchers):
            callback(self)

    def replace(self, items: Iterable[Item], revision: str | None) -> None:
        """Swap in a whole new collection in one assignment."""
        self._items = list(items)
        self.revision = revision
        self.changed()

    def find(self, item_id: str) -> Item | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def column(self, column_id: str) -> list[Item]:
        """Items of a column in display order."""
        return column_items(self._items, column_id)
