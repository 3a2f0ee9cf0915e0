"""Column widgets for the taskboard UI."""

import weakref

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Rule, Static

from taskboard.client.insertion import insertion_index
from taskboard.columns import Column
from taskboard.models import Item
from taskboard.ui.card import CardWidget
from taskboard.ui.drag import CardPlaceholder, DropTarget


class ColumnWidget(DropTarget, Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > #column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    class CardDropped(Message):
        """Posted when a card is dropped on this column."""

        def __init__(self, column_widget: "ColumnWidget", item_id: str, index: int) -> None:
            super().__init__()
            self.column_widget = column_widget
            self.item_id = item_id
            self.index = index

        @property
        def column_id(self) -> str:
            return self.column_widget.column.id

    def __init__(self, column: Column, items: list[Item]):
        super().__init__(id=f"column-{column.id}")
        self.column = column
        self._initial_items = list(items)
        self._card_placeholder: CardPlaceholder | None = None
        # Cards already told to remove() but not yet pruned from children
        self._removed: weakref.WeakSet[CardWidget] = weakref.WeakSet()

    def compose(self) -> ComposeResult:
        yield Static(self.column.name, id="column-title")
        yield Rule()
        for item in self._initial_items:
            yield CardWidget(item)

    @property
    def cards(self) -> list[CardWidget]:
        """Card widgets in display order."""
        return [c for c in self.children if isinstance(c, CardWidget) and c not in self._removed]

    # -- Re-render from state --

    def sync_items(self, items: list[Item]) -> None:
        """Make the card widgets match items, in order, reusing widgets by id."""
        existing = {card.item_id: card for card in self.cards}
        wanted = {item.id for item in items}

        for item_id, widget in existing.items():
            if item_id not in wanted:
                self._removed.add(widget)
                widget.remove()

        for item in items:
            widget = existing.get(item.id)
            if widget is None:
                widget = CardWidget(item)
                self.mount(widget)
                existing[item.id] = widget
            else:
                widget.update_item(item)

        if not items:
            return
        # Reorder to match items, anchored on the last card
        anchor = existing[items[-1].id]
        for item in reversed(items[:-1]):
            widget = existing[item.id]
            self.move_child(widget, before=anchor)
            anchor = widget

    # -- DropTarget: column accepting card drops --

    def _visible_cards(self, draggable) -> list[CardWidget]:
        return [c for c in self.cards if c is not draggable]

    def drop_index(self, draggable, screen_y: int) -> int:
        """Insertion index for a drop at screen_y, ignoring the dragged card."""
        return insertion_index(screen_y, [c.region for c in self._visible_cards(draggable)])

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        visible = self._visible_cards(draggable)
        index = self.drop_index(draggable, y)
        self._ensure_card_placeholder(visible[index] if index < len(visible) else None)
        return True

    def drag_away(self, draggable) -> None:
        self._remove_card_placeholder()

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        index = self.drop_index(draggable, y)
        self._remove_card_placeholder()
        self.post_message(self.CardDropped(self, draggable.item_id, index))
        return True

    def _ensure_card_placeholder(self, insert_before: Widget | None) -> None:
        """Put the placeholder before insert_before, or at the end for None.

        Does nothing if the placeholder is already in that slot.
        """
        if self._card_placeholder is None or self._card_placeholder.parent is not self:
            self._remove_card_placeholder()
            self._card_placeholder = CardPlaceholder()
            if insert_before is None:
                self.mount(self._card_placeholder)
            else:
                self.mount(self._card_placeholder, before=insert_before)
            return

        children = list(self.children)
        placeholder_idx = children.index(self._card_placeholder)
        if insert_before is None:
            if placeholder_idx == len(children) - 1:
                return
            self.move_child(self._card_placeholder, after=children[-1])
            return
        if placeholder_idx + 1 == children.index(insert_before):
            return
        self.move_child(self._card_placeholder, before=insert_before)

    def _remove_card_placeholder(self) -> None:
        if self._card_placeholder is not None and self._card_placeholder.parent is not None:
            self._card_placeholder.remove()
        self._card_placeholder = None
