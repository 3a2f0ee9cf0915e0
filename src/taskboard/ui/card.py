"""Card widgets for the taskboard UI."""

from rich.text import Text
from textual.widgets import Static

from taskboard.models import Item
from taskboard.ui.drag import DraggableMixin

ICON_PRIORITY = "★"
ICON_BODY = "📝"


def card_text(item: Item) -> Text:
    """Rich text shown on a card: priority star, title and a body marker."""
    text = Text()
    if item.priority:
        text.append(f"{ICON_PRIORITY} ", style="bold yellow")
    text.append(item.title or item.id)
    if item.description:
        text.append(f" {ICON_BODY}", style="dim")
    return text


class DragGhost(Static):
    """Floating overlay showing the card being dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        padding: 0 1;
        background: $primary;
    }
    """

    def __init__(self, item: Item):
        super().__init__(card_text(item))


class CardWidget(DraggableMixin, Static, can_focus=True):
    """A single card in a column."""

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        min-height: 3;
        padding: 1 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.dragging {
        display: none;
    }
    """

    def __init__(self, item: Item):
        Static.__init__(self, card_text(item))
        self._init_draggable()
        self.item_id = item.id
        self.item = item

    def update_item(self, item: Item) -> None:
        """Show a newer copy of the same item."""
        if item == self.item:
            return
        self.item = item
        self.update(card_text(item))

    def draggable_make_ghost(self) -> DragGhost:
        return DragGhost(self.item)

    def draggable_clicked(self) -> None:
        self.focus()
