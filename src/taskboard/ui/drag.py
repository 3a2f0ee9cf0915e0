"""Mouse drag-and-drop for cards.

Pressing a card arms it; moving further than DRAG_THRESHOLD starts a
DragSession. From then on the screen forwards mouse events to the card
(see BoardScreen) until the button is released. Columns implement
DropTarget to show where the card would land and to accept it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.screen import Screen
    from textual.widget import Widget


class DropTarget:
    """Mixin for containers that accept dragged widgets."""

    def drag_over(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """The draggable is hovering at (x, y). Return True to accept it."""
        return False

    def drag_away(self, draggable: DraggableMixin) -> None:
        """The draggable moved on to another target or the drag was cancelled."""

    def try_drop(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """The button was released at (x, y). Return True if the drop is taken."""
        return False


@dataclass
class DragSession:
    """State of a drag in progress."""

    ghost: Widget
    grab: Offset  # pointer position relative to the dragged widget's corner
    target: DropTarget | None = None

    def place_ghost(self, x: int, y: int) -> None:
        self.ghost.styles.offset = (x - self.grab.x, y - self.grab.y)


def drop_targets_at(screen: Screen, x: int, y: int, ghost: Widget | None = None) -> list[DropTarget]:
    """DropTargets under a screen position, innermost first, looking through the ghost."""
    found: list[DropTarget] = []
    for widget, _region in screen.get_widgets_at(x, y):
        if ghost is not None and (widget is ghost or ghost in widget.ancestors):
            continue
        for node in widget.ancestors_with_self:
            if isinstance(node, DropTarget) and node not in found:
                found.append(node)
    return found


class DraggableMixin:
    """Mixin for widgets that can be picked up with the mouse.

    Subclasses call _init_draggable() in __init__ and implement
    draggable_make_ghost() and draggable_clicked(). The host screen needs an
    _active_draggable attribute and forwards mouse moves and releases to
    _drag_move() and _drag_finish() while it is set.
    """

    DRAG_THRESHOLD = 2

    def _init_draggable(self) -> None:
        self._press: Offset | None = None
        self._session: DragSession | None = None

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        event.prevent_default()
        self._press = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._press is None:
            return
        event.stop()
        event.prevent_default()
        delta = Offset(event.screen_x, event.screen_y) - self._press
        if max(abs(delta.x), abs(delta.y)) > self.DRAG_THRESHOLD:
            press, self._press = self._press, None
            self.release_mouse()
            self._drag_start(press)

    def on_mouse_up(self, event) -> None:
        event.stop()
        event.prevent_default()
        self.release_mouse()
        if self._press is not None:
            self._press = None
            self.draggable_clicked()

    def _drag_start(self, press: Offset) -> None:
        """Hide the widget, float a ghost in its place and hand the mouse to the screen."""
        region = self.region
        ghost = self.draggable_make_ghost()
        ghost.styles.width = region.width
        ghost.styles.offset = (region.x, region.y)
        self._session = DragSession(ghost=ghost, grab=press - region.offset)

        self.add_class("dragging")
        screen = self.screen
        screen.set_focus(None)
        screen.mount(ghost)
        screen._active_draggable = self
        screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        session = self._session
        if session is None:
            return
        session.place_ghost(x, y)
        targets = drop_targets_at(self.screen, x, y, session.ghost)
        if not targets:
            # Over a gap: keep the last target so its placeholder stays put
            return
        target = targets[0]
        if target is not session.target:
            if session.target is not None:
                session.target.drag_away(self)
            session.target = target
        target.drag_over(self, x, y)

    def _drag_finish(self, x: int, y: int) -> None:
        """Offer the drop to the targets under the pointer, then the last hovered one."""
        self.screen.release_mouse()
        session = self._session
        if session is None:
            return
        candidates = drop_targets_at(self.screen, x, y, session.ghost)
        if session.target is not None and session.target not in candidates:
            candidates.append(session.target)

        if any(target.try_drop(self, x, y) for target in candidates):
            session.target = None
            self._drag_end()
        else:
            self._drag_cancel()

    def _drag_cancel(self) -> None:
        self.screen.release_mouse()
        session = self._session
        if session is not None and session.target is not None:
            session.target.drag_away(self)
            session.target = None
        self._drag_end()

    def _drag_end(self) -> None:
        if self._session is not None:
            self._session.ghost.remove()
        self._session = None
        self.remove_class("dragging")
        self.screen._active_draggable = None

    def draggable_make_ghost(self) -> Widget:
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        raise NotImplementedError


class CardPlaceholder(Static):
    """Dashed slot showing where a dragged card will land."""

    DEFAULT_CSS = """
    CardPlaceholder {
        width: 100%;
        height: 3;
        margin-bottom: 1;
        border: dashed $primary;
        background: $surface-darken-1;
    }
    """
