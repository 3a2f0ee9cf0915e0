"""Board screen showing columns and cards."""

import asyncio
from typing import Coroutine

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from taskboard.client.orchestrator import MoveOrchestrator, MoveOutcome
from taskboard.client.state import BoardState
from taskboard.columns import ColumnSet
from taskboard.models import MoveIntent
from taskboard.ui.card import CardWidget
from taskboard.ui.column import ColumnWidget
from taskboard.ui.watcher import StateWatcherMixin


class BoardScreen(StateWatcherMixin, Screen):
    """Main board screen showing all columns."""

    DEFAULT_CSS = """
    BoardScreen {
        layers: base overlay;
    }
    BoardScreen > #columns {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("ctrl+r", "refresh", "Refresh"),
        Binding("shift+up", "nudge(-1, 0)", "Move up", show=False),
        Binding("shift+down", "nudge(1, 0)", "Move down", show=False),
        Binding("shift+left", "nudge(0, -1)", "Move left", show=False),
        Binding("shift+right", "nudge(0, 1)", "Move right", show=False),
    ]

    def __init__(self, orchestrator: MoveOrchestrator, columns: ColumnSet):
        self._init_watcher()
        super().__init__()
        self.orchestrator = orchestrator
        self.board_columns = columns
        self._active_draggable = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def board_state(self) -> BoardState:
        return self.orchestrator.state

    def compose(self) -> ComposeResult:
        with Horizontal(id="columns"):
            for column in self.board_columns:
                yield ColumnWidget(column, self.board_state.column(column.id))
        yield Footer()

    def on_mount(self) -> None:
        self.state_watch(self.board_state, self._on_state_changed)

    def _on_state_changed(self, state: BoardState) -> None:
        """Re-render every column from the current items."""
        for widget in self.query(ColumnWidget):
            widget.sync_items(state.column(widget.column.id))

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()

    # -- Moves --

    def on_column_widget_card_dropped(self, event: ColumnWidget.CardDropped) -> None:
        """Start a move for a drop; the handler returns before the store answers."""
        event.stop()
        self.start_move(MoveIntent(event.item_id, event.column_id, event.index))

    def _spawn(self, coro: Coroutine) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def start_move(self, intent: MoveIntent) -> None:
        """Run the move as a task so later drops reach the move lock (and are dropped)."""
        self._spawn(self._move(intent))

    async def _move(self, intent: MoveIntent) -> MoveOutcome:
        outcome = await self.orchestrator.move(intent)
        if outcome is not MoveOutcome.DROPPED:
            self.call_after_refresh(self._refocus_card, intent.item_id)
        return outcome

    def _refocus_card(self, item_id: str) -> None:
        """Focus a card by item id."""
        for card in self.query(CardWidget):
            if card.item_id == item_id:
                card.focus()
                return

    def action_nudge(self, rows: int, cols: int) -> None:
        """Move the focused card one slot up/down or one column left/right."""
        focused = self.focused
        if not isinstance(focused, CardWidget):
            return
        item = self.board_state.find(focused.item_id)
        column_ids = self.board_columns.ids
        if item is None or item.column not in column_ids:
            return

        if cols:
            new_col = column_ids.index(item.column) + cols
            if not 0 <= new_col < len(column_ids):
                return
            column = column_ids[new_col]
            index = min(item.rank, len(self.board_state.column(column)))
        else:
            column = item.column
            index = item.rank + rows
            if not 0 <= index < len(self.board_state.column(column)):
                return

        self.start_move(MoveIntent(item.id, column, index))

    def action_refresh(self) -> None:
        """Re-read the board from the store."""
        self._spawn(self._refresh())

    async def _refresh(self) -> None:
        if not await self.orchestrator.resync():
            self.notify("Could not load the board", severity="error")
