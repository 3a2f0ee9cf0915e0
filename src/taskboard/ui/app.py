"""Main Textual application for taskboard."""

import asyncio
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from taskboard.client.orchestrator import MoveOrchestrator
from taskboard.client.state import BoardState
from taskboard.constants import BRANCH_NAME
from taskboard.git import init_repo, is_git_repo, load_settings
from taskboard.store import BoardStore
from taskboard.ui.board import BoardScreen


class ConfirmInitScreen(ModalScreen[bool]):
    """Ask before turning a plain directory into a git repository."""

    DEFAULT_CSS = """
    ConfirmInitScreen {
        align: center middle;
    }
    ConfirmInitScreen > #confirm-box {
        width: 64;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $panel;
    }
    ConfirmInitScreen #confirm-actions {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    ConfirmInitScreen Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        ("y", "answer(True)", "Create"),
        ("n,escape", "answer(False)", "Quit"),
    ]

    def __init__(self, path: Path):
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-box"):
            yield Static(Text.assemble((str(self.path), "bold"), " is not a git repository."))
            yield Static(f"Run git init here and keep the board on the '{BRANCH_NAME}' branch?")
            with Horizontal(id="confirm-actions"):
                yield Button("Create", id="create", variant="primary")
                yield Button("Quit", id="quit")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.action_answer(event.button.id == "create")

    def action_answer(self, create: bool) -> None:
        self.dismiss(create)


class TaskboardApp(App):
    """Kanban board TUI with optimistic card moves."""

    TITLE = "taskboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, repo_path: Path):
        super().__init__()
        self.repo_path = repo_path
        self.orchestrator: MoveOrchestrator | None = None

    async def on_mount(self) -> None:
        if not is_git_repo(self.repo_path):
            self.push_screen(ConfirmInitScreen(self.repo_path), self._on_init_response)
        else:
            await self._load_board()

    async def _on_init_response(self, result: bool) -> None:
        if result:
            init_repo(self.repo_path)
            await self._load_board()
        else:
            self.exit()

    async def _load_board(self) -> None:
        """Open the store, read the items and show the board."""
        try:
            settings = await asyncio.to_thread(load_settings, self.repo_path)
        except ValueError as e:
            self.notify(f"Bad taskboard config: {e}", severity="error")
            self.exit(return_code=1)
            return
        store = BoardStore(self.repo_path, settings.columns)
        await asyncio.to_thread(store.initialize)

        self.orchestrator = MoveOrchestrator(
            BoardState(),
            store,
            notify=self._notify,
            timeout=settings.move_timeout,
        )
        if not await self.orchestrator.resync():
            self.notify("Could not load the board", severity="error")
        self.push_screen(BoardScreen(self.orchestrator, settings.columns))

    def _notify(self, message: str, severity: str) -> None:
        self.notify(message, severity=severity)
