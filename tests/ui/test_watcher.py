"""Tests for StateWatcherMixin."""

from taskboard.client.state import BoardState
from taskboard.ui.watcher import StateWatcherMixin


class FakeWidget(StateWatcherMixin):
    """Minimal stand-in for a Textual widget."""

    def __init__(self):
        self._init_watcher()


def test_watch_fires_callback():
    widget = FakeWidget()
    state = BoardState()
    calls = []
    widget.state_watch(state, calls.append)

    state.changed()
    assert calls == [state]


def test_on_unmount_cleans_up():
    widget = FakeWidget()
    state = BoardState()
    calls = []
    widget.state_watch(state, calls.append)
    widget.state_watch(state, calls.append)

    widget.on_unmount()

    state.replace([], "r2")
    assert calls == []
