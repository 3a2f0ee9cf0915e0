"""Mixin that manages BoardState watches with auto-cleanup."""

from __future__ import annotations

from typing import Callable

from taskboard.client.state import BoardState, Callback


class StateWatcherMixin:
    """Mixin for widgets that re-render from a BoardState.

    Subclasses should:
    - Call ``_init_watcher()`` in ``__init__``
    - Use ``self.state_watch(state, callback)`` instead of ``state.watch(...)``
    - Skip writing ``on_unmount`` -- the mixin handles cleanup
    """

    def _init_watcher(self) -> None:
        self._watches: list[Callable[[], None]] = []

    def state_watch(self, state: BoardState, callback: Callback) -> None:
        """Register a watch that is removed again on unmount."""
        self._watches.append(state.watch(callback))

    def on_unmount(self) -> None:
        for unwatch in self._watches:
            unwatch()
        self._watches.clear()
