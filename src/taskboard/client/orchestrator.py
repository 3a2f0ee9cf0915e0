"""Move orchestration: lock, snapshot, optimistic apply, store call, resync or rollback.

The store is synchronous (git I/O); every call to it runs via
asyncio.to_thread so the event loop stays responsive while a move is in
flight. That await is the only suspension point of a move.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Protocol

from taskboard.client.lock import MoveLock
from taskboard.client.optimistic import apply_optimistic_move
from taskboard.client.snapshot import capture, restore
from taskboard.client.state import BoardState
from taskboard.constants import MOVE_FAILED_MESSAGE
from taskboard.models import Item, MoveIntent
from taskboard.store.errors import RevisionConflict, StoreError

logger = logging.getLogger(__name__)

Notify = Callable[[str, str], None]


class ItemStore(Protocol):
    """What the orchestrator needs from the authoritative store."""

    def fetch(self) -> tuple[list[Item], str | None]: ...

    def move_item(
        self,
        item_id: str,
        column: str | None = None,
        index: int | None = None,
        expected_revision: str | None = None,
    ) -> Item: ...


class MoveOutcome(Enum):
    DROPPED = "dropped"
    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"


def _ignore(message: str, severity: str) -> None:
    pass


class MoveOrchestrator:
    """Runs card moves against a BoardState and an authoritative store."""

    def __init__(
        self,
        state: BoardState,
        store: ItemStore,
        *,
        lock: MoveLock | None = None,
        notify: Notify | None = None,
        timeout: float | None = None,
    ) -> None:
        self.state = state
        self.store = store
        self.lock = lock or MoveLock()
        self.notify = notify or _ignore
        self.timeout = timeout

    async def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run a store call in a worker thread, bounded by the timeout."""
        call = asyncio.to_thread(func, *args)
        if self.timeout is None:
            return await call
        return await asyncio.wait_for(call, self.timeout)

    async def move(self, intent: MoveIntent) -> MoveOutcome:
        """Run one move end to end.

        A move that arrives while another is in flight is dropped without
        touching the state. On any store or transport failure the state is
        rolled back to the pre-move snapshot and the user is told once; moves
        are never retried.
        """
        if not self.lock.try_begin():
            logger.debug("dropping move of %s: another move is in flight", intent.item_id)
            return MoveOutcome.DROPPED

        try:
            snapshot = capture(self.state)
            apply_optimistic_move(self.state.items, intent)
            self.state.changed()

            try:
                await self._call(
                    self.store.move_item,
                    intent.item_id,
                    intent.column,
                    intent.index,
                    snapshot.revision,
                )
            except asyncio.CancelledError:
                restore(self.state, snapshot)
                raise
            except StoreError as exc:
                logger.warning("move of %s rejected: %s", intent.item_id, exc)
                restore(self.state, snapshot)
                self.notify(MOVE_FAILED_MESSAGE, "error")
                if isinstance(exc, RevisionConflict):
                    await self.resync()
                return MoveOutcome.ROLLED_BACK
            except Exception:
                logger.exception("move of %s failed", intent.item_id)
                restore(self.state, snapshot)
                self.notify(MOVE_FAILED_MESSAGE, "error")
                return MoveOutcome.ROLLED_BACK

            if not await self.resync():
                self.notify("Task moved, but the board could not be refreshed", "warning")
            return MoveOutcome.CONFIRMED
        finally:
            self.lock.end()

    async def resync(self) -> bool:
        """Replace local state with the store's collection.

        Returns False, leaving the state as it was, if the read fails.
        """
        try:
            items, revision = await self._call(self.store.fetch)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("resync failed")
            return False
        self.state.replace(items, revision)
        return True
