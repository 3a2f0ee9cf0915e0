"""Pre-move snapshots for rolling back optimistic changes."""

import copy
from dataclasses import dataclass

from taskboard.client.state import BoardState
from taskboard.models import Item


@dataclass(frozen=True)
class Snapshot:
    """Deep copy of the collection and the revision it belongs to."""

    items: tuple[Item, ...]
    revision: str | None


def capture(state: BoardState) -> Snapshot:
    """Copy the whole collection; later changes to state do not reach it."""
    return Snapshot(items=tuple(copy.deepcopy(state.items)), revision=state.revision)


def restore(state: BoardState, snapshot: Snapshot) -> None:
    """Put the snapshot back and fire the state's watchers.

    The snapshot is copied again on the way in so it stays untouched if the
    restored items are mutated later.
    """
    state.replace(copy.deepcopy(list(snapshot.items)), snapshot.revision)
