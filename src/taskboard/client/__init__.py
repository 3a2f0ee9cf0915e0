"""Client side of card moves: optimistic state, locking, rollback and resync."""

from taskboard.client.insertion import insertion_index
from taskboard.client.lock import MoveLock
from taskboard.client.optimistic import apply_optimistic_move
from taskboard.client.orchestrator import MoveOrchestrator, MoveOutcome
from taskboard.client.snapshot import Snapshot, capture, restore
from taskboard.client.state import BoardState

__all__ = [
    "BoardState",
    "MoveLock",
    "MoveOrchestrator",
    "MoveOutcome",
    "Snapshot",
    "apply_optimistic_move",
    "capture",
    "insertion_index",
    "restore",
]
