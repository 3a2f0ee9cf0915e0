"""Authoritative, git-backed item store."""

from taskboard.store.errors import InvalidMove, ItemNotFound, RevisionConflict, StoreError, ValidationError
from taskboard.store.reconcile import reconcile_move
from taskboard.store.store import BoardStore

__all__ = [
    "BoardStore",
    "InvalidMove",
    "ItemNotFound",
    "RevisionConflict",
    "StoreError",
    "ValidationError",
    "reconcile_move",
]
