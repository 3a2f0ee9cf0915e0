"""Fixtures for UI tests."""

import copy
from datetime import date

import pytest

from taskboard.columns import default_columns
from taskboard.models import Item
from taskboard.store import reconcile_move


class MemoryStore:
    """In-memory store with the BoardStore move/fetch surface."""

    def __init__(self, items):
        self.items = copy.deepcopy(items)
        self.revision = "r1"
        self.calls = []
        self.move_error = None

    def fetch(self):
        return copy.deepcopy(self.items), self.revision

    def move_item(self, item_id, column=None, index=None, expected_revision=None):
        self.calls.append((item_id, column, index))
        if self.move_error:
            raise self.move_error
        item = reconcile_move(self.items, item_id, column, index, columns=default_columns(), today=date(2024, 5, 17))
        self.revision = f"r{len(self.calls) + 1}"
        return copy.deepcopy(item)


@pytest.fixture
def items():
    """todo [x, y, w], done [z]."""
    return [
        Item(id="x", title="Write tests", column="todo", rank=0),
        Item(id="y", title="Fix bug", column="todo", rank=1, priority=True),
        Item(id="w", title="Ship it", column="todo", rank=2, description="Tag and push"),
        Item(id="z", title="Plan", column="done", rank=0),
    ]


@pytest.fixture
def memory_store(items):
    return MemoryStore(items)
