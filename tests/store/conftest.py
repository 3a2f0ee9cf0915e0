"""Fixtures for store tests."""

import pytest

from taskboard.columns import parse_columns
from taskboard.models import Item
from taskboard.store import BoardStore
from taskboard.store.backend import write_items


@pytest.fixture
def columns():
    return parse_columns("todo:To Do,wait:Wait,inprogress:In Progress,done:Done")


@pytest.fixture
def board_items():
    """todo [X, Y], done [Z]."""
    return [
        Item(id="x", title="X", column="todo", rank=0),
        Item(id="y", title="Y", column="todo", rank=1),
        Item(id="z", title="Z", column="done", rank=0),
    ]


@pytest.fixture
def store(temp_repo, columns, board_items):
    """A store on a repo whose board branch already holds board_items."""
    write_items(temp_repo, board_items, "Seed board", None)
    return BoardStore(temp_repo, columns)
