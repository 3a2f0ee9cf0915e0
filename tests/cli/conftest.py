"""Shared fixtures for CLI tests."""

import pytest

from taskboard.store import BoardStore


@pytest.fixture
def initialized_repo(temp_repo):
    """A repo with an initialized board: todo [First, Second], done [Third]."""
    store = BoardStore(temp_repo)
    store.initialize()
    store.create_item("First card", "Description one.")
    store.create_item("Second card")
    third = store.create_item("Third card", priority=True)
    store.move_item(third.id, "done")
    return temp_repo


@pytest.fixture
def store(initialized_repo):
    return BoardStore(initialized_repo)


@pytest.fixture
def ids(store):
    """Item ids keyed by title."""
    items, _ = store.fetch()
    return {item.title: item.id for item in items}


@pytest.fixture
def titles(store):
    """Callable giving the titles of a column in rank order."""

    def column_titles(column):
        items, _ = store.fetch()
        members = sorted((i for i in items if i.column == column), key=lambda i: i.rank)
        return [i.title for i in members]

    return column_titles
