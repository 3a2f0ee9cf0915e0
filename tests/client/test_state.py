"""Tests for BoardState."""

from taskboard.client.state import BoardState
from taskboard.models import Item


def test_watch_and_unwatch():
    state = BoardState()
    calls = []
    unwatch = state.watch(calls.append)

    state.changed()
    unwatch()
    state.changed()
    unwatch()

    assert calls == [state]


def test_replace():
    state = BoardState([Item(id="a", title="A", column="todo")], revision="r1")
    revisions = []
    state.watch(lambda s: revisions.append(s.revision))

    state.replace([Item(id="b", title="B", column="done")], "r2")

    assert [i.id for i in state.items] == ["b"]
    assert revisions == ["r2"]


def test_find_and_column():
    state = BoardState(
        [
            Item(id="a", title="A", column="todo", rank=1),
            Item(id="b", title="B", column="todo", rank=0),
            Item(id="c", title="C", column="done", rank=0),
        ]
    )
    assert state.find("c").title == "C"
    assert state.find("zz") is None
    assert [i.id for i in state.column("todo")] == ["b", "a"]
