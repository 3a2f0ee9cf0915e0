"""Tests for optimistic local moves."""

from taskboard.client.optimistic import apply_optimistic_move
from taskboard.models import Item, MoveIntent
from taskboard.ordering import column_items, find_violations


def make_items():
    return [
        Item(id="x", title="X", column="todo", rank=0),
        Item(id="y", title="Y", column="todo", rank=1),
        Item(id="z", title="Z", column="done", rank=0),
    ]


def test_cross_column():
    items = make_items()
    moved = apply_optimistic_move(items, MoveIntent("x", "done", 1))

    assert moved is items[0]
    assert [i.id for i in column_items(items, "todo")] == ["y"]
    assert [i.id for i in column_items(items, "done")] == ["z", "x"]
    assert find_violations(items) == {}


def test_does_not_touch_history():
    items = make_items()
    apply_optimistic_move(items, MoveIntent("x", "done", 0))
    assert items[0].history == []


def test_unknown_item_leaves_collection_alone():
    items = make_items()
    assert apply_optimistic_move(items, MoveIntent("nope", "done", 0)) is None
    assert items == make_items()


def test_index_clamped():
    items = make_items()
    apply_optimistic_move(items, MoveIntent("y", "todo", 10))
    assert [(i.id, i.rank) for i in column_items(items, "todo")] == [("x", 0), ("y", 1)]


def test_negative_index_goes_to_top():
    items = make_items()
    apply_optimistic_move(items, MoveIntent("y", "todo", -2))
    assert [i.id for i in column_items(items, "todo")] == ["y", "x"]
