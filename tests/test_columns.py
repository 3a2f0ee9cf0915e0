"""Tests for column configuration."""

import pytest

from taskboard.columns import Column, ColumnSet, default_columns, format_columns, parse_columns


def test_default_columns():
    columns = default_columns()
    assert columns.ids == ["todo", "wait", "inprogress", "done"]
    assert columns.name("inprogress") == "In Progress"
    assert columns.first == Column("todo", "To Do")


def test_parse_columns_bare_id():
    columns = parse_columns("todo:To Do, review ,done:Done")
    assert columns.ids == ["todo", "review", "done"]
    assert columns.name("review") == "review"


def test_parse_columns_round_trip():
    text = "a:Alpha,b:Beta"
    assert format_columns(parse_columns(text)) == text


def test_parse_columns_rejects_empty():
    with pytest.raises(ValueError):
        parse_columns(" , ")


def test_parse_columns_rejects_missing_id():
    with pytest.raises(ValueError):
        parse_columns(":Nameless")


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        ColumnSet([Column("a", "A"), Column("a", "Again")])


def test_membership_and_name_fallback():
    columns = default_columns()
    assert "done" in columns
    assert "archive" not in columns
    assert columns.name("archive") == "archive"
    assert len(columns) == 4
