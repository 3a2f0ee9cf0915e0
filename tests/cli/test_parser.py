"""Tests for CLI argument parsing and dispatch."""

import pytest

from taskboard.__main__ import main
from taskboard.cli import build_parser
from taskboard.cli.board import board_check, board_summary
from taskboard.cli.card import card_edit, card_list, card_move


def test_card_move_args():
    args = build_parser().parse_args(["card", "move", "abc", "--column", "done", "--position", "2", "--json"])
    assert args.func is card_move
    assert (args.id, args.column, args.position, args.json) == ("abc", "done", 2, True)


def test_card_edit_args():
    parser = build_parser()
    args = parser.parse_args(["card", "edit", "abc", "--title", "New", "--no-priority"])
    assert args.func is card_edit
    assert (args.id, args.title, args.body, args.priority) == ("abc", "New", None, False)
    assert parser.parse_args(["card", "edit", "abc"]).priority is None


def test_noun_defaults():
    parser = build_parser()
    assert parser.parse_args(["card"]).func is card_list
    assert parser.parse_args(["board"]).func is board_summary
    assert parser.parse_args(["board", "check"]).func is board_check


def test_main_dispatches(initialized_repo, monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["taskboard", "board", "check", "--repo", str(initialized_repo)])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == "ok"
