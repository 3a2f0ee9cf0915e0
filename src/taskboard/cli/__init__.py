"""CLI argument parser and dispatch for taskboard."""

import argparse

from taskboard.cli.board import board_check, board_summary
from taskboard.cli.card import card_add, card_delete, card_edit, card_list, card_move
from taskboard.cli.init import init_board
from taskboard.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", help="Path to git repository (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")

    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Git-backed task board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Initialize a taskboard board", parents=[common])
    init_p.add_argument("--columns", help="Columns as 'id:Name,id:Name' (saved to git config)")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_check_p = board_verbs.add_parser("check", help="Check column ranks are dense", parents=[common])
    board_check_p.set_defaults(func=board_check)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--body", default="", help="Card description")
    card_add_p.add_argument("--priority", action="store_true", help="Mark as priority")
    card_add_p.set_defaults(func=card_add)

    card_edit_p = card_verbs.add_parser("edit", help="Change a card's title, body or priority", parents=[common])
    card_edit_p.add_argument("id", help="Card ID")
    card_edit_p.add_argument("--title", help="New title")
    card_edit_p.add_argument("--body", help="New description")
    card_edit_p.add_argument("--priority", action=argparse.BooleanOptionalAction, help="Set or clear priority")
    card_edit_p.set_defaults(func=card_edit)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--column", dest="column", help="Target column ID (default: current)")
    card_move_p.add_argument("--position", type=int, help="Position in column (1-indexed)")
    card_move_p.set_defaults(func=card_move)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve board in browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8617, help="Port (default: 8617)")
    web_p.set_defaults(func=web)

    return parser
