"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from taskboard.columns import ColumnSet
from taskboard.git import has_branch_sync, is_git_repo
from taskboard.models import Item
from taskboard.store import BoardStore


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.INFO,
    )


def open_store_or_die(repo: str, json_mode: bool) -> BoardStore:
    """Open the board store at repo. Exit 1 with message if there is no board."""
    repo_path = Path(repo).resolve()
    if not is_git_repo(repo_path) or not has_branch_sync(repo_path):
        error(f"No board in {repo_path}. Run 'taskboard init' first.", json_mode)
    try:
        return BoardStore.open(repo_path)
    except ValueError as e:
        error(f"Bad taskboard config: {e}", json_mode)


def item_data(item: Item, columns: ColumnSet) -> dict:
    """JSON-ready summary of an item."""
    return {
        "id": item.id,
        "title": item.title,
        "rank": item.rank,
        "priority": item.priority,
        "column": {"id": item.column, "name": columns.name(item.column)},
    }


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
