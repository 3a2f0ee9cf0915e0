"""Handler for 'taskboard init'."""

from pathlib import Path

from taskboard.cli._common import error, output_json
from taskboard.columns import format_columns, parse_columns
from taskboard.git import init_repo, is_git_repo, write_git_config_key
from taskboard.store import BoardStore
from taskboard.store.backend import get_branch_tip


def init_board(args) -> int:
    """Initialize a taskboard board in the repository."""
    repo_path = Path(args.repo).resolve()

    if not is_git_repo(repo_path):
        init_repo(repo_path)

    if args.columns:
        try:
            columns = parse_columns(args.columns)
        except ValueError as e:
            error(str(e), args.json)
        write_git_config_key(repo_path, "columns", format_columns(columns))

    created = get_branch_tip(repo_path) is None
    store = BoardStore.open(repo_path)
    revision = store.initialize()

    names = [c.name for c in store.columns]
    if args.json:
        output_json({"repo_path": str(repo_path), "columns": names, "created": created, "revision": revision})
    elif created:
        print(f"Initialized taskboard at {repo_path}")
        print(f"Columns: {', '.join(names)}")
    else:
        print(f"Board already initialized at {repo_path}")

    return 0
