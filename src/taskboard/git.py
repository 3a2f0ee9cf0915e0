"""Git repository helpers and taskboard configuration in git config."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from taskboard.columns import DEFAULT_COLUMNS, ColumnSet, parse_columns
from taskboard.constants import BRANCH_NAME

SECTION = "taskboard"

TASKBOARD_DEFAULTS = {
    "columns": DEFAULT_COLUMNS,
    "move-timeout": 10,
}


@dataclass
class Settings:
    """Typed view of the taskboard section of git config."""

    columns: ColumnSet
    move_timeout: float | None


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _git_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to git-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce_value(git_key: str, raw: str):
    """Type-coerce taskboard section values using defaults."""
    default = TASKBOARD_DEFAULTS.get(git_key)
    if default is None:
        return raw
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "1")
    if isinstance(default, int):
        return int(raw)
    return raw


def read_git_config(repo_path: str | Path) -> dict[str, Any]:
    """Read the taskboard section of git config into a dict.

    Keys use underscores. Values are coerced to the type of their default,
    and defaults fill in any key that is not set.
    """
    repo = _get_repo(repo_path)
    reader = repo.config_reader()
    result: dict[str, Any] = {}
    if reader.has_section(SECTION):
        for git_k, raw in reader.items(SECTION):
            result[_python_key(git_k)] = _coerce_value(git_k, raw)
    for git_k, default in TASKBOARD_DEFAULTS.items():
        result.setdefault(_python_key(git_k), default)
    return result


def write_git_config_key(repo_path: str | Path, key: str, value) -> None:
    """Write one taskboard key to the repository's git config."""
    git_k = _git_key(key)
    repo = _get_repo(repo_path)
    writer = repo.config_writer("repository")
    try:
        if isinstance(value, bool):
            writer.set_value(SECTION, git_k, str(value).lower())
        else:
            writer.set_value(SECTION, git_k, str(value))
    finally:
        writer.release()


def load_settings(repo_path: str | Path) -> Settings:
    """Read and validate board settings from git config."""
    config = read_git_config(repo_path)
    timeout = config["move_timeout"]
    return Settings(
        columns=parse_columns(config["columns"]),
        move_timeout=timeout if timeout > 0 else None,
    )


def _get_repo(repo_path: str | Path) -> Repo:
    return Repo(repo_path)


def is_git_repo(path: str | Path) -> bool:
    """Check if path is inside a git repository."""
    try:
        Repo(path)
        return True
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False


def init_repo(path: str | Path) -> Repo:
    """Initialize a new git repository at path."""
    return Repo.init(path)


def has_branch_sync(repo_path: str | Path, branch: str = BRANCH_NAME) -> bool:
    """Check if a branch exists in the repository."""
    repo = _get_repo(repo_path)
    return branch in [h.name for h in repo.heads]
