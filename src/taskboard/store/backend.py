"""Read and write tasks.json on the board branch without touching the working tree."""

import json
import subprocess
from pathlib import Path

from git import Repo

from taskboard.constants import BRANCH_NAME, TASKS_FILE
from taskboard.models import Item
from taskboard.store.errors import RevisionConflict

ZERO_SHA = "0" * 40


# --- Git plumbing ---


def _git(repo_path: Path, args: list[str]) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _hash_object(repo_path: Path, content: str) -> str:
    """Write content to git object store and return the blob hash."""
    result = subprocess.run(
        ["git", "hash-object", "-w", "--stdin"],
        cwd=repo_path,
        input=content.encode("utf-8"),
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _mktree(repo_path: Path, entries: list[tuple[str, str, str, str]]) -> str:
    """Create a tree object from entries and return its hash.

    Each entry is (mode, type, sha, name).
    """
    lines = [f"{mode} {typ} {sha}\t{name}" for mode, typ, sha, name in entries]
    content = "\n".join(lines) + "\n" if lines else ""

    result = subprocess.run(
        ["git", "mktree"],
        cwd=repo_path,
        input=content.encode("utf-8"),
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def get_branch_tip(repo_path: Path, branch: str = BRANCH_NAME) -> str | None:
    """Get the current commit hash of a branch, or None if it doesn't exist."""
    result = subprocess.run(
        ["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip()


# --- Serialization ---


def serialize_items(items: list[Item]) -> str:
    """Render items as the tasks.json document."""
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False) + "\n"


def parse_items(text: str) -> list[Item]:
    """Parse a tasks.json document."""
    data = json.loads(text) if text.strip() else []
    return [Item.from_dict(entry) for entry in data]


# --- Read / write ---


def read_items(repo_path: Path, branch: str = BRANCH_NAME) -> tuple[list[Item], str | None]:
    """Load items from the branch tip.

    Returns (items, revision). A missing branch reads as ([], None), a branch
    without tasks.json as ([], tip).
    """
    tip = get_branch_tip(repo_path, branch)
    if tip is None:
        return [], None

    tree = Repo(repo_path).commit(tip).tree
    try:
        blob = tree[TASKS_FILE]
    except KeyError:
        return [], tip
    return parse_items(blob.data_stream.read().decode("utf-8")), tip


def write_items(
    repo_path: Path,
    items: list[Item],
    message: str,
    parent: str | None,
    branch: str = BRANCH_NAME,
) -> str:
    """Commit items as tasks.json on top of parent and move the branch.

    The ref update is a compare-and-swap against parent: if the branch no
    longer points at parent, nothing is changed and RevisionConflict is raised.
    Returns the new commit hash.
    """
    blob = _hash_object(repo_path, serialize_items(items))
    tree = _mktree(repo_path, [("100644", "blob", blob, TASKS_FILE)])

    parent_args = ["-p", parent] if parent else []
    new_commit = _git(repo_path, ["commit-tree", tree, *parent_args, "-m", message])

    result = subprocess.run(
        ["git", "update-ref", f"refs/heads/{branch}", new_commit, parent or ZERO_SHA],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        raise RevisionConflict(parent, get_branch_tip(repo_path, branch))

    return new_commit
