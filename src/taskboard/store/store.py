"""The authoritative item store."""

import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, TypeVar

from taskboard.columns import ColumnSet, default_columns
from taskboard.constants import BRANCH_NAME
from taskboard.git import load_settings
from taskboard.ids import new_id
from taskboard.models import Item
from taskboard.ordering import column_items, next_rank, renumber
from taskboard.store.backend import get_branch_tip, read_items, write_items
from taskboard.store.errors import RevisionConflict, ValidationError
from taskboard.store.reconcile import find_item, reconcile_move

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoardStore:
    """Item collection persisted on a git branch.

    Every operation reads the whole collection, changes it and writes it back
    as one commit. Operations in this process are serialised by a lock; writers
    in other processes are caught by the compare-and-swap in write_items and
    reported as RevisionConflict.
    """

    def __init__(self, repo_path: str | Path, columns: ColumnSet | None = None, branch: str = BRANCH_NAME):
        self.repo_path = Path(repo_path)
        self.columns = columns or default_columns()
        self.branch = branch
        self._lock = threading.Lock()

    @classmethod
    def open(cls, repo_path: str | Path) -> "BoardStore":
        """Create a store using the columns configured in git config."""
        settings = load_settings(repo_path)
        return cls(repo_path, settings.columns)

    @property
    def revision(self) -> str | None:
        return get_branch_tip(self.repo_path, self.branch)

    def fetch(self) -> tuple[list[Item], str | None]:
        """Read the full collection and the revision it was read at."""
        return read_items(self.repo_path, self.branch)

    def initialize(self) -> str:
        """Create the board branch with no items unless it exists. Returns the tip."""
        with self._lock:
            tip = get_branch_tip(self.repo_path, self.branch)
            if tip is not None:
                return tip
            logger.info("initializing board branch %s in %s", self.branch, self.repo_path)
            return write_items(self.repo_path, [], "Initialize taskboard", None, self.branch)

    def _mutate(self, message: str, mutate: Callable[[list[Item]], T], expected_revision: str | None = None) -> T:
        """Read, apply mutate, write back; all under the store lock."""
        with self._lock:
            items, tip = self.fetch()
            if expected_revision is not None and expected_revision != tip:
                raise RevisionConflict(expected_revision, tip)
            result = mutate(items)
            commit = write_items(self.repo_path, items, message, tip, self.branch)
            logger.debug("%s -> %s", message, commit[:7])
            return result

    def move_item(
        self,
        item_id: str,
        column: str | None = None,
        index: int | None = None,
        expected_revision: str | None = None,
    ) -> Item:
        """Move an item and persist the renumbered collection.

        Raises ItemNotFound, InvalidMove or RevisionConflict; nothing is
        written when any of them is raised.
        """

        def mutate(items: list[Item]) -> Item:
            return reconcile_move(items, item_id, column, index, columns=self.columns)

        item = self._mutate(f"Move item {item_id}", mutate, expected_revision)
        logger.info("moved %s to %s@%d", item_id, item.column, item.rank)
        return item

    def create_item(self, title: str, description: str = "", priority: bool = False) -> Item:
        """Add an item at the end of the first column."""
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required")

        def mutate(items: list[Item]) -> Item:
            column = self.columns.first.id
            item = Item(
                id=new_id(),
                title=title,
                column=column,
                rank=next_rank(items, column),
                description=description.strip(),
                priority=priority,
                created=datetime.now(timezone.utc).isoformat(),
            )
            items.append(item)
            return item

        return self._mutate(f"Add item: {title}", mutate)

    def update_item(
        self,
        item_id: str,
        title: str | None = None,
        description: str | None = None,
        priority: bool | None = None,
    ) -> Item:
        """Change descriptive fields; ordering is untouched."""
        if title is not None and not title.strip():
            raise ValidationError("Title must not be empty")

        def mutate(items: list[Item]) -> Item:
            item = find_item(items, item_id)
            if title is not None:
                item.title = title.strip()
            if description is not None:
                item.description = description.strip()
            if priority is not None:
                item.priority = priority
            return item

        return self._mutate(f"Update item {item_id}", mutate)

    def delete_item(self, item_id: str) -> Item:
        """Remove an item and close the gap it leaves in its column."""

        def mutate(items: list[Item]) -> Item:
            item = find_item(items, item_id)
            items.remove(item)
            renumber(column_items(items, item.column))
            return item

        item = self._mutate(f"Delete item {item_id}", mutate)
        logger.info("deleted %s from %s", item_id, item.column)
        return item
