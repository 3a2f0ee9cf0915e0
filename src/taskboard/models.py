"""Data models for taskboard items."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class HistoryEntry:
    """One line of an item's append-only history."""

    date: str
    action: str


@dataclass
class Item:
    """A work item on the board."""

    id: str
    title: str
    column: str
    rank: int = 0
    description: str = ""
    priority: bool = False
    history: list[HistoryEntry] = field(default_factory=list)
    created: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready dict stored in tasks.json."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Build an Item from a stored dict, ignoring unknown keys."""
        history = [
            HistoryEntry(date=str(entry.get("date", "")), action=str(entry.get("action", "")))
            for entry in data.get("history") or []
        ]
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            column=str(data["column"]),
            rank=int(data.get("rank", 0)),
            description=str(data.get("description", "")),
            priority=bool(data.get("priority", False)),
            history=history,
            created=str(data.get("created", "")),
        )


@dataclass(frozen=True)
class MoveIntent:
    """A requested move: put item_id into column at index."""

    item_id: str
    column: str
    index: int
