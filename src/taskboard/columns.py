"""Column configuration for taskboard boards."""

from dataclasses import dataclass

DEFAULT_COLUMNS = "todo:To Do,wait:Wait,inprogress:In Progress,done:Done"


@dataclass(frozen=True)
class Column:
    """A named bucket on the board."""

    id: str
    name: str


class ColumnSet:
    """The ordered set of valid columns."""

    def __init__(self, columns: list[Column]):
        if not columns:
            raise ValueError("a board needs at least one column")
        ids = [c.id for c in columns]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate column ids: {', '.join(ids)}")
        self._columns = list(columns)
        self._by_id = {c.id: c for c in columns}

    def __iter__(self):
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._by_id

    def __repr__(self) -> str:
        return f"ColumnSet({format_columns(self)!r})"

    @property
    def ids(self) -> list[str]:
        return [c.id for c in self._columns]

    @property
    def first(self) -> Column:
        return self._columns[0]

    def name(self, column_id: str) -> str:
        """Display name for a column id, falling back to the id itself."""
        column = self._by_id.get(column_id)
        return column.name if column else column_id


def parse_columns(text: str) -> ColumnSet:
    """Parse "id:Name,id:Name" into a ColumnSet.

    "todo:To Do,done:Done" → [Column("todo", "To Do"), Column("done", "Done")]
    A bare "review" becomes Column("review", "review").
    """
    columns = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        column_id, _, name = part.partition(":")
        column_id = column_id.strip()
        if not column_id:
            raise ValueError(f"column entry without an id: {part!r}")
        columns.append(Column(id=column_id, name=name.strip() or column_id))
    return ColumnSet(columns)


def format_columns(columns: ColumnSet) -> str:
    """Inverse of parse_columns."""
    return ",".join(f"{c.id}:{c.name}" for c in columns)


def default_columns() -> ColumnSet:
    return parse_columns(DEFAULT_COLUMNS)
