"""Errors raised by the authoritative store."""


class StoreError(Exception):
    """Base class for store failures the caller can report."""


class ItemNotFound(StoreError):
    """The item id does not exist in the store."""

    def __init__(self, item_id: str):
        super().__init__(f"Item '{item_id}' not found.")
        self.item_id = item_id


class ValidationError(StoreError):
    """The request was rejected before any mutation."""


class InvalidMove(ValidationError):
    """A move referenced an unknown column or a malformed index."""


class RevisionConflict(StoreError):
    """Another writer changed the board since the caller last read it."""

    def __init__(self, expected: str | None, actual: str | None):
        super().__init__(f"Board changed underneath us: expected {_short(expected)}, found {_short(actual)}.")
        self.expected = expected
        self.actual = actual


def _short(revision: str | None) -> str:
    return revision[:7] if revision else "nothing"
