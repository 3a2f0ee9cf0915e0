"""Single-flight guard for card moves."""


class MoveLock:
    """Admits one move at a time.

    A plain flag: the client runs on one event loop, so the only thing to
    guard against is a second drop arriving while the first move is awaiting
    the store. Callers pair try_begin() with end() in a finally block.
    """

    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def try_begin(self) -> bool:
        """Take the lock if it is free. Returns False if a move is in flight."""
        if self._held:
            return False
        self._held = True
        return True

    def end(self) -> None:
        """Release the lock. Safe to call when it is not held."""
        self._held = False
