"""Item ID generation."""

import secrets
import time

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
RANDOM_LENGTH = 9


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36.

    0 → "0", 35 → "z", 36 → "10"
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


def new_id(now_ms: int | None = None) -> str:
    """Generate an item ID: base36 millisecond timestamp plus random suffix.

    IDs sort roughly by creation time and collide only if two items are
    created in the same millisecond with the same random suffix.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(ALPHABET) for _ in range(RANDOM_LENGTH))
    return to_base36(now_ms) + suffix
