"""Card and column ID generation."""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def random_suffix(length: int = 7) -> str:
    """Return a random base-36 string of the given length."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_id(now_ms: int | None = None) -> str:
    """Generate an opaque ID from a millisecond timestamp and random suffix.

    "id_1718000000000_k3j9x0a"
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"id_{now_ms}_{random_suffix()}"


def unique_id(existing) -> str:
    """Generate an ID that does not collide with any in existing."""
    new = generate_id()
    while new in existing:
        new = generate_id()
    return new
