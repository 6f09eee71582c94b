"""Three-way comparison of ordered values."""

from typing import Any


def compare(a: Any, b: Any) -> int:
    """Return 0 if ``a == b``, 1 if ``a > b`` and -1 otherwise."""
    if a == b:
        return 0
    return 1 if a > b else -1