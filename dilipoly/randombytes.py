"""Operating-system randomness."""

from __future__ import annotations

import os


def randombytes(length: int) -> bytes:
    """Return ``length`` bytes from the system's secure random source."""
    if length < 0:
        raise ValueError("length must not be negative")
    return os.urandom(length)