"""Random byte source for ItemEncrypt."""

from __future__ import annotations

import secrets
from collections.abc import Callable

# Signature of an injectable randomness source
RandomBytes = Callable[[int], bytes]


def random_bytes(count: int) -> bytes:
    """Return ``count`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(count)
