from __future__ import annotations

import os
from collections.abc import Callable

RandomSource = Callable[[int], bytes]

default_source: RandomSource = os.urandom


def random_bytes(n: int, source: RandomSource | None = None) -> bytes:
    """Draw exactly ``n`` bytes from ``source``.

    Args:
        n: Number of bytes wanted.
        source: Callable returning ``n`` random bytes. Defaults to
            :func:`os.urandom`.

    Returns:
        The random bytes.

    Raises:
        ValueError: If the source returns the wrong number of bytes.
    """
    data = (source or default_source)(n)
    if len(data) != n:
        raise ValueError(f"Random source returned {len(data)} bytes, expected {n}")
    return bytes(data)
