from __future__ import annotations

from collections.abc import Iterable

from .errors import BlockLengthError

BLOCK_SIZE = 16


def group(data: bytes, block_size: int = BLOCK_SIZE) -> list[bytes]:
    """Split block-aligned data into consecutive blocks.

    Args:
        data: Input bytes. Length must be a multiple of ``block_size``;
            call :func:`~blockmodes.libs.crypto.padding.pad` first otherwise.
        block_size: Block size in bytes.

    Returns:
        The blocks in order. Empty input yields an empty list.

    Raises:
        BlockLengthError: If the input length is not a multiple of
            ``block_size``.
    """
    if len(data) % block_size != 0:
        raise BlockLengthError(
            f"Data length {len(data)} not a multiple of block size {block_size}"
        )
    data = bytes(data)
    return [data[i : i + block_size] for i in range(0, len(data), block_size)]


def ungroup(blocks: Iterable[bytes]) -> bytes:
    """Concatenate blocks back into a flat byte string."""
    return b"".join(blocks)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte sequences of equal length.

    Args:
        a: First byte sequence.
        b: Second byte sequence.

    Returns:
        The XOR result as a new byte sequence.

    Raises:
        ValueError: If the lengths differ.
    """
    if len(a) != len(b):
        raise ValueError("Cannot XOR byte sequences of different lengths")
    return bytes(x ^ y for x, y in zip(a, b, strict=True))
