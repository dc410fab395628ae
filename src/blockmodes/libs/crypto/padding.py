from __future__ import annotations

import logging

from .errors import PaddingError

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16


def _check_block_size(block_size: int) -> None:
    if not (1 <= block_size <= 255):
        raise ValueError("block_size must be between 1 and 255")


def pad(data_to_pad: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Pad data so its length becomes a multiple of ``block_size``.

    N bytes each equal to N are appended, where N is in ``[1, block_size]``.
    Padding is always added: block-aligned input gains a full extra block,
    so the end of the payload is never mistaken for padding.

    Args:
        data_to_pad: Raw input bytes.
        block_size: Block size in bytes. Must be in the range [1, 255].

    Returns:
        The padded data.

    Raises:
        ValueError: If ``block_size`` is out of range.
    """
    _check_block_size(block_size)

    padding_len = block_size - (len(data_to_pad) % block_size)
    return bytes(data_to_pad) + bytes([padding_len]) * padding_len


def unpad(
    padded_data: bytes,
    block_size: int = BLOCK_SIZE,
    strict: bool = False,
) -> bytes:
    """Remove padding previously applied by :func:`pad`.

    The default lenient policy only reads the last byte N. When N is zero
    or larger than the input, the input is returned unchanged rather than
    rejected, and empty input is returned as is. This cannot tell corrupted
    padding apart from a plaintext that happens to end in a valid-looking
    pattern.

    With ``strict=True`` every malformed case raises instead, and all N
    padding bytes are verified.

    Args:
        padded_data: Input data with padding applied.
        block_size: Block size in bytes. Must be in the range [1, 255].
        strict: Raise :class:`PaddingError` on malformed padding.

    Returns:
        The original unpadded data.

    Raises:
        ValueError: If ``block_size`` is out of range.
        PaddingError: In strict mode, if the padding is malformed.
    """
    _check_block_size(block_size)
    padded_data = bytes(padded_data)
    pdata_len = len(padded_data)

    if strict:
        if pdata_len == 0:
            raise PaddingError("Zero-length input cannot be unpadded")
        if pdata_len % block_size:
            raise PaddingError("Input data is not padded")

        padding_len = padded_data[-1]
        if padding_len < 1 or padding_len > block_size:
            raise PaddingError("Padding is incorrect")
        if padded_data[-padding_len:] != bytes([padding_len]) * padding_len:
            raise PaddingError("Padding is incorrect")

        return padded_data[:-padding_len]

    if pdata_len == 0:
        return padded_data

    padding_len = padded_data[-1]
    if padding_len == 0 or padding_len > pdata_len:
        logger.debug(
            "Ignoring invalid padding byte %d on %d-byte input",
            padding_len,
            pdata_len,
        )
        return padded_data

    return padded_data[:-padding_len]
