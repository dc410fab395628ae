from __future__ import annotations

import random

import pytest
from Crypto.Util.Padding import pad as ref_pad
from Crypto.Util.Padding import unpad as ref_unpad

from blockmodes.libs.crypto.errors import PaddingError
from blockmodes.libs.crypto.padding import pad, unpad

# ===========================================================
# FIXED PARAMETERS
# ===========================================================

DATA_KNOWN = [
    b"",
    b"\x00",
    b"\x01\x02\x03",
    b"hello",
    b"\xff" * 7,
    b"\x10" * 16,
    b"The quick brown fox jumps over the lazy dog",
]

DATA_RANDOM_LENGTHS = [0, 1, 2, 7, 8, 15, 16, 17, 31, 32, 33, 47, 48, 53, 63, 64, 65]

_rng = random.Random(20251123)


def randbytes(n: int) -> bytes:
    """Reproducible random bytes using Python's random.Random."""
    return bytes(_rng.randrange(0, 256) for _ in range(n))


# ===========================================================
# PAD
# ===========================================================


@pytest.mark.parametrize("data", DATA_KNOWN)
def test_pad_matches_pycryptodome_pkcs7(data):
    assert pad(data) == ref_pad(data, 16, style="pkcs7")


@pytest.mark.parametrize("n", DATA_RANDOM_LENGTHS)
def test_pad_length_is_positive_multiple(n):
    padded = pad(randbytes(n))
    assert len(padded) % 16 == 0
    assert len(padded) > n
    assert 1 <= len(padded) - n <= 16


def test_pad_empty_gives_full_block():
    assert pad(b"") == bytes([16]) * 16


def test_pad_aligned_input_gets_extra_block():
    data = bytes(range(48))
    padded = pad(data)
    assert len(padded) == 64
    assert padded[48:] == bytes([16]) * 16


def test_pad_accepts_bytearray():
    assert pad(bytearray(b"abc")) == b"abc" + bytes([13]) * 13


def test_pad_invalid_block_size():
    with pytest.raises(ValueError):
        pad(b"abc", 0)
    with pytest.raises(ValueError):
        pad(b"abc", 256)


# ===========================================================
# UNPAD (lenient, default)
# ===========================================================


@pytest.mark.parametrize("n", DATA_RANDOM_LENGTHS)
def test_unpad_roundtrip(n):
    data = randbytes(n)
    assert unpad(pad(data)) == data
    assert ref_unpad(pad(data), 16) == data


def test_unpad_exact_multiple_and_non_multiple():
    data = bytes(range(48))
    assert unpad(pad(data)) == data

    data = bytes(range(53))
    assert unpad(pad(data)) == data


def test_unpad_empty_returns_empty():
    assert unpad(b"") == b""


def test_unpad_zero_byte_returned_unchanged():
    data = b"A" * 15 + b"\x00"
    assert unpad(data) == data


def test_unpad_length_beyond_input_returned_unchanged():
    data = b"AB" + bytes([4])
    assert unpad(data) == data


def test_unpad_only_last_byte_is_read():
    # Lenient policy strips N bytes without checking the rest of the pad.
    data = b"A" * 12 + b"\x09\x09\x09\x04"
    assert unpad(data) == b"A" * 12


def test_unpad_value_larger_than_block_but_within_input():
    data = bytes(range(20)) + bytes([18])
    assert unpad(data) == data[:-18]


def test_unpad_payload_that_looks_like_padding_is_stripped():
    # A message ending in 0x01 cannot be told apart from one pad byte.
    assert unpad(b"hello\x01") == b"hello"


# ===========================================================
# UNPAD (strict)
# ===========================================================


@pytest.mark.parametrize("n", DATA_RANDOM_LENGTHS)
def test_strict_unpad_roundtrip(n):
    data = randbytes(n)
    assert unpad(pad(data), strict=True) == data


def test_strict_unpad_rejects_empty_input():
    with pytest.raises(PaddingError):
        unpad(b"", strict=True)


def test_strict_unpad_rejects_non_multiple():
    with pytest.raises(PaddingError):
        unpad(b"\x01" * 15, strict=True)


@pytest.mark.parametrize("last", [0, 17, 255])
def test_strict_unpad_rejects_bad_padding_length(last):
    with pytest.raises(PaddingError):
        unpad(b"A" * 15 + bytes([last]), strict=True)


def test_strict_unpad_rejects_inconsistent_pad_bytes():
    padded = pad(b"attack at dawn")
    bad = bytearray(padded)
    bad[-2] ^= 0xFF
    with pytest.raises(PaddingError):
        unpad(bytes(bad), strict=True)
    with pytest.raises(ValueError):
        ref_unpad(bytes(bad), 16)


def test_padding_error_is_value_error():
    with pytest.raises(ValueError):
        unpad(b"", strict=True)
