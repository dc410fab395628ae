import pytest

from blockmodes.libs.crypto.blocks import group, ungroup, xor_bytes
from blockmodes.libs.crypto.errors import BlockLengthError

# -------------------------------------------------------------
# group / ungroup
# -------------------------------------------------------------


def test_ungroup_reverses_group():
    data = bytes(range(48))
    grouped = group(data)
    assert ungroup(grouped) == data


def test_group_preserves_order():
    data = bytes(range(48))
    blocks = group(data)
    assert blocks == [bytes(range(0, 16)), bytes(range(16, 32)), bytes(range(32, 48))]
    assert all(len(b) == 16 for b in blocks)


def test_group_empty():
    assert group(b"") == []
    assert ungroup([]) == b""


def test_group_custom_block_size():
    assert group(b"abcdef", 2) == [b"ab", b"cd", b"ef"]


@pytest.mark.parametrize("n", [1, 15, 17, 33])
def test_group_rejects_unaligned(n):
    with pytest.raises(BlockLengthError):
        group(b"\x00" * n)


def test_ungroup_accepts_generator():
    assert ungroup(bytes([i]) * 2 for i in range(3)) == b"\x00\x00\x01\x01\x02\x02"


# -------------------------------------------------------------
# xor_bytes
# -------------------------------------------------------------


def test_xor_bytes_basic():
    assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"


def test_xor_bytes_self_is_zero():
    block = bytes(range(16))
    assert xor_bytes(block, block) == bytes(16)


def test_xor_bytes_length_mismatch():
    with pytest.raises(ValueError):
        xor_bytes(b"\x00", b"\x00\x00")
