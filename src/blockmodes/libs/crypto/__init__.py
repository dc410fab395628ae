"""
Padding, block grouping and the cipher mode engines.
"""

__all__ = [
    "BlockLengthError",
    "CipherError",
    "PaddingError",
    "group",
    "pad",
    "ungroup",
    "unpad",
    "xor_bytes",
]

from .blocks import group, ungroup, xor_bytes
from .errors import BlockLengthError, CipherError, PaddingError
from .padding import pad, unpad
