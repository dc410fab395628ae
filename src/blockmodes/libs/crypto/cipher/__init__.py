"""
Block-cipher modes of operation over a pluggable single-block primitive.
"""

__all__ = [
    "AES",
    "BaseMode",
    "BlockCipherFunc",
    "CBCMode",
    "CTRMode",
    "ECBMode",
]

from . import AES
from ._mode_base import BaseMode, BlockCipherFunc
from ._mode_cbc import CBCMode
from ._mode_ctr import CTRMode
from ._mode_ecb import ECBMode
