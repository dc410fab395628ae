"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass

MODE_NAMES = ("ecb", "cbc", "ctr")


@dataclass
class CipherConfig:
    """Configuration for the high-level encrypt/decrypt helpers.

    Attributes:
        default_mode: Mode used when a caller does not name one
            (``"ecb"``, ``"cbc"`` or ``"ctr"``).
        strict_padding: Raise on malformed padding during decryption instead
            of returning the decrypted buffer unchanged.
    """

    default_mode: str = "cbc"
    strict_padding: bool = False
