"""
Data contracts and type definitions.
"""

__all__ = [
    "CipherConfig",
    "MODE_NAMES",
]

from .config import MODE_NAMES, CipherConfig
