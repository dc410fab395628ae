"""
Typed access to cipher settings held in a configuration mapping.
"""

__all__ = [
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
