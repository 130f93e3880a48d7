"""
idmclient utilities.
"""

from .callbacks import Callback, with_callback

__all__ = [
    "Callback",
    "with_callback",
]
