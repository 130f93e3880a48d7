"""
idmclient auth module.

Token providers used to authorize API requests.
"""

from .tokens import StaticTokenProvider, TokenProvider

__all__ = [
    "TokenProvider",
    "StaticTokenProvider",
]
