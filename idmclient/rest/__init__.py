"""
idmclient REST module.

Generic resource client and its retry wrapper.
"""

from .client import RestClient
from .models import ClientOptions, QueryOptions, RetryConfig
from .retry import RetryRestClient

__all__ = [
    "RestClient",
    "RetryRestClient",
    "ClientOptions",
    "QueryOptions",
    "RetryConfig",
]
