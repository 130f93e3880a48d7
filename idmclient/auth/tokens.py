"""
Token providers for idmclient.

A token provider supplies the bearer token attached to every API request.
The REST client asks for a token once per request, so a provider is free
to hand out a different token each time.
"""

from typing import Protocol, runtime_checkable

from ..exceptions import ArgumentError


@runtime_checkable
class TokenProvider(Protocol):
    """Anything that can hand out an access token."""

    async def get_access_token(self) -> str:
        ...


class StaticTokenProvider:
    """
    Token provider that always returns the same access token.

    Example:
        ```python
        provider = StaticTokenProvider("eyJhbGciOi...")
        client = RestClient(url, token_provider=provider)
        ```
    """

    def __init__(self, token: str) -> None:
        if not isinstance(token, str) or not token:
            raise ArgumentError("Must provide an access token")
        self._token = token

    async def get_access_token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "StaticTokenProvider(token='***')"
