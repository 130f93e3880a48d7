"""
Retrying wrapper around RestClient.

Rate-limited calls (HTTP 429 by default) are retried with exponential
backoff. Everything else is passed through untouched.
"""

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from pydantic import ValidationError

from ..exceptions import APIError, ArgumentError
from .client import Params, RestClient
from .models import RetryConfig

logger = logging.getLogger(__name__)

JITTER = 0.1


class RetryRestClient:
    """
    Decorates a RestClient with a retry policy.

    Exposes the same methods as RestClient. When the wrapped call raises
    an APIError with a retryable status, the call is issued again after a
    backoff delay. Once retries run out the last error is raised as is.

    Example:
        ```python
        client = RetryRestClient(
            RestClient(url, options, token_provider),
            {"max_retries": 5},
        )
        orgs = await client.get_all({"per_page": 50})
        ```
    """

    def __init__(
        self,
        client: RestClient,
        retry: Optional[Union[RetryConfig, Dict[str, Any]]] = None,
    ) -> None:
        """
        Initialize RetryRestClient.

        Args:
            client: The client to wrap
            retry: RetryConfig, an equivalent dict, or None for the defaults

        Raises:
            ArgumentError: If client is missing or retry is invalid
        """
        if client is None:
            raise ArgumentError("Must provide a REST client to wrap")

        if retry is None:
            retry = RetryConfig()
        elif not isinstance(retry, RetryConfig):
            try:
                retry = RetryConfig.model_validate(retry)
            except ValidationError as e:
                raise ArgumentError(f"Invalid retry configuration: {e}") from e

        self.client = client
        self.retry = retry

    def _delay(self, attempt: int, error: APIError) -> float:
        """Seconds to wait before retry number `attempt` (1-based)."""
        retry_after = error.retry_after
        if retry_after is not None:
            return min(retry_after, self.retry.max_delay)

        delay = self.retry.initial_delay * 2 ** (attempt - 1)
        delay += random.uniform(0, delay * JITTER)
        return min(delay, self.retry.max_delay)

    async def _invoke(self, name: str, call: Callable[[], Awaitable[Any]]) -> Any:
        if not self.retry.enabled:
            return await call()

        attempt = 0
        while True:
            try:
                return await call()
            except APIError as e:
                if e.status_code not in self.retry.retry_statuses:
                    raise
                if attempt >= self.retry.max_retries:
                    logger.warning(
                        "%s gave up after %d retries: %s", name, attempt, e
                    )
                    raise

                attempt += 1
                delay = self._delay(attempt, e)
                logger.warning(
                    "%s got %s, retry %d/%d in %.2fs",
                    name,
                    e.status_code,
                    attempt,
                    self.retry.max_retries,
                    delay,
                )
                await asyncio.sleep(delay)

    async def get_all(self, params: Params = None) -> Any:
        return await self._invoke("get_all", lambda: self.client.get_all(params))

    async def get(self, params: Params = None) -> Any:
        return await self._invoke("get", lambda: self.client.get(params))

    async def create(self, data: Any, params: Params = None) -> Any:
        return await self._invoke("create", lambda: self.client.create(data, params))

    async def patch(self, params: Params, data: Any) -> Any:
        return await self._invoke("patch", lambda: self.client.patch(params, data))

    async def update(self, params: Params, data: Any) -> Any:
        return await self._invoke("update", lambda: self.client.update(params, data))

    async def delete(self, params: Params = None) -> Any:
        return await self._invoke("delete", lambda: self.client.delete(params))

    async def close(self) -> None:
        """Close the wrapped client."""
        await self.client.close()
