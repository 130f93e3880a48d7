"""
idmclient exceptions.

Construction problems raise ArgumentError synchronously. Failed API calls
raise APIError through the awaitable (or the callback). Transport errors
from httpx are never wrapped.
"""

from typing import Any, Dict, Optional


class IDMClientError(Exception):
    """Base class for all idmclient errors."""


class ArgumentError(IDMClientError, ValueError):
    """Raised when a client or manager is constructed with bad options."""


class OperationError(IDMClientError):
    """Base class for errors raised while performing an API operation."""


class APIError(OperationError):
    """
    The API answered with a non-2xx status.

    The error body returned by the API usually looks like:

        {"statusCode": 404, "error": "Not Found",
         "message": "No organization found by that id", "errorCode": "inexistent_organization"}

    Attributes:
        status_code: HTTP status code
        error: Short error name (e.g. "Not Found")
        message: Human readable description
        error_code: Machine readable code, when the API sends one
        body: Decoded response body (dict, str or None)
        headers: Response headers
        method: HTTP method of the failed request
        url: URL of the failed request
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
        error_code: Optional[str] = None,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.error = error
        self.error_code = error_code
        self.body = body
        self.headers = headers or {}
        self.method = method
        self.url = url
        super().__init__(f"{status_code} {error or 'Error'}: {message}")

    @property
    def retry_after(self) -> Optional[float]:
        """Seconds from a numeric Retry-After header, if the API sent one."""
        value = self.headers.get("retry-after") or self.headers.get("Retry-After")
        if value is None:
            return None
        try:
            return max(float(value), 0.0)
        except ValueError:
            return None
