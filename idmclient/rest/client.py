"""
Generic REST resource client.

Issues HTTP requests against a templated resource URL such as
``https://tenant.example.com/api/v2/organizations/:id`` using httpx.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..auth.tokens import TokenProvider
from ..exceptions import APIError, ArgumentError
from .models import ClientOptions

logger = logging.getLogger(__name__)

# "/:name" segments; the "//" after a URL scheme never matches
PLACEHOLDER = re.compile(r"/:([A-Za-z_][A-Za-z0-9_]*)")

Params = Optional[Mapping[str, Any]]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RestClient:
    """
    Client for a single REST resource.

    Path placeholders in the URL template are filled from the params
    mapping. A placeholder without a value is dropped along with its
    slash, so the same template serves both the collection and a single
    item. Whatever params are left over are sent as the query string.

    Example:
        ```python
        client = RestClient(
            "https://tenant.example.com/api/v2/organizations/:id",
            {"headers": {"Accept": "application/json"}},
            token_provider=StaticTokenProvider(token),
        )

        # GET /api/v2/organizations?per_page=10&page=0
        orgs = await client.get_all({"per_page": 10, "page": 0})

        # PATCH /api/v2/organizations/org_123
        org = await client.patch({"id": "org_123"}, {"display_name": "Acme"})
        ```
    """

    def __init__(
        self,
        url_template: str,
        options: Optional[Union[ClientOptions, Dict[str, Any]]] = None,
        token_provider: Optional[TokenProvider] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize RestClient.

        Args:
            url_template: Resource URL with ":name" placeholders
            options: ClientOptions (or an equivalent dict)
            token_provider: Supplies the bearer token for each request
            http_client: Shared httpx client; one is created on demand if omitted

        Raises:
            ArgumentError: If url_template is empty or options are invalid
        """
        if not isinstance(url_template, str) or not url_template:
            raise ArgumentError("Must provide a URL template")

        if options is None:
            options = ClientOptions()
        elif not isinstance(options, ClientOptions):
            try:
                options = ClientOptions.model_validate(options)
            except ValidationError as e:
                raise ArgumentError(f"Invalid client options: {e}") from e

        self.url_template = url_template
        self.options = options
        self.token_provider = token_provider
        self._http_client = http_client
        self._owns_http_client = http_client is None

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.options.timeout)
        return self._http_client

    def build_url(self, params: Params = None) -> Tuple[str, List[Tuple[str, str]]]:
        """
        Resolve the URL template against params.

        Args:
            params: Path and query parameters

        Returns:
            Tuple of (url, query items)
        """
        remaining = dict(params or {})

        def fill(match: "re.Match[str]") -> str:
            value = remaining.pop(match.group(1), None)
            if value is None:
                return ""
            return "/" + quote(_format_value(value), safe="")

        url = PLACEHOLDER.sub(fill, self.url_template)
        return url, self._serialize_query(remaining)

    def _serialize_query(self, params: Dict[str, Any]) -> List[Tuple[str, str]]:
        items: List[Tuple[str, str]] = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                if self.options.query.repeat_params:
                    items.extend((key, _format_value(v)) for v in value)
                else:
                    items.append((key, ",".join(_format_value(v) for v in value)))
            else:
                items.append((key, _format_value(value)))
        return items

    async def _headers(self) -> Dict[str, str]:
        headers = dict(self.options.headers)
        if self.token_provider is not None:
            token = await self.token_provider.get_access_token()
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        params: Params = None,
        data: Any = None,
    ) -> Any:
        """
        Send a request and decode the response.

        Args:
            method: HTTP method
            params: Path and query parameters
            data: JSON body (omitted when None)

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            APIError: If the API answers with a non-2xx status
            httpx.HTTPError: On transport failures
        """
        url, query = self.build_url(params)
        headers = await self._headers()

        logger.debug("%s %s params=%s", method, url, query)

        response = await self._get_http_client().request(
            method,
            url,
            params=query or None,
            json=data,
            headers=headers,
            timeout=self.options.timeout,
        )

        logger.debug("%s %s -> %s", method, url, response.status_code)

        if not response.is_success:
            raise self._build_error(response, method, url)

        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _build_error(self, response: httpx.Response, method: str, url: str) -> APIError:
        body = self._decode(response)
        reason = response.reason_phrase or "Error"
        error = reason
        message = reason
        error_code = None

        if isinstance(body, dict):
            error = body.get("error") or reason
            message = body.get("message") or body.get("error_description") or error
            error_code = body.get("errorCode")
        elif isinstance(body, str) and body:
            message = body

        return APIError(
            status_code=response.status_code,
            message=message,
            error=error,
            error_code=error_code,
            body=body,
            headers=dict(response.headers),
            method=method,
            url=url,
        )

    async def get_all(self, params: Params = None) -> Any:
        """GET the resource without an id (the collection)."""
        return await self.request("GET", params)

    async def get(self, params: Params = None) -> Any:
        """GET a single resource."""
        return await self.request("GET", params)

    async def create(self, data: Any, params: Params = None) -> Any:
        """POST a new resource."""
        return await self.request("POST", params, data)

    async def patch(self, params: Params, data: Any) -> Any:
        """PATCH an existing resource."""
        return await self.request("PATCH", params, data)

    async def update(self, params: Params, data: Any) -> Any:
        """PUT (replace) an existing resource."""
        return await self.request("PUT", params, data)

    async def delete(self, params: Params = None) -> Any:
        """DELETE a resource."""
        return await self.request("DELETE", params)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
