"""
Pytest configuration and fixtures for idmclient tests.

Provides a fake management API (httpx.MockTransport) and test fixtures.
"""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
import pytest

from idmclient.auth import StaticTokenProvider
from idmclient.config import ManagementConfig
from idmclient.management import OrganizationsManager

BASE_URL = "https://tenant.example.com/api/v2"
ORGS_URL = f"{BASE_URL}/organizations"


class FakeAPI:
    """
    Records requests and answers them from a queue of responses.

    When the queue is empty every request gets a 200 with an empty object.
    A queued exception is raised instead of answering.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def queue(
        self,
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        elif json is not None:
            response = httpx.Response(status_code, json=json, headers=headers)
        else:
            response = httpx.Response(status_code, headers=headers)
        self._responses.append(response)

    def queue_error(self, error: Exception) -> None:
        self._responses.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api():
    """Create a fake management API."""
    return FakeAPI()


@pytest.fixture
def http_client(api):
    """Create an httpx client talking to the fake API."""
    return httpx.AsyncClient(transport=api.transport)


@pytest.fixture
def token_provider():
    """Create a static token provider."""
    return StaticTokenProvider("test-token")


@pytest.fixture
def manager(http_client, token_provider):
    """Create an OrganizationsManager bound to the fake API."""
    return OrganizationsManager(
        {
            "base_url": BASE_URL,
            "headers": {"X-Test": "yes"},
            "token_provider": token_provider,
            "retry": {"initial_delay": 0, "max_delay": 0},
            "http_client": http_client,
        }
    )


@pytest.fixture
def management_config():
    """Create a test ManagementConfig."""
    return ManagementConfig(
        domain="tenant.example.com",
        token="test-token",
        debug=False,
    )


@pytest.fixture
def sample_org_data():
    """Create sample organization data."""
    return {
        "id": "org_123",
        "name": "acme",
        "display_name": "Acme Corp",
        "branding": {"colors": {"primary": "#0059d6"}},
        "metadata": {"tier": "pro"},
    }


def make_callback():
    """
    Build a (callback, future) pair.

    The future resolves to the (error, result) tuple the callback receives.
    Must be called from inside a running event loop.
    """
    future = asyncio.get_running_loop().create_future()

    def callback(error, result):
        future.set_result((error, result))

    return callback, future
