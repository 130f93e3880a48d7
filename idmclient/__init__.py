"""
idmclient - Async client for the identity-management API.

Example:
    ```python
    from idmclient import ManagementClient

    async with await ManagementClient.create(
        domain="tenant.example.com",
        token="management-api-token",
    ) as client:
        # Create an organization
        org = await client.organizations.create({"name": "acme", "display_name": "Acme"})

        # Page through organizations
        orgs = await client.organizations.get_all({"per_page": 10, "page": 0})

        # Update and delete
        await client.organizations.update({"id": org["id"]}, {"display_name": "Acme Inc"})
        await client.organizations.delete({"id": org["id"]})

    # Or use a manager on its own
    from idmclient import OrganizationsManager, StaticTokenProvider

    orgs = OrganizationsManager({
        "base_url": "https://tenant.example.com/api/v2",
        "token_provider": StaticTokenProvider("management-api-token"),
    })
    ```
"""

from .__version__ import __version__
from .auth import StaticTokenProvider, TokenProvider
from .client import ManagementClient
from .config import ManagementConfig, load_config
from .exceptions import APIError, ArgumentError, IDMClientError, OperationError
from .management import ManagerOptions, OrganizationsManager
from .rest import ClientOptions, QueryOptions, RestClient, RetryConfig, RetryRestClient

__all__ = [
    # Main client
    "ManagementClient",
    "ManagementConfig",
    "load_config",
    # Managers
    "OrganizationsManager",
    "ManagerOptions",
    # REST layer
    "RestClient",
    "RetryRestClient",
    "ClientOptions",
    "QueryOptions",
    "RetryConfig",
    # Auth
    "TokenProvider",
    "StaticTokenProvider",
    # Errors
    "IDMClientError",
    "ArgumentError",
    "OperationError",
    "APIError",
    "__version__",
]
