"""
Main management API client.

This is the primary interface users interact with.
"""

import base64
import json
import logging
import platform
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .__version__ import __version__
from .auth import StaticTokenProvider
from .config import ManagementConfig, load_config
from .management import OrganizationsManager
from .utils.callbacks import with_callback


class ManagementClient:
    """
    Client for the identity-management API.

    Owns one HTTP connection pool shared by all resource managers.

    Example:
        ```python
        from idmclient import ManagementClient

        # Initialize from environment variables
        client = await ManagementClient.create()

        # Or with explicit config
        client = await ManagementClient.create(
            domain="tenant.example.com",
            token="management-api-token"
        )

        org = await client.organizations.create({"name": "acme"})
        ```
    """

    def __init__(
        self,
        config: ManagementConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize ManagementClient.

        Args:
            config: Management API configuration
            http_client: Optional httpx client to use instead of a new one

        Note:
            Use ManagementClient.create() to load configuration from the environment.
        """
        self.config = config
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=config.timeout)

        if config.debug:
            logging.getLogger("idmclient").setLevel(logging.DEBUG)

        self.token_provider = StaticTokenProvider(config.token)

        self.organizations = OrganizationsManager(
            {
                "base_url": config.api_url,
                "headers": self._build_headers(),
                "token_provider": self.token_provider,
                "retry": config.retry_config(),
                "timeout": config.timeout,
                "http_client": self.http_client,
            }
        )

    def _build_headers(self) -> Dict[str, str]:
        """Default headers sent with every request."""
        headers = {
            "Accept": "application/json",
            "User-Agent": f"idmclient-python/{__version__}",
        }
        if self.config.telemetry:
            info = {
                "name": "idmclient-python",
                "version": __version__,
                "env": {"python": platform.python_version()},
            }
            headers["Client-Info"] = base64.urlsafe_b64encode(
                json.dumps(info).encode("utf-8")
            ).decode("ascii")
        return headers

    @classmethod
    async def create(
        cls,
        domain: Optional[str] = None,
        token: Optional[str] = None,
        **kwargs,
    ) -> "ManagementClient":
        """
        Create a ManagementClient.

        Args:
            domain: Tenant domain (optional, loads from env)
            token: Management API token (optional, loads from env)
            **kwargs: Additional configuration options

        Returns:
            Initialized ManagementClient

        Raises:
            ValidationError: If required configuration is missing or invalid

        Example:
            ```python
            # Load from environment (.env file or IDM_* env vars)
            client = await ManagementClient.create()

            # Explicit configuration
            client = await ManagementClient.create(
                domain="tenant.example.com",
                token="management-api-token",
                max_retries=5,
            )
            ```
        """
        config_kwargs = kwargs.copy()
        if domain:
            config_kwargs["domain"] = domain
        if token:
            config_kwargs["token"] = token

        config = load_config(**config_kwargs)

        return cls(config=config)

    # Shortcuts mirroring client.organizations

    @with_callback
    async def create_organization(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an organization. See OrganizationsManager.create."""
        return await self.organizations.create(data)

    @with_callback
    async def get_organizations(
        self, params: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """List organizations. See OrganizationsManager.get_all."""
        return await self.organizations.get_all(params)

    @with_callback
    async def get_organization(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Get an organization. See OrganizationsManager.get."""
        return await self.organizations.get(params)

    @with_callback
    async def update_organization(
        self, params: Mapping[str, Any], data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Update an organization. See OrganizationsManager.update."""
        return await self.organizations.update(params, data)

    @with_callback
    async def delete_organization(self, params: Mapping[str, Any]) -> None:
        """Delete an organization. See OrganizationsManager.delete."""
        return await self.organizations.delete(params)

    async def close(self) -> None:
        """
        Close the client and release its connections.

        Example:
            ```python
            client = await ManagementClient.create()
            try:
                # ... use client
                pass
            finally:
                await client.close()
            ```
        """
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "ManagementClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
