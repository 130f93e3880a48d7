"""
Organization management for idmclient.

CRUD operations on the organizations collection of the management API.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..rest import RestClient, RetryRestClient
from ..utils.callbacks import with_callback
from .options import validate_manager_options


class OrganizationsManager:
    """
    Manager for organization CRUD operations.

    Every call goes to ``<base_url>/organizations[/:id]`` through a
    retrying REST client. Records are plain dicts shaped by the API.

    All operations can be awaited, or given a ``callback`` keyword that
    receives ``(error, result)``.

    Example:
        ```python
        orgs = OrganizationsManager({
            "base_url": "https://tenant.example.com/api/v2",
            "token_provider": StaticTokenProvider(token),
            "retry": {"max_retries": 5},
        })

        # Create organization
        org = await orgs.create({"name": "acme", "display_name": "Acme Corp"})

        # List organizations, ten per page
        page = await orgs.get_all({"per_page": 10, "page": 0})

        # Rename it
        org = await orgs.update({"id": org["id"]}, {"display_name": "Acme Inc"})
        ```
    """

    def __init__(self, options: Any) -> None:
        """
        Initialize OrganizationsManager.

        Args:
            options: Mapping or ManagerOptions with base_url (required),
                headers, token_provider, retry, timeout and http_client

        Raises:
            ArgumentError: If options or base_url are missing or invalid
        """
        options = validate_manager_options(options)

        client_options: Dict[str, Any] = {
            "headers": options.headers or {},
            "query": {"repeat_params": False},
        }
        if options.timeout is not None:
            client_options["timeout"] = options.timeout

        rest_client = RestClient(
            options.base_url + "/organizations/:id",
            client_options,
            options.token_provider,
            http_client=options.http_client,
        )

        self.options = options
        self.resource = RetryRestClient(rest_client, options.retry)

    @with_callback
    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new organization.

        Args:
            data: Organization data (name, display_name, branding, metadata, ...)

        Returns:
            Created organization

        Example:
            ```python
            org = await orgs.create({"name": "acme", "display_name": "Acme Corp"})
            ```
        """
        return await self.resource.create(data)

    @with_callback
    async def get_all(self, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Get all organizations.

        Without pagination params the API returns its first page with its
        default page size.

        Args:
            params: Optional pagination, e.g. {"per_page": 10, "page": 0}
                (page is zero indexed)

        Returns:
            List of organizations

        Example:
            ```python
            orgs_page = await orgs.get_all({"per_page": 10, "page": 0})
            print(len(orgs_page))
            ```
        """
        return await self.resource.get_all(params)

    @with_callback
    async def get(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Get an organization.

        Args:
            params: {"id": ORGANIZATION_ID}

        Returns:
            The organization
        """
        return await self.resource.get(params)

    @with_callback
    async def update(self, params: Mapping[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update an existing organization.

        Sends a PATCH, so only the given fields change.

        Args:
            params: {"id": ORGANIZATION_ID}
            data: Fields to update

        Returns:
            Updated organization

        Example:
            ```python
            org = await orgs.update({"id": org_id}, {"name": "new-name"})
            print(org["name"])  # 'new-name'
            ```
        """
        return await self.resource.patch(params, data)

    @with_callback
    async def delete(self, params: Mapping[str, Any]) -> None:
        """
        Delete an existing organization.

        Args:
            params: {"id": ORGANIZATION_ID}
        """
        return await self.resource.delete(params)

    async def close(self) -> None:
        """Close the underlying HTTP client, if the manager created it."""
        await self.resource.close()
