"""
Manager options.

Options shared by resource managers, and the validation run before any
client is built.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ..exceptions import ArgumentError


class ManagerOptions(BaseModel):
    """
    Options for a resource manager.

    Only base_url is checked here. headers, token_provider, retry and
    timeout are handed to the REST client and retry wrapper, which
    validate them.
    """

    base_url: str
    headers: Any = None
    token_provider: Any = None
    retry: Any = None
    timeout: Optional[float] = None
    http_client: Any = None

    model_config = {
        "arbitrary_types_allowed": True,
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "base_url": "https://tenant.example.com/api/v2",
                "headers": {"Accept": "application/json"},
                "retry": {"max_retries": 3},
            }
        },
    }


def validate_manager_options(options: Any) -> ManagerOptions:
    """
    Validate manager options.

    Args:
        options: A mapping of option values, or a ManagerOptions instance

    Returns:
        Validated ManagerOptions

    Raises:
        ArgumentError: If options are missing or base_url is missing or invalid

    Example:
        ```python
        options = validate_manager_options({
            "base_url": "https://tenant.example.com/api/v2",
            "token_provider": StaticTokenProvider(token),
        })
        ```
    """
    if isinstance(options, ManagerOptions):
        values = {name: getattr(options, name) for name in ManagerOptions.model_fields}
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        raise ArgumentError("Must provide manager options")

    base_url = values.get("base_url")

    if base_url is None:
        raise ArgumentError("Must provide a base URL for the API")

    if not isinstance(base_url, str) or len(base_url) == 0:
        raise ArgumentError("The provided base URL is invalid")

    return ManagerOptions.model_construct(
        **{name: values.get(name) for name in ManagerOptions.model_fields}
    )
