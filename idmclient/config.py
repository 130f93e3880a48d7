"""
idmclient configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rest.models import RetryConfig


class ManagementConfig(BaseSettings):
    """
    Management API client settings.

    Can be loaded from:
    1. Environment variables (IDM_DOMAIN, IDM_TOKEN, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = ManagementConfig()

        # Direct instantiation
        config = ManagementConfig(
            domain="tenant.example.com",
            token="management-api-token"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="IDM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Tenant
    domain: str = Field(
        ...,
        description="Tenant domain (e.g., tenant.example.com)",
    )

    token: str = Field(
        ...,
        description="Management API access token",
    )

    base_url: Optional[str] = Field(
        default=None,
        description="Override for the API base URL (defaults to https://<domain>/api/v2)",
    )

    # HTTP
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )

    telemetry: bool = Field(
        default=True,
        description="Send the Client-Info header identifying this library",
    )

    # Retries
    retry_enabled: bool = Field(
        default=True,
        description="Retry rate-limited (429) requests",
    )

    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum retries per request",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Strip scheme and trailing slash from the domain."""
        for scheme in ("https://", "http://"):
            if v.startswith(scheme):
                v = v[len(scheme):]
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("domain must not be empty")
        return v

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Ensure the token is not empty."""
        if not v or not v.strip():
            raise ValueError("token must not be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Ensure base URL is absolute."""
        if v is None:
            return v
        if not v.startswith(("https://", "http://")):
            raise ValueError("base_url must start with https:// or http://")
        return v.rstrip("/")

    @property
    def api_url(self) -> str:
        """Base URL of the management API."""
        return self.base_url or f"https://{self.domain}/api/v2"

    def retry_config(self) -> RetryConfig:
        """Retry policy matching these settings."""
        return RetryConfig(enabled=self.retry_enabled, max_retries=self.max_retries)


def load_config(**kwargs) -> ManagementConfig:
    """
    Load management API configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (IDM_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        ManagementConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid

    Example:
        ```python
        # Load from environment
        config = load_config()

        # Override specific values
        config = load_config(debug=True)
        ```
    """
    return ManagementConfig(**kwargs)
