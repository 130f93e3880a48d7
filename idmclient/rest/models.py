"""
REST client models.

Pydantic models for REST client and retry policy configuration.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class QueryOptions(BaseModel):
    """How query parameters are serialized."""

    # False: list values are joined with commas instead of repeating the key
    repeat_params: bool = True


class ClientOptions(BaseModel):
    """Options for a RestClient instance."""

    headers: Dict[str, str] = Field(default_factory=dict)
    query: QueryOptions = Field(default_factory=QueryOptions)
    timeout: float = Field(default=10.0, gt=0)


class RetryConfig(BaseModel):
    """
    Retry policy for RetryRestClient.

    Only responses whose status is listed in retry_statuses are retried.
    The delay doubles on every attempt, starting at initial_delay. Jitter
    is added before capping, so no delay exceeds max_delay.
    """

    enabled: bool = True
    max_retries: int = Field(default=3, ge=0, le=10)
    initial_delay: float = Field(default=0.25, ge=0)
    max_delay: float = Field(default=10.0, ge=0)
    retry_statuses: List[int] = Field(default_factory=lambda: [429])

    model_config = {
        "json_schema_extra": {
            "example": {
                "enabled": True,
                "max_retries": 3,
                "initial_delay": 0.25,
                "max_delay": 10.0,
                "retry_statuses": [429],
            }
        },
    }
