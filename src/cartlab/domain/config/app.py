"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from cartlab.domain.config.api import ApiConfig
from cartlab.domain.config.retry import RetryConfig
from cartlab.domain.config.transport import TransportConfig


class AppConfig(BaseModel):
    """Main application configuration.

    Root model aggregating all configuration sections. Validation runs at load
    time so bad settings fail before the first request is made.

    Attributes:
        api: Cart data endpoint configuration
        transport: Transport selection
        retry: Retry/backoff configuration
    """

    api: ApiConfig = Field(default_factory=ApiConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",  # Reject unknown fields
    )
