"""Configuration models with Pydantic validation."""

from cartlab.domain.config.api import ApiConfig
from cartlab.domain.config.app import AppConfig
from cartlab.domain.config.retry import RetryConfig
from cartlab.domain.config.transport import TransportConfig

__all__ = [
    "AppConfig",
    "ApiConfig",
    "RetryConfig",
    "TransportConfig",
]
