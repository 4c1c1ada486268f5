"""Exceptions raised across CartLab component boundaries"""

from typing import Optional


class CartLabError(Exception):
    """Base class for all CartLab errors."""

    pass


class ConfigurationError(CartLabError):
    """Configuration validation error."""

    pass


class FetchError(CartLabError):
    """A cart fetch failed in a way the caller has to handle"""

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class FetchExhaustedError(FetchError):
    """Every configured attempt failed"""

    def __init__(self, key: str, attempts: int, last_reason: Optional[str] = None):
        message = f"Failed getting data for user {key} after {attempts} attempt(s)"
        if last_reason:
            message += f": {last_reason}"
        super().__init__(message, key)
        self.attempts = attempts
        self.last_reason = last_reason


class MalformedPayloadError(FetchError):
    """The endpoint answered successfully but the body is not a cart"""

    def __init__(self, key: str, detail: str):
        super().__init__(f"Malformed cart payload for user {key}: {detail}", key)
        self.detail = detail
