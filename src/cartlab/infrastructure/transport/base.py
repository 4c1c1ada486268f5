"""Base transport interface"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from cartlab.domain.models.cart import FetchRequest
from cartlab.domain.models.transport import Endpoint, TransportOutcome


class Transport(ABC):
    """Abstract base class for transports that perform one remote call"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize transport with configuration

        Args:
            config: Transport configuration dictionary

        Raises:
            ValueError: If configuration is invalid
        """
        if config is None:
            config = {}
        self.config = config
        self._validate_config(config)

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate transport configuration

        Args:
            config: Configuration dictionary

        Raises:
            ValueError: If configuration is invalid
        """
        # Override in subclasses for specific validation
        pass

    @abstractmethod
    def perform(self, endpoint: Endpoint, request: FetchRequest) -> TransportOutcome:
        """Perform a single request against the endpoint

        Transport problems are reported as failure outcomes, not raised.

        Args:
            endpoint: Remote data source
            request: Query parameters

        Returns:
            Outcome of this one attempt
        """
        pass
