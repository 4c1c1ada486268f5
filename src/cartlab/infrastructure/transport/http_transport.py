"""HTTP transport (requests)"""

import logging
from typing import Any, Dict, Optional

import requests

from cartlab.domain.models.cart import FetchRequest
from cartlab.domain.models.transport import Endpoint, TransportOutcome
from cartlab.infrastructure.transport.base import Transport

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Fetches the cart with a GET request; only HTTP 200 counts as success"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize HTTP transport
        
        Args:
            config: Optional configuration with:
                - timeout: Request timeout in seconds (default: 10.0)
                - param_name: Query parameter carrying the user id (default: userid)
        """
        super().__init__(config)
        self.timeout = float(self.config.get("timeout", 10.0))
        self.param_name = self.config.get("param_name", "userid")

    def _validate_config(self, config: Dict[str, Any]) -> None:
        if "timeout" in config and not isinstance(config["timeout"], (int, float)):
            raise ValueError("timeout must be a number")
        if "timeout" in config and config["timeout"] <= 0:
            raise ValueError("timeout must be positive")
        if "param_name" in config and not config["param_name"]:
            raise ValueError("param_name must not be empty")

    def perform(self, endpoint: Endpoint, request: FetchRequest) -> TransportOutcome:
        url = endpoint.url
        logger.debug(f"HTTP GET {url}?{self.param_name}={request.user_id}")
        try:
            resp = requests.get(
                url,
                params={self.param_name: request.user_id},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            return TransportOutcome.failure(f"{type(e).__name__}: {e}")

        if resp.status_code == 200:
            return TransportOutcome.success(resp.text, status_code=resp.status_code)
        return TransportOutcome.failure(resp.reason or "unexpected status", status_code=resp.status_code)
