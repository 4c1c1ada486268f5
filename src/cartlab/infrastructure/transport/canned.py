"""In-process cart data source for demos and local runs"""

import json
import logging
from typing import Any, Dict, List, Optional

from cartlab.domain.models.cart import FetchRequest
from cartlab.domain.models.transport import Endpoint, TransportOutcome
from cartlab.infrastructure.transport.base import Transport

logger = logging.getLogger(__name__)

DEFAULT_CARTS: Dict[str, List[Dict[str, str]]] = {
    "1234": [
        {"item": "Plush lobster", "quantity": "1"},
        {"item": "Plush lobster food", "quantity": "10"},
    ],
}


class CannedTransport(Transport):
    """Answers from a fixed table of carts instead of the network"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize canned transport
        
        Args:
            config: Optional configuration with:
                - carts: Dict mapping user ids to lists of cart records
                - fail_first: Number of initial calls that fail (default: 0)
        """
        super().__init__(config)
        carts = self.config.get("carts")
        self.carts = {str(k): v for k, v in (carts if carts is not None else DEFAULT_CARTS).items()}
        self.fail_first = self.config.get("fail_first", 0)
        self.calls = 0

    def _validate_config(self, config: Dict[str, Any]) -> None:
        if "fail_first" in config and not isinstance(config["fail_first"], int):
            raise ValueError("fail_first must be an integer")
        if "fail_first" in config and config["fail_first"] < 0:
            raise ValueError("fail_first must be non-negative")
        if "carts" in config and not isinstance(config["carts"], dict):
            raise ValueError("carts must be a mapping of user id to records")

    def perform(self, endpoint: Endpoint, request: FetchRequest) -> TransportOutcome:
        self.calls += 1
        if self.calls <= self.fail_first:
            return TransportOutcome.failure("Service unavailable", status_code=503)

        # Only users present in the table are known
        if request.user_id not in self.carts:
            return TransportOutcome.failure(f"Unexpected user: {request.user_id}", status_code=500)

        logger.debug(f"Serving canned cart for user {request.user_id} ({endpoint.url})")
        return TransportOutcome.success(json.dumps(self.carts[request.user_id]))
