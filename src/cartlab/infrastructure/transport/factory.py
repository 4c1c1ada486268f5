"""Factory for creating transports"""

import logging
from typing import Any, Dict, Optional

from cartlab.infrastructure.transport.base import Transport
from cartlab.infrastructure.transport.canned import CannedTransport
from cartlab.infrastructure.transport.http_transport import HttpTransport

logger = logging.getLogger(__name__)


class TransportFactory:
    """Factory for creating Transport instances"""

    TRANSPORTS = {
        "http": HttpTransport,
        "canned": CannedTransport,
    }

    @classmethod
    def create(cls, kind: str, config: Optional[Dict[str, Any]] = None) -> Transport:
        """Create transport instance
        
        Args:
            kind: Type of transport (http, canned)
            config: Transport configuration
            
        Returns:
            Transport instance
            
        Raises:
            ValueError: If transport type is not supported
        """
        if config is None:
            config = {}

        kind_lower = kind.lower()

        if kind_lower not in cls.TRANSPORTS:
            available = ", ".join(cls.TRANSPORTS.keys())
            raise ValueError(f"Unknown transport: {kind}. Available transports: {available}")

        transport_class = cls.TRANSPORTS[kind_lower]
        logger.info(f"Creating {kind_lower} transport")
        return transport_class(config)
