"""Transports that perform a single remote call for the fetcher."""

from cartlab.infrastructure.transport.base import Transport
from cartlab.infrastructure.transport.canned import CannedTransport
from cartlab.infrastructure.transport.factory import TransportFactory
from cartlab.infrastructure.transport.http_transport import HttpTransport

__all__ = [
    "Transport",
    "HttpTransport",
    "CannedTransport",
    "TransportFactory",
]
