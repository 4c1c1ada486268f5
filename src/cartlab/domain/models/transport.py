"""Transport-level models - where to send a request and what came back"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Endpoint:
    """Remote data source location"""

    base_url: str  # Scheme and host, e.g. http://localhost:9726
    path: str = "/"  # Resource path on the host

    @property
    def url(self) -> str:
        """Full URL of the endpoint"""
        return self.base_url.rstrip("/") + "/" + self.path.lstrip("/")


@dataclass(frozen=True)
class TransportOutcome:
    """Result of a single transport attempt"""

    ok: bool
    payload: Optional[str] = None  # Raw response body (success only)
    reason: Optional[str] = None  # Why the attempt failed (failure only)
    status_code: Optional[int] = None  # HTTP status if a response was received

    @classmethod
    def success(cls, payload: str, status_code: Optional[int] = 200) -> "TransportOutcome":
        return cls(ok=True, payload=payload, status_code=status_code)

    @classmethod
    def failure(cls, reason: str, status_code: Optional[int] = None) -> "TransportOutcome":
        return cls(ok=False, reason=reason, status_code=status_code)

    def describe(self) -> str:
        """Short human-readable description for logs"""
        if self.ok:
            return f"OK (status {self.status_code})"
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {self.reason}"
        return self.reason or "unknown failure"
