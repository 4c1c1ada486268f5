"""Transport selection model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class TransportConfig(BaseModel):
    """Which transport performs the remote call (http or in-process canned data)"""

    kind: Literal["http", "canned"] = "http"

    model_config = ConfigDict(extra="forbid")
