"""Retry configuration model."""

from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

BackoffInterval = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]


class RetryConfig(BaseModel):
    """Configuration for retry logic.
    
    Attributes:
        backoff_intervals: Seconds to wait after each failed attempt except the
            last one; total attempts is len(backoff_intervals) + 1. An empty
            list means a single attempt with no retries.
    """

    backoff_intervals: List[BackoffInterval] = Field(
        default_factory=lambda: [1.0, 10.0, 60.0], max_length=20
    )

    model_config = ConfigDict(extra="forbid")

    @property
    def max_attempts(self) -> int:
        return len(self.backoff_intervals) + 1
