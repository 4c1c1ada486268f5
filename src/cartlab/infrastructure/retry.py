"""Retry schedule and tenacity wiring for the cart fetch protocol.

The schedule is an explicit list of wait durations: one entry per failed
attempt that is followed by another attempt. Running out of entries is what
stops the retry loop, so the total number of attempts is len(schedule) + 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from tenacity import RetryCallState, Retrying, retry_if_result, stop_after_attempt
from tenacity.wait import wait_base

from cartlab.domain.config.retry import RetryConfig
from cartlab.domain.models.transport import TransportOutcome


@dataclass(frozen=True)
class RetrySchedule:
    """Immutable ordered backoff durations in seconds"""

    intervals: Tuple[float, ...] = ()

    def __post_init__(self):
        intervals = tuple(float(i) for i in self.intervals)
        if any(i < 0 or not math.isfinite(i) for i in intervals):
            raise ValueError("Backoff intervals must be finite and non-negative")
        object.__setattr__(self, "intervals", intervals)

    @classmethod
    def of(cls, intervals: Iterable[float]) -> RetrySchedule:
        return cls(tuple(intervals))

    @classmethod
    def from_config(cls, config: RetryConfig) -> RetrySchedule:
        return cls(tuple(config.backoff_intervals))

    @property
    def max_attempts(self) -> int:
        return len(self.intervals) + 1

    def delay_after(self, attempt_number: int) -> float:
        """Wait that follows the given failed attempt (1-based)

        Returns 0.0 past the end of the schedule; the stop condition
        prevents that value from ever being slept on.
        """
        if 1 <= attempt_number <= len(self.intervals):
            return self.intervals[attempt_number - 1]
        return 0.0

    def __len__(self) -> int:
        return len(self.intervals)


def parse_schedule(value: str) -> Tuple[float, ...]:
    """Parse a comma-separated list of seconds, e.g. "1,10,60"

    Raises:
        ValueError: If an entry is not a finite non-negative number
    """
    parts = [p.strip() for p in value.split(",") if p.strip()]
    intervals = tuple(float(p) for p in parts)
    for i in intervals:
        if not math.isfinite(i):
            raise ValueError(f"Backoff interval must be finite in {value!r}")
        if i < 0:
            raise ValueError(f"Negative backoff interval in {value!r}")
    return intervals


class wait_schedule(wait_base):
    """tenacity wait strategy that reads delays from a RetrySchedule"""

    def __init__(self, schedule: RetrySchedule):
        self.schedule = schedule

    def __call__(self, retry_state: RetryCallState) -> float:
        return self.schedule.delay_after(retry_state.attempt_number)


def _is_failed_outcome(outcome: TransportOutcome) -> bool:
    return not outcome.ok


def create_retrying(
    schedule: RetrySchedule,
    sleep: Callable[[float], None],
    before_sleep: Optional[Callable[[RetryCallState], None]] = None,
) -> Retrying:
    """Create a tenacity controller that retries failed transport outcomes.

    Args:
        schedule: Backoff schedule; attempts are capped at len(schedule) + 1
        sleep: Wait capability called once per retried attempt
        before_sleep: Optional callback invoked before each wait

    Returns:
        A fresh Retrying instance. Exceptions raised by the attempt itself
        are not retried and propagate unchanged; exhaustion raises
        tenacity.RetryError holding the last outcome.
    """
    return Retrying(
        stop=stop_after_attempt(schedule.max_attempts),
        wait=wait_schedule(schedule),
        retry=retry_if_result(_is_failed_outcome),
        sleep=sleep,
        before_sleep=before_sleep,
        reraise=False,
    )
