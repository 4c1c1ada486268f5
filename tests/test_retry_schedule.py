"""Tests for retry schedule and tenacity wiring"""

from unittest.mock import MagicMock

import pytest
from tenacity import RetryError

from cartlab.domain.config.retry import RetryConfig
from cartlab.domain.models.transport import TransportOutcome
from cartlab.infrastructure.retry import RetrySchedule, create_retrying, parse_schedule, wait_schedule


class TestRetrySchedule:
    """Tests for RetrySchedule"""

    def test_max_attempts(self):
        """Test attempts are one more than the number of intervals"""
        assert RetrySchedule.of([1, 10, 60]).max_attempts == 4
        assert RetrySchedule().max_attempts == 1

    def test_intervals_are_floats_and_immutable(self):
        """Test intervals are normalized to a tuple of floats"""
        schedule = RetrySchedule.of([1, 10])
        assert schedule.intervals == (1.0, 10.0)
        with pytest.raises(AttributeError):
            schedule.intervals = (5.0,)

    def test_negative_interval_rejected(self):
        """Test negative durations are rejected"""
        with pytest.raises(ValueError, match="non-negative"):
            RetrySchedule.of([1, -1])

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_interval_rejected(self, value):
        """Test infinite and NaN durations are rejected"""
        with pytest.raises(ValueError, match="finite"):
            RetrySchedule.of([1, value])

    def test_delay_after(self):
        """Test delays are looked up per failed attempt"""
        schedule = RetrySchedule.of([1, 10, 60])
        assert schedule.delay_after(1) == 1.0
        assert schedule.delay_after(3) == 60.0
        assert schedule.delay_after(4) == 0.0

    def test_from_config(self):
        """Test building a schedule from RetryConfig"""
        schedule = RetrySchedule.from_config(RetryConfig(backoff_intervals=[2, 4]))
        assert schedule.intervals == (2.0, 4.0)
        assert len(schedule) == 2


class TestParseSchedule:
    """Tests for parse_schedule"""

    def test_parse_comma_separated(self):
        assert parse_schedule("1, 10,60") == (1.0, 10.0, 60.0)

    def test_parse_empty(self):
        """Test an empty string means no retries"""
        assert parse_schedule("") == ()

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_schedule("1,soon")

    @pytest.mark.parametrize("value", ["inf", "1,nan", "-inf"])
    def test_parse_non_finite(self, value):
        """Test inf and nan entries are rejected"""
        with pytest.raises(ValueError, match="finite"):
            parse_schedule(value)

    def test_parse_negative(self):
        with pytest.raises(ValueError, match="Negative"):
            parse_schedule("1,-5")


def test_wait_schedule_reads_attempt_number():
    """Test the tenacity wait strategy maps attempt numbers to intervals"""
    wait = wait_schedule(RetrySchedule.of([3, 7]))
    state = MagicMock()
    state.attempt_number = 2
    assert wait(state) == 7.0


def test_create_retrying_raises_retry_error_on_exhaustion():
    """Test the controller stops after len(schedule)+1 failed outcomes"""
    sleeps = []
    calls = []

    def attempt():
        calls.append(1)
        return TransportOutcome.failure("down")

    retrying = create_retrying(RetrySchedule.of([0.5]), sleep=sleeps.append)

    with pytest.raises(RetryError) as exc_info:
        retrying(attempt)

    assert len(calls) == 2
    assert sleeps == [0.5]
    assert exc_info.value.last_attempt.result().reason == "down"


def test_blocking_sleeper_uses_time_sleep(monkeypatch):
    """Test the production sleeper delegates to time.sleep"""
    from cartlab.infrastructure.clock import BlockingSleeper

    slept = []
    monkeypatch.setattr("cartlab.infrastructure.clock.time.sleep", slept.append)

    BlockingSleeper().wait_seconds(2.5)

    assert slept == [2.5]
