"""Data fetcher - retrieves a user's cart over an unreliable transport"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError
from tenacity import RetryCallState, RetryError

from cartlab.domain.errors import FetchExhaustedError, MalformedPayloadError
from cartlab.domain.models.cart import CART_PAYLOAD, CartItem, FetchRequest, FetchResult
from cartlab.domain.config.retry import RetryConfig
from cartlab.domain.models.transport import Endpoint, TransportOutcome
from cartlab.infrastructure.clock import BlockingSleeper, Sleeper
from cartlab.infrastructure.retry import RetrySchedule, create_retrying
from cartlab.infrastructure.transport.base import Transport

logger = logging.getLogger(__name__)


class DataFetcher:
    """Fetches and parses cart data, retrying failed attempts on a fixed schedule.

    Every attempt is exactly one transport call. After a failed attempt the
    next schedule entry is waited out through the sleeper; the final attempt
    is never followed by a wait. Nothing is kept between fetch() calls.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: Endpoint,
        schedule: Optional[RetrySchedule] = None,
        sleeper: Optional[Sleeper] = None,
    ):
        """Initialize data fetcher

        Args:
            transport: Performs one remote call per attempt
            endpoint: Remote data source
            schedule: Backoff schedule (default: RetryConfig defaults)
            sleeper: Wait capability (default: real blocking sleep)
        """
        self.transport = transport
        self.endpoint = endpoint
        if schedule is None:
            schedule = RetrySchedule.from_config(RetryConfig())
        self.schedule = schedule
        self.sleeper = sleeper if sleeper is not None else BlockingSleeper()

    def fetch(self, request: FetchRequest) -> FetchResult:
        """Fetch the cart identified by the request

        Args:
            request: Identifies the cart to retrieve

        Returns:
            Parsed cart records and the number of attempts used

        Raises:
            FetchExhaustedError: If every attempt failed
            MalformedPayloadError: If a successful response could not be parsed
        """
        attempts = 0

        def _attempt() -> TransportOutcome:
            nonlocal attempts
            attempts += 1
            return self.transport.perform(self.endpoint, request)

        retrying = create_retrying(
            self.schedule,
            sleep=self.sleeper.wait_seconds,
            before_sleep=self._log_retry(request),
        )

        try:
            outcome = retrying(_attempt)
        except RetryError as e:
            last = e.last_attempt.result()
            logger.error(
                f"Failed getting data for user {request.user_id} "
                f"after {attempts} attempt(s): {last.describe()}"
            )
            raise FetchExhaustedError(request.user_id, attempts, last.describe()) from e

        items = self._parse(request, outcome.payload)
        logger.info(
            f"Fetched {len(items)} cart item(s) for user {request.user_id} "
            f"in {attempts} attempt(s)"
        )
        return FetchResult(request=request, items=items, attempts=attempts)

    def _log_retry(self, request: FetchRequest):
        max_attempts = self.schedule.max_attempts

        def _before_sleep(retry_state: RetryCallState) -> None:
            if retry_state.outcome is None:
                return
            outcome = retry_state.outcome.result()
            delay = retry_state.next_action.sleep if retry_state.next_action else 0
            logger.warning(
                f"Fetch for user {request.user_id} failed "
                f"(attempt {retry_state.attempt_number}/{max_attempts}): {outcome.describe()}. "
                f"Sleeping for {delay} seconds..."
            )

        return _before_sleep

    def _parse(self, request: FetchRequest, payload: Optional[str]) -> List[CartItem]:
        if payload is None:
            raise MalformedPayloadError(request.user_id, "empty response body")
        try:
            return CART_PAYLOAD.validate_json(payload)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(x) for x in first["loc"]) or "<root>"
            detail = f"{location}: {first['msg']}"
            if e.error_count() > 1:
                detail += f" (+{e.error_count() - 1} more)"
            raise MalformedPayloadError(request.user_id, detail) from e
