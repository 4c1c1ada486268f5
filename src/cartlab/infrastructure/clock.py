"""Sleep capability used between fetch attempts"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class Sleeper(ABC):
    """Abstract wait capability"""

    @abstractmethod
    def wait_seconds(self, seconds: float) -> None:
        """Block for the given number of seconds

        Args:
            seconds: Non-negative wait duration
        """
        pass


class BlockingSleeper(Sleeper):
    """Really waits, using time.sleep"""

    def wait_seconds(self, seconds: float) -> None:
        logger.debug(f"Sleeping for {seconds} seconds")
        time.sleep(seconds)


class RecordingSleeper(Sleeper):
    """Records requested waits without blocking"""

    def __init__(self):
        self.calls: List[float] = []

    def wait_seconds(self, seconds: float) -> None:
        self.calls.append(seconds)
