"""Refresh loop driving the fetch-transform-publish pipeline."""

import logging
import random
import time
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum

from ..core.config import CollectorConfig
from ..core.exceptions import CollectorError, DownloadError
from ..core.utils import remove_file
from ..pipeline import parse, update
from .backoff import backoff

logger = logging.getLogger(__name__)


class SchedulerState(Enum):
    """Refresh loop states."""

    WAITING = "waiting"
    RUNNING = "running"
    BACKOFF_WAITING = "backoff_waiting"


class RefreshScheduler:
    """Fires an update cycle immediately, then every refresh interval.

    A failed cycle reschedules the single pending delay using exponential
    backoff with jitter instead of the full interval. Only one cycle runs at
    a time and the next delay is computed only after the previous cycle ends.
    """

    def __init__(
        self,
        config: CollectorConfig,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ):
        self.config = config
        self.retries = 0
        self.next_delay = 0.0
        self.state = SchedulerState.WAITING
        self._sleep = sleep
        self._rng = rng

    def run_cycle(self) -> bool:
        """Run one update cycle.

        Returns:
            True if the metric file was published, False on a cycle failure
        """
        logger.info("Updating OUI database")

        try:
            filename = update(self.config)
        except DownloadError as e:
            self._fail("Error updating OUI database", e)
            if e.path:
                remove_file(e.path)
            return False

        try:
            count = parse(filename, self.config)
        except CollectorError as e:
            self._fail("Error parsing OUI database", e)
            remove_file(filename)
            return False

        remove_file(filename)
        self._succeed(count)
        return True

    def tick(self) -> bool:
        """Wait for the pending delay, then run one cycle."""
        self._sleep(self.next_delay)
        self.state = SchedulerState.RUNNING
        return self.run_cycle()

    def run_forever(self) -> None:
        """Run update cycles until the process is killed."""
        while True:
            self.tick()

    def _fail(self, message: str, error: CollectorError) -> None:
        delay = backoff(self.retries, self._rng)
        logger.error("%s: %s (retry in %s)", message, error, timedelta(seconds=delay))

        self.retries += 1
        self.next_delay = delay
        self.state = SchedulerState.BACKOFF_WAITING

    def _succeed(self, count: int) -> None:
        self.retries = 0
        self.next_delay = self.config.refresh_interval
        self.state = SchedulerState.WAITING

        logger.info("Successfully updated OUI database (%d OUIs)", count)
        logger.info(
            "Next OUI database refresh time: %s",
            (datetime.now() + timedelta(seconds=self.next_delay)).isoformat(timespec="seconds"),
        )
