"""
Fixed-interval tick scheduling.

The host loop owns the clock: it calls run_pending() as often as it likes
(once per rendered frame, say) and the job fires whenever its interval has
elapsed. Stopping cancels the job, so nothing fires while a session is paused.
"""

import datetime
import logging
from typing import Callable, Optional

import schedule

from ..domain.constants import DEFAULT_TICK_MS

logger = logging.getLogger(__name__)

# Ticks replayed by one run_pending() call after the host loop stalls
MAX_CATCH_UP = 5


class Ticker:
    """
    A start/stop wrapper around a single recurring schedule job.

    schedule computes a job's next run from the moment it actually ran, so a
    host polling once per frame would drift by up to a frame every tick.
    The ticker pins each next run to the previous due time instead.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval_ms: int = DEFAULT_TICK_MS,
        scheduler: Optional[schedule.Scheduler] = None,
    ):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms} ms.")
        self.callback = callback
        self.interval_ms = interval_ms
        self.period = datetime.timedelta(milliseconds=interval_ms)
        self.scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._due: Optional[datetime.datetime] = None

    @property
    def is_running(self) -> bool:
        return self._job is not None

    def start(self) -> None:
        if self._job is not None:
            return
        self._job = self.scheduler.every(self.interval_ms / 1000.0).seconds.do(self._fire)
        self._due = self._job.next_run
        logger.debug("Ticker started (every %s ms)", self.interval_ms)

    def stop(self) -> None:
        if self._job is None:
            return
        self.scheduler.cancel_job(self._job)
        self._job = None
        self._due = None
        logger.debug("Ticker stopped")

    def _fire(self) -> None:
        self._due += self.period
        self.callback()

    def run_pending(self) -> None:
        """
        Fire every tick that has come due since the last call.

        A host that stalls for longer than MAX_CATCH_UP intervals gets
        MAX_CATCH_UP ticks and then resumes one interval from now.
        """
        for _ in range(MAX_CATCH_UP):
            job = self._job
            if job is None or not job.should_run:
                return
            self.scheduler.run_pending()
            if job is self._job:
                job.next_run = self._due

        job = self._job
        if job is not None and job.should_run:
            logger.debug("Ticker fell behind, skipping missed ticks")
            self._due = datetime.datetime.now() + self.period
            job.next_run = self._due

    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next tick is due, or None when stopped."""
        if self._job is None:
            return None
        return self.scheduler.idle_seconds
