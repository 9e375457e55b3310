"""Interval timer aligned to whole multiples of its interval."""

from __future__ import annotations

import logging
import time

_log = logging.getLogger(__name__)


class IntervalTimer:
    """One-shot timer measured in whole seconds.

    :meth:`begin` records a start time rounded down to a multiple of the
    interval; :meth:`expired` reports once more than one interval has passed
    since then and stops the timer.
    """

    def __init__(self, interval: int = 0):
        self.interval = interval
        self._last_time = 0
        self._started = False

    @property
    def last_time(self) -> int:
        """Aligned start time of the current run."""
        return self._last_time

    @property
    def started(self) -> bool:
        """Whether the timer is running."""
        return self._started

    @staticmethod
    def _now(now: int | None) -> int:
        return int(time.time()) if not now else int(now)

    def begin(self, now: int | None = None) -> None:
        """Start the timer unless it is running or has a zero interval."""
        if self.interval > 0 and not self._started:
            start = self._now(now)
            self._last_time = start - start % self.interval
            self._started = True

    def expired(self, now: int | None = None) -> bool:
        """Return ``True`` once, when more than one interval has elapsed."""
        if not self._started:
            _log.error("timer is not started ...")
            return False
        current = self._now(now)
        if current > self._last_time and current - self._last_time > self.interval:
            self._started = False
            return True
        return False

    def reset(self, now: int | None = None) -> None:
        """Start the timer again after it has expired."""
        self.begin(now)