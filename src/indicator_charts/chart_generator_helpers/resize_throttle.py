from __future__ import annotations

"""Resize event throttling."""


import time
from typing import Callable, Optional


class ResizeThrottle:
    """
    Allows at most one render per interval.

    Requests inside the interval are dropped, never queued; a single trailing
    render is remembered so the final viewport size still gets drawn.
    """

    def __init__(self, interval_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._last_fired: Optional[float] = None
        self._pending = False
        self.dropped_count = 0

    @property
    def pending(self) -> bool:
        return self._pending

    def _ready(self, now: float) -> bool:
        return self._last_fired is None or now - self._last_fired >= self._interval_seconds

    def request(self) -> bool:
        """Record a resize event and return True when it should render now."""

        now = self._clock()
        if self._ready(now):
            self._last_fired = now
            self._pending = False
            return True
        self._pending = True
        self.dropped_count += 1
        return False

    def take_pending(self) -> bool:
        """Return True once when a dropped event is owed a trailing render."""

        now = self._clock()
        if not self._pending or not self._ready(now):
            return False
        self._last_fired = now
        self._pending = False
        return True

    def seconds_until_ready(self) -> float:
        if self._last_fired is None:
            return 0.0
        return max(0.0, self._interval_seconds - (self._clock() - self._last_fired))
