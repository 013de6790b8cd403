"""Cancellable one-shot delays for cosmetic pauses (die spin, turn handoff).

Streamlit has no timers of its own, so a delay is just a deadline plus a
callback. Whoever drives the UI polls :meth:`ScheduledDelay.fire_if_due` on
each rerun.
"""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


class ScheduledDelay:
    """Run ``callback`` once, no earlier than ``delay_s`` seconds from now."""

    def __init__(
        self,
        delay_s: float,
        callback: Callable[[], None],
        clock: Clock = time.monotonic,
    ) -> None:
        if delay_s < 0:
            raise ValueError(f"Delay cannot be negative, got {delay_s}.")
        self._clock = clock
        self._callback = callback
        self.deadline = clock() + delay_s
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def remaining(self, now: float | None = None) -> float:
        """Seconds left before the callback is due (never negative)."""
        if not self.pending:
            return 0.0
        now = self._clock() if now is None else now
        return max(0.0, self.deadline - now)

    def is_due(self, now: float | None = None) -> bool:
        now = self._clock() if now is None else now
        return self.pending and now >= self.deadline

    def cancel(self) -> None:
        self.cancelled = True

    def fire_if_due(self, now: float | None = None) -> bool:
        """Invoke the callback if the deadline has passed.

        Returns:
            True if the callback ran on this call
        """
        if not self.is_due(now):
            return False
        self.fired = True
        self._callback()
        return True
