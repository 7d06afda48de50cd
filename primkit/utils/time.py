"""
Clock abstractions for deterministic timing.

**Conceptual**: current_time and time_lapsed ask a Clock for "now" instead of
calling the system clock directly. Production code uses SystemClock; tests use
FrozenClock, which only moves when told to, so elapsed-time assertions are
exact rather than flaky.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Time source protocol.

    **Usage**:
        def elapsed_since(start: float, clock: Clock) -> float:
            return clock.now().timestamp() - start

        elapsed_since(start, SystemClock())
        elapsed_since(start, FrozenClock(datetime(2024, 1, 1, tzinfo=timezone.utc)))
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Clock that reads the system wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that stays at a fixed instant until advanced.

    **Usage**:
        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        start = clock.now().timestamp()
        clock.advance(1.5)
        clock.now().timestamp() - start  # 1.5

    Args:
        fixed_now: Starting instant. Naive datetimes are treated as UTC.
    """

    def __init__(self, fixed_now: datetime):
        if fixed_now.tzinfo is None:
            fixed_now = fixed_now.replace(tzinfo=timezone.utc)
        self._now = fixed_now

    def now(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward (or backward, for negative seconds)."""
        self._now = self._now + timedelta(seconds=seconds)
