"""
Tests for primkit/utils/time.py

These tests verify the clock abstraction works correctly for both real and frozen time.
"""

from datetime import datetime, timedelta, timezone

from primkit.utils.time import FrozenClock, SystemClock


def test_system_clock_returns_current_time():
    """Test that SystemClock returns a time close to actual current time."""
    clock = SystemClock()

    before = datetime.now(timezone.utc)
    clock_time = clock.now()
    after = datetime.now(timezone.utc)

    assert before <= clock_time <= after
    assert clock_time.tzinfo == timezone.utc


def test_frozen_clock_returns_fixed_time():
    """Test that FrozenClock keeps returning the configured timestamp."""
    fixed_time = datetime(2015, 1, 5, 12, 30, 45, tzinfo=timezone.utc)
    clock = FrozenClock(fixed_time)

    for _ in range(3):
        assert clock.now() == fixed_time


def test_frozen_clock_naive_datetime_is_utc():
    """Test a naive starting instant is interpreted as UTC."""
    clock = FrozenClock(datetime(2020, 7, 4, 10, 30))
    assert clock.now() == datetime(2020, 7, 4, 10, 30, tzinfo=timezone.utc)


def test_frozen_clock_advance():
    """Test advance moves the clock by exactly the given seconds, both directions."""
    start = datetime(2021, 12, 25, tzinfo=timezone.utc)
    clock = FrozenClock(start)

    clock.advance(90)
    assert clock.now() == start + timedelta(seconds=90)

    clock.advance(-30.5)
    assert clock.now() == start + timedelta(seconds=59.5)
