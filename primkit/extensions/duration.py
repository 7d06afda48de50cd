"""
Duration decomposition, clock-style formatting and elapsed-time helpers.

**Conceptual**: Media players, timers and progress displays all need to turn
"9999.3 seconds" into "2:46:39". This module splits a total number of seconds
into whole hours, minutes and seconds, renders that as a clock string, and
measures elapsed time against an injectable Clock.

**Sign convention**: negative totals are decomposed as the negation of their
absolute value, so every non-zero field carries the sign and
hours*3600 + minutes*60 + seconds equals the truncated total. Clock strings
for negative totals put a single "-" in front of the formatted absolute value.
"""

import logging
import math
from typing import NamedTuple, Optional, Union

from primkit.extensions.numeric import round_to
from primkit.utils.errors import InvalidNumericValueError
from primkit.utils.time import Clock, SystemClock

logger = logging.getLogger(__name__)

Number = Union[int, float]

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
INVALID_CLOCK_FORMAT = "0:00"


class SecondsBreakdown(NamedTuple):
    """Whole hours, minutes and seconds of a duration. Compares equal to a plain tuple."""
    hours: int
    minutes: int
    seconds: int


def _whole_seconds(total_seconds: Number) -> int:
    # Covers numpy floats and Decimal as well as float
    if not isinstance(total_seconds, int) and not math.isfinite(total_seconds):
        raise InvalidNumericValueError(
            f"cannot decompose a non-finite duration: {total_seconds}"
        )
    # int() truncates toward zero; the fractional part never rounds up
    return int(total_seconds)


def seconds_decompose(total_seconds: Number) -> SecondsBreakdown:
    """
    Break a total number of seconds into hours, minutes and remaining seconds.

    **Mathematical**: For a non-negative whole total T:
        hours   = T // 3600
        minutes = (T % 3600) // 60
        seconds = T % 60
    so 0 <= minutes < 60, 0 <= seconds < 60 and
    hours*3600 + minutes*60 + seconds == T.

    **Functionally**:
    - Floats are truncated to whole seconds first (9999.9 → 9999).
    - Negative totals decompose |T| and negate every field:
      -3725 → (-1, -2, -5).

    >>> seconds_decompose(9999)
    SecondsBreakdown(hours=2, minutes=46, seconds=39)

    Args:
        total_seconds: Duration in seconds.

    Returns:
        SecondsBreakdown(hours, minutes, seconds).

    Raises:
        InvalidNumericValueError: If total_seconds is NaN or infinite.
    """
    whole = _whole_seconds(total_seconds)
    sign = -1 if whole < 0 else 1
    hours, remainder = divmod(abs(whole), SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return SecondsBreakdown(sign * hours, sign * minutes, sign * seconds)


def seconds_to_clock_format(total_seconds: Number) -> str:
    """
    Render a duration as H:MM:SS, or M:SS when it is under an hour.

    **Functionally**:
    - Minutes and seconds are zero-padded to two digits once hours appear;
      seconds are always zero-padded; hours are never padded.
    - Fractional seconds are dropped, not rounded.
    - NaN and ±infinity render as "0:00".
    - Negative durations render as "-" + the absolute value's format.
      Totals that truncate to zero whole seconds render as "0:00".

    >>> seconds_to_clock_format(9999.3)
    '2:46:39'
    >>> seconds_to_clock_format(458)
    '7:38'
    >>> seconds_to_clock_format(-458)
    '-7:38'

    Args:
        total_seconds: Duration in seconds.

    Returns:
        Clock-style string.
    """
    try:
        parts = seconds_decompose(total_seconds)
    except InvalidNumericValueError:
        logger.debug("Formatting non-finite duration %r as %s", total_seconds, INVALID_CLOCK_FORMAT)
        return INVALID_CLOCK_FORMAT

    hours, minutes, seconds = (abs(p) for p in parts)
    sign = "-" if any(p < 0 for p in parts) else ""
    if hours > 0:
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{minutes}:{seconds:02d}"


def current_time(clock: Optional[Clock] = None) -> float:
    """Current POSIX timestamp in seconds, read from clock (SystemClock by default)."""
    clock = clock or SystemClock()
    return clock.now().timestamp()


def time_lapsed(start: float, clock: Optional[Clock] = None) -> float:
    """
    Seconds elapsed since start, rounded to milliseconds.

    **Usage**:
        started = current_time()
        do_work()
        logger.info("work took %ss", time_lapsed(started))

    Args:
        start: Timestamp previously returned by current_time.
        clock: Clock to read "now" from (SystemClock by default).

    Returns:
        Elapsed seconds rounded to 3 decimal places.
    """
    return round_to(current_time(clock) - start, 3)
