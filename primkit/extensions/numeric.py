"""
Numeric conversion, bounding and rounding helpers.

This module collects the small arithmetic conveniences that otherwise get
rewritten at every call site: angle conversion, clamping and range checks,
uniform random integers, unit scaling (miles, megabytes) and decimal rounding
with half-away-from-zero semantics.

Every function is pure except random_less_than, which draws from an
injectable RandomSource.
"""

import math
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from primkit.utils.errors import InvalidArgumentError
from primkit.utils.random import RandomSource, resolve_source

Number = Union[int, float]
C = TypeVar("C")

METERS_PER_MILE = 1609
BYTES_PER_MEGABYTE = 1024 * 1024


def degrees_to_radians(value: Number) -> float:
    """
    Convert an angle in degrees to radians.

    **Mathematical**: radians = degrees * π / 180.

    Works element-wise on numpy arrays as well as on scalars.

    Args:
        value: Angle in degrees.

    Returns:
        Angle in radians.
    """
    return value * math.pi / 180.0


def radians_to_degrees(value: Number) -> float:
    """
    Convert an angle in radians to degrees (inverse of degrees_to_radians).

    Args:
        value: Angle in radians.

    Returns:
        Angle in degrees.
    """
    return value * 180.0 / math.pi


def clamp(value: C, low: C, high: C) -> C:
    """
    Constrain value to the inclusive range [low, high].

    **Functionally**:
    - value > high → high
    - value < low  → low
    - otherwise    → value, unchanged

    The upper bound is checked first. Works for any mutually comparable
    values (ints, floats, Decimals, dates, strings).

    **Edge cases**:
    - low == high always returns that bound.
    - low > high is rejected rather than resolved by comparison order.

    Args:
        value: Value to constrain.
        low: Inclusive lower bound.
        high: Inclusive upper bound.

    Returns:
        The clamped value.

    Raises:
        InvalidArgumentError: If low > high.
    """
    if low > high:
        raise InvalidArgumentError(
            f"clamp requires low <= high, got low={low!r}, high={high!r}"
        )
    if value > high:
        return high
    if value < low:
        return low
    return value


def clamp_to_range(value: C, bounds: Tuple[C, C]) -> C:
    """
    Clamp value into an inclusive (low, high) pair.

    Unlike clamp, the lower bound is checked first. The result is the same
    whenever the bounds are valid.

    Raises:
        InvalidArgumentError: If bounds[0] > bounds[1].
    """
    low, high = bounds
    if low > high:
        raise InvalidArgumentError(
            f"clamp_to_range requires low <= high, got bounds={bounds!r}"
        )
    if value < low:
        return low
    if value > high:
        return high
    return value


def in_range(value: C, low: C, high: C) -> bool:
    """True iff low <= value <= high (both ends inclusive)."""
    return low <= value <= high


def random_less_than(upper: Number, source: Optional[RandomSource] = None) -> Number:
    """
    Draw a uniformly distributed integer in [0, upper).

    **Functionally**:
    - Integer bound → integer result.
    - Float bound → the bound is truncated to an integer first and the result
      is returned as a float (e.g. 10.9 draws from [0, 10)).

    Args:
        upper: Exclusive upper bound; must be at least 1 after truncation.
        source: Random source to draw from. Defaults to a freshly seeded
                NumpyRandomSource.

    Returns:
        Random value in [0, upper).

    Raises:
        InvalidArgumentError: If the (truncated) bound is not positive or
            the bound is not finite.
    """
    if isinstance(upper, float):
        if not math.isfinite(upper):
            raise InvalidArgumentError(f"random bound must be finite, got: {upper}")
        bound = int(upper)
    else:
        bound = upper

    if bound <= 0:
        raise InvalidArgumentError(f"random bound must be positive, got: {upper}")

    result = resolve_source(source).next_below(bound)
    return float(result) if isinstance(upper, float) else result


def miles_to_meters(value: Number) -> Number:
    """Convert miles to meters using 1 mile = 1609 m (int stays int, float stays float)."""
    return value * METERS_PER_MILE


def megabytes_to_bytes(value: Number) -> Number:
    """Convert megabytes (MiB) to bytes: value * 1024 * 1024."""
    return value * BYTES_PER_MEGABYTE


def _round_half_away_from_zero(value: float) -> float:
    # Python's round() is half-to-even; this is the schoolbook rule.
    # Compare the fractional part instead of adding 0.5, which can itself round up.
    magnitude = abs(value)
    whole = math.floor(magnitude)
    rounded = whole + 1.0 if magnitude - whole >= 0.5 else float(whole)
    return math.copysign(rounded, value)


def round_to(value: float, decimal_places: int) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    **Mathematical**:
        round_to(x, d) = round(x * 10^d) / 10^d
    where round() sends .5 away from zero (2.5 → 3, -2.5 → -3). Negative d
    rounds to tens, hundreds, and so on.

    **Edge cases**:
    - NaN and ±infinity are returned unchanged.
    - If x * 10^d overflows, x is returned unchanged.
    - Results carry the usual binary floating-point representation error;
      round_to(1.005, 2) is 1.0 because 1.005 is stored as 1.00499999...

    Args:
        value: Number to round.
        decimal_places: Digits to keep after the decimal point.

    Returns:
        Rounded float.
    """
    divisor = math.pow(10.0, decimal_places)
    scaled = value * divisor
    if not math.isfinite(scaled):
        return float(value)
    return _round_half_away_from_zero(scaled) / divisor


def places(value: float, places: int) -> float:
    """
    Like round_to, but any places < 1 rounds to the nearest whole number.

    >>> places(3.14159, 2)
    3.14
    >>> places(2.5, 0)
    3.0
    >>> places(2.5, -3)
    3.0
    """
    if places < 1:
        if not math.isfinite(value):
            return float(value)
        return _round_half_away_from_zero(value)
    return round_to(value, places)


def times(count: int, block: Callable[[int], Any]) -> None:
    """Call block(i) for i in 0..count-1. Non-positive counts do nothing."""
    for i in range(count):
        block(i)
