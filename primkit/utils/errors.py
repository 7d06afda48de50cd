"""
Error classes raised by primkit helpers.

**Conceptual**: Most helpers in this package are total: absent or empty input
is a normal value, not a failure. The few that can be handed input with no
sensible answer (a non-positive random bound, inverted clamp bounds, a NaN
duration) raise one of the exceptions below instead of returning garbage.

Both concrete errors also subclass ValueError, so callers can catch either
PrimkitError (everything from this package) or the builtin category.
"""


class PrimkitError(Exception):
    """
    Base exception for all primkit errors.

    Catch this to handle any failure raised by the package without caring
    about the specific cause.
    """
    pass


class InvalidArgumentError(PrimkitError, ValueError):
    """
    Raised when an argument falls outside the domain of a helper.

    **Examples**:
      - random_less_than(0): there is no integer in [0, 0).
      - clamp(5, 10, 1): the lower bound is above the upper bound.
      - first_character(""): an empty string has no first character.
    """
    pass


class InvalidNumericValueError(PrimkitError, ValueError):
    """
    Raised when a numeric input is NaN or infinite where a finite value is needed.

    seconds_to_clock_format recovers from this locally and renders "0:00";
    seconds_decompose lets it propagate.
    """
    pass
