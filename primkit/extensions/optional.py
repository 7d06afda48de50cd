"""
Safe-navigation helpers for optional values.

**Conceptual**: Values that may be missing are represented as ``None``. Call
sites constantly need "the value, or a sensible empty default" and "is there
anything here at all?". This module answers both without branching at every
call site.

The or-default logic lives in a single generic OrDefault class; each
supported type gets an instance whose default factory produces that type's
identity value (0, 0.0, int64 zero, "", []).
"""

from typing import Any, Callable, Generic, List, Optional, Sequence, Sized, TypeVar, Union

import numpy as np

T = TypeVar("T")


class OrDefault(Generic[T]):
    """
    Unwrap an optional value, substituting a freshly built default when absent.

    The factory is called on every absent lookup so mutable defaults such as
    lists are never shared between callers.

    **Usage**:
        int_or_zero = OrDefault(int)
        int_or_zero(None)  # 0
        int_or_zero(7)     # 7

    Args:
        factory: Zero-argument callable building the default value.
    """

    def __init__(self, factory: Callable[[], T]):
        self.factory = factory

    def __call__(self, value: Optional[T]) -> T:
        if value is None:
            return self.factory()
        return value

    def __repr__(self) -> str:
        return f"OrDefault({getattr(self.factory, '__name__', self.factory)!r})"


int_or_zero: OrDefault[int] = OrDefault(int)
int64_or_zero: OrDefault[np.int64] = OrDefault(np.int64)
float_or_zero: OrDefault[float] = OrDefault(float)
str_or_empty: OrDefault[str] = OrDefault(str)
sequence_or_empty: OrDefault[List[Any]] = OrDefault(list)


def or_zero(value: Optional[Union[int, float]]) -> Union[int, float]:
    """Return value if present, else 0. Use float_or_zero / int64_or_zero for typed zeros."""
    return int_or_zero(value)


def or_empty(value: Optional[Union[str, Sequence[Any]]]) -> Union[str, Sequence[Any]]:
    """Return value if present, else the empty string. Use sequence_or_empty for lists."""
    return str_or_empty(value)


def is_empty_or_absent(value: Optional[Sized]) -> bool:
    """True if value is None or has length zero."""
    return value is None or len(value) == 0


def is_present_non_empty(value: Optional[Sized]) -> bool:
    """True if value is not None and has at least one element."""
    return not is_empty_or_absent(value)


def presence(value: Optional[str]) -> Optional[str]:
    """
    Trimmed string, or None when value is absent or only whitespace.

    >>> presence("  a ")
    'a'
    >>> presence("   ") is None
    True
    """
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def has_value(value: Optional[Any]) -> bool:
    """True if value is not None. Falsy values such as 0 and "" still count as present."""
    return value is not None


def is_nil(value: Optional[Any]) -> bool:
    """True if value is None; the negation of has_value."""
    return value is None
