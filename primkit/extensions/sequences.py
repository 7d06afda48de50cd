"""
Helpers for lists, sets and other collections.

**Conceptual**: Small conveniences for membership tests, random sampling,
shuffling and in-place removal. Random helpers take an optional RandomSource
so tests can pin down exactly which element is chosen.
"""

from enum import Enum
from typing import (
    AbstractSet,
    Any,
    Callable,
    Collection,
    Iterable,
    List,
    MutableSequence,
    Optional,
    Sequence,
    TypeVar,
)

from primkit.utils.random import RandomSource, resolve_source

T = TypeVar("T")
C = TypeVar("C", bound=Collection)


def raw_values(members: Iterable[Enum]) -> List[Any]:
    """
    Underlying values of a sequence of enum members, in order.

    >>> class Color(Enum):
    ...     BLUE = 0
    ...     RED = 1
    >>> raw_values([Color.RED, Color.BLUE])
    [1, 0]
    """
    return [member.value for member in members]


def any_of(item: T, *items: T) -> bool:
    """True if item equals any of items. For a single candidate, use == instead."""
    return item in items


def contains_any(collection: Collection[T], *items: T) -> bool:
    """True if at least one of items is in collection."""
    return any(item in collection for item in items)


def tap(collection: C, block: Callable[[C], Any]) -> C:
    """Call block(collection) and return collection unchanged, for use in expression chains."""
    block(collection)
    return collection


def last_index(sequence: Sequence[Any]) -> int:
    """Index of the last element; -1 for an empty sequence."""
    return len(sequence) - 1


def has_items(collection: Collection[Any]) -> bool:
    """True if collection holds at least one element."""
    return len(collection) > 0


def missing(collection: Collection[T], value: T) -> bool:
    """True if value is not in collection."""
    return value not in collection


def remove_item(items: MutableSequence[T], item: T) -> None:
    """Remove the first occurrence of item in place. Does nothing if it is absent."""
    if item in items:
        items.remove(item)


def sample(sequence: Sequence[T], source: Optional[RandomSource] = None) -> Optional[T]:
    """
    Pick a random element, or None when the sequence is empty.

    Args:
        sequence: Sequence to draw from.
        source: Random source (a fresh NumpyRandomSource by default).

    Returns:
        A uniformly chosen element, or None.
    """
    if not sequence:
        return None
    return sequence[resolve_source(source).next_below(len(sequence))]


def shuffle(items: MutableSequence[T], source: Optional[RandomSource] = None) -> None:
    """
    Shuffle items in place using the Fisher-Yates algorithm.

    **Algorithm**: walk positions i = 0..n-2; swap position i with a uniformly
    chosen position in [i, n). Every permutation is equally likely given a
    uniform source. Sequences shorter than two elements are left alone.
    """
    count = len(items)
    if count < 2:
        return
    rng = resolve_source(source)
    for i in range(count - 1):
        j = i + rng.next_below(count - i)
        items[i], items[j] = items[j], items[i]


def shuffled(iterable: Iterable[T], source: Optional[RandomSource] = None) -> List[T]:
    """Return a new shuffled list of the iterable's elements."""
    result = list(iterable)
    shuffle(result, source)
    return result


def to_list(values: AbstractSet[T]) -> List[T]:
    """Elements of a set as a list (iteration order of the set)."""
    return list(values)
