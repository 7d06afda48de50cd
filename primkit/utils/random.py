"""
Injectable random sources for the sampling helpers.

**Conceptual**: Helpers such as random_less_than, sample and shuffle need a
stream of uniformly distributed integers. Rather than reaching for a global
generator, they accept a RandomSource. Production code can pass nothing and
get a fresh numpy-backed source; tests pass a ScriptedRandomSource and know
exactly which "random" values will come out.
"""

from typing import Iterable, List, Optional, Protocol

import numpy as np

_INT64_MAX = int(np.iinfo(np.int64).max)


class RandomSource(Protocol):
    """
    Anything that can produce a uniform integer in [0, upper).

    Implementations may assume upper > 0; callers validate the bound first.
    """

    def next_below(self, upper: int) -> int:
        """Return an integer in the half-open range [0, upper)."""
        ...


class NumpyRandomSource:
    """
    RandomSource backed by numpy's default bit generator (PCG64).

    **Usage**:
        source = NumpyRandomSource(seed=42)   # reproducible
        source = NumpyRandomSource()          # seeded from OS entropy

    Bounds beyond the int64 range are supported: the draw is assembled from
    random bytes and retried until it falls below the bound, which keeps it
    uniform.

    Not suitable for cryptographic use.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_below(self, upper: int) -> int:
        if upper <= _INT64_MAX:
            # integers() excludes the high end by default
            return int(self._rng.integers(0, upper))

        bits = (upper - 1).bit_length()
        n_bytes = (bits + 7) // 8
        while True:
            candidate = int.from_bytes(self._rng.bytes(n_bytes), "little") >> (n_bytes * 8 - bits)
            if candidate < upper:
                return candidate


class ScriptedRandomSource:
    """
    RandomSource that replays a fixed list of values, cycling when exhausted.

    Each scripted value is reduced modulo the requested bound, so a script
    written for one bound never yields an out-of-range result for another.

    Args:
        values: Non-empty iterable of non-negative integers to replay.

    Raises:
        ValueError: If values is empty or contains a negative number.
    """

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = list(values)
        if not self._values:
            raise ValueError("ScriptedRandomSource needs at least one value")
        if any(v < 0 for v in self._values):
            raise ValueError(
                f"ScriptedRandomSource values must be non-negative, got: {self._values}"
            )
        self._position = 0
        self.calls: List[int] = []

    def next_below(self, upper: int) -> int:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        self.calls.append(upper)
        return value % upper


def resolve_source(source: Optional[RandomSource]) -> RandomSource:
    """Return source, or a freshly seeded NumpyRandomSource when it is None."""
    if source is None:
        return NumpyRandomSource()
    return source
