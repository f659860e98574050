from __future__ import annotations

from typing import Callable, Iterable, Optional

from numpy.random import default_rng

MAX_PRIORITY = 2 ** 31

PrioritySource = Callable[[], int]


def random_priorities(seed: Optional[int] = None) -> PrioritySource:
    """Uniform priorities in [0, MAX_PRIORITY) from a private numpy generator.

    Passing the same seed yields the same sequence of priorities, and thus
    the same tree shape for the same sequence of operations.
    """
    rng = default_rng(seed)

    def next_priority() -> int:
        return int(rng.integers(0, MAX_PRIORITY))

    return next_priority


def fixed_priorities(values: Iterable[int]) -> PrioritySource:
    """Replay `values` in order, one per call."""
    it = iter(values)

    def next_priority() -> int:
        try:
            return int(next(it))
        except StopIteration:
            raise ValueError("priority sequence exhausted") from None

    return next_priority
