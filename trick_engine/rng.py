"""Seeded, splittable random source used by every simulation phase."""

from __future__ import annotations

from random import Random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

SPLIT_BITS = 64


class SplittableRandom:
    """Deterministic generator that can hand out independent child streams.

    A child produced by :meth:`split` is seeded from a single draw of the
    parent, so the parent advances by exactly one step per split and the
    child's output depends only on the parent's state at that moment.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = Random(seed)

    def next_bounded(self, low_or_high: int, high: Optional[int] = None) -> int:
        """Return an integer in ``[0, low_or_high)`` or ``[low_or_high, high)``."""
        if high is None:
            low, high = 0, low_or_high
        else:
            low = low_or_high
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high}).")
        return self._random.randrange(low, high)

    def next_unit(self) -> float:
        return self._random.random()

    def split(self) -> "SplittableRandom":
        return SplittableRandom(self._random.getrandbits(SPLIT_BITS))

    def choice(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot choose from an empty sequence.")
        return options[self.next_bounded(len(options))]

    def __repr__(self) -> str:
        return f"SplittableRandom(seed={self.seed})"


def create_rng(seed: int) -> SplittableRandom:
    return SplittableRandom(seed)
