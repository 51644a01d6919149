"""Seedable random capability consumed by the combination engine.

The engine only needs uniform booleans and uniform floats in [0, 1). Any
source that is deterministic given its seed and call order can be plugged in
by subclassing RandomSource.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """Abstract base class for random sources used by GeneticCombiner.

    Example:
        class FixedSource(RandomSource):
            def next_boolean(self) -> bool:
                return True

            def next_float(self) -> float:
                return 0.5
    """

    @abstractmethod
    def next_boolean(self) -> bool:
        """Return a uniformly distributed boolean."""

    @abstractmethod
    def next_float(self) -> float:
        """Return a uniformly distributed float in [0, 1)."""

    def shuffled(self, items: list[T]) -> list[T]:
        """Return a shuffled copy of items, leaving the input untouched.

        Fisher-Yates driven by next_float, so the permutation is reproducible
        for any deterministic subclass.

        Args:
            items: Items to shuffle.

        Returns:
            New list holding the same items in random order.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = min(int(self.next_float() * (i + 1)), i)
            result[i], result[j] = result[j], result[i]
        return result


class SeededRandom(RandomSource):
    """RandomSource backed by the standard library's Mersenne Twister.

    Two instances built with the same seed produce the same values for the
    same call sequence.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the source.

        Args:
            seed: Seed for reproducible draws. If None, one is taken from
                system entropy and exposed as ``self.seed``.
        """
        if seed is None:
            seed = random.SystemRandom().randrange(2**63)
        self.seed = seed
        self._rng = random.Random(seed)

    def next_boolean(self) -> bool:
        return self._rng.random() < 0.5

    def next_float(self) -> float:
        return self._rng.random()

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"
