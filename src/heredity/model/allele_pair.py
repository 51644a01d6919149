"""AllelePair: unordered pair of alleles used as a mutation trigger key."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AllelePair:
    """An unordered pair of alleles.

    Stored canonically as (low, high) so that ``AllelePair(1, 2)`` and
    ``AllelePair(2, 1)`` compare and hash equal.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            low, high = self.high, self.low
            object.__setattr__(self, "low", low)
            object.__setattr__(self, "high", high)

    def __contains__(self, allele: object) -> bool:
        return allele == self.low or allele == self.high
