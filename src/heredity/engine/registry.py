"""Mutation registry: per-locus lookup of override rules by trigger pair."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from heredity.errors import LocusOutOfRangeError
from heredity.model.allele_pair import AllelePair

if TYPE_CHECKING:
    from heredity.model.genome import Genome
    from heredity.model.mutation import Mutation

logger = logging.getLogger(__name__)


class MutationRegistry:
    """Fixed-size table of mutation rules, one mapping per locus.

    Each locus maps an AllelePair to the list of rules it triggers. The table
    is sized once at construction. Registering the same rule twice stores it
    twice; each copy is evaluated independently on every draw.

    Not safe to modify while a combine stream is being consumed.
    """

    def __init__(self, locus_count: int) -> None:
        if locus_count < 0:
            msg = f"locus_count must be non-negative, got {locus_count}"
            raise ValueError(msg)
        self.locus_count = locus_count
        self._loci: list[dict[AllelePair, list[Mutation]]] = [{} for _ in range(locus_count)]

    def register(self, locus: int, pair: AllelePair, mutation: Mutation) -> None:
        """Append a rule to the list for (locus, pair).

        Args:
            locus: Locus index the trigger pair is read from.
            pair: Unordered trigger pair of active alleles.
            mutation: Rule to append.

        Raises:
            LocusOutOfRangeError: If locus is outside [0, locus_count).
        """
        self._check_locus(locus)
        self._loci[locus].setdefault(pair, []).append(mutation)
        logger.debug(
            "Registered mutation at locus %d for pair (%d, %d) with chance %.4f",
            locus,
            pair.low,
            pair.high,
            mutation.chance,
        )

    def rules_for(self, locus: int, pair: AllelePair) -> list[Mutation]:
        """Return the rules registered for (locus, pair), empty on a miss."""
        self._check_locus(locus)
        return list(self._loci[locus].get(pair, []))

    def candidates(self, parent_a: Genome, parent_b: Genome) -> list[Mutation]:
        """Collect every rule triggered by the parents' active alleles.

        Each locus contributes the rules keyed by the pair formed from the
        two parents' active alleles at that locus. The result spans all loci.

        Args:
            parent_a: First parent, already validated against locus_count.
            parent_b: Second parent, already validated against locus_count.

        Returns:
            Flat list of triggered rules in locus order.
        """
        triggered: list[Mutation] = []
        for locus, rules in enumerate(self._loci):
            if not rules:
                continue
            pair = AllelePair(parent_a.active_alleles[locus], parent_b.active_alleles[locus])
            triggered.extend(rules.get(pair, []))
        return triggered

    def _check_locus(self, locus: int) -> None:
        if not 0 <= locus < self.locus_count:
            msg = f"Locus {locus} out of range for genome of {self.locus_count} loci"
            raise LocusOutOfRangeError(msg)

    def __len__(self) -> int:
        return sum(len(rules) for by_pair in self._loci for rules in by_pair.values())
