"""Genetic combination engine: mutation-aware Mendelian recombination of genomes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from heredity.engine.random_source import RandomSource, SeededRandom
from heredity.engine.registry import MutationRegistry
from heredity.errors import MalformedGenomeError, SizeMismatchError
from heredity.model.allele_pair import AllelePair
from heredity.model.genome import Genome
from heredity.model.mutation import Mutation

if TYPE_CHECKING:
    from heredity.config import CombinerSettings

logger = logging.getLogger(__name__)


class GeneticCombiner:
    """Combines pairs of genomes into an endless stream of offspring.

    Owns a seeded random source and a MutationRegistry sized to locus_count.
    Mutations are registered at setup time, then combine() is called for
    each breeding request.

    For every offspring drawn, each parent may first be replaced wholesale by
    the override of a triggered mutation rule. Then, at every locus, the
    offspring's active allele is picked at random from (possibly mutated)
    parent A and its inactive allele from (possibly mutated) parent B.

    Single owner only: the random source is shared by every stream this
    engine hands out, and registering while a stream is consumed is undefined.

    Example:
        >>> combiner = GeneticCombiner(locus_count=2, seed=7)
        >>> a = Genome.from_alleles([1, 1], [2, 2])
        >>> b = Genome.from_alleles([3, 3], [4, 4])
        >>> child = next(combiner.combine(a, b))
        >>> child.is_valid()
        True
    """

    def __init__(
        self,
        locus_count: int,
        seed: int | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            locus_count: Number of loci every genome handled must have.
            seed: Seed for the default SeededRandom. Ignored when
                random_source is given.
            random_source: Custom random capability. Defaults to
                SeededRandom(seed).
        """
        self.locus_count = locus_count
        self.random = random_source if random_source is not None else SeededRandom(seed)
        self.registry = MutationRegistry(locus_count)

    @classmethod
    def from_settings(cls, settings: CombinerSettings) -> GeneticCombiner:
        """Create an engine from loaded settings.

        Args:
            settings: CombinerSettings carrying locus_count and seed.

        Returns:
            GeneticCombiner configured from settings.
        """
        combiner = cls(locus_count=settings.locus_count, seed=settings.seed)
        if settings.seed is None and isinstance(combiner.random, SeededRandom):
            logger.info("No seed configured, using generated seed %d", combiner.random.seed)
        return combiner

    def register_mutation(
        self,
        locus: int,
        allele0: int,
        allele1: int,
        override: Genome,
        chance: float,
    ) -> None:
        """Register an override rule triggered by an allele pair at a locus.

        The pair is unordered. Repeated registration adds independent rules,
        which compounds the effective chance of an override.

        Args:
            locus: Locus the trigger pair is read from.
            allele0: One allele of the trigger pair.
            allele1: The other allele of the trigger pair.
            override: Whole genome that replaces a parent when the rule fires.
            chance: Probability in [0.0, 1.0] that the rule fires per draw.

        Raises:
            LocusOutOfRangeError: If locus is outside [0, locus_count).
            MalformedGenomeError: If override is not a valid genome.
            SizeMismatchError: If override has a different locus count.
            InvalidChanceError: If chance is outside [0.0, 1.0].
        """
        self._check_genome(override, "override")
        mutation = Mutation(chance=chance, override=override.copy())
        self.registry.register(locus, AllelePair(allele0, allele1), mutation)

    def combine(self, parent_a: Genome, parent_b: Genome) -> Iterator[Genome]:
        """Start an endless, lazily generated stream of offspring.

        Both parents are checked before anything is produced. Trigger rules
        are collected once here from the parents' active alleles; each draw
        then gets its own shuffles and chance rolls. Calling combine again
        starts an independent stream.

        Args:
            parent_a: Parent supplying the offspring's active alleles.
            parent_b: Parent supplying the offspring's inactive alleles.

        Returns:
            Iterator that yields a new valid Genome on every next().

        Raises:
            MalformedGenomeError: If either parent is not valid.
            SizeMismatchError: If either parent's locus count differs from
                the engine's.
        """
        for genome, name in ((parent_a, "parent_a"), (parent_b, "parent_b")):
            if not genome.is_valid():
                msg = (
                    f"Malformed genome {name}: {len(genome.active_alleles)} active and "
                    f"{len(genome.inactive_alleles)} inactive alleles for "
                    f"{genome.locus_count} loci"
                )
                raise MalformedGenomeError(msg)
        for genome, name in ((parent_a, "parent_a"), (parent_b, "parent_b")):
            self._check_size(genome, name)

        parent_a = parent_a.copy()
        parent_b = parent_b.copy()
        candidates = self.registry.candidates(parent_a, parent_b)
        logger.debug(
            "Combining genomes of %d loci with %d candidate mutations",
            self.locus_count,
            len(candidates),
        )
        return self._offspring(parent_a, parent_b, candidates)

    def _offspring(
        self, parent_a: Genome, parent_b: Genome, candidates: list[Mutation]
    ) -> Iterator[Genome]:
        while True:
            mutated_a = self._mutate(parent_a, candidates)
            mutated_b = self._mutate(parent_b, candidates)
            yield self._recombine(mutated_a, mutated_b)

    def _mutate(self, parent: Genome, candidates: list[Mutation]) -> Genome:
        """Return the override of the first rule to fire in a fresh shuffle, else parent."""
        if not candidates:
            return parent
        for mutation in self.random.shuffled(candidates):
            if mutation.fires(self.random.next_float()):
                return mutation.override
        return parent

    def _recombine(self, mutated_a: Genome, mutated_b: Genome) -> Genome:
        offspring = Genome.sized(self.locus_count)
        for i in range(self.locus_count):
            offspring.active_alleles.append(
                mutated_a.active_alleles[i]
                if self.random.next_boolean()
                else mutated_a.inactive_alleles[i]
            )
            offspring.inactive_alleles.append(
                mutated_b.active_alleles[i]
                if self.random.next_boolean()
                else mutated_b.inactive_alleles[i]
            )
        return offspring

    def _check_genome(self, genome: Genome, name: str) -> None:
        if not genome.is_valid():
            msg = f"Malformed genome {name}: allele lists do not match {genome.locus_count} loci"
            raise MalformedGenomeError(msg)
        self._check_size(genome, name)

    def _check_size(self, genome: Genome, name: str) -> None:
        if genome.locus_count != self.locus_count:
            msg = (
                f"Genome {name} has {genome.locus_count} loci, "
                f"engine is configured for {self.locus_count}"
            )
            raise SizeMismatchError(msg)
