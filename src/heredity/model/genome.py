"""Genome dataclass: a fixed-size record of active and inactive alleles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Genome:
    """A genome where one allele at each locus is expressed and the other is repressed.

    A genome consists of a number of loci. Each locus holds a pair of alleles,
    represented as opaque integers. The active allele is the one traits are
    based on (the genotype). The inactive allele is carried but not expressed,
    and still participates in combination.

    Validity is checked, never enforced: ``Genome()`` is the empty shape used
    while deserializing and must pass ``is_valid()`` before it is used.
    """

    locus_count: int = 0
    active_alleles: list[int] = field(default_factory=list)  # expressed
    inactive_alleles: list[int] = field(default_factory=list)  # repressed

    @classmethod
    def sized(cls, locus_count: int) -> Genome:
        """Create an unpopulated genome with a given number of loci.

        Args:
            locus_count: Number of loci in the genome.

        Returns:
            Genome with empty allele lists, ready to be filled.
        """
        return cls(locus_count=locus_count)

    @classmethod
    def from_alleles(cls, active: Sequence[int], inactive: Sequence[int]) -> Genome:
        """Create a populated genome sized to the active alleles.

        Does not validate; a length mismatch yields an invalid genome.

        Args:
            active: Expressed allele per locus.
            inactive: Repressed allele per locus.

        Returns:
            Genome with locus_count == len(active).
        """
        return cls(
            locus_count=len(active),
            active_alleles=list(active),
            inactive_alleles=list(inactive),
        )

    def is_valid(self) -> bool:
        """Check the genome's shape.

        Returns:
            True if and only if there are as many active alleles as inactive
            alleles, and the number of each matches the number of loci.
        """
        return len(self.active_alleles) == len(self.inactive_alleles) == self.locus_count

    def genotype(self) -> tuple[int, ...]:
        """Return the expressed alleles across all loci."""
        return tuple(self.active_alleles)

    def copy(self) -> Genome:
        """Return an independent copy with fresh allele lists."""
        return Genome(
            locus_count=self.locus_count,
            active_alleles=list(self.active_alleles),
            inactive_alleles=list(self.inactive_alleles),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "locus_count": self.locus_count,
            "active_alleles": list(self.active_alleles),
            "inactive_alleles": list(self.inactive_alleles),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Genome:
        return cls(
            locus_count=int(data.get("locus_count", 0)),
            active_alleles=[int(a) for a in data.get("active_alleles", [])],
            inactive_alleles=[int(a) for a in data.get("inactive_alleles", [])],
        )

    def __hash__(self) -> int:
        return hash((self.locus_count, tuple(self.active_alleles), tuple(self.inactive_alleles)))
