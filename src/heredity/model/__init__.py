"""Domain model: Genome, AllelePair, Mutation."""

from heredity.model.allele_pair import AllelePair
from heredity.model.genome import Genome
from heredity.model.mutation import Mutation

__all__ = [
    "AllelePair",
    "Genome",
    "Mutation",
]
