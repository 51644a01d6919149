"""Combination engine: random source, mutation registry, genome combiner."""

from heredity.engine.combiner import GeneticCombiner
from heredity.engine.random_source import RandomSource, SeededRandom
from heredity.engine.registry import MutationRegistry

__all__ = [
    "GeneticCombiner",
    "MutationRegistry",
    "RandomSource",
    "SeededRandom",
]
