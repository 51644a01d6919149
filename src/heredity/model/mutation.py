"""Mutation dataclass: a chance-gated whole-genome override."""

from __future__ import annotations

from dataclasses import dataclass

from heredity.errors import InvalidChanceError
from heredity.model.genome import Genome


@dataclass(frozen=True)
class Mutation:
    """A rule that replaces an entire parent genome when it fires.

    The rule fires on a draw when ``chance`` exceeds a uniform float in [0, 1),
    so 0.0 never fires and 1.0 always fires. The override replaces the whole
    parent, not just the locus that triggered it.
    """

    chance: float
    override: Genome

    def __post_init__(self) -> None:
        if not 0.0 <= self.chance <= 1.0:
            msg = f"Mutation chance must be in [0.0, 1.0], got {self.chance}"
            raise InvalidChanceError(msg)

    def fires(self, draw: float) -> bool:
        """Check whether this rule fires for a uniform draw in [0, 1)."""
        return self.chance > draw
