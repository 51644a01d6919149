"""Command-line interface for sampling offspring from a breeding plan."""

from __future__ import annotations

import argparse
import json
import sys
from itertools import islice
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from heredity import __version__
from heredity.config import get_settings
from heredity.engine.combiner import GeneticCombiner
from heredity.errors import GeneticsError
from heredity.logging_config import configure_logging, get_logger
from heredity.model.genome import Genome

logger = get_logger(__name__)


class GenomeRecord(BaseModel):
    """Genome as written in a plan file.

    Attributes:
        active_alleles: Expressed allele per locus.
        inactive_alleles: Repressed allele per locus.
        locus_count: Declared locus count. Defaults to len(active_alleles).
    """

    active_alleles: list[int] = Field(description="Expressed allele per locus")
    inactive_alleles: list[int] = Field(description="Repressed allele per locus")
    locus_count: int | None = Field(default=None, ge=0, description="Declared locus count")

    def to_genome(self) -> Genome:
        genome = Genome.from_alleles(self.active_alleles, self.inactive_alleles)
        if self.locus_count is not None:
            genome.locus_count = self.locus_count
        return genome


class MutationSpec(BaseModel):
    """One override rule in a plan file."""

    locus: int = Field(ge=0, description="Locus the trigger pair is read from")
    allele0: int = Field(description="First allele of the trigger pair")
    allele1: int = Field(description="Second allele of the trigger pair")
    chance: float = Field(ge=0.0, le=1.0, description="Probability the rule fires")
    override: GenomeRecord = Field(description="Genome substituted for the parent")


class BreedingPlan(BaseModel):
    """Parents and mutation rules for one sampling run."""

    locus_count: int = Field(ge=0, description="Loci per genome")
    parent_a: GenomeRecord = Field(description="Parent supplying active alleles")
    parent_b: GenomeRecord = Field(description="Parent supplying inactive alleles")
    mutations: list[MutationSpec] = Field(default_factory=list, description="Override rules")
    seed: int | None = Field(default=None, description="Seed used when --seed is not given")


def load_plan(path: Path) -> BreedingPlan:
    """Read and validate a breeding plan from a JSON file."""
    return BreedingPlan.model_validate_json(path.read_text(encoding="utf-8"))


def build_combiner(plan: BreedingPlan, seed: int | None) -> GeneticCombiner:
    """Create a combiner for the plan and register its mutations.

    Args:
        plan: Validated breeding plan.
        seed: Seed override. Falls back to the plan's seed, then to settings.

    Returns:
        GeneticCombiner ready to combine the plan's parents.
    """
    if seed is None:
        seed = plan.seed if plan.seed is not None else get_settings().seed
    combiner = GeneticCombiner(locus_count=plan.locus_count, seed=seed)
    for spec in plan.mutations:
        combiner.register_mutation(
            spec.locus,
            spec.allele0,
            spec.allele1,
            spec.override.to_genome(),
            spec.chance,
        )
    return combiner


def _format_genome(genome: Genome, format_type: str) -> str:
    if format_type == "json":
        return json.dumps(genome.to_dict())
    active = " ".join(str(a) for a in genome.active_alleles)
    inactive = " ".join(str(a) for a in genome.inactive_alleles)
    return f"active: {active} | inactive: {inactive}"


def main(args: list[str] | None = None) -> int:
    """Run the Heredity CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for an invalid plan).
    """
    parser = argparse.ArgumentParser(
        prog="heredity",
        description="Heredity - sample offspring genomes from two parents",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser("sample", help="Draw offspring from a breeding plan")
    sample.add_argument("plan", type=Path, help="Path to a JSON breeding plan")
    sample.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of offspring to draw (default: 10)",
    )
    sample.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible draws (default: plan seed or HEREDITY_SEED)",
    )
    sample.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    parsed = parser.parse_args(args)
    configure_logging()

    try:
        plan = load_plan(parsed.plan)
        combiner = build_combiner(plan, parsed.seed)
        offspring = combiner.combine(plan.parent_a.to_genome(), plan.parent_b.to_genome())
    except (OSError, ValidationError, GeneticsError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.debug("Drawing %d offspring from %s", parsed.count, parsed.plan)
    for genome in islice(offspring, max(parsed.count, 0)):
        print(_format_genome(genome, parsed.format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
