"""Tests for the heredity command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from heredity.cli import BreedingPlan, build_combiner, load_plan, main


@pytest.fixture
def plan_data() -> dict:
    return {
        "locus_count": 2,
        "parent_a": {"active_alleles": [1, 5], "inactive_alleles": [3, 6]},
        "parent_b": {"active_alleles": [2, 7], "inactive_alleles": [4, 8]},
        "mutations": [
            {
                "locus": 0,
                "allele0": 2,
                "allele1": 1,
                "chance": 1.0,
                "override": {"active_alleles": [9, 9], "inactive_alleles": [9, 9]},
            }
        ],
        "seed": 5,
    }


@pytest.fixture
def plan_file(tmp_path: Path, plan_data: dict) -> Path:
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan_data))
    return path


class TestLoadPlan:
    """Tests for plan loading and combiner building."""

    def test_loads_plan(self, plan_file: Path) -> None:
        plan = load_plan(plan_file)

        assert plan.locus_count == 2
        assert plan.parent_a.to_genome().active_alleles == [1, 5]
        assert len(plan.mutations) == 1

    def test_declared_locus_count_kept(self) -> None:
        """An explicit locus_count is kept even when it disagrees with the alleles."""
        plan = BreedingPlan.model_validate(
            {
                "locus_count": 2,
                "parent_a": {"active_alleles": [1], "inactive_alleles": [1], "locus_count": 2},
                "parent_b": {"active_alleles": [1, 2], "inactive_alleles": [1, 2]},
            }
        )

        assert not plan.parent_a.to_genome().is_valid()

    def test_build_combiner_registers_mutations(self, plan_file: Path) -> None:
        combiner = build_combiner(load_plan(plan_file), seed=None)

        assert len(combiner.registry) == 1
        assert combiner.random.seed == 5

    def test_explicit_seed_wins(self, plan_file: Path) -> None:
        combiner = build_combiner(load_plan(plan_file), seed=77)

        assert combiner.random.seed == 77


class TestMain:
    """Tests for the CLI entry point."""

    def test_sample_text(self, plan_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["sample", str(plan_file), "--count", "3"])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert len(lines) == 3
        assert all(line == "active: 9 9 | inactive: 9 9" for line in lines)

    def test_sample_json(
        self, tmp_path: Path, plan_data: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        plan_data["mutations"] = []
        path = tmp_path / "plain.json"
        path.write_text(json.dumps(plan_data))

        exit_code = main(["sample", str(path), "--count", "20", "--format", "json"])

        genomes = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert exit_code == 0
        assert len(genomes) == 20
        for genome in genomes:
            assert genome["locus_count"] == 2
            assert genome["active_alleles"][0] in (1, 3)
            assert genome["inactive_alleles"][1] in (7, 8)

    def test_same_seed_same_output(
        self, plan_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["sample", str(plan_file), "--seed", "3", "--format", "json"])
        first = capsys.readouterr().out
        main(["sample", str(plan_file), "--seed", "3", "--format", "json"])

        assert capsys.readouterr().out == first

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["sample", str(tmp_path / "nope.json")])

        assert exit_code == 1
        assert "error:" in capsys.readouterr().err

    def test_invalid_plan(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"locus_count": -1}))

        assert main(["sample", str(path)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_mismatched_parents(
        self, tmp_path: Path, plan_data: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        plan_data["parent_b"] = {"active_alleles": [2], "inactive_alleles": [4]}
        path = tmp_path / "mismatch.json"
        path.write_text(json.dumps(plan_data))

        assert main(["sample", str(path)]) == 1
        assert "loci" in capsys.readouterr().err

    def test_out_of_range_mutation_locus(
        self, tmp_path: Path, plan_data: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        plan_data["mutations"][0]["locus"] = 5
        path = tmp_path / "locus.json"
        path.write_text(json.dumps(plan_data))

        assert main(["sample", str(path)]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])
