"""Tests for combiner settings loading."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from heredity.config import CombinerSettings, get_settings


class TestCombinerSettings:
    """Tests for CombinerSettings."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = CombinerSettings(_env_file=None)

        assert settings.locus_count == 0
        assert settings.seed is None

    def test_reads_environment(self) -> None:
        with patch.dict(os.environ, {"HEREDITY_LOCUS_COUNT": "12", "HEREDITY_SEED": "99"}):
            settings = CombinerSettings(_env_file=None)

        assert settings.locus_count == 12
        assert settings.seed == 99

    def test_explicit_values_override_environment(self) -> None:
        with patch.dict(os.environ, {"HEREDITY_LOCUS_COUNT": "12"}):
            settings = CombinerSettings(_env_file=None, locus_count=3)

        assert settings.locus_count == 3

    def test_negative_locus_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CombinerSettings(_env_file=None, locus_count=-1)

    def test_reads_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("HEREDITY_LOCUS_COUNT=5\nHEREDITY_SEED=8\n")

        with patch.dict(os.environ, {}, clear=True):
            settings = CombinerSettings(_env_file=env_file)

        assert settings.locus_count == 5
        assert settings.seed == 8


class TestGetSettings:
    """Tests for the cached settings singleton."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self) -> None:
        with patch.dict(os.environ, {"HEREDITY_SEED": "1"}):
            first = get_settings()
        get_settings.cache_clear()
        with patch.dict(os.environ, {"HEREDITY_SEED": "2"}):
            second = get_settings()

        assert first.seed == 1
        assert second.seed == 2
