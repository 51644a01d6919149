"""Configuration loading for the combination engine.

Pydantic-based settings read from environment variables and .env files.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class CombinerSettings(BaseSettings):
    """Settings for building a GeneticCombiner.

    Environment Variables:
        HEREDITY_LOCUS_COUNT: Number of loci per genome (default: 0)
        HEREDITY_SEED: Seed for reproducible combination (default: unset,
            meaning a fresh seed per process)

    Example:
        >>> settings = CombinerSettings()  # Loads from environment
        >>> settings = CombinerSettings(locus_count=8, seed=42)
    """

    model_config = SettingsConfigDict(
        env_prefix="HEREDITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locus_count: int = Field(
        default=0,
        ge=0,
        description="Number of loci in every genome the engine combines",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the engine's random source",
    )


@lru_cache
def get_settings() -> CombinerSettings:
    """Get cached settings singleton.

    To reload, call get_settings.cache_clear() first.

    Returns:
        CombinerSettings loaded from the environment.
    """
    settings = CombinerSettings()
    logger.info("Loaded combiner settings: %r", settings)
    return settings
