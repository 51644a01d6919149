"""Shared pytest configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from heredity.config import get_settings


@pytest.fixture(autouse=True)
def reset_heredity_logging() -> Iterator[None]:
    """Undo configure_logging() so caplog sees records in later tests."""
    logger = logging.getLogger("heredity")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
