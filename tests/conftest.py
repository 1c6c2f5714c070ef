"""
Pytest configuration for insight-cli.

Provides fixtures for:
- Settings override and settings-cache isolation
- A fixed clock for deterministic report timestamps
- A Typer CLI runner
- Root logger isolation (the CLI reconfigures logging on every invocation)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Generator

import pytest
from typer.testing import CliRunner

from insight_cli.config import Settings, get_settings

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """
    Drop the cached Settings so env overrides made by a test are picked up
    and do not leak into the next one.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolate_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        author="Test Author",
        version="9.9.9",
        log_level="DEBUG",
    )


@pytest.fixture
def fixed_now() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
