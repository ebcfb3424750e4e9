"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import numpy as np
import pytest

from dungen_geometry.config import Settings
from dungen_geometry.sampling.rng import reset_default_rng
from dungen_geometry.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        SAMPLING_SEED=1234,
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so sampling tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def seeded_default_rng() -> Iterator[np.random.Generator]:
    """Replace the shared default generator with a seeded one for one test."""
    yield reset_default_rng(seed=7)
    reset_default_rng()
