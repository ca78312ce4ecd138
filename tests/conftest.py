"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from overlaytool.config import Settings
from overlaytool.geometry import ROI, Color, OverlayConfig
from overlaytool.utils.logging import clear_run_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset run context between tests."""
    clear_run_context()
    yield
    clear_run_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def white() -> Color:
    """The default guide color."""
    return Color(r=1.0, g=1.0, b=1.0)


@pytest.fixture
def default_config() -> OverlayConfig:
    """The configuration the CLI uses when no flags are given."""
    return OverlayConfig()


@pytest.fixture
def landscape_frame() -> ROI:
    """A 1000x500 frame at the origin."""
    return ROI(xbegin=0, xend=1000, ybegin=0, yend=500)
