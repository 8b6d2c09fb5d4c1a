"""Top-level pytest configuration for the jolt framework."""

import os

import pytest

# Import for side effects so the DI error codes are registered
import jolt.di.errors  # noqa: F401
from jolt.config import ServiceSettings
from jolt.di import ServiceCollection

JOLT_ENV_PREFIXES = ("JOLT_LOGGING_", "JOLT_SERVICES_")


def pytest_configure(config):
    """Configure pytest to recognize our custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (deselect with '-m "
        "not integration')",
    )


@pytest.fixture(autouse=True)
def clear_jolt_env(monkeypatch):
    """Keep settings tests independent of the developer's environment."""
    for key in list(os.environ):
        if key.startswith(JOLT_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def services() -> ServiceCollection:
    return ServiceCollection()


@pytest.fixture
def settings() -> ServiceSettings:
    return ServiceSettings(detect_cycles=True, trace_activations=False)
