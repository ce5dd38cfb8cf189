"""Top-level pytest configuration for conform."""

import logging

import pytest

# Import modules for their side effects so error registries are populated
import conform.errors.base
import conform.template.errors

from conform.config.settings import TemplateSettings
from conform.logging.config import LoggingSettings
from conform.logging.logger import ROOT_LOGGER_NAME, configure_logging


def pytest_configure(config):
    """Configure pytest to recognize our custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (deselect with '-m "
        "not integration')",
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CONFORM_* variables from the host environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("CONFORM_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def template_settings() -> TemplateSettings:
    """Default template settings."""
    return TemplateSettings()


@pytest.fixture
def captured_logging():
    """Route conform records to the root logger so caplog can see them."""
    configure_logging(
        LoggingSettings(level="DEBUG", console_enabled=False, propagate=True)
    )
    yield logging.getLogger(ROOT_LOGGER_NAME)
    configure_logging(LoggingSettings(console_enabled=False))
