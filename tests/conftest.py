"""Pytest configuration and fixtures."""

import os

import pytest

# Keep test output free of log lines
os.environ.setdefault("DMAUTOMATION_DISABLE_CONSOLE_LOGGING", "1")

from dmautomation.config import reset_settings  # noqa: E402
from dmautomation.mock import RecordingScriptExecutor  # noqa: E402
from dmautomation.model import StaticElementDirectory  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test from default settings."""
    for name in list(os.environ):
        if name.startswith("DMAUTOMATION_") and name != "DMAUTOMATION_DISABLE_CONSOLE_LOGGING":
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def executor():
    """Provide a recording executor answering with success."""
    return RecordingScriptExecutor()


@pytest.fixture
def directory():
    """Provide an element directory with a few known elements."""
    return StaticElementDirectory({"E1": "7/101", "Router": "5/12", "Encoder 2": "9/3"})
