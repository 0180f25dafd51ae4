"""
Shared test fixtures for the fp-containers test suite.

Provides a fresh in-memory database and default Reader demo settings, and
routes structlog output to stderr so stdout assertions only see demo output.
"""

from __future__ import annotations

import pytest

from container_demos.adapters.in_memory import InMemoryDatabase
from container_demos.config import ReaderDemoSettings
from container_demos.main import configure_structlog


@pytest.fixture(autouse=True)
def _quiet_structlog() -> None:
    configure_structlog("WARNING")


@pytest.fixture()
def database() -> InMemoryDatabase:
    """Return an empty in-memory database."""
    return InMemoryDatabase()


@pytest.fixture()
def reader_settings() -> ReaderDemoSettings:
    """Return the default Reader demo settings (account 1, 6.0 × 7.0)."""
    return ReaderDemoSettings()
