"""
Acceptance test fixtures — isolate the command line from the host environment.

The CLI loads AppSettings from environment variables; every acceptance test
starts from a clean slate so only the variables it sets are visible.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LOG_LEVEL and READER__* variables for the duration of a test."""
    for name in list(os.environ):
        if name == "LOG_LEVEL" or name.startswith("READER__"):
            monkeypatch.delenv(name)
