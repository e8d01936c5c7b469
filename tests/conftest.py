"""Shared pytest configuration for bemkit tests."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from bemkit.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default settings."""
    for name in ("BEM_LOG_LEVEL", "BEM_DEFAULT_FROZEN", "BEM_STRICT_CLASS_NAMES"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
