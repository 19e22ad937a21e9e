"""Shared pytest fixtures."""

import os
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_gitwho_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/gitwho directory."""
    gitwho_dir = temp_dir / ".gitwho"
    gitwho_dir.mkdir()
    monkeypatch.setenv("GITWHO_DIR", str(gitwho_dir))
    return gitwho_dir


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real config and debug log."""
    from gitwho.utils.debug import reload_config

    for key in list(os.environ):
        if key.startswith("GITWHO_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GITWHO_DIR", str(tmp_path / "gitwho-home"))
    reload_config()
    yield
    reload_config()
