"""Tests for configuration module."""

import json
from pathlib import Path

import pytest

from gitwho.utils.config import Config, get_gitwho_dir


def test_config_default_values(mock_gitwho_dir):
    """Config should have sensible defaults."""
    config = Config(mock_gitwho_dir)

    assert config.gitconfig is None
    assert config.title == "Select Git Email"
    assert config.poll_interval == 0.2
    assert config.git_command == "git"
    assert config.debug is False


def test_config_loads_from_file(mock_gitwho_dir):
    """Config should load values from config.json."""
    (mock_gitwho_dir / "config.json").write_text(
        json.dumps(
            {
                "gitconfig": "/tmp/other.gitconfig",
                "title": "Who are you?",
                "poll_interval": 0.5,
                "debug": True,
            }
        )
    )

    config = Config(mock_gitwho_dir)

    assert config.gitconfig_path == Path("/tmp/other.gitconfig")
    assert config.title == "Who are you?"
    assert config.poll_interval == 0.5
    assert config.debug is True


def test_config_invalid_json_uses_defaults(mock_gitwho_dir):
    (mock_gitwho_dir / "config.json").write_text("{not json")

    config = Config(mock_gitwho_dir)

    assert config.title == "Select Git Email"


@pytest.mark.parametrize("content", ["[]", "\"x\"", "42", "null"])
def test_config_non_object_json_uses_defaults(mock_gitwho_dir, content):
    """Valid JSON that is not an object is ignored like a broken file."""
    (mock_gitwho_dir / "config.json").write_text(content)

    config = Config(mock_gitwho_dir)

    assert config.title == "Select Git Email"
    assert config.git_command == "git"


def test_config_get_gitwho_dir_from_env(temp_dir, monkeypatch):
    """Config should use GITWHO_DIR env var if set."""
    custom_dir = temp_dir / "custom"
    monkeypatch.setenv("GITWHO_DIR", str(custom_dir))

    assert get_gitwho_dir() == custom_dir


def test_config_default_gitwho_dir(monkeypatch):
    """Config should default to ~/.config/gitwho (XDG-compliant)."""
    monkeypatch.delenv("GITWHO_DIR", raising=False)

    assert get_gitwho_dir() == Path.home() / ".config" / "gitwho"


def test_gitconfig_path_defaults_to_home(mock_gitwho_dir, temp_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(temp_dir))

    assert Config(mock_gitwho_dir).gitconfig_path == temp_dir / ".gitconfig"


def test_gitconfig_path_expands_user(mock_gitwho_dir, temp_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.setenv("GITWHO_GITCONFIG", "~/alt.gitconfig")

    assert Config(mock_gitwho_dir).gitconfig_path == temp_dir / "alt.gitconfig"


def test_shell_env_overrides(mock_gitwho_dir, monkeypatch):
    """GITWHO_* variables are coerced to the setting's type."""
    monkeypatch.setenv("GITWHO_DEBUG", "yes")
    monkeypatch.setenv("GITWHO_POLL_INTERVAL", "0.05")
    monkeypatch.setenv("GITWHO_GIT_COMMAND", "/opt/git/bin/git")

    config = Config(mock_gitwho_dir)

    assert config.debug is True
    assert config.poll_interval == 0.05
    assert config.git_command == "/opt/git/bin/git"


def test_config_env_section(mock_gitwho_dir):
    """The env section accepts both GITWHO_FOO and FOO keys."""
    (mock_gitwho_dir / "config.json").write_text(
        json.dumps({"env": {"GITWHO_TITLE": "Pick", "debug": "1"}})
    )

    config = Config(mock_gitwho_dir)

    assert config.title == "Pick"
    assert config.debug is True


def test_shell_env_beats_config_env(mock_gitwho_dir, monkeypatch):
    (mock_gitwho_dir / "config.json").write_text(
        json.dumps({"env": {"title": "From file"}})
    )
    monkeypatch.setenv("GITWHO_TITLE", "From shell")

    assert Config(mock_gitwho_dir).title == "From shell"


def test_bad_number_override_ignored(mock_gitwho_dir, monkeypatch):
    monkeypatch.setenv("GITWHO_POLL_INTERVAL", "soon")

    assert Config(mock_gitwho_dir).poll_interval == 0.2


def test_unknown_override_ignored(mock_gitwho_dir, monkeypatch):
    monkeypatch.setenv("GITWHO_NOT_A_SETTING", "x")

    assert not hasattr(Config(mock_gitwho_dir), "not_a_setting")
