"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional


def get_gitwho_dir() -> Path:
    """Get the gitwho data directory (XDG-compliant)."""
    if env_dir := os.environ.get("GITWHO_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "gitwho"


class Config:
    """Application configuration."""

    def __init__(self, gitwho_dir: Optional[Path] = None):
        """Load config from directory."""
        self.gitwho_dir = gitwho_dir or get_gitwho_dir()
        self._config_file = self.gitwho_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from gitwho.utils.constants import (
            DEFAULT_GIT_COMMAND,
            DEFAULT_POLL_INTERVAL,
            DEFAULT_TITLE,
        )

        # Set defaults
        self.gitconfig: Optional[str] = None  # None means ~/.gitconfig
        self.title = DEFAULT_TITLE
        self.poll_interval = DEFAULT_POLL_INTERVAL
        self.git_command = DEFAULT_GIT_COMMAND
        self.debug = False
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                if not isinstance(data, dict):
                    raise ValueError("config.json must hold an object")
                self.gitconfig = data.get("gitconfig")
                self.title = data.get("title", DEFAULT_TITLE)
                self.poll_interval = float(
                    data.get("poll_interval", DEFAULT_POLL_INTERVAL)
                )
                self.git_command = data.get("git_command", DEFAULT_GIT_COMMAND)
                self.debug = data.get("debug", False)
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError, TypeError, ValueError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell GITWHO_* vars."""
        prefix = "GITWHO_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both GITWHO_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, (int, float)):
                    try:
                        setattr(self, attr_name, type(current)(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    @property
    def gitconfig_path(self) -> Path:
        """Path of the git configuration file candidates are read from."""
        from gitwho.core.candidates import get_gitconfig_path

        if self.gitconfig:
            return Path(self.gitconfig).expanduser()
        return get_gitconfig_path()
