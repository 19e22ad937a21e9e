"""Debug logging utility."""

import sys
from datetime import datetime

from gitwho.utils.config import Config, get_gitwho_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_gitwho_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        gitwho_dir = get_gitwho_dir()
        gitwho_dir.mkdir(parents=True, exist_ok=True)
        with open(gitwho_dir / "debug.log", "a") as f:
            f.write(line + "\n")
    except Exception:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Only the log file is written: the picker owns the screen while it runs.

    Args:
        category: Category like 'config', 'terminal', 'picker', 'commit'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[gitwho:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'terminal', 'commit'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[gitwho:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently
