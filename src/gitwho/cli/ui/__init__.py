"""UI components for the interactive picker."""

from gitwho.cli.ui.panels import build_panel, console, err_console
from gitwho.cli.ui.picker import run_selector, translate_key
from gitwho.cli.ui.terminal import TerminalSession

__all__ = [
    "TerminalSession",
    "build_panel",
    "console",
    "err_console",
    "run_selector",
    "translate_key",
]
