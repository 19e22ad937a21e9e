"""Exclusive terminal control for the picker.

A TerminalSession puts stdin into raw (cbreak) input mode and switches the
display to the alternate screen. It is meant to be used as a context
manager so the terminal is restored on every way out of the picker.
"""

import codecs
import os
import select
import sys
import termios
import tty
from typing import Optional

from rich.console import Console, RenderableType
from rich.live import Live

from gitwho.cli.ui.panels import console as default_console
from gitwho.utils.debug import debug, log_error
from gitwho.utils.exceptions import TerminalError

_active_session: Optional["TerminalSession"] = None

ESC = "\x1b"

# Bytes taken from the tty per read; a burst of keys is split afterwards
READ_SIZE = 32


def split_keys(data: str) -> tuple[list[str], str]:
    """Split raw terminal input into keys.

    CSI (``ESC [``) and SS3 (``ESC O``) sequences stay together as one key,
    matching the readchar.key constants. Anything else is one character.

    Returns:
        Complete keys, and a trailing incomplete escape sequence
    """
    keys = []
    i = 0
    while i < len(data):
        if data[i] != ESC:
            keys.append(data[i])
            i += 1
        elif i + 1 == len(data):
            return keys, data[i:]
        elif data[i + 1] == "O":
            if i + 2 >= len(data):
                return keys, data[i:]
            keys.append(data[i : i + 3])
            i += 3
        elif data[i + 1] == "[":
            end = i + 2
            # Parameter bytes run until a final byte in @..~
            while end < len(data) and not "\x40" <= data[end] <= "\x7e":
                end += 1
            if end == len(data):
                return keys, data[i:]
            keys.append(data[i : end + 1])
            i = end + 1
        else:
            keys.append(ESC)
            i += 1
    return keys, ""


class TerminalSession:
    """Raw input plus alternate screen, acquired and released as a unit."""

    def __init__(self, console: Optional[Console] = None, stdin=None):
        self.console = console or default_console
        self._stdin = stdin or sys.stdin
        self._fd: Optional[int] = None
        self._saved_attrs = None
        self._live: Optional[Live] = None
        self._pending: list[str] = []
        self._partial = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def active(self) -> bool:
        return self._live is not None

    def acquire(self) -> "TerminalSession":
        """Take over the terminal.

        Raises:
            TerminalError: If stdin is not a terminal, raw mode cannot be
                entered, or another session is active. Nothing is drawn.
        """
        global _active_session
        if _active_session is not None:
            raise TerminalError("Another terminal session is already active")
        if not self._stdin.isatty():
            raise TerminalError("Not an interactive terminal")

        try:
            fd = self._stdin.fileno()
            saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (OSError, termios.error) as e:
            raise TerminalError(f"Could not enter raw mode: {e}") from e
        self._fd = fd
        self._saved_attrs = saved_attrs

        live = Live(
            "",
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        try:
            live.start()
        except Exception as e:
            self._restore_input()
            raise TerminalError(f"Could not switch to alternate screen: {e}") from e
        self._live = live
        _active_session = self
        debug("terminal", "acquired", fd=fd)
        return self

    def release(self) -> None:
        """Give the terminal back. Safe to call more than once.

        Failures are logged and ignored so an error already unwinding
        is never replaced.
        """
        global _active_session
        live, self._live = self._live, None
        if live is not None:
            try:
                live.stop()
            except Exception as e:
                log_error("terminal", "Failed to leave alternate screen", e)
        self._restore_input()
        try:
            self.console.show_cursor(True)
        except Exception as e:
            log_error("terminal", "Failed to show cursor", e)
        if _active_session is self:
            _active_session = None
            debug("terminal", "released")

    def _restore_input(self) -> None:
        saved_attrs, self._saved_attrs = self._saved_attrs, None
        if saved_attrs is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, saved_attrs)
        except (OSError, termios.error) as e:
            log_error("terminal", "Failed to restore terminal mode", e)

    def __enter__(self) -> "TerminalSession":
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def draw(self, renderable: RenderableType) -> None:
        """Replace the screen contents."""
        if self._live is None:
            raise TerminalError("Terminal session is not active")
        self._live.update(renderable, refresh=True)

    def poll_key(self, timeout: float) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a key.

        Input is read straight from the session's fd, so keys typed in a
        burst are queued and returned one per call.

        Returns:
            The key, comparable with the readchar.key constants, or None on
            timeout
        """
        while not self._pending:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            if not ready:
                if self._partial:
                    # A lone ESC or a cut-off sequence: hand over what we have
                    self._pending.append(self._partial)
                    self._partial = ""
                    break
                return None
            chunk = os.read(self._fd, READ_SIZE)
            if not chunk:
                raise TerminalError("Terminal input closed")
            data = self._partial + self._decoder.decode(chunk)
            keys, self._partial = split_keys(data)
            self._pending.extend(keys)
        return self._pending.pop(0)
