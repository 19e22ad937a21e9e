"""Interactive email picker loop."""

from typing import Optional, Sequence

import readchar

from gitwho.cli.ui.panels import build_panel
from gitwho.cli.ui.terminal import TerminalSession
from gitwho.core.selector import Event, Outcome, SelectorState, is_outcome
from gitwho.utils.constants import DEFAULT_POLL_INTERVAL, DEFAULT_TITLE
from gitwho.utils.debug import debug

# Enter arrives as CR in raw mode and LF when the tty translates it
ENTER_KEYS = (readchar.key.ENTER, "\r", "\n")


def translate_key(key: str) -> Event:
    """Map a readchar key to a selector event."""
    if key == readchar.key.DOWN:
        return Event.MOVE_DOWN
    elif key == readchar.key.UP:
        return Event.MOVE_UP
    elif key in ENTER_KEYS:
        return Event.CONFIRM
    elif key == "q":
        return Event.CANCEL
    return Event.IGNORE


def run_selector(
    items: Sequence[str],
    title: str = DEFAULT_TITLE,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    session: Optional[TerminalSession] = None,
) -> Outcome:
    """Let the user pick one item.

    Blocks until the user confirms or cancels. The screen is redrawn at
    least every ``poll_interval`` seconds.

    Args:
        items: Candidates, at least one
        title: Panel title
        poll_interval: Longest wait for a key before redrawing
        session: Terminal session to draw in (default: a new one)

    Returns:
        Confirmed with the picked item, or Cancelled

    Raises:
        ValueError: If items is empty
        TerminalError: If the terminal cannot be acquired
    """
    state = SelectorState(tuple(items))
    with session or TerminalSession() as term:
        while True:
            term.draw(build_panel(state, title))

            key = term.poll_key(poll_interval)
            if key is None:
                continue

            event = translate_key(key)
            result = state.step(event)
            if is_outcome(result):
                debug("picker", "finished", outcome=result)
                return result
            state = result
