"""Single-choice selector state machine.

The selector is a list of candidates plus a cursor. Every key press is
reduced to an Event, and SelectorState.step() turns (state, event) into
either the next state or a terminal Outcome:

- MOVE_DOWN / MOVE_UP move the cursor, wrapping at both ends
- CONFIRM ends with Confirmed(items[cursor])
- CANCEL ends with Cancelled()
- IGNORE leaves the state as it is
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class Event(Enum):
    """Selector input events."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Confirmed:
    """The user picked a candidate."""

    candidate: str


@dataclass(frozen=True)
class Cancelled:
    """The user left without picking."""


Outcome = Union[Confirmed, Cancelled]


def is_outcome(value: object) -> bool:
    """Check whether a step result ends the session."""
    return isinstance(value, (Confirmed, Cancelled))


@dataclass(frozen=True)
class SelectorState:
    """Candidates and the highlighted position.

    Attributes:
        items: Candidates in display order, never empty
        cursor: Index of the highlighted candidate
    """

    items: tuple[str, ...]
    cursor: int = 0

    def __post_init__(self):
        if not self.items:
            raise ValueError("selector needs at least one item")
        if not 0 <= self.cursor < len(self.items):
            raise ValueError(
                f"cursor {self.cursor} out of range for {len(self.items)} items"
            )
        # Accept any sequence but store an immutable one
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def current(self) -> str:
        """Candidate under the cursor."""
        return self.items[self.cursor]

    def step(self, event: Event) -> Union["SelectorState", Outcome]:
        """Apply one event.

        Returns:
            The next state, or an Outcome when the session is over
        """
        count = len(self.items)
        if event is Event.MOVE_DOWN:
            return replace(self, cursor=(self.cursor + 1) % count)
        elif event is Event.MOVE_UP:
            cursor = count - 1 if self.cursor == 0 else self.cursor - 1
            return replace(self, cursor=cursor)
        elif event is Event.CONFIRM:
            return Confirmed(self.current)
        elif event is Event.CANCEL:
            return Cancelled()
        return self
