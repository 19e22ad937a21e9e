"""Core modules: candidate extraction, selector state, commit delegation."""

from gitwho.core.candidates import extract_candidates, load_candidates
from gitwho.core.selector import (
    Cancelled,
    Confirmed,
    Event,
    Outcome,
    SelectorState,
    is_outcome,
)

__all__ = [
    "Cancelled",
    "Confirmed",
    "Event",
    "Outcome",
    "SelectorState",
    "extract_candidates",
    "is_outcome",
    "load_candidates",
]
