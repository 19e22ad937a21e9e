"""gitwho - Pick a git identity before committing."""

from importlib.metadata import version

__version__ = version("gitwho")

from gitwho.core.candidates import extract_candidates, load_candidates
from gitwho.core.selector import Cancelled, Confirmed, Event, SelectorState

__all__ = [
    "Cancelled",
    "Confirmed",
    "Event",
    "SelectorState",
    "extract_candidates",
    "load_candidates",
]
