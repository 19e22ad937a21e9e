"""Extract selectable email addresses from a git configuration file."""

import re
from pathlib import Path
from typing import Optional

from gitwho.utils.debug import debug

# Commented-out entries count too, so several identities can live in one file
EMAIL_PATTERN = re.compile(r"^[#\s]*email\s*=\s*(\S+@\S+)", re.IGNORECASE)


def get_gitconfig_path() -> Path:
    """Get the per-user git configuration file."""
    return Path.home() / ".gitconfig"


def extract_candidates(text: str) -> list[str]:
    """Collect unique email values from config text, sorted.

    Lines that do not look like ``email = user@host`` are ignored.
    """
    emails = set()
    for line in text.splitlines():
        match = EMAIL_PATTERN.match(line)
        if match:
            emails.add(match.group(1))
    return sorted(emails)


def load_candidates(path: Optional[Path] = None) -> list[str]:
    """Read candidates from a config file.

    A missing or unreadable file yields an empty list.
    """
    path = path or get_gitconfig_path()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        debug("config", "gitconfig not readable", path=path, error=e)
        return []

    candidates = extract_candidates(text)
    debug("config", "candidates loaded", path=path, count=len(candidates))
    return candidates
