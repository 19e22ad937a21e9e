"""Custom exceptions for gitwho.

This module defines a small hierarchy of exceptions:
- GitwhoError: Base exception for all gitwho errors
- TerminalError: The terminal could not be taken over for the picker
- CommitError: The downstream git process could not be started
"""


class GitwhoError(Exception):
    """Base exception for all gitwho errors.

    All gitwho-specific exceptions inherit from this class, allowing
    callers to catch all gitwho errors with a single except clause.
    """

    pass


class TerminalError(GitwhoError):
    """Terminal acquisition errors.

    Raised before anything is drawn, such as when:
    - stdin is not an interactive terminal
    - switching to raw input fails
    - another picker session is already active
    """

    pass


class CommitError(GitwhoError):
    """Downstream commit errors.

    Raised when the git executable cannot be spawned. Never retried.
    """

    pass
