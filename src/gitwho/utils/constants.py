"""Constants used throughout gitwho."""

# Picker title shown in the panel border
DEFAULT_TITLE = "Select Git Email"

# Redraw tick while waiting for a key (in seconds)
DEFAULT_POLL_INTERVAL = 0.2

# Downstream executable
DEFAULT_GIT_COMMAND = "git"

# Flags that trigger the email picker
SIGNOFF_FLAGS = ("-s", "--signoff")


# Environment variables handed to the commit process
class GitEnv:
    """Git identity environment variable names."""

    AUTHOR_EMAIL = "GIT_AUTHOR_EMAIL"
    COMMITTER_EMAIL = "GIT_COMMITTER_EMAIL"
