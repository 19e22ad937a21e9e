"""Build and run the downstream git commit."""

import os
import subprocess
from typing import Mapping, Optional, Sequence

from gitwho.utils.constants import DEFAULT_GIT_COMMAND, GitEnv
from gitwho.utils.debug import debug
from gitwho.utils.exceptions import CommitError


def build_commit_command(
    args: Sequence[str], git: str = DEFAULT_GIT_COMMAND
) -> list[str]:
    """Build the git argv, adding ``commit`` unless the user already did."""
    command = [git]
    if not args or args[0] != "commit":
        command.append("commit")
    command.extend(args)
    return command


def commit_env(
    email: Optional[str], base: Optional[Mapping[str, str]] = None
) -> dict[str, str]:
    """Environment for the commit process.

    Returns a copy of ``base`` (default: the current environment) with the
    author and committer email set when an email was picked.
    """
    env = dict(os.environ if base is None else base)
    if email is not None:
        env[GitEnv.AUTHOR_EMAIL] = email
        env[GitEnv.COMMITTER_EMAIL] = email
    return env


def run_commit(
    args: Sequence[str],
    email: Optional[str] = None,
    git: str = DEFAULT_GIT_COMMAND,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run git commit with inherited stdio and wait for it.

    Args:
        args: Arguments passed through from the command line
        email: Identity to commit as, or None to leave git's default
        git: Git executable
        env: Base environment (default: the current environment)

    Returns:
        Exit code to mirror; a child killed by signal N maps to 128 + N

    Raises:
        CommitError: If the git executable cannot be started
    """
    command = build_commit_command(args, git)
    debug("commit", "running", command=command, email=email)

    try:
        completed = subprocess.run(command, env=commit_env(email, env))
    except OSError as e:
        raise CommitError(f"Failed to run {command[0]}: {e}") from e

    returncode = completed.returncode
    if returncode < 0:
        returncode = 128 - returncode
    debug("commit", "finished", returncode=returncode)
    return returncode
