"""Command implementation for the git commit wrapper."""

from typing import Optional, Sequence

from rich.markup import escape

from gitwho.cli.ui import console, err_console
from gitwho.core.selector import Cancelled
from gitwho.utils.config import Config
from gitwho.utils.constants import SIGNOFF_FLAGS
from gitwho.utils.debug import debug
from gitwho.utils.exceptions import GitwhoError


def wants_signoff(args: Sequence[str]) -> bool:
    """Check whether the picker was requested."""
    return any(arg in SIGNOFF_FLAGS for arg in args)


def cmd_commit(args: Sequence[str], config: Optional[Config] = None) -> int:
    """Pick an email if signing off, then run git commit.

    Returns:
        Exit code for the process
    """
    from gitwho.cli.ui.picker import run_selector
    from gitwho.core.candidates import load_candidates
    from gitwho.core.commit import run_commit

    config = config or Config()
    debug("cli", "invoked", args=list(args))

    try:
        email = None
        if wants_signoff(args):
            gitconfig_path = config.gitconfig_path
            candidates = load_candidates(gitconfig_path)
            if not candidates:
                path = escape(str(gitconfig_path))
                err_console.print(f"[red]No email addresses found in {path}.[/red]")
                return 0

            outcome = run_selector(
                candidates,
                title=config.title,
                poll_interval=config.poll_interval,
            )
            if isinstance(outcome, Cancelled):
                console.print("[yellow]Cancelled.[/yellow]")
                return 0

            email = outcome.candidate
            console.print(f"[green]Using email:[/green] {escape(email)}")

        return run_commit(args, email=email, git=config.git_command)
    except GitwhoError as e:
        debug("cli", "failed", error=e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
