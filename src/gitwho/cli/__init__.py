"""CLI entry point for gitwho.

A single Typer command that forwards every argument to ``git commit``.
UI modules are loaded lazily so the plain pass-through stays fast.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="gitwho",
    help="Pick a git email before committing",
    add_completion=False,
)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        # --help belongs to git commit
        "help_option_names": [],
    }
)
def main(ctx: typer.Context) -> None:
    """Run git commit, picking an email first when signing off."""
    from gitwho.cli.commands import cmd_commit

    raise typer.Exit(cmd_commit(list(ctx.args)))


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
