"""Main CLI application entry point."""

from __future__ import annotations

import typer

from valuecast.cli.commands import cast, guess

app = typer.Typer(
    name="valuecast",
    help="Guess and cast loosely typed values.",
    no_args_is_help=True,
)

# Register commands
app.command()(guess.guess)
app.command()(cast.cast)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
