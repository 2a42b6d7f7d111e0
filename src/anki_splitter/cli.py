"""Command-line interface for anki-splitter."""

from __future__ import annotations

import typer

from .cli_commands import score_commands, split_commands

app = typer.Typer(
    name="anki-splitter",
    help="Split multi-concept Anki cards into atomic cards.",
    no_args_is_help=True,
)

split_commands.register(app)
score_commands.register(app)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
