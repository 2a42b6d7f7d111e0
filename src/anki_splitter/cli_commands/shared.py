"""Shared utilities for CLI commands."""

from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from anki_splitter.config import Config, load_config, set_config
from anki_splitter.exceptions import AnkiSplitterError
from anki_splitter.utils.logging import configure_logging, get_logger

# Shared console for all commands
console = Console()


def get_config_and_logger(
    config_path: Path | None = None,
    log_level: str | None = None,
) -> tuple[Config, Any]:
    """Load configuration, configure logging and return both.

    Args:
        config_path: Optional path to a YAML config file
        log_level: Console log level; falls back to the configured level

    Returns:
        Tuple of (Config, Logger)
    """
    try:
        config = load_config(config_path)
    except AnkiSplitterError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    set_config(config)
    configure_logging(log_level or config.log_level, log_file=config.log_file)
    return config, get_logger("cli")


def read_card_text(path: Path) -> str:
    """Read a card body from ``path`` ("-" reads stdin)."""
    if str(path) == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {e}")
        raise typer.Exit(code=1) from e
