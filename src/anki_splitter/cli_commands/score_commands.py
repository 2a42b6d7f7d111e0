"""Difficulty scoring command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..anki.difficulty import assess_difficulty
from .shared import console, get_config_and_logger


def register(app: typer.Typer) -> None:
    """Register the score command on the given Typer app."""

    @app.command()
    def score(
        lapses: Annotated[int, typer.Option("--lapses", min=0, help="Number of lapses")],
        ease: Annotated[
            int, typer.Option("--ease", min=0, help="Ease factor in per-mille (2500 = 250%)")
        ],
        interval: Annotated[int, typer.Option("--interval", min=0, help="Interval in days")],
        reps: Annotated[int, typer.Option("--reps", min=0, help="Number of reviews")],
        config_path: Annotated[
            Path | None,
            typer.Option("--config", help="Path to config.yaml", exists=True),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
        ] = None,
    ) -> None:
        """Compute the difficulty score of a card from its review statistics."""
        config, logger = get_config_and_logger(config_path, log_level)

        result = assess_difficulty(
            lapses, ease, interval, reps, config.difficulty_thresholds()
        )
        logger.info("difficulty_scored", score=result.score, reasons=len(result.reasons))

        color = "red" if result.score >= 60 else "yellow" if result.score >= 30 else "green"
        console.print(f"Difficulty score: [bold {color}]{result.score}[/bold {color}]")
        for reason in result.reasons:
            console.print(f"  - {reason}")
