"""Card text commands: analyze, split, clozes."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..parser.cloze import get_cloze_stats, renumber_clozes, reset_clozes_to_c1
from ..parser.container import parse_containers
from ..parser.nid_link import get_nid_link_stats
from ..splitter.analysis import analyze_for_split
from ..splitter.atomic import extract_todo_blocks, perform_hard_split
from .shared import console, get_config_and_logger, read_card_text

CardPath = Annotated[Path, typer.Argument(help="Card body file ('-' for stdin)")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to config.yaml", exists=True),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
]


def register(app: typer.Typer) -> None:
    """Register card text commands on the given Typer app."""

    @app.command()
    def analyze(
        path: CardPath,
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
    ) -> None:
        """Show split points, containers, clozes and links of a card."""
        _config, logger = get_config_and_logger(config_path, log_level)
        text = read_card_text(path)

        analysis = analyze_for_split(text)
        containers = parse_containers(text)
        cloze_stats = get_cloze_stats(text)
        link_stats = get_nid_link_stats(text)
        logger.info("analyze_completed", path=str(path), headers=analysis.header_count)

        table = Table(title="Split analysis", show_header=True, header_style="bold magenta")
        table.add_column("Kind")
        table.add_column("Line", justify="right")
        table.add_column("Content")
        for point in analysis.hard_split_points:
            table.add_row(point.kind.value, str(point.line), point.content)
        console.print(table)

        status = "[green]yes[/green]" if analysis.can_hard_split else "[yellow]no[/yellow]"
        console.print(f"Hard split possible: {status}")
        console.print(f"Estimated cards: {analysis.estimated_cards}")
        console.print(
            f"Clozes: {cloze_stats.total_clozes} "
            f"({cloze_stats.unique_numbers} distinct numbers)"
        )
        console.print(f"Containers: {len(containers)}")
        console.print(
            f"Nid links: {link_stats.total_links} ({link_stats.unique_nids} distinct notes)"
        )
        if analysis.has_todo_block:
            todo_count = len(extract_todo_blocks(text).todo_blocks)
            console.print(f"[yellow]Todo blocks kept out of splitting: {todo_count}[/yellow]")

    @app.command()
    def split(
        path: CardPath,
        source_id: Annotated[
            str,
            typer.Option("--source-id", help="Note id of the card being split"),
        ],
        as_json: Annotated[
            bool,
            typer.Option("--json", help="Print fragments as JSON"),
        ] = False,
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
    ) -> None:
        """Split a card on its #### headers."""
        config, logger = get_config_and_logger(config_path, log_level)
        text = read_card_text(path)

        fragments = perform_hard_split(text, source_id, config.source_title)
        if fragments is None:
            logger.info("split_skipped", path=str(path), source_id=source_id)
            if as_json:
                console.print_json(json.dumps(None))
            else:
                console.print(
                    "[yellow]Card has no header structure to split on.[/yellow]"
                )
            return

        logger.info("split_completed", path=str(path), source_id=source_id, fragments=len(fragments))

        if as_json:
            console.print_json(json.dumps([asdict(f) for f in fragments], ensure_ascii=False))
            return

        for index, fragment in enumerate(fragments, 1):
            marker = " [bold](main)[/bold]" if fragment.is_main_card else ""
            console.print(f"\n[bold cyan]Card {index}: {fragment.title}[/bold cyan]{marker}")
            console.print(fragment.content, markup=False, highlight=False)
            if fragment.images:
                console.print(f"Images: {', '.join(fragment.images)}")
            if fragment.nid_links:
                console.print(f"Links: {', '.join(fragment.nid_links)}")

    @app.command()
    def clozes(
        path: CardPath,
        renumber: Annotated[
            bool,
            typer.Option("--renumber", help="Print the card with clozes renumbered from 1"),
        ] = False,
        reset: Annotated[
            bool,
            typer.Option("--reset", help="Print the card with every cloze set to c1"),
        ] = False,
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
    ) -> None:
        """Show cloze statistics or rewrite cloze numbers."""
        get_config_and_logger(config_path, log_level)
        if renumber and reset:
            console.print("[bold red]Error:[/bold red] --renumber and --reset are exclusive")
            raise typer.Exit(code=1)

        text = read_card_text(path)
        if renumber:
            console.print(renumber_clozes(text), markup=False, highlight=False)
            return
        if reset:
            console.print(reset_clozes_to_c1(text), markup=False, highlight=False)
            return

        stats = get_cloze_stats(text)
        table = Table(title="Clozes", show_header=True, header_style="bold magenta")
        table.add_column("Number", justify="right")
        table.add_column("Count", justify="right")
        for number, count in sorted(stats.number_counts.items()):
            table.add_row(f"c{number}", str(count))
        console.print(table)
        console.print(f"Total: {stats.total_clozes}")
