#!/usr/bin/env python3
"""
Command-line interface for the Quake 3 Arena log parser.
"""

import csv
import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
from rich.markup import escape

from .config.settings import get_settings, reload_settings
from .config.loader import load_and_apply_config
from .processing.processor import LogProcessor
from .reporting.summary import LogSummaryType


# Set up rich console for pretty output
console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=console, rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)

VIEW_CHOICES = [view.value for view in LogSummaryType] + ["all"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Custom YAML configuration file",
)
def cli(verbose, config_path):
    """Quake 3 Arena Log Parser - per-game kill statistics"""
    # Environment is read per invocation
    settings = reload_settings()
    try:
        settings.validate()
    except ValueError as e:
        raise click.UsageError(str(e))

    logging.getLogger().setLevel(logging.DEBUG if verbose else settings.logging_level)

    # Load custom configuration if available
    load_and_apply_config(config_path)
    settings.log_configuration()


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--view",
    type=click.Choice(VIEW_CHOICES),
    default=None,
    help="Report view (default: standard, or Q3LOG_DEFAULT_VIEW)",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the report to a file")
def report(log_file, view, output):
    """Render the per-game report for a log file."""
    settings = get_settings()
    view = view or settings.default_view

    processor = LogProcessor(encoding=settings.encoding)
    result = processor.process_file(log_file)

    if not result.summary.has_data:
        console.print("[yellow]Nothing to show: the log file is empty.[/yellow]")
        return

    if view == "all":
        views = list(LogSummaryType)
    else:
        views = [LogSummaryType(view)]

    text = "\n".join(result.summary.render(v) for v in views if result.summary.get_view(v))

    if not text:
        console.print("[yellow]No games found in the log file.[/yellow]")
        return

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Wrote {result.summary.game_count} games to {output}[/green]")
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True)


@cli.command()
@click.argument("log_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Output file for results")
@click.option("--format", type=click.Choice(["json", "csv", "summary"]), default="summary")
@click.option(
    "--threads",
    default=None,
    type=int,
    help="Number of threads when parsing several files (default: CPU count)",
)
def parse(log_files, output, format, threads):
    """Parse one or more log files and show game statistics."""
    settings = get_settings()
    processor = LogProcessor(encoding=settings.encoding, max_workers=threads or settings.workers)

    if len(log_files) == 1:
        results = [processor.process_file(log_files[0])]
    else:
        console.print(f"[cyan]Parsing {len(log_files)} files ({processor.max_workers} threads)[/cyan]")
        results = processor.process_files(log_files)

    if format == "summary":
        for result in results:
            display_summary(result)
    elif format == "json":
        export_json(results, output or "output.json")
    elif format == "csv":
        export_csv(results, output or "output.csv")


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
def methods(log_file):
    """Show kills per means of death across all games."""
    settings = get_settings()
    processor = LogProcessor(encoding=settings.encoding)
    result = processor.process_file(log_file)

    totals = {}
    for game in result.games:
        for method, count in game.kills_by_method.items():
            totals[method] = totals.get(method, 0) + count

    if not totals:
        console.print("[yellow]No kills found in the log file.[/yellow]")
        return

    table = Table(title=f"Kills by Means of Death ({result.total_kills:,} kills)")
    table.add_column("Method", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Kills", justify="right", style="red")
    table.add_column("Share", justify="right")
    table.add_column("Environment", justify="center")

    for method, count in sorted(totals.items(), key=lambda item: item[1], reverse=True):
        name = escape(method.label) if method.is_recognized else f"[dim]{escape(method.label)} (unrecognized)[/dim]"
        table.add_row(
            escape(method.value),
            name,
            f"{count:,}",
            f"{count / result.total_kills:.1%}",
            "✓" if method.is_environmental else "",
        )

    console.print(table)


def display_summary(result):
    """Display parsing summary."""
    source = result.source.name if result.source else "log"
    console.print(f"\n[bold cyan]═══ {source} ═══[/bold cyan]")

    stats = result.stats
    stats_table = Table(title="Parsing Statistics", show_header=False)
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="white")

    stats_table.add_row("Lines Read", f"{stats.get('lines_read', 0):,}")
    stats_table.add_row("Kill Lines", f"{stats.get('kill_lines', 0):,}")
    stats_table.add_row("Skipped Lines", str(stats.get("skipped_lines", 0)))
    stats_table.add_row("Games", str(len(result.games)))
    stats_table.add_row("Total Kills", f"{result.total_kills:,}")
    stats_table.add_row("Unique Players", str(stats.get("unique_players", 0)))
    stats_table.add_row("Processing Time", f"{result.processing_time:.3f}s")

    console.print(stats_table)

    if not result.games:
        return

    game_table = Table(title=f"\n[bold]Games ({len(result.games)})[/bold]")
    game_table.add_column("#", style="dim", width=4)
    game_table.add_column("Kills", justify="right", width=6)
    game_table.add_column("Players", justify="right", width=7)
    game_table.add_column("Top Scorer", width=18)
    game_table.add_column("Score", justify="right", width=6)
    game_table.add_column("Top Method", width=18)

    for game in result.games[:50]:  # Show first 50
        top = game.get_top_scorer()
        top_method = None
        if game.kills_by_method:
            top_method = max(game.kills_by_method.items(), key=lambda item: item[1])[0]

        score_color = "green" if top and top[1] > 0 else "red"
        game_table.add_row(
            str(game.game_id),
            str(game.total_kills) if game.total_kills else "-",
            str(game.get_player_count()),
            escape(top[0][:18]) if top else "-",
            f"[{score_color}]{top[1]}[/{score_color}]" if top else "-",
            top_method.value if top_method else "-",
        )

    console.print(game_table)


def _game_to_dict(game):
    return {
        "game_id": game.game_id,
        "total_kills": game.total_kills,
        "players": list(game.players),
        "kills": dict(game.kills),
        "kills_by_means": {m.value: c for m, c in game.kills_by_method.items()},
    }


def export_json(results, output_file):
    """Export parsed games to JSON format."""
    data = []
    for result in results:
        data.append({
            "file": str(result.source) if result.source else None,
            "stats": {k: v for k, v in result.stats.items() if k != "top_scorers"},
            "games": [_game_to_dict(game) for game in result.games],
        })

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    game_count = sum(len(r.games) for r in results)
    console.print(f"[green]Exported {game_count} games to {output_file}[/green]")


def export_csv(results, output_file):
    """Export per-player game scores to CSV format."""
    rows = 0
    with open(output_file, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["File", "Game", "Total Kills", "Player", "Score"])

        for result in results:
            source = result.source.name if result.source else ""
            for game in result.games:
                for player in game.players:
                    writer.writerow([
                        source,
                        game.game_id,
                        game.total_kills,
                        player,
                        game.kills.get(player, 0),
                    ])
                    rows += 1

    console.print(f"[green]Exported {rows} player rows to {output_file}[/green]")


def main():
    """Entry point for the q3log command."""
    cli()


if __name__ == "__main__":
    main()
