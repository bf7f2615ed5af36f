#!/usr/bin/env python3
"""
Command-line entry point: read a saved page, print the Markdown extraction.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from configurations import get_config
from exceptions import ConfigurationError
from logger import (
    ExtractionResult,
    ExtractionStatus,
    setup_smart_logger,
    share_handlers,
)
from pipelines import MatchDataOrchestrator

console = Console()


def read_source(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_output(markdown: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(markdown, encoding="utf-8")
        console.print(f"[green]Wrote {output}[/green]")
    else:
        # Plain print keeps the table pipes unstyled for redirection
        print(markdown)


def build_summary_table(result: ExtractionResult) -> Table:
    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Records", justify="right", style="green")
    table.add_column("Message", style="white")
    table.add_row(
        result.category,
        result.status.value,
        str(len(result.records)),
        result.message,
    )
    if result.stoppage_prediction is not None:
        table.add_row("stoppage", "", str(result.stoppage_prediction), "minutes")
    return table


def run_fixtures(
    orchestrator: MatchDataOrchestrator, raw_text: str, leagues: List[str]
) -> ExtractionResult:
    with Progress(
        TextColumn("[bold blue]Fixtures"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("fixtures", total=None)

        def on_progress(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        return orchestrator.extract_fixtures(
            raw_text, league_filter=leagues or None, on_progress=on_progress
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract match data from saved pages as Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s leagues page.html
  %(prog)s fixtures page.html --league 英超 --league 西甲
  %(prog)s match detail.html --events timeline.html --output report.md
        """,
    )
    parser.add_argument("--env", help="Configuration environment")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--output", help="Write Markdown to this file")
    parser.add_argument(
        "--summary", action="store_true", help="Show a summary table on stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    leagues = subparsers.add_parser("leagues", help="League list")
    leagues.add_argument("source", help="Saved fixture listing page")

    fixtures = subparsers.add_parser("fixtures", help="Fixture table")
    fixtures.add_argument("source", help="Saved fixture listing page")
    fixtures.add_argument(
        "--league",
        action="append",
        default=[],
        help="League filter term (repeatable)",
    )

    match = subparsers.add_parser("match", help="Statistics and events report")
    match.add_argument("source", help="Saved match page or statistics fragment")
    match.add_argument("--events", help="Separate events fragment")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_config(args.env)
        if args.log_level:
            settings.log_level = args.log_level.upper()
        orchestrator = MatchDataOrchestrator(settings)
    except ConfigurationError as error:
        console.print(f"[red]Configuration error: {error}[/red]")
        return 2

    app_logger = setup_smart_logger(
        "matchsheet",
        Path(settings.log_dir) / "matchsheet.log",
        strategy=settings.log_strategy,
        level=getattr(logging, settings.log_level, logging.INFO),
    )
    share_handlers(app_logger)

    try:
        raw_text = read_source(args.source)
        events_path = getattr(args, "events", None)
        events_text = read_source(events_path) if events_path else None
    except (OSError, UnicodeDecodeError) as error:
        app_logger.error(f"Cannot read input: {error}")
        console.print(f"[red]Cannot read input: {error}[/red]")
        return 1

    if args.command == "leagues":
        result = orchestrator.extract_leagues(raw_text)
    elif args.command == "fixtures":
        result = run_fixtures(orchestrator, raw_text, args.league)
    else:
        result = orchestrator.extract_match_report(raw_text, events_text)

    if args.summary:
        Console(stderr=True).print(build_summary_table(result))

    if result.status is ExtractionStatus.FAILED:
        console.print(f"[red]{result.message}[/red]")
        return 1
    if result.status is ExtractionStatus.NO_DATA:
        console.print(f"[yellow]{result.message}[/yellow]")
        return 0

    write_output(result.markdown, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
