"""Main command: compute metrics for a source tree and write the CSV."""

from pathlib import Path
from typing import Optional

import typer
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from .. import __version__
from ..analysis.engine import MetricsEngine
from ..config import load_config
from ..exceptions import PromiseMetricsError
from ..formatters.csv_formatter import CsvFormatter
from ..logging_config import setup_logging
from . import app
from ._common import MetricsCommand, console, print_error
from ._summary import print_summary


@app.command(cls=MetricsCommand)
def main(
    source_dir: Optional[Path] = typer.Argument(
        None,
        help="Path to the Java source code directory",
        show_default=False,
    ),
    output_file: Optional[Path] = typer.Argument(
        None,
        help="Path to output CSV file (default: output/metrics.csv)",
        show_default=False,
    ),
    full_format: bool = typer.Option(
        False,
        "--full-format",
        help="Export all 22 PROMISE columns (unimplemented metrics as 0)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of parallel workers (default: 1)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Calculate PROMISE metrics (WMC, NPM, LOC, AMC, MAX_CC, AVG_CC) per Java class.

    [bold cyan]Examples:[/bold cyan]

      promise-metrics src/main

      promise-metrics src/main output/ant-1.3.csv

      promise-metrics src/main output/ant-1.3.csv --full-format
    """
    if version:
        console.print(f"[bold cyan]PROMISE Metrics[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if verbose and quiet:
        print_error("--verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    if source_dir is None:
        print_error("Missing argument <source-directory>")
        console.print("Usage: promise-metrics <source-directory> [output-file] [--full-format]")
        raise typer.Exit(1)

    try:
        settings = load_config(
            config_file=config,
            output_file=str(output_file) if output_file is not None else None,
            full_format=True if full_format else None,
            workers=workers,
            log_file=str(log_file) if log_file is not None else None,
            verbose=verbose,
            quiet=quiet,
        )
    except PromiseMetricsError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    setup_logging(settings.verbosity, settings.log_file)
    quiet = settings.verbosity == "quiet"
    output_path = Path(settings.output_file)

    if not quiet:
        console.print("[bold cyan]PROMISE METRICS[/bold cyan]")
        console.print(f"Source directory: {source_dir}", highlight=False)
        console.print(f"Output file: {output_path}", highlight=False)
        console.print()

    engine = MetricsEngine(settings)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
            disable=quiet,
        ) as progress:
            task = progress.add_task("Scanning for Java files", total=None)

            def on_discovered(count: int) -> None:
                progress.update(task, description="Processing files", total=count)

            def on_file(path: Path, records: list) -> None:
                progress.advance(task)

            records = engine.analyze_directory(
                source_dir, on_file=on_file, on_discovered=on_discovered
            )

        written = CsvFormatter(full_format=settings.full_format).write(records, output_path)
    except PromiseMetricsError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    if not quiet:
        console.print(f"Exported {written} class metrics to: {output_path}", highlight=False)
        print_summary(console, records, engine.stats)
        console.print()
        console.print("[green]Metrics calculation completed successfully![/green]")
