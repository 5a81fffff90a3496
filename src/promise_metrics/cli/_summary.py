"""Run summary table."""

from __future__ import annotations

import numpy as np
from rich.console import Console
from rich.table import Table

from ..analysis.engine import RunStats
from ..metrics.models import ClassMetrics


def summarize(records: list[ClassMetrics]) -> dict[str, float]:
    """Aggregate figures printed after a run."""
    if not records:
        return {"classes": 0, "avg_npm": 0.0, "avg_loc": 0.0, "total_loc": 0}
    npm = np.array([m.npm for m in records], dtype=np.int64)
    loc = np.array([m.loc for m in records], dtype=np.int64)
    return {
        "classes": len(records),
        "avg_npm": float(npm.mean()),
        "avg_loc": float(loc.mean()),
        "total_loc": int(loc.sum()),
    }


def print_summary(console: Console, records: list[ClassMetrics], stats: RunStats) -> None:
    figures = summarize(records)

    console.print()
    console.print("[bold cyan]METRICS SUMMARY[/bold cyan]")

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Metric", min_width=24)
    table.add_column("Value", justify="right")

    table.add_row("Total classes analyzed", str(figures["classes"]))
    table.add_row("Average NPM", f"{figures['avg_npm']:.2f}")
    table.add_row("Average LOC", f"{figures['avg_loc']:.2f}")
    table.add_row("Total LOC", str(figures["total_loc"]))
    table.add_row("Files analyzed", f"{stats.files_analyzed}/{stats.files_found}")
    if stats.files_failed:
        table.add_row("Files skipped", f"[red]{stats.files_failed}[/red]")
    if stats.files_with_problems:
        table.add_row("Files with parse problems", f"[yellow]{stats.files_with_problems}[/yellow]")
    table.add_row("Source LOC (all files)", str(stats.source_loc))

    console.print(table)
