"""CLI entry point."""

import typer

app = typer.Typer(
    name="promise-metrics",
    help="PROMISE Metrics - per-class defect-prediction metrics for Java sources",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main  # noqa: F401, E402
