"""Shared CLI helpers."""

import click
from rich.console import Console
from typer.core import TyperCommand

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}", highlight=False, soft_wrap=True)


class MetricsCommand(TyperCommand):
    """Command whose usage errors exit with status 1 like every other failure."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise
