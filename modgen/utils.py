"""Rich-based console output for the generator CLI.

Progress and results go to ``console`` (stdout); warnings and errors go to
``err_console`` (stderr) so that registration warnings can be told apart from
normal output.  Soft wrapping keeps long paths on one line.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import GenerationReport

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_info(message: str) -> None:
    console.print(message)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(report: GenerationReport, title: str = "Registration") -> None:
    """Print one row per registration step with its outcome.

    Args:
        report: The finished generation report.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Step", style="dim", no_wrap=True)
    table.add_column("Target")
    table.add_column("Status")

    for result in report.registrations:
        status = "[green]ok[/green]" if result.ok else "[yellow]manual[/yellow]"
        table.add_row(result.step, escape(result.target), status)

    console.print(table)
    console.print()
