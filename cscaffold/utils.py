"""Shared Rich output helpers for cscaffold.

Normal output goes to ``console`` (stdout); every failure message goes to
``err_console`` (stderr).
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True
    )


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(
        f"[bold yellow]Warning:[/bold yellow] {escape(message)}", highlight=False, soft_wrap=True
    )


def print_created(path: Path, root: Path | None = None) -> None:
    """Print one created path, relative to *root* when given."""
    shown = path.relative_to(root.parent) if root is not None else path
    console.print(f"  [green]+[/green] [dim]{escape(str(shown))}[/dim]", highlight=False, soft_wrap=True)
