"""Shared utility functions for Whisk.

Provides the process-wide Rich console, coloured message helpers, a summary
table and a spinner for the wizard, plus a small file-system helper.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.status import Status
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path, mode: int = 0o755) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.
        mode: Permission bits for newly created directories.

    Returns:
        The ``Path`` object.

    Raises:
        FileExistsError: If *path* exists and is not a directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(mode=mode, parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value table.

    Args:
        data: Row labels mapped to values.
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
    console.print(f"[bold green]{message}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def create_status(message: str) -> Status:
    """Create a spinner status line for a long-running step.

    Returns:
        A ``Status`` instance suitable for use as a context manager.
    """
    return console.status(f"[bold]{message}[/bold]", spinner="dots")
