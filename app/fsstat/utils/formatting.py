"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import stat as stat_module
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fsstat.metadata.stats import Stats


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(color_system=_detect_color_system())
err_console = Console(stderr=True, color_system=_detect_color_system())


def create_stats_table(path: str) -> Table:
    """Create a two-column table for one path's metadata.

    Args:
        path: Path shown as the table title.

    Returns:
        Rich Table configured for field/value display.
    """
    table = Table(
        title=path,
        show_header=True,
        header_style="bold",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    return table


def format_kind(stats: Stats) -> str:
    """Describe the entry kind from the supported predicates."""
    if stats.is_symbolic_link():
        return "symbolic link"
    if stats.is_directory():
        return "directory"
    if stats.is_file():
        return "file"
    return "other"


def format_mode(mode: int | None) -> str:
    """Format permission bits as ``0o755 (drwxr-xr-x)``, or ``-`` when absent."""
    if mode is None:
        return "[dim]-[/]"
    return f"{oct(stat_module.S_IMODE(mode))} ({stat_module.filemode(mode)})"


def format_value(value: object) -> str:
    """Format a nullable field value, rendering None as a dim ``null``."""
    if value is None:
        return "[dim]null[/]"
    return str(value)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/]")
