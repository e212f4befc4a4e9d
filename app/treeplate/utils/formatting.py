"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table

from treeplate.core.theme import get_rich_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


_theme = get_rich_theme()

# Shared console instances (theme loaded once at import)
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())

# Set by the --quiet flag; silences info and success messages only
_quiet = False


def set_quiet(quiet: bool) -> None:
    """Enable or disable quiet mode for non-essential messages."""
    global _quiet
    _quiet = quiet


def create_tree_table(title: str) -> Table:
    """Create a pre-configured table for listing tree paths.

    Args:
        title: Table title.

    Returns:
        Rich Table with Path, Kind and Detail columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Kind", width=8)
    table.add_column("Detail", style="muted", overflow="ellipsis")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    if _quiet:
        return
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    if _quiet:
        return
    console.print(f"[success]{message}[/]")
