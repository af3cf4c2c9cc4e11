# src/gosearch/cli/display.py

"""Display and formatting utilities for CLI output."""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gosearch.config import Config
from gosearch.search.types import DisplayedEntry

NO_MATCHES_MESSAGE = "No matches."

_COLUMNS = ("#", "Stars", "Imports", "Path", "Description")


def format_path(entry: DisplayedEntry) -> str:
    """Returns the path as shown in the table, marked when installed.

    Args:
        entry: The displayed entry.

    Returns:
        The import path, prefixed with the installed marker if installed.
    """
    if entry.installed:
        return f"{Config.INSTALLED_MARKER}{entry.path}"
    return entry.path


def build_results_table(entries: Sequence[DisplayedEntry]) -> Table:
    """Builds a column-aligned table of numbered search results.

    Args:
        entries: Entries in display order.

    Returns:
        A rich Table with one row per entry.
    """
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    for column in _COLUMNS:
        justify = "right" if column in ("#", "Stars", "Imports") else "left"
        table.add_column(column, justify=justify, overflow="fold")

    for entry in entries:
        table.add_row(
            str(entry.index),
            str(entry.hit.stars),
            str(entry.hit.import_count),
            Text(format_path(entry)),
            Text(entry.hit.synopsis),
        )
    return table


def display_entries(
    entries: Sequence[DisplayedEntry],
    show_installed: bool,
    console: Console,
) -> bool:
    """Prints the results table, or the no-matches message.

    Args:
        entries: Entries in display order.
        show_installed: Whether the installed check was active; prints the
            marker legend below the table.
        console: Console to print to.

    Returns:
        True if at least one entry was displayed.
    """
    if not entries:
        console.print(f"[yellow]{NO_MATCHES_MESSAGE}[/yellow]")
        return False

    console.print(build_results_table(entries))
    if show_installed:
        console.print(f"{Config.INSTALLED_MARKER} = installed", markup=False)
    return True
