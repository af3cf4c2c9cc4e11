"""Command-Line Interface for gosearch.

Searches the Go package index, shows the best matches as a numbered table,
and installs the package the user picks with ``go get``.
"""

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

import typer
from rich.console import Console
from rich.markup import escape

from gosearch.api import ApiClient
from gosearch.cli.display import display_entries
from gosearch.cli.selector import prompt_selection
from gosearch.config import Config
from gosearch.errors import GoSearchError, NoMatches
from gosearch.install import install_package, is_installed
from gosearch.search import FilterCriteria, rank_results
from gosearch.util import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gosearch",
    help="Search the Go package index and install a result with go get.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _get_console(use_stderr: bool = False) -> Console:
    """Create a console for output.

    Args:
        use_stderr: Write to stderr instead of stdout.

    Returns:
        A rich Console bound to the current process streams.
    """
    return Console(stderr=use_stderr)


def _search_and_install(
    query: str,
    criteria: FilterCriteria,
    show_installed: bool,
    get_flags: Sequence[str] | None,
    stream: TextIO,
    console: Console,
) -> None:
    """Runs the search, display, selection, and install pipeline.

    Args:
        query: The search term.
        criteria: Filter settings for this run.
        show_installed: Mark packages already present locally.
        get_flags: Extra ``go get`` arguments; None uses the defaults.
        stream: Input stream for the selection and confirmation.
        console: Console for user-facing output.

    Raises:
        GoSearchError: If any stage fails. NoMatches is raised after the
            no-matches message has been printed.
    """
    response = ApiClient().search(query)

    installed_check = is_installed if show_installed else None
    entries = rank_results(response.results, criteria, query, installed_check)

    if not display_entries(entries, show_installed, console):
        raise NoMatches(query)

    selection = prompt_selection(len(entries), stream, console)
    if selection is None:
        logger.debug("No package selected")
        return

    selected = entries[selection - 1]
    install_package(selected.path, get_flags, stream, console)


@app.command()
def search_command(
    ctx: typer.Context,
    query_string: str | None = typer.Argument(
        None, metavar="QUERY", help="The search term.", show_default=False
    ),
    limit: int = typer.Option(
        Config.DEFAULT_LIMIT,
        "--limit",
        "-n",
        help="Maximum number of search results to display (0 for no limit).",
    ),
    forks: bool = typer.Option(False, "--forks", help="Include forks."),
    apps: bool = typer.Option(
        False, "--apps", help="Search for main packages instead of libraries."
    ),
    min_stars: int = typer.Option(
        Config.DEFAULT_MIN_STARS,
        "--minstars",
        help="Minimum number of stars for a package to be displayed.",
    ),
    min_imports: int = typer.Option(
        Config.DEFAULT_MIN_IMPORTS,
        "--minimports",
        help="Minimum number of imports for a package to be displayed.",
    ),
    show_installed: bool = typer.Option(
        False,
        "--installed",
        help=f"Mark packages that are already installed with {Config.INSTALLED_MARKER}.",
    ),
    in_path: bool = typer.Option(
        True, "--inpath/--no-inpath", help="Search term must be in the package path."
    ),
    get_flags: list[str] | None = typer.Option(
        None,
        "--get-flag",
        "-g",
        help="Argument passed through to go get (repeatable). Defaults to -u -v.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Search for Go packages and install one with go get."""
    setup_logging(verbose)
    console = _get_console()
    error_console = _get_console(use_stderr=True)

    if not query_string or not query_string.strip():
        error_console.print("[bold red]Must provide search term[/bold red]\n")
        error_console.print(ctx.get_usage(), markup=False, highlight=False)
        raise typer.Exit(code=1)

    criteria = FilterCriteria(
        include_forks=forks,
        want_applications=apps,
        min_stars=min_stars,
        min_imports=min_imports,
        path_must_contain_query=in_path,
        display_limit=limit,
    )

    try:
        _search_and_install(
            query_string,
            criteria,
            show_installed,
            get_flags or None,
            sys.stdin,
            console,
        )
    except NoMatches:
        raise typer.Exit(code=1)
    except GoSearchError as e:
        error_console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)


def main() -> None:
    """Console script entry point; reports usage errors with exit status 1."""
    try:
        app()
    except SystemExit as e:
        sys.exit(1 if e.code == 2 else e.code)


if __name__ == "__main__":
    main()
