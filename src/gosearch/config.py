# src/gosearch/config.py

"""Centralized configuration for gosearch.

This module provides the endpoint URL, tool names, and CLI defaults used
throughout the application.
"""

import os


def _optional_float(value: str | None) -> float | None:
    if not value:
        return None
    return float(value)


class Config:
    """Application-wide configuration settings."""

    API_BASE_URL: str = os.getenv("GOSEARCH_API_URL", "https://api.godoc.org/search")
    """Search endpoint queried with a single ``q`` parameter.

    Can be overridden with GOSEARCH_API_URL environment variable.
    """

    REQUEST_TIMEOUT: float | None = _optional_float(os.getenv("GOSEARCH_TIMEOUT"))
    """Timeout for the search request in seconds. None waits indefinitely.

    Can be overridden with GOSEARCH_TIMEOUT environment variable.
    """

    GO_BINARY: str = os.getenv("GOSEARCH_GO_BINARY", "go")
    """Name (or path) of the Go toolchain executable looked up on PATH.

    Can be overridden with GOSEARCH_GO_BINARY environment variable.
    """

    INSTALL_SUBCOMMAND: str = "get"
    """Go subcommand used to install the selected package."""

    LIST_SUBCOMMAND: str = "list"
    """Go subcommand used to check whether a package is present locally."""

    DEFAULT_GET_FLAGS: tuple[str, ...] = ("-u", "-v")
    """Flags passed to ``go get`` when none are given (update, verbose)."""

    DEFAULT_LIMIT: int = 10
    """Maximum number of rows displayed by default."""

    DEFAULT_MIN_STARS: int = 1
    """Minimum star count for a package to be displayed by default."""

    DEFAULT_MIN_IMPORTS: int = 0
    """Minimum import count for a package to be displayed by default."""

    APPLICATION_PACKAGE_NAME: str = "main"
    """Package name that marks an executable (application) package."""

    INSTALLED_MARKER: str = "*"
    """Glyph prefixed to the path of packages that are already installed."""
