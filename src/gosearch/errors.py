"""Exception types raised by the gosearch pipeline.

Library code raises these; the CLI layer is the only place that catches them
and turns them into a message and an exit status.
"""


class GoSearchError(Exception):
    """Base class for all gosearch failures."""


class SearchError(GoSearchError):
    """The package search could not be completed."""


class SearchUnavailable(SearchError):
    """The HTTP request to the search endpoint failed at the transport level."""


class SearchEndpointError(SearchError):
    """The search endpoint answered with a non-success status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"godoc: {status_code} {reason}".rstrip())


class SearchDecodeError(SearchError):
    """The search response body could not be decoded into search hits."""


class NoMatches(GoSearchError):
    """No search hit survived the configured filters."""


class ToolNotFound(GoSearchError):
    """The Go toolchain executable is not on PATH."""

    def __init__(self, binary: str):
        self.binary = binary
        super().__init__(f"Could not find {binary} binary in PATH")


class InstallFailed(GoSearchError):
    """The install subprocess could not be started or exited non-zero."""
