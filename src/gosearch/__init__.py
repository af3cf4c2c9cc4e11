"""Interactive search-and-install helper for the Go package index."""

__version__ = "0.1.0"
