"""Command-line interface for gosearch."""
