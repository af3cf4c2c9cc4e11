"""Shared utilities for gosearch."""

from gosearch.util.logging import setup_logging

__all__ = ["setup_logging"]
