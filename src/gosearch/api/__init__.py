"""Remote search API access."""

from gosearch.api.client import ApiClient

__all__ = ["ApiClient"]
