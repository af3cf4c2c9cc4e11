"""Client for the remote Go package search API."""

import logging

import httpx
from pydantic import ValidationError

from gosearch.config import Config
from gosearch.errors import SearchDecodeError, SearchEndpointError, SearchUnavailable
from gosearch.search.types import SearchResponse

logger = logging.getLogger(__name__)


class ApiClient:
    """Synchronous client for the package search endpoint.

    This client makes a single GET request per search, without retries, and
    parses the response into SearchHit objects.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Search endpoint URL. Defaults to Config.API_BASE_URL.
            timeout: Timeout for the request in seconds. Defaults to
                Config.REQUEST_TIMEOUT; None waits indefinitely.
            transport: Optional httpx transport, mainly for tests.
        """
        self.base_url: str = base_url or Config.API_BASE_URL
        self.timeout: float | None = (
            timeout if timeout is not None else Config.REQUEST_TIMEOUT
        )
        self._transport = transport

    def search(self, query: str) -> SearchResponse:
        """Search the package index.

        Args:
            query: The free-text search term.

        Returns:
            SearchResponse with the hits in endpoint order.

        Raises:
            ValueError: If the query is empty.
            SearchUnavailable: If the request fails at the transport level.
            SearchEndpointError: If the endpoint returns a non-success status.
            SearchDecodeError: If the body is not the expected JSON shape.
        """
        if not query or not query.strip():
            raise ValueError("Must provide search term")

        params = {"q": query}
        logger.debug("GET %s q=%r", self.base_url, query)

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            raise SearchUnavailable(f"godoc: {e}") from e

        if not response.is_success:
            raise SearchEndpointError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise SearchDecodeError(f"godoc: invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise SearchDecodeError(
                f"godoc: expected a JSON object, got {type(data).__name__}"
            )

        try:
            search_response = SearchResponse.model_validate({**data, "query": query})
        except ValidationError as e:
            raise SearchDecodeError(f"godoc: unexpected response shape: {e}") from e

        logger.debug("Received %d search hits", search_response.count)
        return search_response
