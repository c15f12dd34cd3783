"""Async HTTP client for series sources."""

import logging
from typing import Any

import httpx

from src.services.series.errors import FetchError

logger = logging.getLogger(__name__)


class SeriesFetcher:
    """
    Reads ``{"data": [...]}`` payloads over HTTP.

    Usage:
        async with SeriesFetcher(timeout=10.0) as fetcher:
            entries = await fetcher.fetch("http://localhost:8000/api/data")
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional transport override (e.g. ``httpx.MockTransport``)
        """
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def fetch(self, url: str) -> list[Any]:
        """GET *url* and return the raw ``data`` entries.

        Raises:
            FetchError: On a malformed URL, transport failure, non-2xx status,
                non-JSON body or a body without a ``data`` array.
        """
        logger.debug("Fetching series from %s", url)
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(url, response.reason_phrase or "unexpected status", response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise FetchError(url, "response body is not JSON", response.status_code) from e

        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise FetchError(url, "response body has no 'data' array", response.status_code)

        return body["data"]

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "SeriesFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
