"""Tests for the HTTP series fetcher."""

import httpx
import pytest

from src.infrastructure.http.fetcher import SeriesFetcher
from src.services.series.errors import FetchError

URL = "http://source.test/data"


def _fetcher(handler) -> SeriesFetcher:
    return SeriesFetcher(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_returns_data_entries():
    payload = {"data": [{"x": "Point 1", "value": 3}, {"x": "Point 2", "value": "4"}]}
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload)

    async with _fetcher(handler) as fetcher:
        entries = await fetcher.fetch(URL)

    assert entries == payload["data"]
    assert seen[0].method == "GET"
    assert str(seen[0].url) == URL


@pytest.mark.asyncio
async def test_fetch_non_2xx_raises():
    async with _fetcher(lambda request: httpx.Response(503)) as fetcher:
        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL)

    assert exc_info.value.status_code == 503
    assert exc_info.value.url == URL


@pytest.mark.asyncio
async def test_fetch_non_json_raises():
    async with _fetcher(lambda request: httpx.Response(200, text="<html>oops</html>")) as fetcher:
        with pytest.raises(FetchError, match="not JSON"):
            await fetcher.fetch(URL)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[1, 2], {"items": []}, {"data": "nope"}, {"data": None}])
async def test_fetch_wrong_shape_raises(body):
    async with _fetcher(lambda request: httpx.Response(200, json=body)) as fetcher:
        with pytest.raises(FetchError, match="'data' array"):
            await fetcher.fetch(URL)


@pytest.mark.asyncio
async def test_fetch_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _fetcher(handler) as fetcher:
        with pytest.raises(FetchError, match="connection refused") as exc_info:
            await fetcher.fetch(URL)

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_fetch_malformed_url_raises():
    async with SeriesFetcher() as fetcher:
        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("http://[::1/data")

    assert exc_info.value.url == "http://[::1/data"
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
