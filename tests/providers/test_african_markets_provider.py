"""Tests for the listings page fetcher."""
from decimal import Decimal

import httpx
import pytest

from equity_oracle_sync.providers.core.exceptions import FetchError
from equity_oracle_sync.providers.listings import AfricanMarketsProvider

URL = "https://listings.test/ngse"


def _provider(handler) -> AfricanMarketsProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AfricanMarketsProvider(url=URL, client=client)


@pytest.mark.asyncio
async def test_fetch_records_sends_browser_headers_and_parses(mtnn_page):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=mtnn_page)

    async with _provider(handler) as provider:
        records = await provider.fetch_records(["MTNN"])

    assert [r.code for r in records] == ["MTNN"]
    assert records[0].price == Decimal("250.50")
    assert seen[0].headers["Accept-Language"] == "en-US,en;q=0.9"
    assert "Mozilla/5.0" in seen[0].headers["User-Agent"]


@pytest.mark.asyncio
async def test_non_success_status_raises_fetch_error():
    async with _provider(lambda request: httpx.Response(503, text="busy")) as provider:
        with pytest.raises(FetchError) as excinfo:
            await provider.fetch_page()
    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)


@pytest.mark.asyncio
async def test_network_error_raises_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _provider(handler) as provider:
        with pytest.raises(FetchError):
            await provider.fetch_page()


@pytest.mark.asyncio
async def test_timeout_raises_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    async with _provider(handler) as provider:
        with pytest.raises(FetchError, match="Timed out"):
            await provider.fetch_page()
