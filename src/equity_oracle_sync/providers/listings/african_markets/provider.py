"""african-markets.com listings provider for NGX equities."""
import logging
from collections.abc import Iterable

import httpx

from equity_oracle_sync.providers.core.exceptions import FetchError
from equity_oracle_sync.providers.core.listings_provider_abc import \
    ListingsProviderABC
from equity_oracle_sync.providers.listings.african_markets.parser import \
    parse_listings
from equity_oracle_sync.schemas import TickerRecord

logger = logging.getLogger(__name__)


class AfricanMarketsProvider(ListingsProviderABC):
    """Listings provider that scrapes the NGX listed companies page.

    One GET per invocation with a fixed browser header set and timeout.
    There is no retry: a failed fetch aborts the run.
    """

    DEFAULT_URL = "https://african-markets.com/en/stock-markets/ngse/listed-companies"
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120 Safari/537.36"
        ),
        "Accept-Language": "en-US,en;q=0.9",
    }

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            url: Listings page URL.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (tests inject a mock transport).
        """
        self._url = url
        self._client = client or httpx.AsyncClient(
            headers=self.HEADERS, timeout=timeout, follow_redirects=True
        )

    async def fetch_page(self) -> str:
        """Fetch the raw listings page markup.

        Raises:
            FetchError: Network failure, timeout, or non-2xx status.
        """
        try:
            response = await self._client.get(self._url, headers=self.HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise FetchError(
                f"Listings page returned HTTP {status}", url=self._url, status_code=status
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out fetching {self._url}", url=self._url) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {self._url}: {e}", url=self._url) from e
        return response.text

    async def fetch_records(self, watchlist: Iterable[str]) -> list[TickerRecord]:
        """Fetch the page and parse watchlist rows into TickerRecords."""
        html = await self.fetch_page()
        records = parse_listings(html, watchlist)
        for record in records:
            logger.info(
                "ticker=%s price=%s day=%s ytd=%s",
                record.code,
                record.price,
                record.day_change,
                record.ytd_change,
            )
        return records

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
