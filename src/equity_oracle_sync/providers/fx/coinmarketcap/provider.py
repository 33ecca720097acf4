"""CoinMarketCap FX provider: NGN per USD derived from the cNGN stablecoin quote."""
import logging
from decimal import ROUND_HALF_UP, Decimal

import httpx
import pydantic

from equity_oracle_sync.providers.fx.coinmarketcap.models import \
    CmcQuotesResponse
from equity_oracle_sync.providers.fx.fx_provider_abc import FxRateProviderABC
from equity_oracle_sync.providers.fx.models import FxRate

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


class CoinMarketCapFxProvider(FxRateProviderABC):
    """NGN-per-USD rate from CoinMarketCap's cNGN quote.

    cNGN is pegged to the naira, so 1 / (cNGN price in USD) approximates
    naira per dollar. Any failure (no key, non-200, malformed body,
    non-positive price) yields the configured fallback rate.
    """

    BASE_URL = "https://pro-api.coinmarketcap.com/v2/cryptocurrency/quotes/latest"
    SYMBOL = "cNGN"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        url: str = BASE_URL,
        fallback_rate: Decimal = Decimal("1500"),
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the CoinMarketCap FX provider.

        Args:
            api_key: CoinMarketCap Pro API key.
            url: quotes/latest endpoint.
            fallback_rate: Rate used when the quote cannot be obtained.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client.
        """
        self._api_key = api_key
        self._url = url
        self._fallback_rate = fallback_rate
        headers = {"Accept": "application/json"}
        if api_key:
            headers["X-CMC_PRO_API_KEY"] = api_key
        self._client = client or httpx.AsyncClient(headers=headers, timeout=timeout)
        self._headers = headers

    def _fallback(self, reason: str) -> FxRate:
        logger.warning("%s; using fallback %s NGN", reason, self._fallback_rate)
        return FxRate(rate=self._fallback_rate, is_fallback=True)

    async def get_usd_rate(self) -> FxRate:
        """Fetch NGN per USD, rounded to 2 decimal places for stability."""
        if not self._api_key:
            return self._fallback("No CoinMarketCap API key configured")
        try:
            response = await self._client.get(
                self._url, params={"symbol": self.SYMBOL}, headers=self._headers
            )
        except httpx.HTTPError as e:
            return self._fallback(f"CoinMarketCap request failed: {e}")
        if response.status_code != 200:
            return self._fallback(f"CoinMarketCap response {response.status_code}")
        try:
            body = CmcQuotesResponse.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as e:
            return self._fallback(f"Malformed CoinMarketCap body: {e}")

        price_usd = body.usd_price(self.SYMBOL)
        if price_usd is None or price_usd <= 0:
            return self._fallback(f"No positive {self.SYMBOL} USD price")
        rate = (Decimal(1) / Decimal(str(price_usd))).quantize(
            _TWO_PLACES, rounding=ROUND_HALF_UP
        )
        logger.info("1 USD ~ %s NGN", rate)
        return FxRate(rate=rate)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
