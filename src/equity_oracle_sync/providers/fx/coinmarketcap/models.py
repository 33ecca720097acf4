"""Models for the CoinMarketCap v2 quotes/latest response."""
from pydantic import BaseModel, Field


class CmcUsdQuote(BaseModel):
    """Price of the asset in the convert currency."""

    price: float | None = None


class CmcAssetQuote(BaseModel):
    """One asset entry; CMC keys quotes by convert currency (e.g. "USD")."""

    symbol: str | None = None
    quote: dict[str, CmcUsdQuote] = Field(default_factory=dict)


class CmcQuotesResponse(BaseModel):
    """Top-level body of /v2/cryptocurrency/quotes/latest (keyed by upper-case symbol)."""

    data: dict[str, list[CmcAssetQuote]] = Field(default_factory=dict)

    def usd_price(self, symbol: str) -> float | None:
        """USD price of the first asset listed under symbol, if present."""
        entries = self.data.get(symbol.upper()) or []
        if not entries:
            return None
        usd = entries[0].quote.get("USD")
        return usd.price if usd is not None else None
