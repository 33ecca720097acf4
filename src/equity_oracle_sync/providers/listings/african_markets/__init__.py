"""african-markets.com NGX listings source."""
from equity_oracle_sync.providers.listings.african_markets.provider import \
    AfricanMarketsProvider

__all__ = ["AfricanMarketsProvider"]
