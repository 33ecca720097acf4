"""Equity listings providers."""
from equity_oracle_sync.providers.core.listings_provider_abc import \
    ListingsProviderABC
from equity_oracle_sync.providers.listings.african_markets import \
    AfricanMarketsProvider

__all__ = ["ListingsProviderABC", "AfricanMarketsProvider"]
