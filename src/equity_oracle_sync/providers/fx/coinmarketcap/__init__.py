"""CoinMarketCap FX source."""
from equity_oracle_sync.providers.fx.coinmarketcap.provider import \
    CoinMarketCapFxProvider

__all__ = ["CoinMarketCapFxProvider"]
