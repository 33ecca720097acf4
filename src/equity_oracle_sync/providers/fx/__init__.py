"""FX reference rate providers."""
from equity_oracle_sync.providers.fx.coinmarketcap import \
    CoinMarketCapFxProvider
from equity_oracle_sync.providers.fx.fx_provider_abc import FxRateProviderABC
from equity_oracle_sync.providers.fx.models import FxRate

__all__ = ["CoinMarketCapFxProvider", "FxRate", "FxRateProviderABC"]
