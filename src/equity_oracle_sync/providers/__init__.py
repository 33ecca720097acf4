"""Data sources and sinks for the oracle sync job.

- AfricanMarketsProvider: NGX equity prices scraped from african-markets.com
- CoinMarketCapFxProvider: NGN per USD from the cNGN quote
- Web3OracleClient: OracleHub contract writes and reads over JSON-RPC

Example:
    async with AfricanMarketsProvider() as listings:
        records = await listings.fetch_records(["MTNN", "GTCO"])
        for record in records:
            print(f"{record.code}: {record.price}")
"""
from equity_oracle_sync.providers.core.listings_provider_abc import \
    ListingsProviderABC
from equity_oracle_sync.providers.fx import (CoinMarketCapFxProvider,
                                             FxRateProviderABC)
from equity_oracle_sync.providers.listings import AfricanMarketsProvider
from equity_oracle_sync.providers.oracle import (OracleClientABC,
                                                 Web3OracleClient)

__all__ = [
    "AfricanMarketsProvider",
    "CoinMarketCapFxProvider",
    "FxRateProviderABC",
    "ListingsProviderABC",
    "OracleClientABC",
    "Web3OracleClient",
]
