"""Abstract base class for FX reference rate sources."""
from abc import ABC, abstractmethod

from equity_oracle_sync.providers.fx.models import FxRate


class FxRateProviderABC(ABC):
    """Base interface for providers of a local-currency-per-USD reference rate."""

    @abstractmethod
    async def get_usd_rate(self) -> FxRate:
        """Fetch the current units of local currency per 1 USD.

        Implementations substitute their fallback rate instead of raising
        when the upstream source is unavailable.
        """

    async def close(self) -> None:
        """Clean up resources. Override in subclasses if cleanup is needed."""

    async def __aenter__(self) -> "FxRateProviderABC":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
