"""Abstract base class for equity listings sources."""
from abc import ABC, abstractmethod
from collections.abc import Iterable

from equity_oracle_sync.schemas import TickerRecord


class ListingsProviderABC(ABC):
    """Base interface for sources of current equity prices.

    Each listings source fetches its raw page or feed and turns it into
    normalized TickerRecords for the requested watchlist.
    """

    @abstractmethod
    async def fetch_records(self, watchlist: Iterable[str]) -> list[TickerRecord]:
        """Fetch current prices for the watchlist tickers.

        Args:
            watchlist: Ticker codes to keep; everything else is dropped.

        Returns:
            One TickerRecord per watchlist ticker with a parseable price.

        Raises:
            FetchError: The source could not be reached.
            TableNotFoundError: The source no longer has the expected shape.
        """

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "ListingsProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
