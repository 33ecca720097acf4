"""Abstract base class for on-chain price oracle clients."""
from abc import ABC, abstractmethod

from equity_oracle_sync.schemas import (BandPayload, PricePayload,
                                        TransactionReceipt)


class OracleClientABC(ABC):
    """Write/read interface of the price oracle contract.

    Every write waits for its transaction to be confirmed before returning,
    so callers issue writes strictly one after another under one signer.
    Writes raise SubmissionError on failure or revert.

    Subclasses decide at construction whether the batch band call exists and
    expose it through supports_batch_bands; callers never probe mid-run.
    """

    @property
    def supports_batch_bands(self) -> bool:
        """Whether set_bands is available on this oracle."""
        return False

    @abstractmethod
    async def set_prices(
        self, assets: list[str], payloads: list[PricePayload]
    ) -> TransactionReceipt:
        """Publish mark prices for several assets in one transaction."""

    @abstractmethod
    async def set_price(self, asset: str, payload: PricePayload) -> TransactionReceipt:
        """Publish one asset's mark price."""

    @abstractmethod
    async def set_band(self, asset: str, payload: BandPayload) -> TransactionReceipt:
        """Publish one asset's valid price band."""

    async def set_bands(
        self, assets: list[str], payloads: list[BandPayload]
    ) -> TransactionReceipt:
        """Publish bands for several assets in one transaction.

        Default implementation raises NotImplementedError. Override in clients
        whose oracle exposes the batch call (and report it via supports_batch_bands).
        """
        raise NotImplementedError("Batch band updates are not supported by this oracle")

    @abstractmethod
    async def get_band(self, asset: str) -> BandPayload:
        """Read an asset's current band."""

    @abstractmethod
    async def max_staleness(self) -> int:
        """Read the oracle's maximum allowed band age in seconds."""

    @abstractmethod
    async def latest_block_timestamp(self) -> int | None:
        """Timestamp of the latest block on the oracle's chain, if available."""

    async def close(self) -> None:
        """Clean up resources (connections). Override if cleanup is needed."""

    async def __aenter__(self) -> "OracleClientABC":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
