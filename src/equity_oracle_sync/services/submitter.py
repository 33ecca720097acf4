"""Two-phase oracle submission: batch prices, then batch-or-per-asset bands.

Bands favour coverage over atomicity: if the batch call is unavailable or
fails, every asset gets its own call and one failure does not stop the rest.
Successful calls are never rolled back.
"""
import logging

from equity_oracle_sync.providers.oracle import OracleClientABC
from equity_oracle_sync.schemas import PayloadBatch, SubmissionResult

logger = logging.getLogger(__name__)


class OracleSubmitter:
    """Writes a PayloadBatch to the oracle, one confirmed transaction at a time."""

    def __init__(self, oracle: OracleClientABC) -> None:
        self._oracle = oracle

    async def submit_prices(self, batch: PayloadBatch) -> SubmissionResult:
        """Publish all prices in one batch call.

        Raises:
            SubmissionError: The batch call failed; the invocation should abort.
        """
        if not batch.assets:
            logger.warning("No prices to update")
            return SubmissionResult()
        receipt = await self._oracle.set_prices(batch.assets, batch.prices)
        logger.info("setPrices OK: %s status: %s", receipt.tx_hash, receipt.status)
        return SubmissionResult(
            transaction_id=receipt.tx_hash, assets_updated=len(batch.assets)
        )

    async def submit_bands(self, batch: PayloadBatch) -> SubmissionResult:
        """Publish all bands, falling back to per-asset calls when batching fails."""
        if not batch.bands:
            logger.warning("No bands to update")
            return SubmissionResult()

        if self._oracle.supports_batch_bands:
            try:
                receipt = await self._oracle.set_bands(batch.assets, batch.bands)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning("setBands failed, falling back to setBand loop: %s", e)
            else:
                logger.info("setBands OK: %s status: %s", receipt.tx_hash, receipt.status)
                return SubmissionResult(
                    transaction_id=receipt.tx_hash, assets_updated=len(batch.assets)
                )
        else:
            logger.warning("Oracle has no setBands; using setBand loop")

        return await self._submit_bands_one_by_one(batch)

    async def _submit_bands_one_by_one(self, batch: PayloadBatch) -> SubmissionResult:
        last_tx: str | None = None
        failed: list[str] = []
        total = len(batch.assets)
        for i, (asset, band) in enumerate(zip(batch.assets, batch.bands), start=1):
            try:
                receipt = await self._oracle.set_band(asset, band)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning("setBand %d/%d %s failed: %s", i, total, asset, e)
                failed.append(asset)
                continue
            logger.info(
                "setBand %d/%d hash=%s status=%s", i, total, receipt.tx_hash, receipt.status
            )
            last_tx = receipt.tx_hash
        return SubmissionResult(
            transaction_id=last_tx,
            assets_updated=total,
            used_fallback=True,
            failed_assets=failed,
        )
