"""One oracle sync invocation: scrape, normalize, resolve, build, submit, aggregate.

The equity path (listings through band submission) is the main path: any
exception there turns the whole response into a failure. The FX side-channel
and the freshness audit run afterwards, each isolated behind its own tagged
outcome, and are merged only when the response is assembled.
"""
import logging
from collections.abc import Sequence

from equity_oracle_sync.providers.core.error_mapper import SyncErrorMapper
from equity_oracle_sync.providers.core.listings_provider_abc import \
    ListingsProviderABC
from equity_oracle_sync.providers.fx import FxRateProviderABC
from equity_oracle_sync.providers.oracle import OracleClientABC
from equity_oracle_sync.schemas import (AuditOutcome, FxOutcome,
                                        PayloadBatch, PhaseStatus,
                                        SubmissionResult, SyncResponse,
                                        SyncSuccess, TickerRecord)
from equity_oracle_sync.services.clock import ChainClock
from equity_oracle_sync.services.freshness import FreshnessAuditor
from equity_oracle_sync.services.fx import FxSideChannel
from equity_oracle_sync.services.payloads import PayloadBuilder
from equity_oracle_sync.services.resolver import AssetResolver
from equity_oracle_sync.services.submitter import OracleSubmitter

logger = logging.getLogger(__name__)


class OracleSyncService:
    """Runs the sync pipeline once per call to run().

    Holds its collaborators for the lifetime of one invocation; close() (or
    ``async with``) releases the HTTP and RPC clients afterwards.
    """

    def __init__(
        self,
        listings: ListingsProviderABC,
        oracle: OracleClientABC,
        resolver: AssetResolver,
        builder: PayloadBuilder,
        watchlist: Sequence[str],
        *,
        fx: FxSideChannel | None = None,
        auditor: FreshnessAuditor | None = None,
        clock: ChainClock | None = None,
        error_mapper: SyncErrorMapper | None = None,
        closeables: Sequence[ListingsProviderABC | OracleClientABC | FxRateProviderABC] = (),
    ) -> None:
        self._listings = listings
        self._oracle = oracle
        self._resolver = resolver
        self._builder = builder
        self._watchlist = tuple(watchlist)
        self._submitter = OracleSubmitter(oracle)
        self._fx = fx
        self._auditor = auditor
        self._clock = clock or ChainClock(oracle)
        self._error_mapper = error_mapper or SyncErrorMapper()
        self._closeables = tuple(closeables) or (listings, oracle)

    async def _run_equity(
        self,
    ) -> tuple[list[TickerRecord], PayloadBatch, SubmissionResult, SubmissionResult]:
        records = await self._listings.fetch_records(self._watchlist)
        resolved = self._resolver.resolve_records(records)
        timestamp = await self._clock.now()
        batch = self._builder.build(resolved, timestamp)
        logger.info("Price assets: %d", len(batch.prices))
        logger.info("Band assets: %d", len(batch.bands))

        price_result = await self._submitter.submit_prices(batch)
        band_result = await self._submitter.submit_bands(batch)
        published = [record for record, _ in resolved]
        return published, batch, price_result, band_result

    async def run(self) -> SyncResponse:
        """Run one invocation and return the aggregated response. Never raises."""
        try:
            records, batch, price_result, band_result = await self._run_equity()
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Oracle sync failed: %s", exc)
            return self._error_mapper.to_failure(exc)

        fx = await self._fx.run() if self._fx else FxOutcome(status=PhaseStatus.SKIPPED)
        if self._auditor and batch.assets:
            audit = await self._auditor.audit(batch.assets)
        else:
            audit = AuditOutcome(status=PhaseStatus.SKIPPED)

        return SyncSuccess(
            prices_updated=price_result.assets_updated,
            bands_updated=band_result.assets_updated,
            price_tx_hash=price_result.transaction_id,
            band_tx_hash=band_result.transaction_id,
            band_width_bps=self._builder.band_width_bps,
            fx_tx_hash=fx.band_tx_hash,
            records=records,
            fx=fx,
            audit=audit,
        )

    async def close(self) -> None:
        """Close providers and the oracle client."""
        for resource in self._closeables:
            try:
                await resource.close()
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("Error closing %s: %s", type(resource).__name__, exc)

    async def __aenter__(self) -> "OracleSyncService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
