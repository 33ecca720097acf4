"""Diagnostic read-back of band timestamps against the oracle's staleness limit."""
import logging
from collections.abc import Sequence

from equity_oracle_sync.providers.core.exceptions import AuditError
from equity_oracle_sync.providers.oracle import OracleClientABC
from equity_oracle_sync.schemas import (AuditOutcome, FreshnessRecord,
                                        PhaseStatus)
from equity_oracle_sync.services.clock import ChainClock

logger = logging.getLogger(__name__)


class FreshnessAuditor:
    """Checks that each updated asset's band is within maxStaleness of now."""

    def __init__(self, oracle: OracleClientABC, clock: ChainClock) -> None:
        self._oracle = oracle
        self._clock = clock

    async def _check(self, assets: Sequence[str]) -> AuditOutcome:
        try:
            max_stale = await self._oracle.max_staleness()
            now = await self._clock.now()
            records: list[FreshnessRecord] = []
            for asset in assets:
                band = await self._oracle.get_band(asset)
                fresh = now <= band.timestamp + max_stale
                logger.info("Freshness %s: ts=%s fresh=%s", asset, band.timestamp, fresh)
                records.append(
                    FreshnessRecord(asset=asset, last_timestamp=band.timestamp, is_fresh=fresh)
                )
        except Exception as e:  # pylint: disable=broad-except
            raise AuditError(f"Freshness audit failed: {e}") from e
        return AuditOutcome(status=PhaseStatus.OK, max_staleness=max_stale, records=records)

    async def audit(self, assets: Sequence[str]) -> AuditOutcome:
        """Audit the given assets; never raises."""
        try:
            return await self._check(assets)
        except AuditError as e:
            logger.debug("%s", e)
            return AuditOutcome(status=PhaseStatus.FAILED, error=str(e))
