"""Timestamp snapshots: chain time when available, wall clock otherwise."""
import logging
import time

from equity_oracle_sync.providers.oracle import OracleClientABC

logger = logging.getLogger(__name__)


class ChainClock:
    """Takes timestamp snapshots from the oracle's chain with a local fallback."""

    def __init__(self, oracle: OracleClientABC) -> None:
        self._oracle = oracle

    async def now(self) -> int:
        """Latest block timestamp in seconds, or local time if the chain can't say."""
        try:
            ts = await self._oracle.latest_block_timestamp()
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug("Block time unavailable, using wall clock: %s", exc)
            ts = None
        if ts:
            return int(ts)
        return int(time.time())
