"""FX side-channel: publish NGN per USD as a synthetic oracle asset.

Runs after the equity phases. Whatever goes wrong here is reported as a
failed FxOutcome and never touches the equity result.
"""
import logging

from equity_oracle_sync.providers.core.exceptions import (FxError,
                                                          SubmissionError)
from equity_oracle_sync.providers.fx import FxRateProviderABC
from equity_oracle_sync.providers.oracle import OracleClientABC
from equity_oracle_sync.schemas import FxOutcome, PhaseStatus
from equity_oracle_sync.services.clock import ChainClock
from equity_oracle_sync.services.payloads import PayloadBuilder

logger = logging.getLogger(__name__)


class FxSideChannel:
    """Fetches the FX rate and writes one price and one band for the FX asset."""

    def __init__(
        self,
        rate_provider: FxRateProviderABC,
        oracle: OracleClientABC,
        builder: PayloadBuilder,
        clock: ChainClock,
        asset: str,
    ) -> None:
        self._rate_provider = rate_provider
        self._oracle = oracle
        self._builder = builder
        self._clock = clock
        self._asset = asset

    async def _publish(self) -> FxOutcome:
        # Fresh snapshot; the equity timestamp is not reused here.
        timestamp = await self._clock.now()
        fx_rate = await self._rate_provider.get_usd_rate()
        price, band = self._builder.build_single(self._asset, fx_rate.rate, timestamp)
        try:
            price_receipt = await self._oracle.set_price(self._asset, price)
            logger.info("setPrice FX %s hash=%s", self._asset, price_receipt.tx_hash)
            band_receipt = await self._oracle.set_band(self._asset, band)
            logger.info("setBand FX %s hash=%s", self._asset, band_receipt.tx_hash)
        except SubmissionError as e:
            raise FxError(f"FX oracle write failed: {e}") from e
        return FxOutcome(
            status=PhaseStatus.OK,
            rate=fx_rate.rate,
            used_fallback_rate=fx_rate.is_fallback,
            price_tx_hash=price_receipt.tx_hash,
            band_tx_hash=band_receipt.tx_hash,
        )

    async def run(self) -> FxOutcome:
        """Publish the FX rate; failures become a FAILED outcome, never an exception."""
        try:
            return await self._publish()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("FX update failed (will not block equity bands): %s", exc)
            return FxOutcome(status=PhaseStatus.FAILED, error=str(exc) or type(exc).__name__)
