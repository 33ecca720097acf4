"""Fixed-point price and band payload construction."""
from collections.abc import Iterable
from decimal import Decimal

from equity_oracle_sync.providers.core.utils import to_fixed
from equity_oracle_sync.schemas import (ZERO_MESSAGE_ID, BandPayload,
                                        PayloadBatch, PricePayload,
                                        TickerRecord)


class PayloadBuilder:
    """Builds oracle payloads, all stamped with the caller's timestamp snapshot.

    The sequence number equals the timestamp. This is an MVP simplification,
    not a per-asset monotonic counter.
    """

    def __init__(self, band_width_bps: int = 150) -> None:
        self._band_width_bps = band_width_bps

    @property
    def band_width_bps(self) -> int:
        return self._band_width_bps

    def price_payload(self, value_fixed: int, timestamp: int) -> PricePayload:
        return PricePayload(
            price_fixed=value_fixed,
            sequence=timestamp,
            timestamp=timestamp,
            source_message_id=ZERO_MESSAGE_ID,
        )

    def band_payload(self, value_fixed: int, timestamp: int) -> BandPayload:
        return BandPayload(
            mid_fixed=value_fixed, width_bps=self._band_width_bps, timestamp=timestamp
        )

    def build(
        self, resolved: Iterable[tuple[TickerRecord, str]], timestamp: int
    ) -> PayloadBatch:
        """Build parallel asset/price/band arrays for resolved records."""
        batch = PayloadBatch()
        for record, asset in resolved:
            fixed = to_fixed(record.price)
            batch.assets.append(asset)
            batch.prices.append(self.price_payload(fixed, timestamp))
            batch.bands.append(self.band_payload(fixed, timestamp))
        return batch

    def build_single(
        self, asset: str, value: Decimal, timestamp: int
    ) -> tuple[PricePayload, BandPayload]:
        """Price and band payloads for one synthetic asset (the FX rate)."""
        fixed = to_fixed(value)
        return self.price_payload(fixed, timestamp), self.band_payload(fixed, timestamp)
