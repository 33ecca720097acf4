"""Pydantic schemas for the sync pipeline and its HTTP response. Nothing here is persisted."""
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

ZERO_MESSAGE_ID = bytes(32)


class TickerRecord(BaseModel):
    """One normalized listing row for a watchlist ticker."""

    code: str
    price: Decimal
    day_change: Decimal | None = None  # fraction, e.g. -0.0123 for -1.23%
    ytd_change: Decimal | None = None


class PricePayload(BaseModel):
    """Oracle mark-price update, price scaled by 1e6."""

    price_fixed: int = Field(ge=0)
    sequence: int
    timestamp: int
    source_message_id: bytes = ZERO_MESSAGE_ID

    def as_tuple(self) -> tuple[int, int, int, bytes]:
        """Positional form of the on-chain PricePayload struct."""
        return (self.price_fixed, self.sequence, self.timestamp, self.source_message_id)


class BandPayload(BaseModel):
    """Oracle band update: midpoint (scaled by 1e6) and width in basis points."""

    mid_fixed: int = Field(ge=0)
    width_bps: int = Field(ge=0)
    timestamp: int

    def as_tuple(self) -> tuple[int, int, int]:
        """Positional form of the on-chain Band struct."""
        return (self.mid_fixed, self.width_bps, self.timestamp)


class PayloadBatch(BaseModel):
    """Parallel arrays of assets and their price/band payloads for one invocation."""

    assets: list[str] = Field(default_factory=list)
    prices: list[PricePayload] = Field(default_factory=list)
    bands: list[BandPayload] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.assets)


class TransactionReceipt(BaseModel):
    """Confirmed oracle write."""

    tx_hash: str
    status: int = 1
    block_number: int | None = None


class SubmissionResult(BaseModel):
    """Outcome of one submission phase (prices or bands)."""

    transaction_id: str | None = None
    assets_updated: int = 0
    used_fallback: bool = False
    failed_assets: list[str] = Field(default_factory=list)


class FreshnessRecord(BaseModel):
    """Read-back of an asset's band timestamp against the oracle's staleness limit."""

    asset: str
    last_timestamp: int
    is_fresh: bool


class PhaseStatus(str, Enum):
    """Tagged outcome of an isolated tail phase."""

    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


class FxOutcome(BaseModel):
    """Result of the FX side-channel; never affects the equity result."""

    status: PhaseStatus
    rate: Decimal | None = None
    used_fallback_rate: bool = False
    price_tx_hash: str | None = None
    band_tx_hash: str | None = None
    error: str | None = None


class AuditOutcome(BaseModel):
    """Result of the freshness audit; diagnostic only."""

    status: PhaseStatus
    max_staleness: int | None = None
    records: list[FreshnessRecord] = Field(default_factory=list)
    error: str | None = None


class SyncSuccess(BaseModel):
    """Response for an invocation whose equity price/band path completed."""

    success: Literal[True] = True
    prices_updated: int = Field(serialization_alias="pricesUpdated")
    bands_updated: int = Field(serialization_alias="bandsUpdated")
    price_tx_hash: str | None = Field(default=None, serialization_alias="priceTxHash")
    band_tx_hash: str | None = Field(default=None, serialization_alias="bandTxHash")
    band_width_bps: int = Field(serialization_alias="bandWidthBps")
    fx_tx_hash: str | None = Field(default=None, serialization_alias="fxTxHash")
    records: list[TickerRecord] = Field(default_factory=list)
    fx: FxOutcome = Field(default_factory=lambda: FxOutcome(status=PhaseStatus.SKIPPED))
    audit: AuditOutcome = Field(
        default_factory=lambda: AuditOutcome(status=PhaseStatus.SKIPPED)
    )

    @property
    def status_code(self) -> int:
        return 200

    def to_json(self) -> dict:
        """JSON body with the camelCase field names callers expect."""
        return self.model_dump(mode="json", by_alias=True)


class SyncFailure(BaseModel):
    """Response for an invocation whose main path raised."""

    success: Literal[False] = False
    error: str
    http_status: int = Field(default=500, exclude=True)

    @property
    def status_code(self) -> int:
        return self.http_status

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


SyncResponse = SyncSuccess | SyncFailure


__all__ = [
    "ZERO_MESSAGE_ID",
    "AuditOutcome",
    "BandPayload",
    "FreshnessRecord",
    "FxOutcome",
    "PayloadBatch",
    "PhaseStatus",
    "PricePayload",
    "SubmissionResult",
    "SyncFailure",
    "SyncResponse",
    "SyncSuccess",
    "TickerRecord",
    "TransactionReceipt",
]
