"""Tests for the isolated FX side-channel and freshness audit phases."""
from decimal import Decimal

import pytest

from equity_oracle_sync.schemas import BandPayload, PhaseStatus
from equity_oracle_sync.services import (ChainClock, FreshnessAuditor,
                                         FxSideChannel, PayloadBuilder)
from tests.fakes import FakeOracleClient, StaticFxProvider

FX_ASSET = "0x00000000000000000000000000000000006a1e8c"


def _fx(oracle: FakeOracleClient, rate_provider: StaticFxProvider) -> FxSideChannel:
    return FxSideChannel(rate_provider, oracle, PayloadBuilder(150), ChainClock(oracle), FX_ASSET)


@pytest.mark.asyncio
async def test_fx_writes_price_then_band_with_fresh_timestamp():
    oracle = FakeOracleClient(block_timestamp=1_700_000_500)
    outcome = await _fx(oracle, StaticFxProvider("1538.46")).run()

    assert outcome.status is PhaseStatus.OK
    assert outcome.rate == Decimal("1538.46")
    assert [c[0] for c in oracle.calls] == ["set_price", "set_band"]
    price, band = oracle.prices[FX_ASSET], oracle.bands[FX_ASSET]
    assert price.price_fixed == band.mid_fixed == 1_538_460_000
    assert price.timestamp == band.timestamp == 1_700_000_500
    assert outcome.band_tx_hash == "0xtx2"


@pytest.mark.asyncio
async def test_fx_write_failure_becomes_failed_outcome():
    oracle = FakeOracleClient(fail_set_price=True)
    outcome = await _fx(oracle, StaticFxProvider()).run()

    assert outcome.status is PhaseStatus.FAILED
    assert "FX oracle write failed" in outcome.error


@pytest.mark.asyncio
async def test_fx_unexpected_error_is_contained():
    oracle = FakeOracleClient()
    outcome = await _fx(oracle, StaticFxProvider(error=RuntimeError("boom"))).run()

    assert outcome.status is PhaseStatus.FAILED
    assert outcome.error == "boom"
    assert oracle.calls == []


@pytest.mark.asyncio
async def test_clock_falls_back_to_wall_clock(monkeypatch):
    monkeypatch.setattr("equity_oracle_sync.services.clock.time.time", lambda: 1234.9)
    assert await ChainClock(FakeOracleClient(block_timestamp=None)).now() == 1234


@pytest.mark.asyncio
async def test_audit_marks_fresh_and_stale_bands():
    oracle = FakeOracleClient(block_timestamp=10_000, max_stale=600)
    oracle.bands["0xA"] = BandPayload(mid_fixed=1, width_bps=150, timestamp=9_500)
    oracle.bands["0xB"] = BandPayload(mid_fixed=1, width_bps=150, timestamp=9_000)

    outcome = await FreshnessAuditor(oracle, ChainClock(oracle)).audit(["0xA", "0xB"])

    assert outcome.status is PhaseStatus.OK
    assert outcome.max_staleness == 600
    assert [(r.asset, r.is_fresh) for r in outcome.records] == [("0xA", True), ("0xB", False)]


@pytest.mark.asyncio
async def test_audit_failure_is_swallowed():
    oracle = FakeOracleClient()  # no bands stored: get_band raises KeyError
    outcome = await FreshnessAuditor(oracle, ChainClock(oracle)).audit(["0xMISSING"])

    assert outcome.status is PhaseStatus.FAILED
    assert outcome.records == []
