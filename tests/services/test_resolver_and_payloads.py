"""Tests for asset resolution and payload construction."""
import logging
from decimal import Decimal

import pytest

from equity_oracle_sync.providers.core.exceptions import ValidationError
from equity_oracle_sync.schemas import ZERO_MESSAGE_ID, TickerRecord
from equity_oracle_sync.services import AssetResolver, PayloadBuilder


def _record(code: str, price: str) -> TickerRecord:
    return TickerRecord(code=code, price=Decimal(price))


def test_resolve_returns_configured_address():
    assert AssetResolver({"MTNN": "0xAAA"}).resolve("mtnn") == "0xAAA"


def test_resolve_raises_for_unmapped_ticker():
    with pytest.raises(ValidationError, match="No address configured for UBA"):
        AssetResolver({"MTNN": "0xAAA"}).resolve("UBA")


def test_resolve_records_drops_unmapped_with_warning(caplog):
    resolver = AssetResolver({"MTNN": "0xAAA", "GTCO": ""})
    records = [_record("MTNN", "250.5"), _record("GTCO", "50"), _record("UBA", "30")]

    with caplog.at_level(logging.WARNING):
        resolved = resolver.resolve_records(records)

    assert [(r.code, asset) for r, asset in resolved] == [("MTNN", "0xAAA")]
    assert "No address configured for GTCO" in caplog.text
    assert "No address configured for UBA" in caplog.text


def test_build_produces_one_price_and_band_per_record():
    builder = PayloadBuilder(band_width_bps=150)
    resolved = [(_record("MTNN", "250.50"), "0xAAA"), (_record("GTCO", "1050"), "0xBBB")]

    batch = builder.build(resolved, timestamp=1_700_000_000)

    assert batch.assets == ["0xAAA", "0xBBB"]
    assert len(batch.prices) == len(batch.bands) == 2
    assert [p.price_fixed for p in batch.prices] == [250_500_000, 1_050_000_000]
    assert [b.mid_fixed for b in batch.bands] == [250_500_000, 1_050_000_000]


def test_build_stamps_single_timestamp_and_sequence():
    builder = PayloadBuilder(band_width_bps=200)
    batch = builder.build([(_record("MTNN", "1"), "0xAAA"), (_record("UBA", "2"), "0xBBB")], 42)

    assert {p.timestamp for p in batch.prices} == {42}
    assert {p.sequence for p in batch.prices} == {42}
    assert {b.timestamp for b in batch.bands} == {42}
    assert {b.width_bps for b in batch.bands} == {200}
    assert all(p.source_message_id == ZERO_MESSAGE_ID for p in batch.prices)


def test_build_empty():
    batch = PayloadBuilder().build([], 1)
    assert len(batch) == 0
    assert batch.prices == [] and batch.bands == []


def test_build_single_for_fx_rate():
    price, band = PayloadBuilder(band_width_bps=150).build_single("0xFX", Decimal("1538.46"), 9)
    assert price.price_fixed == 1_538_460_000
    assert band.mid_fixed == 1_538_460_000
    assert band.width_bps == 150
    assert price.timestamp == band.timestamp == 9
