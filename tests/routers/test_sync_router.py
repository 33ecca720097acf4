"""Tests for the HTTP trigger route."""
from fastapi.testclient import TestClient

from equity_oracle_sync.deps import get_sync_runner
from equity_oracle_sync.main import app
from equity_oracle_sync.schemas import SyncFailure, SyncSuccess


def _override(result):
    async def runner():
        return result

    app.dependency_overrides[get_sync_runner] = lambda: runner


def test_health():
    with TestClient(app) as client:
        assert client.get("/").json() == {"status": "ok"}


def test_run_returns_success_body():
    _override(
        SyncSuccess(
            prices_updated=1,
            bands_updated=1,
            price_tx_hash="0xtx1",
            band_tx_hash="0xtx2",
            band_width_bps=150,
        )
    )
    try:
        with TestClient(app) as client:
            response = client.get("/api/run")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["pricesUpdated"] == 1
    assert body["bandsUpdated"] == 1
    assert body["priceTxHash"] == "0xtx1"
    assert body["bandTxHash"] == "0xtx2"
    assert body["bandWidthBps"] == 150


def test_run_returns_failure_body_with_mapped_status():
    _override(SyncFailure(error="Could not locate listings table", http_status=502))
    try:
        with TestClient(app) as client:
            response = client.get("/api/run")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502
    assert response.json() == {"success": False, "error": "Could not locate listings table"}
