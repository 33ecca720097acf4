"""Tests for the oracle-sync CLI."""
import json

import pytest

from equity_oracle_sync import cli
from equity_oracle_sync.schemas import SyncFailure, SyncSuccess


def _patch_run_once(monkeypatch, result):
    async def fake_run_once():
        return result

    monkeypatch.setattr(cli, "run_once", fake_run_once)
    monkeypatch.setattr(cli, "configure_logging", lambda: None)


def test_run_prints_json_and_exits_zero(monkeypatch, capsys):
    _patch_run_once(
        monkeypatch, SyncSuccess(prices_updated=2, bands_updated=2, band_width_bps=150)
    )

    assert cli.main(["run"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["pricesUpdated"] == 2


def test_run_exits_one_on_failure(monkeypatch, capsys):
    _patch_run_once(monkeypatch, SyncFailure(error="Private key missing"))

    assert cli.main(["run"]) == 1
    assert json.loads(capsys.readouterr().out) == {"success": False, "error": "Private key missing"}


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
