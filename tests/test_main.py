from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

import main
from config import AppSettings
from services.crypto_sources import KrakenTickerSource
from services.http_client import SourceAPIError
from services.rate_oracle import RateOracle
from tests.helpers.stub_sources import StubCryptoSource, StubQuoteSource, StubWorldSource, fixed_clock, quote


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EXCHANGE_KEY", raising=False)


def _install_oracle(monkeypatch: pytest.MonkeyPatch, world: StubWorldSource) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_build(settings: AppSettings, **kwargs: Any) -> RateOracle:
        calls.append(kwargs)
        return RateOracle(
            argentina_source=StubQuoteSource([quote("blue", 100, 110), quote("bolsa", 0, 108)]),
            bolivia_source=StubQuoteSource([quote("oficial", 8, 9)]),
            world_source=world,
            crypto_source=StubCryptoSource(),
            clock=fixed_clock,
        )

    monkeypatch.setattr(main, "build_rate_oracle", fake_build)
    return calls


def test_main_writes_snapshot(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EXCHANGE_KEY", "abc123")
    calls = _install_oracle(monkeypatch, StubWorldSource({"EUR": 0.9, "ARS": 1200}))
    output = tmp_path / "rates.json"

    exit_code = main.main(["--output", str(output), "--crypto-provider", "okx"])

    assert exit_code == 0
    assert calls == [{"crypto_provider": "okx"}]
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["rates"] == {"EUR": 0.9, "ARS_BLUE": 105, "ARS_MEP": 108, "BOB_OFFICIAL": 8.5}
    assert payload["cryptoRates"] == {}


def test_main_fatal_source_writes_nothing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EXCHANGE_KEY", "abc123")
    _install_oracle(monkeypatch, StubWorldSource(error=SourceAPIError("HTTP 500", status_code=500)))
    output = tmp_path / "rates.json"

    exit_code = main.main(["--output", str(output)])

    assert exit_code == 1
    assert not output.exists()


def test_main_missing_key_aborts_before_fetching(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls = _install_oracle(monkeypatch, StubWorldSource({"EUR": 0.9}))

    exit_code = main.main(["--output", str(tmp_path / "rates.json")])

    assert exit_code == 1
    assert calls == []
    assert list(tmp_path.iterdir()) == []


def test_build_rate_oracle_uses_settings() -> None:
    settings = AppSettings(exchange_key="abc123", crypto_provider="binance", request_timeout=3.0)

    oracle = main.build_rate_oracle(settings, crypto_provider="kraken")

    assert isinstance(oracle.crypto_source, KrakenTickerSource)
    assert oracle.argentina_source.name == "DolarApi Argentina"
    assert oracle.bolivia_source.name == "DolarApi Bolivia"
