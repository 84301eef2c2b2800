from __future__ import annotations

from pathlib import Path

import pytest

from config import AppSettings, load_config
from domain.errors import ConfigurationError
from services.crypto_sources import CryptoProvider


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("EXCHANGE_KEY", "CRYPTO_PROVIDER", "OUTPUT_PATH", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXCHANGE_KEY", "abc123")
    monkeypatch.setenv("CRYPTO_PROVIDER", "kraken")

    settings = load_config()

    assert settings.exchange_key == "abc123"
    assert settings.crypto_provider is CryptoProvider.KRAKEN
    assert settings.output_path == Path("rates.json")
    assert settings.request_timeout == 10.0


def test_load_config_reads_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("EXCHANGE_KEY=from-file\n", encoding="utf-8")

    assert load_config().exchange_key == "from-file"


def test_missing_key_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="EXCHANGE_KEY"):
        load_config()


def test_empty_key_is_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXCHANGE_KEY", "")

    with pytest.raises(ConfigurationError):
        load_config()


def test_unknown_crypto_provider_is_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXCHANGE_KEY", "abc123")
    monkeypatch.setenv("CRYPTO_PROVIDER", "coinbase")

    with pytest.raises(ConfigurationError, match="CRYPTO_PROVIDER"):
        load_config()


def test_settings_can_be_built_directly() -> None:
    settings = AppSettings(exchange_key="k", output_path=Path("out.json"))

    assert settings.output_path == Path("out.json")
