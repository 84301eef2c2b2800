from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.errors import ConfigurationError
from services.crypto_sources import CryptoProvider
from services.dolar_api_client import ARGENTINA_BASE_URL, BOLIVIA_BASE_URL
from services.exchange_rate_api_client import EXCHANGE_RATE_API_BASE_URL


class AppSettings(BaseSettings):
    exchange_key: str = Field(min_length=1)
    crypto_provider: CryptoProvider = CryptoProvider.BINANCE
    output_path: Path = Path("rates.json")
    request_timeout: float = Field(default=10.0, gt=0)

    argentina_api_url: str = ARGENTINA_BASE_URL
    bolivia_api_url: str = BOLIVIA_BASE_URL
    exchange_rate_api_url: str = EXCHANGE_RATE_API_BASE_URL

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()  # type: ignore[call-arg]


def load_config() -> AppSettings:
    try:
        return config()
    except ValidationError as exc:
        missing = [".".join(map(str, err["loc"])).upper() for err in exc.errors()]
        raise ConfigurationError(f"Invalid or missing settings: {', '.join(missing)}") from exc


__all__ = ["AppSettings", "config", "load_config"]
