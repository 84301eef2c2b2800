from __future__ import annotations

from enum import StrEnum
from typing import Any, Callable, Iterable, Mapping, Protocol

import requests

from domain.quotes import TickerPrice

from .http_client import JsonHttpClient, SourcePayloadError


class CryptoProvider(StrEnum):
    BINANCE = "binance"
    BYBIT = "bybit"
    OKX = "okx"
    KRAKEN = "kraken"


class CryptoTickerSource(Protocol):
    name: str

    def fetch_tickers(self) -> list[TickerPrice]: ...


def strip_quote_suffix(symbol: str, suffix: str) -> str | None:
    """``BTCUSDT`` -> ``BTC``; symbols not quoted in ``suffix`` map to ``None``."""

    if len(symbol) <= len(suffix) or not symbol.endswith(suffix):
        return None
    return symbol[: -len(suffix)]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class _HttpTickerSource:
    name = "crypto"
    default_base_url = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._http = JsonHttpClient(
            name=self.name,
            base_url=base_url or self.default_base_url,
            timeout=timeout,
            session=session,
        )

    def _collect(self, entries: Iterable[Any], symbol_key: str, price_key: str) -> list[TickerPrice]:
        tickers: list[TickerPrice] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            canonical = self.canonical_symbol(_text(entry.get(symbol_key)))
            if canonical is None:
                continue
            tickers.append(TickerPrice(symbol=canonical, price_text=_text(entry.get(price_key))))
        return tickers

    def canonical_symbol(self, raw_symbol: str) -> str | None:
        return strip_quote_suffix(raw_symbol, "USDT")


# API docs: https://developers.binance.com/docs/binance-spot-api-docs/rest-api/market-data-endpoints
class BinanceTickerSource(_HttpTickerSource):
    name = "Binance"
    default_base_url = "https://api.binance.com"

    def fetch_tickers(self) -> list[TickerPrice]:
        payload = self._http.get_json("/api/v3/ticker/price")
        if not isinstance(payload, list):
            # Binance reports failures as {"code": ..., "msg": ...}.
            raise SourcePayloadError("Binance returned unexpected payload type", payload=payload)
        return self._collect(payload, "symbol", "price")


# API docs: https://bybit-exchange.github.io/docs/v5/market/tickers
class BybitTickerSource(_HttpTickerSource):
    name = "Bybit"
    default_base_url = "https://api.bybit.com"

    def fetch_tickers(self) -> list[TickerPrice]:
        payload = self._http.get_json("/v5/market/tickers", params={"category": "spot"})
        if not isinstance(payload, dict):
            raise SourcePayloadError("Bybit returned unexpected payload type", payload=payload)
        if payload.get("retCode") != 0:
            raise SourcePayloadError(payload.get("retMsg") or "Bybit error", payload=payload)

        result = payload.get("result")
        entries = result.get("list") if isinstance(result, dict) else None
        if not isinstance(entries, list):
            raise SourcePayloadError("Bybit payload missing ticker list", payload=payload)
        return self._collect(entries, "symbol", "lastPrice")


# API docs: https://www.okx.com/docs-v5/en/#public-data-rest-api-get-tickers
class OkxTickerSource(_HttpTickerSource):
    name = "OKX"
    default_base_url = "https://www.okx.com"

    def fetch_tickers(self) -> list[TickerPrice]:
        payload = self._http.get_json("/api/v5/market/tickers", params={"instType": "SPOT"})
        if not isinstance(payload, dict):
            raise SourcePayloadError("OKX returned unexpected payload type", payload=payload)
        if str(payload.get("code")) != "0":
            raise SourcePayloadError(payload.get("msg") or "OKX error", payload=payload)

        entries = payload.get("data")
        if not isinstance(entries, list):
            raise SourcePayloadError("OKX payload missing ticker list", payload=payload)
        return self._collect(entries, "instId", "last")

    def canonical_symbol(self, raw_symbol: str) -> str | None:
        return strip_quote_suffix(raw_symbol, "-USDT")


# Kraken keeps legacy X/Z-prefixed names for its oldest assets.
KRAKEN_ASSET_ALIASES: Mapping[str, str] = {
    "XXBT": "BTC",
    "XBT": "BTC",
    "XETH": "ETH",
    "XXRP": "XRP",
    "XLTC": "LTC",
    "XETC": "ETC",
    "XXDG": "DOGE",
    "XDG": "DOGE",
}


# API docs: https://docs.kraken.com/api/docs/rest-api/get-ticker-information
class KrakenTickerSource(_HttpTickerSource):
    name = "Kraken"
    default_base_url = "https://api.kraken.com"

    def fetch_tickers(self) -> list[TickerPrice]:
        payload = self._http.get_json("/0/public/Ticker")
        if not isinstance(payload, dict):
            raise SourcePayloadError("Kraken returned unexpected payload type", payload=payload)
        if payload.get("error"):
            raise SourcePayloadError("; ".join(map(str, payload["error"])), payload=payload)

        result = payload.get("result")
        if not isinstance(result, dict):
            raise SourcePayloadError("Kraken payload missing result", payload=payload)

        tickers: list[TickerPrice] = []
        for pair, info in result.items():
            canonical = self.canonical_symbol(pair)
            if canonical is None or not isinstance(info, dict):
                continue
            last_trade = info.get("c")
            price_text = _text(last_trade[0]) if isinstance(last_trade, list) and last_trade else ""
            tickers.append(TickerPrice(symbol=canonical, price_text=price_text))
        return tickers

    def canonical_symbol(self, raw_symbol: str) -> str | None:
        asset = strip_quote_suffix(raw_symbol, "ZUSD") or strip_quote_suffix(raw_symbol, "USD")
        if asset is None:
            return None
        return KRAKEN_ASSET_ALIASES.get(asset, asset)


CRYPTO_SOURCES: Mapping[CryptoProvider, Callable[..., CryptoTickerSource]] = {
    CryptoProvider.BINANCE: BinanceTickerSource,
    CryptoProvider.BYBIT: BybitTickerSource,
    CryptoProvider.OKX: OkxTickerSource,
    CryptoProvider.KRAKEN: KrakenTickerSource,
}


def build_crypto_source(
    provider: str,
    *,
    timeout: float = 10.0,
    session: requests.Session | None = None,
) -> CryptoTickerSource:
    try:
        factory = CRYPTO_SOURCES[CryptoProvider(provider.lower())]
    except ValueError as exc:
        supported = ", ".join(p.value for p in CryptoProvider)
        raise ValueError(f"Unsupported crypto provider {provider!r}, expected one of: {supported}") from exc
    return factory(timeout=timeout, session=session)


__all__ = [
    "CRYPTO_SOURCES",
    "KRAKEN_ASSET_ALIASES",
    "BinanceTickerSource",
    "BybitTickerSource",
    "CryptoProvider",
    "CryptoTickerSource",
    "KrakenTickerSource",
    "OkxTickerSource",
    "build_crypto_source",
    "strip_quote_suffix",
]
