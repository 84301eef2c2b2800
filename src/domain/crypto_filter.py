from __future__ import annotations

import logging
import math
from typing import Collection, Iterable

from .errors import EntryParseError
from .quotes import RateTable, TickerPrice

logger = logging.getLogger(__name__)


def parse_price(ticker: TickerPrice) -> float:
    try:
        price = float(ticker.price_text)
    except (TypeError, ValueError) as exc:
        raise EntryParseError(ticker.symbol, ticker.price_text) from exc
    if not math.isfinite(price) or price < 0:
        raise EntryParseError(ticker.symbol, ticker.price_text)
    return price


def filter_crypto_basket(tickers: Iterable[TickerPrice], basket: Collection[str]) -> RateTable:
    """Keep basket symbols only, keyed by canonical symbol; last occurrence wins."""

    rates: RateTable = {}
    for ticker in tickers:
        if ticker.symbol not in basket:
            continue
        try:
            rates[ticker.symbol] = parse_price(ticker)
        except EntryParseError as exc:
            logger.debug("Skipping ticker entry: %s", exc)
    return rates


__all__ = ["filter_crypto_basket", "parse_price"]
