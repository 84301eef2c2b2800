from __future__ import annotations

import logging
from typing import Callable, Protocol, TypeVar

from domain.aggregator import merge_fiat_rates
from domain.crypto_filter import filter_crypto_basket
from domain.errors import FatalSourceError, OptionalSourceError
from domain.fallback import resolve_fallbacks
from domain.normalizer import normalize_quotes
from domain.quotes import RateTable, RawQuote, TickerPrice, WorldRates
from domain.rules import OracleRules
from domain.snapshot import BASE_CURRENCY, Clock, Snapshot, build_snapshot, utc_now

from .crypto_sources import CryptoTickerSource
from .http_client import SourceAPIError, SourcePayloadError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QuoteSource(Protocol):
    name: str

    def get_quotes(self) -> list[RawQuote]: ...


class WorldRateSource(Protocol):
    def get_latest(self, base: str = "USD") -> WorldRates: ...


class RateOracle:
    """Fetches every source in a fixed order and assembles one snapshot.

    Required sources (Argentina, Bolivia, world rates) raise ``FatalSourceError``
    on any failure. The crypto source only raises for a well-formed payload of
    the wrong shape; transport failures leave the crypto table empty.
    """

    def __init__(
        self,
        *,
        argentina_source: QuoteSource,
        bolivia_source: QuoteSource,
        world_source: WorldRateSource,
        crypto_source: CryptoTickerSource | None = None,
        rules: OracleRules | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.argentina_source = argentina_source
        self.bolivia_source = bolivia_source
        self.world_source = world_source
        self.crypto_source = crypto_source
        self.rules = rules or OracleRules()
        self.clock = clock

    def run(self) -> Snapshot:
        local_rates = self.local_rates()

        logger.info("Fetching world rates")
        world = self._fetch_required("world rates", lambda: self.world_source.get_latest(BASE_CURRENCY))

        crypto_rates = self.crypto_rates()

        fiat_rates = merge_fiat_rates(
            world.conversion_rates,
            local_rates,
            removed_codes=self.rules.removed_codes,
        )
        return build_snapshot(fiat_rates, crypto_rates, clock=self.clock)

    def local_rates(self) -> RateTable:
        logger.info("Fetching Argentina quotes")
        argentina = self._fetch_required("Argentina quotes", self.argentina_source.get_quotes)
        logger.info("Fetching Bolivia quotes")
        bolivia = self._fetch_required("Bolivia quotes", self.bolivia_source.get_quotes)

        rates = normalize_quotes(argentina, self.rules.argentina)
        rates.update(normalize_quotes(bolivia, self.rules.bolivia))
        return resolve_fallbacks(rates, self.rules.fallbacks)

    def crypto_rates(self) -> RateTable:
        if self.crypto_source is None:
            return {}

        logger.info("Fetching %s crypto rates", self.crypto_source.name)
        try:
            tickers = self._fetch_tickers(self.crypto_source)
        except OptionalSourceError as exc:
            logger.warning("Crypto rates unavailable, continuing without them: %s", exc)
            return {}
        return filter_crypto_basket(tickers, self.rules.crypto_basket)

    @staticmethod
    def _fetch_tickers(source: CryptoTickerSource) -> list[TickerPrice]:
        try:
            return source.fetch_tickers()
        except SourcePayloadError as exc:
            logger.debug("%s response body: %s", source.name, exc.payload)
            raise FatalSourceError(source.name, str(exc)) from exc
        except SourceAPIError as exc:
            raise OptionalSourceError(source.name, str(exc)) from exc

    @staticmethod
    def _fetch_required(source: str, fetch: Callable[[], T]) -> T:
        try:
            return fetch()
        except SourceAPIError as exc:
            raise FatalSourceError(source, str(exc)) from exc


__all__ = ["QuoteSource", "RateOracle", "WorldRateSource"]
