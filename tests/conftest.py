from typing import Generator

import pytest

from config import config
from domain.quotes import TickerPrice
from domain.rules import OracleRules
from tests.helpers.stub_sources import StubCryptoSource, StubQuoteSource, StubWorldSource, quote


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()


@pytest.fixture(scope="function")
def argentina_source() -> StubQuoteSource:
    return StubQuoteSource([quote("blue", 100, 110), quote("oficial", 90, 92), quote("bolsa", 0, 108)])


@pytest.fixture(scope="function")
def bolivia_source() -> StubQuoteSource:
    return StubQuoteSource([quote("oficial", 8, 9)])


@pytest.fixture(scope="function")
def world_source() -> StubWorldSource:
    return StubWorldSource({"EUR": 0.9, "ARS": 1200, "BOB": 6.9})


@pytest.fixture(scope="function")
def crypto_source() -> StubCryptoSource:
    return StubCryptoSource([TickerPrice("BTC", "65000.5"), TickerPrice("XYZ", "1.0")])


@pytest.fixture(scope="function")
def btc_only_rules() -> OracleRules:
    return OracleRules(crypto_basket=frozenset({"BTC"}))
