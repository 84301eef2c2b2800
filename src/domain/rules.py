"""Static rate configuration: category dispatch tables, fallback and crypto basket."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .quotes import CategoryRule, DerivationRule, FallbackRule

ARGENTINA_CATEGORY_RULES: Mapping[str, CategoryRule] = MappingProxyType(
    {
        "blue": CategoryRule("ARS_BLUE", DerivationRule.MIDPOINT),
        "oficial": CategoryRule("ARS_OFFICIAL", DerivationRule.MIDPOINT),
        "cripto": CategoryRule("ARS_CRYPTO", DerivationRule.MIDPOINT),
        # MEP/card rate: only the sell side is meaningful.
        "bolsa": CategoryRule("ARS_MEP", DerivationRule.SELL_ONLY),
    }
)

BOLIVIA_CATEGORY_RULES: Mapping[str, CategoryRule] = MappingProxyType(
    {
        "oficial": CategoryRule("BOB_OFFICIAL", DerivationRule.MIDPOINT),
        # Buy side is not reported for the informal market.
        "binance": CategoryRule("BOB_BLUE", DerivationRule.SELL_ONLY),
    }
)

MEP_FALLBACK = FallbackRule(target="ARS_MEP", fallback="ARS_BLUE")

# World-provider codes superseded by the locally derived rates.
LOCALLY_COMPUTED_CODES: frozenset[str] = frozenset({"ARS", "BOB"})

DEFAULT_CRYPTO_BASKET: frozenset[str] = frozenset(
    {
        "BTC",
        "ETH",
        "BNB",
        "SOL",
        "XRP",
        "ADA",
        "AVAX",
        "DOT",
        "LINK",
        "NEAR",
        "APT",
        "SUI",
        "TON",
        "POL",
        "UNI",
        "AAVE",
        "MKR",
        "INJ",
        "RNDR",
        "LTC",
        "BCH",
        "ETC",
        "USDC",
        "DAI",
        "FDUSD",
        "DOGE",
        "SHIB",
        "PEPE",
        "WIF",
    }
)


@dataclass(frozen=True)
class OracleRules:
    argentina: Mapping[str, CategoryRule] = field(default_factory=lambda: ARGENTINA_CATEGORY_RULES)
    bolivia: Mapping[str, CategoryRule] = field(default_factory=lambda: BOLIVIA_CATEGORY_RULES)
    fallbacks: tuple[FallbackRule, ...] = (MEP_FALLBACK,)
    removed_codes: frozenset[str] = LOCALLY_COMPUTED_CODES
    crypto_basket: frozenset[str] = DEFAULT_CRYPTO_BASKET


__all__ = [
    "ARGENTINA_CATEGORY_RULES",
    "BOLIVIA_CATEGORY_RULES",
    "DEFAULT_CRYPTO_BASKET",
    "LOCALLY_COMPUTED_CODES",
    "MEP_FALLBACK",
    "OracleRules",
]
