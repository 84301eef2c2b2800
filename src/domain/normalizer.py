from __future__ import annotations

from typing import Iterable, Mapping

from .quotes import CategoryRule, DerivationRule, RateTable, RawQuote


def midpoint(buy: float, sell: float) -> float:
    return (buy + sell) / 2


def sell_only(buy: float, sell: float) -> float:
    return sell


_RULES = {
    DerivationRule.MIDPOINT: midpoint,
    DerivationRule.SELL_ONLY: sell_only,
}


def apply_rule(rule: DerivationRule, quote: RawQuote) -> float:
    return _RULES[rule](quote.buy or 0.0, quote.sell or 0.0)


def normalize_quotes(quotes: Iterable[RawQuote], rules: Mapping[str, CategoryRule]) -> RateTable:
    """Derive named rates from raw provider quotes.

    Quotes whose category has no entry in ``rules`` are ignored. When a category
    appears more than once the last quote wins.
    """

    rates: RateTable = {}
    for quote in quotes:
        category_rule = rules.get(quote.category)
        if category_rule is None:
            continue
        rates[category_rule.code] = apply_rule(category_rule.rule, quote)
    return rates


__all__ = ["apply_rule", "midpoint", "normalize_quotes", "sell_only"]
