from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .quotes import FallbackRule, RateTable

logger = logging.getLogger(__name__)


def resolve_fallback(rates: Mapping[str, float], rule: FallbackRule) -> RateTable:
    resolved = dict(rates)
    if resolved.get(rule.target):
        return resolved

    fallback_value = resolved.get(rule.fallback)
    if fallback_value is None:
        # Nothing to substitute; a zero target is not published.
        resolved.pop(rule.target, None)
        logger.info("%s unavailable and %s missing, leaving %s unset", rule.target, rule.fallback, rule.target)
        return resolved

    resolved[rule.target] = fallback_value
    logger.info("%s rate was 0, falling back to %s rate %s", rule.target, rule.fallback, fallback_value)
    return resolved


def resolve_fallbacks(rates: Mapping[str, float], rules: Iterable[FallbackRule]) -> RateTable:
    resolved = dict(rates)
    for rule in rules:
        resolved = resolve_fallback(resolved, rule)
    return resolved


__all__ = ["resolve_fallback", "resolve_fallbacks"]
