from __future__ import annotations

import logging
import math
from typing import Collection, Mapping

from .quotes import RateTable

logger = logging.getLogger(__name__)


def merge_fiat_rates(
    world_rates: Mapping[str, float] | None,
    local_rates: Mapping[str, float],
    *,
    removed_codes: Collection[str],
) -> RateTable:
    """Seed from the world table, drop superseded codes, then apply local overrides.

    Neither input is mutated. Codes whose value is not a finite non-negative
    number are left out of the result.
    """

    merged: RateTable = dict(world_rates or {})
    for code in removed_codes:
        merged.pop(code, None)
    merged.update(local_rates)
    return _drop_invalid(merged)


def _drop_invalid(rates: RateTable) -> RateTable:
    valid: RateTable = {}
    for code, value in rates.items():
        if not math.isfinite(value) or value < 0:
            logger.warning("Dropping %s with invalid rate %s", code, value)
            continue
        valid[code] = value
    return valid


__all__ = ["merge_fiat_rates"]
