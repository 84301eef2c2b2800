from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

RateTable = dict[str, float]


class DerivationRule(StrEnum):
    MIDPOINT = "MIDPOINT"
    SELL_ONLY = "SELL_ONLY"


class RawQuote(BaseModel):
    """A single instrument as reported by a quote provider.

    Missing buy/sell values (JSON ``null``) count as zero when a rule is applied.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    category: str = Field(alias="casa")
    buy: float | None = Field(default=None, alias="compra")
    sell: float | None = Field(default=None, alias="venta")
    name: str | None = Field(default=None, alias="nombre")
    currency: str | None = Field(default=None, alias="moneda")
    updated_at: str | None = Field(default=None, alias="fechaActualizacion")


@dataclass(frozen=True)
class CategoryRule:
    code: str
    rule: DerivationRule


@dataclass(frozen=True)
class FallbackRule:
    target: str
    fallback: str


@dataclass(frozen=True)
class TickerPrice:
    symbol: str
    price_text: str


class WorldRates(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    result: str
    base_code: str = "USD"
    conversion_rates: dict[str, float] | None = None


__all__ = [
    "CategoryRule",
    "DerivationRule",
    "FallbackRule",
    "RateTable",
    "RawQuote",
    "TickerPrice",
    "WorldRates",
]
