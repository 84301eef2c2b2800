from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field

BASE_CURRENCY = "USD"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """RFC3339 with second precision and a ``Z`` suffix."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    updated_at: str = Field(alias="updatedAt")
    base: str
    rates: dict[str, float]
    crypto_rates: dict[str, float] = Field(alias="cryptoRates")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def build_snapshot(
    rates: Mapping[str, float],
    crypto_rates: Mapping[str, float],
    *,
    clock: Clock = utc_now,
) -> Snapshot:
    return Snapshot(
        updated_at=format_timestamp(clock()),
        base=BASE_CURRENCY,
        rates=dict(rates),
        crypto_rates=dict(crypto_rates),
    )


__all__ = ["BASE_CURRENCY", "Clock", "Snapshot", "build_snapshot", "format_timestamp", "utc_now"]
