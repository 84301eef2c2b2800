from __future__ import annotations

import requests
from pydantic import ValidationError

from domain.quotes import WorldRates

from .http_client import JsonHttpClient, SourcePayloadError

EXCHANGE_RATE_API_BASE_URL = "https://v6.exchangerate-api.com/v6"


# API docs: https://www.exchangerate-api.com/docs/standard-requests
class ExchangeRateApiClient:
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = EXCHANGE_RATE_API_BASE_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be provided")

        self.api_key = api_key
        self._http = JsonHttpClient(name="ExchangeRate-API", base_url=base_url, timeout=timeout, session=session)

    def get_latest(self, base: str = "USD") -> WorldRates:
        payload = self._http.get_json(f"/{self.api_key}/latest/{base.upper()}")
        if not isinstance(payload, dict):
            raise SourcePayloadError("ExchangeRate-API returned unexpected payload type", payload=payload)

        try:
            rates = WorldRates.model_validate(payload)
        except ValidationError as exc:
            raise SourcePayloadError(f"ExchangeRate-API payload malformed: {exc}", payload=payload) from exc

        if rates.result != "success":
            error_type = payload.get("error-type", "unknown error")
            raise SourcePayloadError(f"ExchangeRate-API returned {rates.result}: {error_type}", payload=payload)
        return rates


__all__ = ["EXCHANGE_RATE_API_BASE_URL", "ExchangeRateApiClient"]
