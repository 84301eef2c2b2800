from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from domain.quotes import RawQuote

from .http_client import JsonHttpClient, SourcePayloadError

ARGENTINA_BASE_URL = "https://dolarapi.com/v1"
BOLIVIA_BASE_URL = "https://bo.dolarapi.com/v1"


# API docs: https://dolarapi.com/docs/
class DolarApiClient:
    """Client for the DolarApi family of endpoints (one host per country)."""

    def __init__(
        self,
        *,
        base_url: str = ARGENTINA_BASE_URL,
        name: str = "DolarApi",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._http = JsonHttpClient(name=name, base_url=base_url, timeout=timeout, session=session)

    @property
    def name(self) -> str:
        return self._http.name

    def get_quotes(self) -> list[RawQuote]:
        payload = self._http.get_json("/dolares")
        if not isinstance(payload, list):
            raise SourcePayloadError(f"{self.name} returned unexpected payload type", payload=payload)
        return [self._parse_quote(entry) for entry in payload]

    def _parse_quote(self, entry: Any) -> RawQuote:
        try:
            return RawQuote.model_validate(entry)
        except ValidationError as exc:
            raise SourcePayloadError(f"{self.name} returned malformed quote: {exc}", payload=entry) from exc


__all__ = ["ARGENTINA_BASE_URL", "BOLIVIA_BASE_URL", "DolarApiClient"]
