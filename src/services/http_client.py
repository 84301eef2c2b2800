from __future__ import annotations

from typing import Any

import requests
from requests import Response


class SourceAPIError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class SourcePayloadError(SourceAPIError):
    """Well-formed JSON that does not have the shape the provider documents."""


class JsonHttpClient:
    def __init__(
        self,
        *,
        name: str,
        base_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url must be provided")

        self.name = name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def _request(self, method: str, path: str, *, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            payload = self._extract_error(resp)
            raise SourceAPIError(
                f"{self.name} request failed with HTTP {status_code}", status_code=status_code, payload=payload
            ) from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            raise SourceAPIError(
                f"{self.name} request failed ({type(exc).__name__})", status_code=status_code
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SourceAPIError(f"{self.name} returned invalid JSON", payload=response.text) from exc

    @staticmethod
    def _extract_error(response: Response | None) -> Any | None:
        if response is None:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


__all__ = ["JsonHttpClient", "SourceAPIError", "SourcePayloadError"]
