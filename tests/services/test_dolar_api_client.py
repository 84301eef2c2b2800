from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from services.dolar_api_client import BOLIVIA_BASE_URL, DolarApiClient
from services.http_client import SourceAPIError, SourcePayloadError
from tests.helpers.stub_sources import mock_response, mock_session


def test_get_quotes_parses_payload() -> None:
    payload = [
        {
            "moneda": "USD",
            "casa": "blue",
            "nombre": "Blue",
            "compra": 1180,
            "venta": 1200,
            "fechaActualizacion": "2025-03-01T12:00:00.000Z",
        },
        {"casa": "bolsa", "compra": None, "venta": 1190.5},
    ]
    session = mock_session(payload)

    client = DolarApiClient(session=session)
    quotes = client.get_quotes()

    assert [q.category for q in quotes] == ["blue", "bolsa"]
    assert quotes[0].buy == 1180.0
    assert quotes[0].sell == 1200.0
    assert quotes[0].name == "Blue"
    assert quotes[1].buy is None
    assert quotes[1].sell == 1190.5

    session.request.assert_called_once()
    args, kwargs = session.request.call_args
    assert args == ("GET", "https://dolarapi.com/v1/dolares")
    assert kwargs["timeout"] == 10.0


def test_bolivia_host_is_configurable() -> None:
    session = mock_session([{"casa": "oficial", "compra": 6.86, "venta": 6.96}])

    client = DolarApiClient(base_url=BOLIVIA_BASE_URL, name="DolarApi Bolivia", session=session)
    quotes = client.get_quotes()

    assert quotes[0].category == "oficial"
    assert session.request.call_args.args[1] == "https://bo.dolarapi.com/v1/dolares"


def test_non_list_payload_is_rejected() -> None:
    client = DolarApiClient(session=mock_session({"message": "not found"}))

    with pytest.raises(SourcePayloadError):
        client.get_quotes()


def test_entry_without_category_is_rejected() -> None:
    client = DolarApiClient(session=mock_session([{"compra": 1, "venta": 2}]))

    with pytest.raises(SourcePayloadError):
        client.get_quotes()


def test_http_errors_are_wrapped() -> None:
    session = Mock()
    response = mock_response({"error": "boom"}, status_code=503)
    response.raise_for_status.side_effect = requests.HTTPError(response=response)
    session.request.return_value = response

    client = DolarApiClient(session=session)

    with pytest.raises(SourceAPIError) as exc_info:
        client.get_quotes()
    assert exc_info.value.status_code == 503
    assert exc_info.value.payload == {"error": "boom"}
    assert not isinstance(exc_info.value, SourcePayloadError)


def test_invalid_json_is_wrapped() -> None:
    session = Mock()
    response = mock_response(None)
    response.json.side_effect = ValueError("no json")
    session.request.return_value = response

    client = DolarApiClient(session=session)

    with pytest.raises(SourceAPIError, match="invalid JSON"):
        client.get_quotes()
