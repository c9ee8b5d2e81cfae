from __future__ import annotations

from typing import Any

import pytest

from gsheets_a1.client import SheetsTransport, SpreadsheetValues
from gsheets_a1.codec import Left, Right
from gsheets_a1.errors import ParseError
from gsheets_a1.models import Credentials, UpdateValuesResponse, ValueRange
from gsheets_a1.values_api import ValuesRequest


class _FakeTransport:
    """Records requests and replies with a canned payload."""

    def __init__(self, response: object) -> None:
        self.response = response
        self.requests: list[ValuesRequest] = []
        self.credentials: list[Credentials] = []

    def send(self, request: ValuesRequest, credentials: Credentials) -> object:
        self.requests.append(request)
        self.credentials.append(credentials)
        return self.response


def test_fake_transport_satisfies_protocol() -> None:
    assert isinstance(_FakeTransport({}), SheetsTransport)


def test_get_returns_value_range(
    value_range_payload: dict[str, Any], credentials: Credentials
) -> None:
    transport = _FakeTransport(value_range_payload)
    result = SpreadsheetValues(transport, credentials).get("sheet-123", "Sheet1!A1:B2")
    assert isinstance(result, Right)
    assert isinstance(result.value, ValueRange)
    assert result.value.values[1] == ["apple", "3"]
    assert [request.method for request in transport.requests] == ["GET"]
    assert transport.credentials == [credentials]


def test_get_returns_api_error(
    error_payload: dict[str, Any], credentials: Credentials
) -> None:
    transport = _FakeTransport(error_payload)
    result = SpreadsheetValues(transport, credentials).get("sheet-123", "Sheet1")
    assert isinstance(result, Left)
    assert result.value.code == 404


def test_get_turns_unexpected_payload_into_fallback_error(credentials: Credentials) -> None:
    transport = _FakeTransport({"range": "Sheet1!", "majorDimension": "ROWS"})
    result = SpreadsheetValues(transport, credentials).get("sheet-123", "Sheet1")
    assert isinstance(result, Left)
    assert result.value.code == 400


def test_get_rejects_malformed_notation_before_sending(credentials: Credentials) -> None:
    transport = _FakeTransport({})
    with pytest.raises(ParseError):
        SpreadsheetValues(transport, credentials).get("sheet-123", "Sheet1!")
    assert transport.requests == []


def test_update_sends_values_and_returns_response(
    update_response_payload: dict[str, Any], credentials: Credentials
) -> None:
    transport = _FakeTransport(update_response_payload)
    result = SpreadsheetValues(transport, credentials).update(
        "sheet-123",
        "Sheet1!A1:B2",
        [["name", "qty"], ["apple", "3"]],
        value_input_option="USER_ENTERED",
    )
    assert isinstance(result, Right)
    assert isinstance(result.value, UpdateValuesResponse)
    assert result.value.updated_cells == 4
    (request,) = transport.requests
    assert request.method == "PUT"
    assert request.params == {"valueInputOption": "USER_ENTERED"}
    assert request.body is not None
    assert request.body["range"] == "Sheet1!A1:B2"
    assert request.body["majorDimension"] == "ROWS"
