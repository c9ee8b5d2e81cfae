from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError
import pytest

from gsheets_a1.codec import (
    Left,
    Right,
    decode,
    decode_either,
    decode_error,
    decoder_for,
    encode,
)
from gsheets_a1.errors import DecodingFailure
from gsheets_a1.models import GsheetsError, UpdateValuesResponse, ValueRange


class _Ping(BaseModel):
    code: int


class _Pong(BaseModel):
    code: int


def test_decode_accepts_json_text(value_range_payload: dict[str, Any]) -> None:
    value_range = decode(ValueRange, json.dumps(value_range_payload))
    assert str(value_range.range) == "Sheet1!A1:B2"


def test_encode_uses_api_field_names(update_response_payload: dict[str, Any]) -> None:
    response = decode(UpdateValuesResponse, update_response_payload)
    assert encode(response) == update_response_payload


def test_decode_reports_parse_failure_with_history() -> None:
    with pytest.raises(DecodingFailure) as excinfo:
        decode(ValueRange, {"range": "Sheet1!", "majorDimension": "ROWS"})
    failure = excinfo.value
    assert failure.history == ("range",)
    assert "Expected" in failure.message
    assert isinstance(failure.cause, ValidationError)
    assert "(at range)" in str(failure)


def test_decode_reports_shape_failure_with_history(
    value_range_payload: dict[str, Any],
) -> None:
    value_range_payload["majorDimension"] = "SIDEWAYS"
    with pytest.raises(DecodingFailure) as excinfo:
        decode(ValueRange, value_range_payload)
    assert excinfo.value.history == ("majorDimension",)


def test_decode_reports_nested_history(value_range_payload: dict[str, Any]) -> None:
    value_range_payload["values"] = [["ok"], ["ok", 3]]
    with pytest.raises(DecodingFailure) as excinfo:
        decode(ValueRange, value_range_payload)
    assert excinfo.value.history == ("values", 1, 1)


def test_decode_rejects_invalid_json_text() -> None:
    with pytest.raises(DecodingFailure, match="ValueRange"):
        decode(ValueRange, "{not json")


def test_decode_error_reads_envelope(error_payload: dict[str, Any]) -> None:
    assert decode_error(error_payload) == GsheetsError(
        code=404, message="Requested entity was not found.", status="NOT_FOUND"
    )


def test_decode_error_reads_envelope_text(error_payload: dict[str, Any]) -> None:
    assert decode_error(json.dumps(error_payload)).status == "NOT_FOUND"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"error": None},
        {"error": {"code": "oops"}},
        {"error": {"code": 500, "message": "boom"}},
        [],
        None,
        "not json",
        "[1, 2]",
        b"\xff\xfe",
    ],
)
def test_decode_error_falls_back_without_raising(payload: object) -> None:
    error = decode_error(payload)
    assert error.code == 400
    assert error.status == ""
    assert "added a row" in error.message


def test_decode_error_fallback_includes_raw_json_and_logs(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.ERROR, logger="gsheets_a1.codec"):
        error = decode_error({"values": []})
    assert '{"values":[]}' in error.message
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_decode_either_prefers_right() -> None:
    result = decode_either({"code": 1}, decoder_for(_Ping), decoder_for(_Pong))
    assert isinstance(result, Right)
    assert isinstance(result.value, _Pong)


def test_decode_either_falls_back_to_left(error_payload: dict[str, Any]) -> None:
    result = decode_either(error_payload, decode_error, decoder_for(ValueRange))
    assert isinstance(result, Left)
    assert result.value.code == 404


def test_decode_either_surfaces_left_failure_when_both_fail() -> None:
    with pytest.raises(DecodingFailure, match="GsheetsError"):
        decode_either({}, decoder_for(GsheetsError), decoder_for(ValueRange))
