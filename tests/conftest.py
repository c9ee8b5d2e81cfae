from __future__ import annotations

from typing import Any

import pytest

from gsheets_a1.models import Credentials


@pytest.fixture
def value_range_payload() -> dict[str, Any]:
    """Values read response as returned by the Sheets API."""
    return {
        "range": "Sheet1!A1:B2",
        "majorDimension": "ROWS",
        "values": [["name", "qty"], ["apple", "3"]],
    }


@pytest.fixture
def update_response_payload() -> dict[str, Any]:
    """Values write response as returned by the Sheets API."""
    return {
        "spreadsheetId": "sheet-123",
        "updatedRange": "Sheet1!A1:B2",
        "updatedRows": 2,
        "updatedColumns": 2,
        "updatedCells": 4,
    }


@pytest.fixture
def error_payload() -> dict[str, Any]:
    return {
        "error": {
            "code": 404,
            "message": "Requested entity was not found.",
            "status": "NOT_FOUND",
        }
    }


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        access_token="access-secret",
        refresh_token="refresh-secret",
        client_id="client-1",
        client_secret="client-secret",
    )
