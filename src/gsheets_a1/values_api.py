from __future__ import annotations

from typing import Any, Final, Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from .a1 import (
    RangeNotation,
    SheetNameNotation,
    SheetNameRangeNotation,
    render_a1_notation,
)
from .codec import encode
from .models import ValueRange
from .types import ValueInputOption

SHEETS_API_ROOT: Final[str] = "https://sheets.googleapis.com/v4"


class ValuesRequest(BaseModel):
    """Transport-agnostic description of one values API call."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "PUT"]
    url: str
    params: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | None = None


def values_url(
    spreadsheet_id: str,
    notation: SheetNameNotation | RangeNotation | SheetNameRangeNotation,
) -> str:
    """Return the values endpoint for one spreadsheet range."""
    return (
        f"{SHEETS_API_ROOT}/spreadsheets/{quote(spreadsheet_id, safe='')}"
        f"/values/{quote(render_a1_notation(notation), safe='')}"
    )


def values_get(
    spreadsheet_id: str,
    notation: SheetNameNotation | RangeNotation | SheetNameRangeNotation,
) -> ValuesRequest:
    """Build a read request for ``notation``."""
    return ValuesRequest(method="GET", url=values_url(spreadsheet_id, notation))


def values_update(
    spreadsheet_id: str,
    value_range: ValueRange,
    value_input_option: ValueInputOption = "RAW",
) -> ValuesRequest:
    """Build a write request that replaces ``value_range.range`` with its values."""
    return ValuesRequest(
        method="PUT",
        url=values_url(spreadsheet_id, value_range.range),
        params={"valueInputOption": value_input_option},
        body=encode(value_range),
    )
