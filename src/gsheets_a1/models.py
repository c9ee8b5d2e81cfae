from __future__ import annotations

from typing import Annotated, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from .a1 import (
    A1_NOTATION_TYPES,
    RangeNotation,
    SheetNameNotation,
    SheetNameRangeNotation,
    parse_a1_notation,
    render_a1_notation,
)
from .types import Dimension


def _coerce_a1_notation(
    value: object,
) -> SheetNameNotation | RangeNotation | SheetNameRangeNotation:
    """Accept either a parsed notation or its A1 text."""
    if isinstance(value, A1_NOTATION_TYPES):
        return value
    if not isinstance(value, str):
        raise ValueError(f"A1 notation must be a string, got {type(value).__name__}.")
    return parse_a1_notation(value)


A1NotationField: TypeAlias = Annotated[
    SheetNameNotation | RangeNotation | SheetNameRangeNotation,
    PlainValidator(_coerce_a1_notation),
    PlainSerializer(render_a1_notation, return_type=str),
]


class ValueRange(BaseModel):
    """Cell values of one range, as returned by a values read."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range: A1NotationField
    major_dimension: Dimension = Field(alias="majorDimension")
    values: list[list[str]] = Field(
        default_factory=list,
        description="Cell contents; omitted by the API when the range is empty.",
    )


class UpdateValuesResponse(BaseModel):
    """Outcome of a values write."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spreadsheet_id: str = Field(alias="spreadsheetId")
    updated_range: A1NotationField = Field(alias="updatedRange")
    updated_rows: int = Field(default=0, ge=0, alias="updatedRows")
    updated_columns: int = Field(default=0, ge=0, alias="updatedColumns")
    updated_cells: int = Field(default=0, ge=0, alias="updatedCells")


class GsheetsError(BaseModel):
    """Error payload reported by the Sheets API."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    status: str


class Credentials(BaseModel):
    """OAuth tokens handed to the transport as-is."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(repr=False)
    refresh_token: str = Field(repr=False)
    client_id: str
    client_secret: str = Field(repr=False)
