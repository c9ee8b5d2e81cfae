"""Parser, data model and JSON codec for spreadsheet A1 notation."""

from __future__ import annotations

from .a1 import (
    A1Notation,
    Column,
    ColumnPosition,
    ColumnRowPosition,
    Position,
    Range,
    RangeNotation,
    Row,
    RowPosition,
    SheetNameNotation,
    SheetNameRangeNotation,
    make_column,
    make_row,
    parse_a1_notation,
    parse_position,
    parse_range,
    render_a1_notation,
    render_position,
    render_range,
)
from .client import SheetsTransport, SpreadsheetValues
from .codec import Left, Right, decode, decode_either, decode_error, decoder_for, encode
from .errors import DecodingFailure, ParseError, ParseErrorDetail
from .models import (
    A1NotationField,
    Credentials,
    GsheetsError,
    UpdateValuesResponse,
    ValueRange,
)
from .types import Dimension, ValueInputOption
from .values_api import ValuesRequest, values_get, values_update

__all__ = [
    "A1Notation",
    "A1NotationField",
    "Column",
    "ColumnPosition",
    "ColumnRowPosition",
    "Credentials",
    "DecodingFailure",
    "Dimension",
    "GsheetsError",
    "Left",
    "ParseError",
    "ParseErrorDetail",
    "Position",
    "Range",
    "RangeNotation",
    "Right",
    "Row",
    "RowPosition",
    "SheetNameNotation",
    "SheetNameRangeNotation",
    "SheetsTransport",
    "SpreadsheetValues",
    "UpdateValuesResponse",
    "ValueInputOption",
    "ValueRange",
    "ValuesRequest",
    "decode",
    "decode_either",
    "decode_error",
    "decoder_for",
    "encode",
    "make_column",
    "make_row",
    "parse_a1_notation",
    "parse_position",
    "parse_range",
    "render_a1_notation",
    "render_position",
    "render_range",
    "values_get",
    "values_update",
]
