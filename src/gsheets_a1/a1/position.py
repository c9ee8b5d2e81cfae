from __future__ import annotations

import re
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ParseError
from .cursor import first_of, match_pattern, parse_all, refine
from .primitives import Column, Row

_COLUMN_PATTERN = re.compile(r"[A-Z]+")
_ROW_PATTERN = re.compile(r"[0-9]+")


class ColumnPosition(BaseModel):
    """A whole column, e.g. ``B``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["column"] = "column"
    column: Column

    def __str__(self) -> str:
        return render_position(self)


class RowPosition(BaseModel):
    """A whole row, e.g. ``7``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["row"] = "row"
    row: Row

    def __str__(self) -> str:
        return render_position(self)


class ColumnRowPosition(BaseModel):
    """A single cell, e.g. ``B7``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["column_row"] = "column_row"
    column: Column
    row: Row

    def __str__(self) -> str:
        return render_position(self)


Position: TypeAlias = Annotated[
    ColumnPosition | RowPosition | ColumnRowPosition, Field(discriminator="kind")
]
POSITION_TYPES = (ColumnPosition, RowPosition, ColumnRowPosition)


def render_position(position: ColumnPosition | RowPosition | ColumnRowPosition) -> str:
    """Render a position as A1 text (``B``, ``7`` or ``B7``)."""
    if isinstance(position, ColumnRowPosition):
        return f"{position.column}{position.row}"
    if isinstance(position, ColumnPosition):
        return str(position.column)
    if isinstance(position, RowPosition):
        return str(position.row)
    raise TypeError(f"Unsupported position: {position!r}")


def parse_position(text: str) -> ColumnPosition | RowPosition | ColumnRowPosition:
    """Parse a complete position such as ``B7``, ``B`` or ``7``.

    Raises:
        ParseError: If the text is not exactly one position.
    """
    return parse_all(position_at, text)


def position_at(
    text: str, offset: int
) -> tuple[ColumnPosition | RowPosition | ColumnRowPosition, int]:
    """Parse one position starting at ``offset``.

    Column+row is tried before column alone so that ``A1`` is one cell
    rather than column ``A`` followed by a stray ``1``.
    """
    return first_of(
        text,
        offset,
        (_column_row_at, _column_at, _row_at),
        expected="column letters or row number",
    )


def _column_row_at(text: str, offset: int) -> tuple[ColumnRowPosition, int]:
    column, after_column = _read_column(text, offset)
    row, end = _read_row(text, after_column)
    return ColumnRowPosition(column=column, row=row), end


def _column_at(text: str, offset: int) -> tuple[ColumnPosition, int]:
    column, end = _read_column(text, offset)
    return ColumnPosition(column=column), end


def _row_at(text: str, offset: int) -> tuple[RowPosition, int]:
    row, end = _read_row(text, offset)
    return RowPosition(row=row), end


def _read_column(text: str, offset: int) -> tuple[Column, int]:
    raw, end = match_pattern(_COLUMN_PATTERN, text, offset, "column letters")
    return refine(Column, raw, text, offset, "column letters"), end


def _read_row(text: str, offset: int) -> tuple[Row, int]:
    raw, end = match_pattern(_ROW_PATTERN, text, offset, "row number")
    try:
        number = int(raw)
    except ValueError as exc:
        # digit runs beyond the interpreter's int conversion limit
        raise ParseError.at(text, offset, "row number") from exc
    return refine(Row, number, text, offset, "positive row number"), end
