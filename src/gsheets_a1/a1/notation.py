from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ParseError
from .cursor import complete, first_of, parse_all
from .ranges import Range, range_at, render_range

SHEET_SEPARATOR = "!"


def _check_sheet_name(value: str) -> str:
    if value == "":
        raise ValueError("sheet_name must not be empty.")
    if SHEET_SEPARATOR in value:
        raise ValueError(f"sheet_name must not contain '{SHEET_SEPARATOR}': {value!r}")
    return value


class SheetNameNotation(BaseModel):
    """A whole sheet, e.g. ``Sheet1``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sheet_name"] = "sheet_name"
    sheet_name: str

    @field_validator("sheet_name")
    @classmethod
    def _validate_sheet_name(cls, value: str) -> str:
        value = _check_sheet_name(value)
        if _is_complete_range(value):
            raise ValueError(f"sheet_name must not be a range reference: {value!r}")
        return value

    def __str__(self) -> str:
        return render_a1_notation(self)


def _is_complete_range(value: str) -> bool:
    try:
        complete(range_at)(value, 0)
    except ParseError:
        return False
    return True


class RangeNotation(BaseModel):
    """A range on the first visible sheet, e.g. ``A1:B2``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    range: Range

    def __str__(self) -> str:
        return render_a1_notation(self)


class SheetNameRangeNotation(BaseModel):
    """A range on a named sheet, e.g. ``Sheet1!A1:B2``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sheet_name_range"] = "sheet_name_range"
    sheet_name: str
    range: Range

    @field_validator("sheet_name")
    @classmethod
    def _validate_sheet_name(cls, value: str) -> str:
        return _check_sheet_name(value)

    def __str__(self) -> str:
        return render_a1_notation(self)


A1Notation: TypeAlias = Annotated[
    SheetNameNotation | RangeNotation | SheetNameRangeNotation,
    Field(discriminator="kind"),
]
A1_NOTATION_TYPES = (SheetNameNotation, RangeNotation, SheetNameRangeNotation)


def render_a1_notation(
    notation: SheetNameNotation | RangeNotation | SheetNameRangeNotation,
) -> str:
    """Render a notation as ``Sheet``, ``A1:B2`` or ``Sheet!A1:B2``."""
    if isinstance(notation, SheetNameRangeNotation):
        return f"{notation.sheet_name}{SHEET_SEPARATOR}{render_range(notation.range)}"
    if isinstance(notation, RangeNotation):
        return render_range(notation.range)
    if isinstance(notation, SheetNameNotation):
        return notation.sheet_name
    raise TypeError(f"Unsupported A1 notation: {notation!r}")


def parse_a1_notation(
    text: str,
) -> SheetNameNotation | RangeNotation | SheetNameRangeNotation:
    """Parse A1 notation text.

    Input containing ``!`` must be ``<sheet name>!<range>``. Otherwise a
    complete range wins, and any other non-empty text names a sheet.

    Raises:
        ParseError: If the text is empty, the sheet name before ``!`` is
            empty, or the text after ``!`` is not a range.
    """
    return parse_all(notation_at, text)


def notation_at(
    text: str, offset: int
) -> tuple[SheetNameNotation | RangeNotation | SheetNameRangeNotation, int]:
    if SHEET_SEPARATOR in text[offset:]:
        return _sheet_name_range_at(text, offset)
    return first_of(
        text,
        offset,
        (_range_notation_at, _sheet_name_at),
        expected="range or sheet name",
    )


def _sheet_name_range_at(text: str, offset: int) -> tuple[SheetNameRangeNotation, int]:
    separator = text.index(SHEET_SEPARATOR, offset)
    if separator == offset:
        raise ParseError.at(text, offset, "sheet name")
    parsed, end = complete(range_at)(text, separator + 1)
    return SheetNameRangeNotation(sheet_name=text[offset:separator], range=parsed), end


def _range_notation_at(text: str, offset: int) -> tuple[RangeNotation, int]:
    parsed, end = complete(range_at)(text, offset)
    return RangeNotation(range=parsed), end


def _sheet_name_at(text: str, offset: int) -> tuple[SheetNameNotation, int]:
    if offset >= len(text):
        raise ParseError.at(text, offset, "sheet name")
    return SheetNameNotation(sheet_name=text[offset:]), len(text)
