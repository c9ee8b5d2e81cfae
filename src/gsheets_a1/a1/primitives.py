from __future__ import annotations

import re

from pydantic import ConfigDict, RootModel, field_validator

_UPPERCASE_PATTERN = re.compile(r"[A-Z]+")


class Column(RootModel[str]):
    """Column label made of one or more uppercase letters (A, B, AA)."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _validate_label(cls, value: str) -> str:
        if value == "":
            raise ValueError("column must not be empty.")
        if not _UPPERCASE_PATTERN.fullmatch(value):
            raise ValueError(f"column is not all uppercase: {value!r}")
        return value

    @property
    def label(self) -> str:
        return self.root

    @property
    def index(self) -> int:
        """1-based column index (A=1, Z=26, AA=27)."""
        return column_label_to_index(self.root)

    @classmethod
    def from_index(cls, index: int) -> Column:
        """Build the column at a 1-based index (27 -> AA)."""
        if index < 1:
            raise ValueError("Column index must be positive.")
        letters = ""
        remaining = index
        while remaining:
            remaining, offset = divmod(remaining - 1, 26)
            letters = chr(ord("A") + offset) + letters
        return cls(letters)

    def __str__(self) -> str:
        return self.root


class Row(RootModel[int]):
    """Row number, counted from 1."""

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("root")
    @classmethod
    def _validate_number(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"row is not positive: {value}")
        return value

    @property
    def number(self) -> int:
        return self.root

    def __str__(self) -> str:
        return str(self.root)


def make_column(label: str) -> Column:
    """Build a validated column.

    Raises:
        pydantic.ValidationError: If the label is empty or not all uppercase.
    """
    return Column(label)


def make_row(number: int) -> Row:
    """Build a validated row.

    Raises:
        pydantic.ValidationError: If the number is below 1.
    """
    return Row(number)


def column_label_to_index(label: str) -> int:
    """Convert a column label (A/AA) to a 1-based index."""
    if not _UPPERCASE_PATTERN.fullmatch(label):
        raise ValueError(f"Invalid column label: {label}")
    index = 0
    for char in label:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def column_index_to_label(index: int) -> str:
    """Convert a 1-based column index to a column label."""
    return Column.from_index(index).label
