from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .cursor import expect_char, parse_all
from .position import ColumnRowPosition, Position, position_at, render_position
from .primitives import Column, Row


class Range(BaseModel):
    """Inclusive span between two positions, e.g. ``A1:C3`` or ``A:B``."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    def __str__(self) -> str:
        return render_range(self)

    def geometry(self) -> tuple[ColumnRowPosition, int, int]:
        """Return the top-left cell and the (rows, cols) size of the range.

        Raises:
            ValueError: If either end is a whole row or a whole column.
        """
        start, end = self._corners()
        min_col = min(start.column.index, end.column.index)
        max_col = max(start.column.index, end.column.index)
        min_row = min(start.row.number, end.row.number)
        max_row = max(start.row.number, end.row.number)
        top_left = ColumnRowPosition(column=Column.from_index(min_col), row=Row(min_row))
        return top_left, max_row - min_row + 1, max_col - min_col + 1

    def cell_count(self) -> int:
        """Return the number of cells covered by a cell-to-cell range."""
        _, rows, cols = self.geometry()
        return rows * cols

    def _corners(self) -> tuple[ColumnRowPosition, ColumnRowPosition]:
        if not isinstance(self.start, ColumnRowPosition) or not isinstance(
            self.end, ColumnRowPosition
        ):
            raise ValueError(
                f"Range {render_range(self)} is open-ended; "
                "both ends need a column and a row."
            )
        return self.start, self.end


def render_range(value: Range) -> str:
    """Render a range as ``start:end``."""
    return f"{render_position(value.start)}:{render_position(value.end)}"


def parse_range(text: str) -> Range:
    """Parse a complete range such as ``A1:B2``.

    Raises:
        ParseError: If the separator is missing or either end is invalid.
    """
    return parse_all(range_at, text)


def range_at(text: str, offset: int) -> tuple[Range, int]:
    """Parse ``position:position`` starting at ``offset``."""
    start, after_start = position_at(text, offset)
    after_separator = expect_char(":", text, after_start)
    end, after_end = position_at(text, after_separator)
    return Range(start=start, end=end), after_end
