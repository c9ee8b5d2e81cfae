from __future__ import annotations

from .notation import (
    A1_NOTATION_TYPES,
    A1Notation,
    RangeNotation,
    SheetNameNotation,
    SheetNameRangeNotation,
    parse_a1_notation,
    render_a1_notation,
)
from .position import (
    POSITION_TYPES,
    ColumnPosition,
    ColumnRowPosition,
    Position,
    RowPosition,
    parse_position,
    render_position,
)
from .primitives import (
    Column,
    Row,
    column_index_to_label,
    column_label_to_index,
    make_column,
    make_row,
)
from .ranges import Range, parse_range, render_range

__all__ = [
    "A1Notation",
    "A1_NOTATION_TYPES",
    "Column",
    "ColumnPosition",
    "ColumnRowPosition",
    "POSITION_TYPES",
    "Position",
    "Range",
    "RangeNotation",
    "Row",
    "RowPosition",
    "SheetNameNotation",
    "SheetNameRangeNotation",
    "column_index_to_label",
    "column_label_to_index",
    "make_column",
    "make_row",
    "parse_a1_notation",
    "parse_position",
    "parse_range",
    "render_a1_notation",
    "render_position",
    "render_range",
]
