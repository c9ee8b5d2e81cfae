from __future__ import annotations

from typing import Literal

Dimension = Literal["ROWS", "COLUMNS"]
ValueInputOption = Literal["RAW", "USER_ENTERED"]
