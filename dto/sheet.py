"""
Sheet input DTOs.

``SheetGrid`` is the raw cell matrix of one worksheet as read by
``extractors.sheet_reader``.  The layout parsers never see openpyxl
objects; they turn a grid into one of two explicit row variants:

  - ``MatrixRow`` — a date followed by one free-text cell per group column
  - ``FlatRow``   — one named-column schedule entry per row
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel


class SheetGrid(BaseModel):
    """Cell values of one worksheet, row-major, 1-based row numbering."""

    name: str
    rows: List[Tuple[Any, ...]] = []

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def row(self, row_number: int) -> Tuple[Any, ...]:
        """Return the values of 1-based *row_number*, or ``()`` past the end."""
        if row_number < 1 or row_number > len(self.rows):
            return ()
        return self.rows[row_number - 1]

    def value(self, row_number: int, col_number: int) -> Any:
        """Return the value at 1-based (row, col), ``None`` when absent."""
        values = self.row(row_number)
        if col_number < 1 or col_number > len(values):
            return None
        return values[col_number - 1]

    def rows_from(self, row_number: int) -> Sequence[Tuple[Any, ...]]:
        return self.rows[max(row_number - 1, 0):]


class MatrixRow(BaseModel):
    row_type: Literal["matrix"] = "matrix"
    row_number: int
    date: Any = None
    cells: List[Any] = []

    model_config = {"arbitrary_types_allowed": True}


class FlatRow(BaseModel):
    row_type: Literal["flat"] = "flat"
    row_number: int
    teacher: Optional[str] = None
    date: Any = None
    group: Optional[str] = None
    subject: Optional[str] = None
    control: Optional[str] = None

    model_config = {"arbitrary_types_allowed": True}


SheetRow = Union[MatrixRow, FlatRow]
