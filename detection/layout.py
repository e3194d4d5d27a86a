"""
Layout detector — decides which parser handles a worksheet.

Heuristic:
  - cell A1 mentions the schedule title marker, or the sheet still has the
    default first-sheet name  →  matrix layout
  - anything else                                                →  flat layout
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict

from detection.constants import DEFAULT_FIRST_SHEET, MATRIX_TITLE_MARKER
from dto.sheet import SheetGrid
from extractors.base import LayoutParser
from extractors.flat import FlatLayoutParser
from extractors.matrix import MatrixLayoutParser
from extractors.sheet_reader import cell_text

logger = logging.getLogger(__name__)


class Layout(str, Enum):
    MATRIX = "matrix"
    FLAT = "flat"


class LayoutDetector:

    def __init__(
        self,
        title_marker: str = MATRIX_TITLE_MARKER,
        first_sheet_name: str = DEFAULT_FIRST_SHEET,
    ) -> None:
        self._title_marker = title_marker.lower()
        self._first_sheet_name = first_sheet_name
        self._parsers: Dict[Layout, LayoutParser] = {
            Layout.MATRIX: MatrixLayoutParser(),
            Layout.FLAT: FlatLayoutParser(),
        }

    def detect(self, grid: SheetGrid) -> Layout:
        first_cell = cell_text(grid.value(1, 1)) or ""
        if self._title_marker in first_cell.lower() or grid.name == self._first_sheet_name:
            return Layout.MATRIX
        return Layout.FLAT

    def parser_for(self, layout: Layout) -> LayoutParser:
        return self._parsers[layout]
