"""
Matrix layout parser — the "date × group" grid.

Sheet shape (1-based rows/cols)::

    row 1    "Расписание экзаменационной сессии ..."
    row 10   |      |   | ИВТ-21 | ИВТ-22 | ...        <- group names from col C
    row 12   | date |   | cell   | cell   | ...        <- data rows
    ...

Every non-empty, non-skipped group cell on a dated row becomes one record.
A row whose date cell is blank is dropped as a whole.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dto.schedule import ExamKind, ScheduleRecord
from dto.sheet import MatrixRow, SheetGrid
from extractors import keywords
from extractors.base import LayoutParser, make_record
from extractors.cell_text import segment_cell_text
from extractors.dates import normalize_date
from extractors.sheet_reader import cell_text, is_blank

logger = logging.getLogger(__name__)

HEADER_ROW = 10
DATA_START_ROW = 12
DATE_COL = 1
GROUP_COL_START = 3
# Header is read over A..T.
LAST_HEADER_COL = 20


class MatrixLayoutParser(LayoutParser):

    # ------------------------------------------------------------------
    # Grid projection
    # ------------------------------------------------------------------

    def group_names(self, grid: SheetGrid) -> List[Optional[str]]:
        return [
            cell_text(grid.value(HEADER_ROW, col))
            for col in range(GROUP_COL_START, LAST_HEADER_COL + 1)
        ]

    def read_rows(self, grid: SheetGrid) -> List[MatrixRow]:
        width = LAST_HEADER_COL - GROUP_COL_START + 1
        rows: List[MatrixRow] = []
        for offset, values in enumerate(grid.rows_from(DATA_START_ROW)):
            date = values[DATE_COL - 1] if len(values) >= DATE_COL else None
            cells = list(values[GROUP_COL_START - 1:GROUP_COL_START - 1 + width])
            cells.extend([None] * (width - len(cells)))
            rows.append(
                MatrixRow(row_number=DATA_START_ROW + offset, date=date, cells=cells)
            )
        return rows

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def parse(self, grid: SheetGrid) -> List[ScheduleRecord]:
        groups = self.group_names(grid)
        records: List[ScheduleRecord] = []

        for row in self.read_rows(grid):
            if is_blank(row.date):
                continue

            date = normalize_date(row.date)

            for group, value in zip(groups, row.cells):
                record = self._parse_cell(grid.name, row.row_number, date, group, value)
                if record is not None:
                    records.append(record)

        logger.debug("Matrix sheet '%s': %d record(s)", grid.name, len(records))
        return records

    def _parse_cell(
        self,
        sheet: str,
        row_number: int,
        date: Optional[str],
        group: Optional[str],
        value: object,
    ) -> Optional[ScheduleRecord]:
        if is_blank(value):
            return None
        text = cell_text(value)
        if not text or keywords.is_skip_value(text):
            return None

        kind = keywords.classify_matrix_cell(text)
        if kind is ExamKind.CONSULTATION:
            return make_record(
                sheet=sheet,
                row=row_number,
                date=date,
                group=group,
                subject=None,
                kind=kind,
                teacher=None,
                room=None,
                notes=keywords.remote_note(text),
            )

        segments = segment_cell_text(text)
        return make_record(
            sheet=sheet,
            row=row_number,
            date=date,
            group=group,
            subject=segments.subject,
            kind=kind,
            teacher=segments.teacher,
            room=segments.room,
            notes=segments.notes,
        )
