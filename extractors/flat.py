"""
Flat layout parser — one schedule entry per row.

Row 1 holds the column names; the parser looks up five of them:

    ФИО | Дата | Группа | Предмет | Контроль

The teacher (ФИО) cell is often merged across a block of rows, so only
the first row of the block carries a value.  The last non-empty teacher
is carried forward onto following rows with a blank teacher cell.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from dto.schedule import ScheduleRecord
from dto.sheet import FlatRow, SheetGrid
from extractors.base import LayoutParser, make_record
from extractors.dates import normalize_date
from extractors.keywords import classify_control
from extractors.sheet_reader import cell_text

logger = logging.getLogger(__name__)

HEADER_ROW = 1

TEACHER_COLUMN = "ФИО"
DATE_COLUMN = "Дата"
GROUP_COLUMN = "Группа"
SUBJECT_COLUMN = "Предмет"
CONTROL_COLUMN = "Контроль"


def _column_index(header: Tuple[Any, ...]) -> Dict[str, int]:
    """Map header text → 0-based column index; the first occurrence wins."""
    index: Dict[str, int] = {}
    for i, value in enumerate(header):
        name = cell_text(value)
        if name is not None and name not in index:
            index[name] = i
    return index


def _pick(values: Tuple[Any, ...], index: Dict[str, int], column: str) -> Any:
    i = index.get(column)
    if i is None or i >= len(values):
        return None
    return values[i]


class FlatLayoutParser(LayoutParser):

    def read_rows(self, grid: SheetGrid) -> List[FlatRow]:
        index = _column_index(grid.row(HEADER_ROW))
        missing = [
            c
            for c in (TEACHER_COLUMN, DATE_COLUMN, GROUP_COLUMN, SUBJECT_COLUMN, CONTROL_COLUMN)
            if c not in index
        ]
        if missing:
            logger.warning("Flat sheet '%s' lacks column(s): %s", grid.name, missing)

        rows: List[FlatRow] = []
        for offset, values in enumerate(grid.rows_from(HEADER_ROW + 1)):
            rows.append(
                FlatRow(
                    row_number=offset + HEADER_ROW + 1,
                    teacher=cell_text(_pick(values, index, TEACHER_COLUMN)),
                    date=_pick(values, index, DATE_COLUMN),
                    group=cell_text(_pick(values, index, GROUP_COLUMN)),
                    subject=cell_text(_pick(values, index, SUBJECT_COLUMN)),
                    control=cell_text(_pick(values, index, CONTROL_COLUMN)),
                )
            )
        return rows

    def parse(self, grid: SheetGrid) -> List[ScheduleRecord]:
        records: List[ScheduleRecord] = []
        last_teacher: Optional[str] = None

        for row in self.read_rows(grid):
            if row.teacher:
                last_teacher = row.teacher

            records.append(
                make_record(
                    sheet=grid.name,
                    row=row.row_number,
                    date=normalize_date(row.date),
                    group=row.group,
                    subject=row.subject,
                    kind=classify_control(row.control),
                    teacher=last_teacher,
                    room=None,
                    notes=None,
                )
            )

        logger.debug("Flat sheet '%s': %d record(s)", grid.name, len(records))
        return records
