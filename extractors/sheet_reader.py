"""
Worksheet reading — turns an openpyxl workbook into ``SheetGrid`` DTOs so
the layout parsers can stay free of openpyxl objects.

The workbook is opened with ``data_only=True``: formula cells yield
Excel's cached result rather than the formula string.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Optional

import openpyxl
from openpyxl.worksheet.worksheet import Worksheet

from dto.sheet import SheetGrid

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Value helpers
# ------------------------------------------------------------------

def cell_text(value: Any) -> Optional[str]:
    """
    Render a cell value as trimmed display text, ``None`` when blank.

    Integral floats lose their ``.0`` so that e.g. a numeric room or
    group number reads the way it is shown in the sheet.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        text = str(int(value))
    elif isinstance(value, datetime):
        text = value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    elif isinstance(value, date):
        text = value.isoformat()
    else:
        text = str(value)
    text = text.strip()
    return text or None


def is_blank(value: Any) -> bool:
    """Falsy cell check: ``None``, empty text and numeric zero are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


# ------------------------------------------------------------------
# Sheet reading
# ------------------------------------------------------------------

def read_sheet_grid(ws: Worksheet) -> SheetGrid:
    """Read every row of *ws* up to its last used row."""
    rows = [tuple(row) for row in ws.iter_rows(values_only=True)]
    return SheetGrid(name=ws.title, rows=rows)


def read_workbook(
    file_path: str | Path,
    sheet_name_filter: Optional[str] = None,
) -> List[SheetGrid]:
    """
    Load the workbook at *file_path* and return one ``SheetGrid`` per
    worksheet, in workbook order.

    Chart sheets hold no cells and are skipped.  If *sheet_name_filter* is
    provided, only that worksheet is read; naming a chart sheet yields no
    grids.
    """
    logger.info("Loading workbook: %s", file_path)
    workbook = openpyxl.load_workbook(file_path, data_only=True, read_only=False)
    try:
        if sheet_name_filter and sheet_name_filter not in workbook.sheetnames:
            logger.error(
                "Worksheet '%s' not found. Available sheets: %s",
                sheet_name_filter,
                workbook.sheetnames,
            )
            raise ValueError(f"Worksheet '{sheet_name_filter}' not found in workbook")

        for chartsheet in workbook.chartsheets:
            logger.info("  Skipping chart sheet '%s'", chartsheet.title)

        worksheets = [
            ws for ws in workbook.worksheets
            if not sheet_name_filter or ws.title == sheet_name_filter
        ]
        grids = [read_sheet_grid(ws) for ws in worksheets]
    finally:
        workbook.close()

    logger.info("  -> %d sheet(s) read", len(grids))
    return grids
