"""
Spreadsheet date normalisation to ISO ``YYYY-MM-DD``.

Accepted inputs:
  - serial day numbers (Excel's 1900 date system, epoch 1899-12-30)
  - ``datetime`` / ``date`` objects, as openpyxl returns for
    date-formatted cells
  - text already in ``YYYY-MM-DD`` form
  - text in US ``M/D/YY`` or ``M/D/YYYY`` form

Everything else normalises to ``None``; a lost date is not an error.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

EXCEL_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)

_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")


def serial_to_iso(serial: float) -> str:
    """Convert a serial day number to ``YYYY-MM-DD`` (time of day dropped)."""
    return (EXCEL_EPOCH + timedelta(days=serial)).date().isoformat()


def _text_to_iso(text: str) -> Optional[str]:
    trimmed = text.strip()
    if _ISO_RE.match(trimmed):
        return trimmed

    m = _US_DATE_RE.match(trimmed)
    if m:
        month = m.group(1).zfill(2)
        day = m.group(2).zfill(2)
        year = m.group(3)
        if len(year) == 2:
            year = f"20{year}"
        return f"{year}-{month}-{day}"

    return None


def normalize_date(value: Any) -> Optional[str]:
    """Return the ISO date for a cell value, or ``None`` if it has none."""
    if value is None or value == "":
        return None
    # bool is an int subclass; a TRUE/FALSE cell is not a date
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        try:
            return serial_to_iso(value)
        except (OverflowError, ValueError):
            return None
    if isinstance(value, str):
        return _text_to_iso(value)
    return None
