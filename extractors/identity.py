"""Content-derived record identifiers."""

from __future__ import annotations

import hashlib
from typing import Optional

from dto.schedule import ExamKind

_ALGORITHM = "sha1"


def record_id(
    sheet: str,
    date: Optional[str],
    group: Optional[str],
    subject: Optional[str],
    kind: ExamKind,
    teacher: Optional[str],
    room: Optional[str],
) -> str:
    """
    Deterministic id for a record.  Two records sharing all seven key
    fields get the same id, even when they come from different rows.
    """
    key = "|".join(
        [
            sheet,
            date or "",
            group or "",
            subject or "",
            kind.value,
            teacher or "",
            room or "",
        ]
    )
    digest = hashlib.new(_ALGORITHM, key.encode("utf-8")).hexdigest()
    return f"{_ALGORITHM}:{digest}"
