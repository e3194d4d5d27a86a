"""
Base class for the sheet layout parsers.

Each parser receives a ``SheetGrid`` and returns the schedule records it
holds, in row order.  Parsers are pure: no state survives between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from dto.schedule import ExamKind, Location, Provenance, ScheduleRecord
from dto.sheet import SheetGrid, SheetRow
from extractors.identity import record_id


class LayoutParser(ABC):
    """Interface that every sheet layout parser must implement."""

    @abstractmethod
    def read_rows(self, grid: SheetGrid) -> List[SheetRow]:
        """Project the raw grid onto this layout's row variant."""
        ...

    @abstractmethod
    def parse(self, grid: SheetGrid) -> List[ScheduleRecord]:
        """Extract all schedule records from *grid*."""
        ...


def make_record(
    *,
    sheet: str,
    row: int,
    date: Optional[str],
    group: Optional[str],
    subject: Optional[str],
    kind: ExamKind,
    teacher: Optional[str],
    room: Optional[str],
    notes: Optional[str],
) -> ScheduleRecord:
    return ScheduleRecord(
        id=record_id(sheet, date, group, subject, kind, teacher, room),
        date=date,
        group=group,
        subject=subject,
        kind=kind,
        teacher=teacher,
        location=Location(room=room),
        notes=notes,
        provenance=Provenance(sheet=sheet, row=row),
    )
