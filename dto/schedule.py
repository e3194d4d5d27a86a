"""
Schedule record DTOs.

A ``ScheduleRecord`` is one exam / credit / consultation entry extracted
from a worksheet.  Records are frozen: a parser builds them once and
appends them to its output list, nothing mutates them afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ExamKind(str, Enum):
    EXAM = "EXAM"
    CREDIT = "CREDIT"
    DIFF_CREDIT = "DIFF_CREDIT"
    CONSULTATION = "CONSULTATION"
    RETAKE = "RETAKE"
    OTHER = "OTHER"


class TimeRange(BaseModel):
    """Start/end as ``HH:mm``.  Not extracted yet, always empty."""

    start: Optional[str] = None
    end: Optional[str] = None

    model_config = {"frozen": True}


class Location(BaseModel):
    room: Optional[str] = None
    building: Optional[str] = None

    model_config = {"frozen": True}


class Provenance(BaseModel):
    """Where a record came from: sheet name and 1-based row number."""

    sheet: str
    row: int

    model_config = {"frozen": True}


class ScheduleRecord(BaseModel):
    id: str
    date: Optional[str] = None
    time: TimeRange = TimeRange()
    group: Optional[str] = None
    subject: Optional[str] = None
    kind: ExamKind
    teacher: Optional[str] = None
    location: Location = Location()
    notes: Optional[str] = None
    # Serialized as "source" in the output document.
    provenance: Provenance = Field(alias="source")

    model_config = {"frozen": True, "populate_by_name": True}
