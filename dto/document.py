"""
Top-level output DTOs for the canonical schedule document (version 1.0).

    ScheduleDocument
      ├─ meta:    DocumentMeta   (sourceFileName, parsedAt, version)
      ├─ summary: Summary        (items, groups, itemsByGroup, dateRange)
      ├─ items:   List[ScheduleRecord]
      └─ issues:  List[ParseIssue]   (reserved, always empty)

Field names are snake_case in Python and camelCase on the wire; dump
with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from dto.schedule import ScheduleRecord

DOCUMENT_VERSION = "1.0"

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class DocumentMeta(BaseModel):
    source_file_name: str
    parsed_at: str
    version: Literal["1.0"] = DOCUMENT_VERSION

    model_config = _CAMEL


class DateRange(BaseModel):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}


class Summary(BaseModel):
    items: int = 0
    groups: List[str] = []
    items_by_group: Dict[str, int] = {}
    date_range: DateRange = DateRange()

    model_config = _CAMEL


class IssueSource(BaseModel):
    sheet: Optional[str] = None
    row: Optional[int] = None
    column: Optional[str] = None


class ParseIssue(BaseModel):
    level: Literal["info", "warning", "error"]
    message: str
    source: Optional[IssueSource] = None


class ScheduleDocument(BaseModel):
    meta: DocumentMeta
    summary: Summary
    items: List[ScheduleRecord] = []
    issues: List[ParseIssue] = []

    model_config = {"frozen": True}

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent, by_alias=True)


class SheetStats(BaseModel):
    """Per-sheet bookkeeping collected while parsing a workbook."""

    sheet: str
    layout: str
    items: int


class ResultMemory(BaseModel):
    """Short digest of a completed job's document."""

    items: int
    groups: List[str] = []
    date_range: DateRange = DateRange()

    model_config = _CAMEL
