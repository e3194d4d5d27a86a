"""
Free-text cell segmentation for matrix-layout schedules.

A matrix cell typically reads like::

    "305а
     Математический анализ  Иванов И.И. дист."

and is split into four nullable parts:

  - room     — 2–3 digits, optional letter, optional ``/N`` suffix, at
               the very start of the cell
  - teacher  — ``Фамилия И.О.`` (comma-separated list allowed) or
               ``Фамилия И.`` at the end of the cell
  - notes    — the remote-format marker, when present
  - subject  — whatever is left in between
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel

from extractors.keywords import remote_note

_HSPACE_RUN_RE = re.compile(r"[ \t]{2,}")

_ROOM_RE = re.compile(r"^([0-9]{2,3}[а-яА-ЯёЁa-zA-Z]?(?:/[0-9]+)?)\s*[\n\s]+")

_TRAILING_REMOTE_RE = re.compile(r"\s*дист\.?\s*$", re.IGNORECASE)

_SURNAME = r"[А-ЯЁ][а-яё]+-?[а-яё]*"

# "Иванов И.И." or "Иванов И.И., Петрова-Сидорова А.Б."
_TEACHER_FULL_RE = re.compile(
    rf"({_SURNAME}\s+[А-ЯЁ]\.[А-ЯЁ]\.(?:,\s*{_SURNAME}\s+[А-ЯЁ]\.[А-ЯЁ]\.)*)"
    r"\s*(?:дист\.?)?\s*$"
)

# "Иванов И."
_TEACHER_SHORT_RE = re.compile(r"([А-ЯЁ][а-яё]+\s+[А-ЯЁ]\.)\s*(?:дист\.?)?\s*$")

_WHITESPACE_RE = re.compile(r"\s+")
_SUBJECT_TAIL_RE = re.compile(r"[\s,.\-]+$")


class CellSegments(BaseModel):
    room: Optional[str] = None
    subject: Optional[str] = None
    teacher: Optional[str] = None
    notes: Optional[str] = None

    model_config = {"frozen": True}


def _match_teacher(text: str) -> Optional[re.Match[str]]:
    return _TEACHER_FULL_RE.search(text) or _TEACHER_SHORT_RE.search(text)


def _clean_subject(text: str) -> Optional[str]:
    subject = _WHITESPACE_RE.sub(" ", text)
    subject = _SUBJECT_TAIL_RE.sub("", subject).strip()
    return subject or None


def segment_cell_text(raw: str) -> CellSegments:
    """Split one matrix cell into room / subject / teacher / notes."""
    text = raw.strip()
    if not text:
        return CellSegments()

    normalized = _HSPACE_RUN_RE.sub("  ", text)

    room: Optional[str] = None
    rest = normalized
    room_match = _ROOM_RE.match(normalized)
    if room_match:
        room = room_match.group(1)
        rest = normalized[room_match.end():].strip()

    notes = remote_note(rest)
    rest = _TRAILING_REMOTE_RE.sub("", rest).strip()

    teacher: Optional[str] = None
    subject_text = rest
    teacher_match = _match_teacher(rest)
    if teacher_match:
        teacher = teacher_match.group(1).strip()
        subject_text = rest[: teacher_match.start()]

    return CellSegments(
        room=room,
        subject=_clean_subject(subject_text),
        teacher=teacher,
        notes=notes,
    )
