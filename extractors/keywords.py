"""
Keyword pattern matchers shared by the layout parsers.

Each matcher is a small predicate over one cell's text.  Precedence is
decided by the callers:

  - matrix cells:  skip check → consultation → EXAM, then CREDIT, then
    DIFF_CREDIT (the later override wins)
  - flat control column:  exam → diff → credit → consultation → retake
"""

from __future__ import annotations

import re
from typing import Optional

from dto.schedule import ExamKind

# Marker written into ``notes`` for remote-format entries.
REMOTE_MARKER = "дист."

# Whole-cell values meaning "no exam on this day".
SKIP_VALUES = frozenset({"занятия", "зачетная неделя", "каникулы"})

# Prefixes for placements/practicums and plain consultation slots.
SKIP_PREFIXES = (
    "консультация",
    "практика",
    "эксплуатационная",
    "технологическая",
    "научно-исследовательская",
    "педагогическая",
)

_REMOTE_RE = re.compile(r"дист\.?", re.IGNORECASE)
_CONSULTATION_RE = re.compile(r"консульт", re.IGNORECASE)
_CREDIT_RE = re.compile(r"зач[её]т", re.IGNORECASE)
_DIFF_RE = re.compile(r"диф", re.IGNORECASE)

# Control-column vocabulary for the flat layout, in priority order.
_CONTROL_KINDS = (
    (re.compile(r"(экз|exam)"), ExamKind.EXAM),
    (re.compile(r"(диф|diff)"), ExamKind.DIFF_CREDIT),
    (re.compile(r"(зач|credit)"), ExamKind.CREDIT),
    (re.compile(r"(конс|consult)"), ExamKind.CONSULTATION),
    (re.compile(r"(пересда|retake)"), ExamKind.RETAKE),
)


def is_skip_value(text: str) -> bool:
    low = text.strip().lower()
    if low in SKIP_VALUES:
        return True
    return low.startswith(SKIP_PREFIXES)


def has_remote_marker(text: str) -> bool:
    return _REMOTE_RE.search(text) is not None


def remote_note(text: str) -> Optional[str]:
    """``REMOTE_MARKER`` when *text* mentions the remote format, else ``None``."""
    return REMOTE_MARKER if has_remote_marker(text) else None


def is_consultation(text: str) -> bool:
    return _CONSULTATION_RE.search(text) is not None


def is_credit(text: str) -> bool:
    return _CREDIT_RE.search(text) is not None


def is_diff_credit(text: str) -> bool:
    return _DIFF_RE.search(text) is not None


def classify_matrix_cell(text: str) -> ExamKind:
    """Kind of a non-skipped matrix cell."""
    if is_consultation(text):
        return ExamKind.CONSULTATION
    kind = ExamKind.EXAM
    if is_credit(text):
        kind = ExamKind.CREDIT
    if is_diff_credit(text):
        kind = ExamKind.DIFF_CREDIT
    return kind


def classify_control(value: Optional[str]) -> ExamKind:
    """Kind from a flat-layout control column value."""
    if not value:
        return ExamKind.OTHER
    low = value.lower()
    for pattern, kind in _CONTROL_KINDS:
        if pattern.search(low):
            return kind
    return ExamKind.OTHER
