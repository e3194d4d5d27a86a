"""Tests for the date × group matrix layout parser."""

from __future__ import annotations

from datetime import datetime

from conftest import matrix_grid
from dto.schedule import ExamKind
from extractors.matrix import DATA_START_ROW, MatrixLayoutParser

GROUPS = ["ИВТ-21", "ИВТ-22"]


def _parse(data_rows, groups=GROUPS):
    return MatrixLayoutParser().parse(matrix_grid(groups, data_rows))


def test_segmented_exam_cell():
    (record,) = _parse([[datetime(2024, 1, 15), None, "305а\nМатематика Иванов И.И.", None]])
    assert record.date == "2024-01-15"
    assert record.group == "ИВТ-21"
    assert record.kind is ExamKind.EXAM
    assert record.subject == "Математика"
    assert record.teacher == "Иванов И.И."
    assert record.location.room == "305а"
    assert record.location.building is None
    assert record.time.start is None and record.time.end is None
    assert record.provenance.sheet == "Сессия"
    assert record.provenance.row == DATA_START_ROW


def test_skip_values_emit_nothing():
    records = _parse(
        [
            [45306, None, "занятия", "Практика производственная"],
            [45307, None, "Консультация 12:00", "Каникулы"],
        ]
    )
    assert records == []


def test_remote_marker_only_cell_still_yields_record():
    (record,) = _parse([[45306, None, None, "дист."]])
    assert record.group == "ИВТ-22"
    assert record.notes == "дист."
    assert record.location.room is None
    assert record.teacher is None
    assert record.kind is ExamKind.EXAM


def test_consultation_is_not_segmented():
    (record,) = _parse([[45306, None, "305 консультация Иванов И.И. дист", None]])
    assert record.kind is ExamKind.CONSULTATION
    assert record.notes == "дист."
    assert record.subject is None
    assert record.teacher is None
    assert record.location.room is None


def test_diff_credit_wins_over_credit():
    (record,) = _parse([[45306, None, "Дифференцированный зачет Физика Петров П.", None]])
    assert record.kind is ExamKind.DIFF_CREDIT
    assert record.teacher == "Петров П."


def test_credit_cell():
    (record,) = _parse([[45306, None, "Зачёт Химия Сидоров С.С.", None]])
    assert record.kind is ExamKind.CREDIT
    assert record.subject == "Зачёт Химия"


def test_row_without_date_is_dropped_entirely():
    records = _parse(
        [
            [datetime(2024, 1, 15), None, "Математика", None],
            [None, None, "Физика", "Химия"],
            [datetime(2024, 1, 17), None, None, "История"],
        ]
    )
    assert [(r.subject, r.provenance.row) for r in records] == [
        ("Математика", DATA_START_ROW),
        ("История", DATA_START_ROW + 2),
    ]


def test_serial_date_is_normalised_once_per_row():
    records = _parse([[45306, None, "Математика", "Физика"]])
    assert [r.date for r in records] == ["2024-01-15", "2024-01-15"]


def test_unreadable_date_keeps_the_record():
    (record,) = _parse([["15 января", None, "Математика", None]])
    assert record.date is None


def test_cell_under_missing_group_header():
    (record,) = _parse([[45306, None, None, None, "Экология"]])
    assert record.group is None
    assert record.subject == "Экология"


def test_numeric_cell_text():
    (record,) = _parse([[45306, None, 101.0, None]])
    assert record.subject == "101"


def test_reparse_gives_identical_ids():
    rows = [[45306, None, "Математика Иванов И.И.", "Физика"], [45307, None, "Химия", None]]
    first = [r.id for r in _parse(rows)]
    second = [r.id for r in _parse(rows)]
    assert first == second
    assert len(first) == 3
