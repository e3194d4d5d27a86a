"""Shared fixtures: in-memory sheet grids and real .xlsx workbooks."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Sequence

import openpyxl
import pytest

from dto.sheet import SheetGrid

MATRIX_TITLE = "Расписание экзаменационной сессии"
FLAT_HEADER = ("ФИО", "Дата", "Группа", "Предмет", "Контроль")


def matrix_rows(
    groups: Sequence[Optional[str]],
    data_rows: Sequence[Sequence[Any]],
    title: Optional[str] = MATRIX_TITLE,
) -> List[List[Any]]:
    """Title in A1, group header in row 10 (from column C), data from row 12."""
    rows: List[List[Any]] = [[title]]
    rows.extend([] for _ in range(8))
    rows.append([None, None, *groups])
    rows.append([])
    rows.extend(list(r) for r in data_rows)
    return rows


def matrix_grid(
    groups: Sequence[Optional[str]],
    data_rows: Sequence[Sequence[Any]],
    name: str = "Сессия",
    title: Optional[str] = MATRIX_TITLE,
) -> SheetGrid:
    return SheetGrid(name=name, rows=[tuple(r) for r in matrix_rows(groups, data_rows, title)])


def flat_grid(
    data_rows: Sequence[Sequence[Any]],
    name: str = "Лист2",
    header: Sequence[str] = FLAT_HEADER,
) -> SheetGrid:
    return SheetGrid(name=name, rows=[tuple(header)] + [tuple(r) for r in data_rows])


def write_workbook(path: Path, sheets: Sequence[tuple[str, List[List[Any]]]]) -> Path:
    """Save ``[(sheet_name, rows), ...]`` as an .xlsx file at *path*."""
    wb = openpyxl.Workbook()
    first = True
    for name, rows in sheets:
        if first:
            ws = wb.active
            ws.title = name
            first = False
        else:
            ws = wb.create_sheet(name)
        for row in rows:
            ws.append(list(row))
    wb.save(path)
    wb.close()
    return path


@pytest.fixture
def session_workbook(tmp_path: Path) -> Path:
    """A two-sheet workbook: a matrix sheet and a flat sheet."""
    matrix = matrix_rows(
        ["ИВТ-21", "ИВТ-22"],
        [
            [datetime(2024, 1, 15), None, "305а\nМатематический анализ Иванов И.И.", "занятия"],
            [None, None, "Физика Петров П.", "Химия Сидоров С.С."],
            [datetime(2024, 1, 18), None, "Дифференцированный зачет История Орлов О.О.", "дист."],
        ],
    )
    flat = [
        list(FLAT_HEADER),
        ["Смирнов В.Г.", datetime(2024, 1, 20), "ПИ-11", "Программирование", "Экзамен"],
        [None, datetime(2024, 1, 22), "ПИ-12", "Программирование", "Зачет"],
    ]
    return write_workbook(tmp_path / "session.xlsx", [("Лист1", matrix), ("Лист2", flat)])
