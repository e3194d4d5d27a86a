"""Tests for spreadsheet date normalisation."""

from __future__ import annotations

import re
from datetime import date, datetime

import pytest

from extractors.dates import normalize_date, serial_to_iso


@pytest.mark.parametrize(
    "serial, expected",
    [
        (0, "1899-12-30"),
        (1, "1899-12-31"),
        (45292, "2024-01-01"),
        (45306, "2024-01-15"),
        (45292.75, "2024-01-01"),
    ],
)
def test_serial_numbers(serial, expected):
    assert normalize_date(serial) == expected


def test_consecutive_serials_are_one_day_apart():
    for n in (1, 59, 60, 61, 44927, 45351):
        first = date.fromisoformat(serial_to_iso(n))
        second = date.fromisoformat(serial_to_iso(n + 1))
        assert (second - first).days == 1


def test_datetime_and_date_objects():
    assert normalize_date(datetime(2024, 6, 3, 9, 30)) == "2024-06-03"
    assert normalize_date(date(2024, 6, 3)) == "2024-06-03"


def test_iso_text_passes_through():
    assert normalize_date("2024-01-10") == "2024-01-10"
    assert normalize_date("  2024-01-10 ") == "2024-01-10"


def test_us_text_is_month_first():
    assert normalize_date("1/15/24") == "2024-01-15"
    assert normalize_date("12/3/2023") == "2023-12-03"


@pytest.mark.parametrize("value", [None, "", "15 января", "2024.01.15", "1-15-24", True, [1]])
def test_unrecognised_values_are_lost(value):
    assert normalize_date(value) is None


def test_output_is_always_iso_shaped():
    iso = re.compile(r"^\d{4}-\d{2}-\d{2}$")
    for value in (45000, "3/7/25", datetime(2025, 3, 7)):
        assert iso.match(normalize_date(value))
