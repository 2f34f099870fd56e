from __future__ import annotations

import math
from datetime import date, datetime

import pandas as pd
import pytest

from safa_pipeline.normalize.dates import parse_date
from safa_pipeline.normalize.fields import normalize_aircraft, normalize_ata


@pytest.mark.parametrize(
    "value, expected",
    [
        ("25", "25-00-00"),
        ("25-22", "25-22-00"),
        ("25-22-00", "25-22-00"),
        (" 25-22 ", "25-22-00"),
        (25, "25-00-00"),
        (25.0, "25-00-00"),
        ("25-2", "25-2"),
        ("ATA 25", "ATA 25"),
        ("", "UNKNOWN"),
        (None, "UNKNOWN"),
        (math.nan, "UNKNOWN"),
    ],
)
def test_normalize_ata(value, expected):
    assert normalize_ata(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (" tc-soh ", "TC-SOH"),
        ("TC-JHK", "TC-JHK"),
        (None, "UNKNOWN"),
        ("", "UNKNOWN"),
        ("   ", "UNKNOWN"),
    ],
)
def test_normalize_aircraft(value, expected):
    assert normalize_aircraft(value) == expected


def test_parse_dotted_day_first():
    d = parse_date("1.05.2025")
    assert d == date(2025, 5, 1)
    assert (d.day, d.month, d.year) == (1, 5, 2025)
    assert parse_date("31.12.2024") == date(2024, 12, 31)


def test_parse_generic_fallback():
    assert parse_date("2025-05-01") == date(2025, 5, 1)
    assert parse_date("2025-05-01 14:30") == date(2025, 5, 1)


def test_parse_native_datetime_cells():
    assert parse_date(pd.Timestamp("2025-03-04 08:00")) == date(2025, 3, 4)
    assert parse_date(datetime(2025, 3, 4, 23, 59)) == date(2025, 3, 4)
    assert parse_date(date(2025, 3, 4)) == date(2025, 3, 4)


@pytest.mark.parametrize("value", ["not-a-date", "", None, math.nan, pd.NaT, "31.02.2025", "today", "now", "TODAY "])
def test_parse_no_date(value):
    assert parse_date(value) is None
