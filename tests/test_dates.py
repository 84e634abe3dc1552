from datetime import date, datetime, timedelta, timezone

import pytest

from app.services.dates import (
    anniversary_in_year,
    days_between,
    parse_local_date,
    parse_quarter,
    quarter_end,
    quarter_of,
)


@pytest.mark.parametrize("value, expected", [
    ("2024-03-15", date(2024, 3, 15)),
    ("2024-03-15T23:59:59", date(2024, 3, 15)),
    ("2024-03-15T23:30:00Z", date(2024, 3, 15)),
    ("2024-03-15 08:00:00", date(2024, 3, 15)),
    (date(2024, 3, 15), date(2024, 3, 15)),
    (datetime(2024, 3, 15, 23, 30), date(2024, 3, 15)),
])
def test_parse_local_date_keeps_the_calendar_day(value, expected):
    assert parse_local_date(value) == expected


def test_parse_local_date_ignores_timezone_offset():
    late_evening = datetime(2024, 3, 15, 23, 30, tzinfo=timezone(timedelta(hours=-8)))
    assert parse_local_date(late_evening) == date(2024, 3, 15)


@pytest.mark.parametrize("value", [None, "", "not-a-date", "2024-13-01", "2024-02-30", "15/03/2024", 20240315])
def test_parse_local_date_degrades_to_none(value):
    assert parse_local_date(value) is None


def test_days_between_is_signed():
    today = date(2024, 5, 10)
    assert days_between(date(2024, 5, 12), today) == 2
    assert days_between(today, today) == 0
    assert days_between(date(2024, 5, 1), today) == -9


@pytest.mark.parametrize("month, quarter", [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)])
def test_quarter_of(month, quarter):
    assert quarter_of(date(2024, month, 1)) == quarter


def test_quarter_end():
    assert quarter_end(1, 2024) == date(2024, 3, 31)
    assert quarter_end(2, 2024) == date(2024, 6, 30)
    assert quarter_end(3, 2024) == date(2024, 9, 30)
    assert quarter_end(4, 2024) == date(2024, 12, 31)


@pytest.mark.parametrize("value, expected", [
    ("Q1", 1), ("q4", 4), ("3", 3), ("Q2 2024", 2), (2, 2),
    ("Q5", None), ("", None), (None, None), (0, None), ("quarterly", None),
])
def test_parse_quarter(value, expected):
    assert parse_quarter(value) == expected


def test_anniversary_in_year():
    assert anniversary_in_year(date(2020, 3, 15), 2024) == date(2024, 3, 15)
    assert anniversary_in_year(date(2020, 2, 29), 2024) == date(2024, 2, 29)
    assert anniversary_in_year(date(2020, 2, 29), 2023) == date(2023, 3, 1)
