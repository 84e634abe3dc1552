"""
Calendar helpers shared by the cadence and growth-area code.

Every date that enters the system goes through ``parse_local_date``: it
accepts ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:mm:ss`` (any suffix after the date
is ignored), always reads the value as a local calendar date and never
shifts it by a timezone offset. Bad input yields ``None`` instead of raising.
"""
import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime, str, None]

_DATE_PREFIX = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T\s])")
_QUARTER = re.compile(r"^\s*Q?([1-4])(?:\s|$)", re.IGNORECASE)


def parse_local_date(value: DateLike) -> Optional[date]:
    if value is None:
        return None
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    match = _DATE_PREFIX.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def days_between(target: date, today: date) -> int:
    """Whole calendar days from ``today`` to ``target`` (negative when target is past)."""
    return (target - today).days


def quarter_of(day: date) -> int:
    return (day.month - 1) // 3 + 1


def quarter_label(day: date) -> str:
    return f"Q{quarter_of(day)}"


def quarter_end(quarter: int, year: int) -> date:
    end_month = quarter * 3
    return date(year, end_month, calendar.monthrange(year, end_month)[1])


def parse_quarter(value: Union[str, int, None]) -> Optional[int]:
    """"Q3", "q3", "3" or "Q3 2024" -> 3."""
    if value is None:
        return None
    if isinstance(value, int):
        return value if 1 <= value <= 4 else None
    match = _QUARTER.match(str(value))
    return int(match.group(1)) if match else None


def anniversary_in_year(start_date: date, year: int) -> date:
    try:
        return date(year, start_date.month, start_date.day)
    except ValueError:
        # Feb 29 hire date in a non-leap year rolls over to Mar 1
        return date(year, 3, 1)
