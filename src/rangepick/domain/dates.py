"""Calendar-day arithmetic over wall-clock datetimes.

Every function here is pure and timezone-naive: it reads and writes the
local wall-clock fields of a ``datetime`` and never consults a zone.
Months are numbered 1-12 as in :mod:`datetime`. Weekdays are numbered
0=Sunday .. 6=Saturday to match the calendar grid's column order.

INVARIANT: Inputs are never mutated; every transform returns a new value.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

from rangepick.domain.types import TimeFormat

# Millisecond precision: the last representable instant of a day.
END_OF_DAY_TIME = time(23, 59, 59, 999_000)

_ONE_MS = timedelta(milliseconds=1)


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: divisible by 4 and not by 100, unless by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days (28-31) in *month* of *year*."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return calendar.monthrange(year, month)[1]


def weekday_index(d: date) -> int:
    """Sunday-based weekday: 0=Sunday .. 6=Saturday."""
    return (d.weekday() + 1) % 7


def first_weekday_of_month(year: int, month: int) -> int:
    """Sunday-based weekday of day 1 of *month*."""
    return weekday_index(date(year, month, 1))


def same_day(a: datetime, b: datetime) -> bool:
    """True when *a* and *b* fall on the same calendar day; time is ignored."""
    return a.year == b.year and a.month == b.month and a.day == b.day


def in_range(d: datetime, start: datetime, end: datetime) -> bool:
    """Inclusive instant-level containment: ``start <= d <= end``."""
    return not is_before(d, start) and not is_after(d, end)


def add_days(d: datetime, n: int) -> datetime:
    """Shift *d* by *n* calendar days, keeping its time of day."""
    return d + timedelta(days=n)


def subtract_days(d: datetime, n: int) -> datetime:
    """Shift *d* back by *n* calendar days."""
    return add_days(d, -n)


def add_months(d: datetime, n: int) -> datetime:
    """Shift *d* by *n* months, rolling the year as needed.

    When the target month is shorter than *d*'s day of month the day is
    clamped to the target month's last day (Jan 31 + 1 month is Feb 28/29).
    The result never spills into the following month.
    """
    index = d.year * 12 + (d.month - 1) + n
    year, month0 = divmod(index, 12)
    month = month0 + 1
    day = min(d.day, days_in_month(year, month))
    return d.replace(year=year, month=month, day=day)


def start_of_day(d: datetime) -> datetime:
    """Midnight of *d*'s day."""
    return d.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(d: datetime) -> datetime:
    """23:59:59.999 of *d*'s day."""
    return datetime.combine(d.date(), END_OF_DAY_TIME, tzinfo=d.tzinfo)


def start_of_month(d: datetime) -> datetime:
    """Midnight of the first day of *d*'s month."""
    return start_of_day(d.replace(day=1))


def end_of_month(d: datetime) -> datetime:
    """23:59:59.999 of the last day of *d*'s month."""
    last = d.replace(day=days_in_month(d.year, d.month))
    return end_of_day(last)


def compare(a: datetime, b: datetime) -> int:
    """Three-way comparison returning -1, 0 or 1.

    Mixed naive and aware values are compared by their wall-clock fields.
    """
    a, b = _aligned(a, b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _aligned(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    return a.replace(tzinfo=None), b.replace(tzinfo=None)


def is_before(a: datetime, b: datetime) -> bool:
    return compare(a, b) < 0


def is_after(a: datetime, b: datetime) -> bool:
    return compare(a, b) > 0


def duration_ms(a: datetime, b: datetime) -> int:
    """Absolute difference between *a* and *b* in whole milliseconds."""
    a, b = _aligned(a, b)
    return abs(b - a) // _ONE_MS


def is_today(d: datetime, today: date) -> bool:
    """True when *d* falls on the reference day *today*."""
    return d.date() == today


def format_date(d: date) -> str:
    """Format as ``YYYY-MM-DD``."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_time(d: datetime, fmt: TimeFormat = TimeFormat.H24) -> str:
    """Format the time of day as ``HH:MM`` (24h) or ``h:MM AM`` (12h)."""
    if fmt == TimeFormat.H12:
        period = "PM" if d.hour >= 12 else "AM"
        hour = d.hour % 12 or 12
        return f"{hour}:{d.minute:02d} {period}"
    return f"{d.hour:02d}:{d.minute:02d}"


def set_time(d: datetime, hour: int, minute: int) -> datetime:
    """Replace the time of day, zeroing seconds and sub-seconds."""
    return d.replace(hour=hour, minute=minute, second=0, microsecond=0)


def week_number(d: date) -> int:
    """ISO-8601 week number (weeks start Monday, week 1 holds Jan 4)."""
    return d.isocalendar()[1]
