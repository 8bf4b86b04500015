"""Time-of-day state for 12- and 24-hour clocks.

A :class:`TimeState` carries ``period`` exactly when it is a 12-hour
value.  Setters ignore out-of-range input and hand back the unchanged
state, so a half-typed hour never corrupts a selection.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, model_validator

from rangepick.domain.timezones import to_instant
from rangepick.domain.types import TimeFormat, TimePeriod


class TimeState(BaseModel):
    """Hour, minute and (12h only) period."""

    model_config = {"frozen": True}

    hour: int
    minute: int = 0
    period: TimePeriod | None = None

    @model_validator(mode="after")
    def _check_ranges(self) -> Self:
        low, high = hour_bounds(self.format)
        if not low <= self.hour <= high:
            msg = f"hour {self.hour} outside {low}-{high} for {self.format} clock"
            raise ValueError(msg)
        if not 0 <= self.minute <= 59:
            msg = f"minute {self.minute} outside 0-59"
            raise ValueError(msg)
        return self

    @property
    def format(self) -> TimeFormat:
        return TimeFormat.H24 if self.period is None else TimeFormat.H12


def hour_bounds(fmt: TimeFormat) -> tuple[int, int]:
    """Inclusive hour range for *fmt*."""
    if fmt == TimeFormat.H12:
        return 1, 12
    return 0, 23


def default_time(fmt: TimeFormat) -> TimeState:
    """Midnight: ``12:00 AM`` or ``00:00``."""
    if fmt == TimeFormat.H12:
        return TimeState(hour=12, minute=0, period=TimePeriod.AM)
    return TimeState(hour=0, minute=0)


def with_hour(time: TimeState, hour: int) -> TimeState:
    low, high = hour_bounds(time.format)
    if not low <= hour <= high:
        return time
    return time.model_copy(update={"hour": hour})


def with_minute(time: TimeState, minute: int) -> TimeState:
    if not 0 <= minute <= 59:
        return time
    return time.model_copy(update={"minute": minute})


def with_period(time: TimeState, period: TimePeriod) -> TimeState:
    """Set AM/PM. A 24-hour state has no period and is returned unchanged."""
    if time.period is None:
        return time
    return time.model_copy(update={"period": period})


def to_24_hour(time: TimeState) -> int:
    """Hour on a 24-hour clock (12 AM is 0, 12 PM is 12)."""
    if time.period is None:
        return time.hour
    if time.period == TimePeriod.PM and time.hour != 12:
        return time.hour + 12
    if time.period == TimePeriod.AM and time.hour == 12:
        return 0
    return time.hour


def from_24_hour(hour: int, minute: int, fmt: TimeFormat) -> TimeState:
    """Build a TimeState for *fmt* from a 24-hour clock reading."""
    if fmt == TimeFormat.H24:
        return TimeState(hour=hour, minute=minute)
    period = TimePeriod.PM if hour >= 12 else TimePeriod.AM
    return TimeState(hour=hour % 12 or 12, minute=minute, period=period)


def combine_date_time(day: date | datetime, time: TimeState) -> datetime:
    """Wall-clock datetime for *day* at *time*; seconds are zeroed."""
    return datetime(day.year, day.month, day.day, to_24_hour(time), time.minute)


def combine_in_timezone(day: date | datetime, time: TimeState, tz: str) -> datetime:
    """Instant for *day* at *time* as read on a clock in *tz*."""
    return to_instant(combine_date_time(day, time), tz)
