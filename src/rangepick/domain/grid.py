"""Calendar grid builder.

A month is laid out as whole weeks of seven :class:`DayCell`, Sunday
first.  Leading cells come from the previous month and trailing cells
from the next one, so every row is complete.

The grid is a total function of its arguments and is rebuilt wholesale
on every call; results are memoized on the (hashable) argument tuple.
"""

from __future__ import annotations

import functools
from dataclasses import asdict, dataclass
from datetime import date, datetime, tzinfo
from typing import Any

from rangepick.domain.constraints import DateRangeConstraints, is_selectable
from rangepick.domain.dates import (
    add_months,
    days_in_month,
    first_weekday_of_month,
    format_date,
    in_range,
    is_today,
    same_day,
)
from rangepick.domain.selection import DateRangeState

WEEK_LENGTH = 7

Week = tuple["DayCell", ...]


@dataclass(frozen=True)
class DayCell:
    """One day of the grid and its classification flags."""

    date: datetime
    is_current_month: bool
    is_today: bool
    is_selected: bool
    is_in_range: bool
    is_disabled: bool
    is_blackout: bool

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["date"] = format_date(self.date)
        return data


def classify_day(
    d: datetime,
    *,
    is_current_month: bool,
    selection: DateRangeState,
    constraints: DateRangeConstraints,
    today: date | None = None,
) -> DayCell:
    """Build the cell for *d* against the selection and constraints."""
    start, end = selection.start, selection.end

    selected = (start is not None and same_day(d, start)) or (
        end is not None and same_day(d, end)
    )
    within = False
    if start is not None and end is not None and not same_day(start, end):
        within = not selected and in_range(d, start, end)

    return DayCell(
        date=d,
        is_current_month=is_current_month,
        is_today=today is not None and is_today(d, today),
        is_selected=selected,
        is_in_range=within,
        is_disabled=not is_selectable(d, constraints),
        is_blackout=constraints.is_blackout(d),
    )


@functools.lru_cache(maxsize=64)
def build_month_grid(
    year: int,
    month: int,
    selection: DateRangeState,
    constraints: DateRangeConstraints,
    today: date | None = None,
) -> tuple[Week, ...]:
    """Lay out *month* of *year* as complete Sunday-first weeks.

    Cells for the previous and next month pad the first and last rows and
    carry ``is_current_month=False``.
    """
    # Cells share the awareness of the values they are compared against.
    first = datetime(year, month, 1, tzinfo=_anchor_tz(selection, constraints))

    def cell(d: datetime, current: bool) -> DayCell:
        return classify_day(
            d,
            is_current_month=current,
            selection=selection,
            constraints=constraints,
            today=today,
        )

    weeks: list[Week] = []
    week: list[DayCell] = []

    lead = first_weekday_of_month(year, month)
    prev = add_months(first, -1)
    prev_days = days_in_month(prev.year, prev.month)
    for day in range(prev_days - lead + 1, prev_days + 1):
        week.append(cell(prev.replace(day=day), False))

    for day in range(1, days_in_month(year, month) + 1):
        week.append(cell(first.replace(day=day), True))
        if len(week) == WEEK_LENGTH:
            weeks.append(tuple(week))
            week = []

    if week:
        nxt = add_months(first, 1)
        day = 1
        while len(week) < WEEK_LENGTH:
            week.append(cell(nxt.replace(day=day), False))
            day += 1
        weeks.append(tuple(week))

    return tuple(weeks)


def _anchor_tz(selection: DateRangeState, constraints: DateRangeConstraints) -> tzinfo | None:
    for anchor in (selection.start, selection.end, constraints.min_date, constraints.max_date):
        if anchor is not None:
            return anchor.tzinfo
    return None


def grid_to_dicts(grid: tuple[Week, ...]) -> list[list[dict[str, Any]]]:
    """Serialize a grid week-major for JSON output."""
    return [[c.to_dict() for c in week] for week in grid]
