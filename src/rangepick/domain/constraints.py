"""Constraint validation for single dates and two-endpoint ranges.

Violations are *reported*, never raised: every check returns either
``None`` or a :class:`ConstraintViolation` whose message names the
offending bound or date.  Single-date checks are endpoint-agnostic and
tag their result ``start``; :func:`validate_range` re-tags violations
of the end date as ``end``.

Error order from :func:`validate_range` is deterministic:
start checks (min, max, blackout), end checks (same order), range
order, then duration.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rangepick.domain.dates import duration_ms, format_date, is_after, is_before
from rangepick.domain.types import ErrorField, ViolationKind

_MS_PER_DAY = 24 * 60 * 60 * 1000


class ConstraintViolation(BaseModel):
    """A field-attributed, human-readable validation error."""

    model_config = {"frozen": True}

    field: ErrorField
    kind: ViolationKind
    message: str


class DateRangeConstraints(BaseModel):
    """Optional bounds on what may be selected. Absent means unconstrained.

    Blackout entries are held at day granularity; datetimes passed in are
    reduced to their calendar date.
    """

    model_config = {"frozen": True}

    min_date: datetime | None = None
    max_date: datetime | None = None
    blackout_dates: frozenset[date] = Field(default_factory=frozenset)
    max_duration: timedelta | None = None

    @field_validator("blackout_dates", mode="before")
    @classmethod
    def _days_only(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(d.date() if isinstance(d, datetime) else d for d in value)
        return value

    def is_blackout(self, d: date) -> bool:
        day = d.date() if isinstance(d, datetime) else d
        return day in self.blackout_dates


# ---------------------------------------------------------------------------
# Single-date checks
# ---------------------------------------------------------------------------


def check_min(d: datetime, min_date: datetime | None) -> ConstraintViolation | None:
    if min_date is None or not is_before(d, min_date):
        return None
    return ConstraintViolation(
        field=ErrorField.START,
        kind=ViolationKind.MIN_DATE,
        message=f"Date cannot be before {format_date(min_date)}",
    )


def check_max(d: datetime, max_date: datetime | None) -> ConstraintViolation | None:
    if max_date is None or not is_after(d, max_date):
        return None
    return ConstraintViolation(
        field=ErrorField.START,
        kind=ViolationKind.MAX_DATE,
        message=f"Date cannot be after {format_date(max_date)}",
    )


def check_blackout(d: datetime, blackout: Iterable[date]) -> ConstraintViolation | None:
    """Day-granularity membership test against the blackout days."""
    days = blackout if isinstance(blackout, (set, frozenset)) else set(blackout)
    if d.date() not in days:
        return None
    return ConstraintViolation(
        field=ErrorField.START,
        kind=ViolationKind.BLACKOUT,
        message=f"{format_date(d)} is not available for selection",
    )


def check_max_duration(
    start: datetime,
    end: datetime,
    max_duration: timedelta | None,
) -> ConstraintViolation | None:
    """Flag ranges longer than *max_duration*. The bound is reported in whole days."""
    if max_duration is None:
        return None
    limit_ms = max_duration // timedelta(milliseconds=1)
    if duration_ms(start, end) <= limit_ms:
        return None
    return ConstraintViolation(
        field=ErrorField.DURATION,
        kind=ViolationKind.MAX_DURATION,
        message=f"Range duration cannot exceed {limit_ms // _MS_PER_DAY} days",
    )


def _date_violations(d: datetime, constraints: DateRangeConstraints) -> list[ConstraintViolation]:
    checks = (
        check_min(d, constraints.min_date),
        check_max(d, constraints.max_date),
        check_blackout(d, constraints.blackout_dates),
    )
    return [v for v in checks if v is not None]


def is_selectable(d: datetime, constraints: DateRangeConstraints) -> bool:
    """True when *d* passes the min, max and blackout checks."""
    return not _date_violations(d, constraints)


# ---------------------------------------------------------------------------
# Range validation
# ---------------------------------------------------------------------------


def validate_range(
    start: datetime | None,
    end: datetime | None,
    constraints: DateRangeConstraints,
) -> list[ConstraintViolation]:
    """Validate both endpoints and the range they span.

    Returns the full ordered list of violations (empty when valid).
    """
    errors: list[ConstraintViolation] = []

    if start is not None:
        errors.extend(_date_violations(start, constraints))

    if end is not None:
        errors.extend(
            v.model_copy(update={"field": ErrorField.END})
            for v in _date_violations(end, constraints)
        )

    if start is not None and end is not None:
        if is_after(start, end):
            errors.append(
                ConstraintViolation(
                    field=ErrorField.RANGE,
                    kind=ViolationKind.RANGE_ORDER,
                    message=(
                        f"Start date {format_date(start)} must precede "
                        f"end date {format_date(end)}"
                    ),
                )
            )
        duration_error = check_max_duration(start, end, constraints.max_duration)
        if duration_error is not None:
            errors.append(duration_error)

    return errors


def blackout_dates_in_range(
    start: datetime,
    end: datetime,
    blackout: Iterable[date],
) -> list[date]:
    """Blackout days falling within ``[start, end]``, in calendar order."""
    first, last = start.date(), end.date()
    return sorted(d for d in blackout if first <= d <= last)
