"""Shared Click options for selection and constraint input.

Dates are accepted as ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM[:SS]`` and
parsed to naive wall-clock datetimes.  Constraint flags layer on top of
the ``[constraints]`` config section rather than replacing it.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, TypeVar

import click

from rangepick.domain.selection import DateRangeState

if TYPE_CHECKING:
    from rangepick.commands._context import AppContext
    from rangepick.domain.constraints import DateRangeConstraints

F = TypeVar("F", bound=Callable[..., Any])

DATE = click.DateTime(
    formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]
)


def range_options(func: F) -> F:
    """``--start`` / ``--end`` for the caller-owned selection."""
    func = click.option("--end", type=DATE, default=None, help="Current range end.")(func)
    func = click.option("--start", type=DATE, default=None, help="Current range start.")(func)
    return func


def constraint_options(func: F) -> F:
    """``--min`` / ``--max`` / ``--blackout`` / ``--max-days`` overrides."""
    options = [
        click.option("--min", "min_date", type=DATE, default=None, help="Earliest day."),
        click.option("--max", "max_date", type=DATE, default=None, help="Latest day."),
        click.option(
            "--blackout",
            type=DATE,
            multiple=True,
            help="Unavailable day (repeatable).",
        ),
        click.option(
            "--max-days",
            type=click.IntRange(min=0),
            default=None,
            help="Longest allowed range in days.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_state(start: datetime | None, end: datetime | None) -> DateRangeState:
    if end is not None and start is None:
        raise click.UsageError("--end requires --start.")
    return DateRangeState(start=start, end=end)


def build_constraints(
    app: AppContext,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
) -> DateRangeConstraints:
    """Merge CLI overrides into the configured constraints."""
    base = app.settings.constraints
    overrides: dict[str, Any] = {}
    if min_date is not None:
        overrides["min_date"] = min_date.date()
    if max_date is not None:
        overrides["max_date"] = max_date.date()
    if blackout:
        overrides["blackout_dates"] = [*base.blackout_dates, *(d.date() for d in blackout)]
    if max_days is not None:
        overrides["max_duration_days"] = max_days
    return base.model_copy(update=overrides).to_constraints()
