"""Commands: feed a date pick into the selection, or validate a range."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rangepick.commands._base import RangeCommand
from rangepick.commands._options import (
    DATE,
    build_constraints,
    build_state,
    constraint_options,
    range_options,
)

if TYPE_CHECKING:
    from rangepick.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangepick select 2024-06-15
  rangepick select 2024-06-10 --start 2024-06-15
  rangepick select 2024-03-05 --start 2024-03-01 --min 2024-03-03""",
)
@click.argument("picked", type=DATE)
@range_options
@constraint_options
@click.pass_obj
def select(
    app: AppContext,
    picked: datetime,
    start: datetime | None,
    end: datetime | None,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
) -> None:
    """Pick PICKED: starts a new range or completes the current one."""
    app.emit(
        app.service.select_date(
            build_state(start, end),
            picked,
            build_constraints(app, min_date, max_date, blackout, max_days),
        )
    )


@click.command(
    cls=RangeCommand,
    examples="""\
  rangepick validate --start 2024-01-01 --end 2024-01-10 --max-days 7
  rangepick validate --start 2024-03-05 --min 2024-03-10
  rangepick --json validate --start 2024-03-10 --end 2024-03-20 --blackout 2024-03-15""",
)
@range_options
@constraint_options
@click.pass_obj
def validate(
    app: AppContext,
    start: datetime | None,
    end: datetime | None,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
) -> None:
    """Check a range against the constraints and list every violation."""
    app.emit(
        app.service.validate(
            build_state(start, end),
            build_constraints(app, min_date, max_date, blackout, max_days),
        )
    )
