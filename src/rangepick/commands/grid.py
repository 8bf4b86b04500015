"""Command: render one month of the calendar grid."""

from __future__ import annotations

from datetime import date, datetime
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
  rangepick grid 2024 2
  rangepick grid 2024 3 --start 2024-03-10 --end 2024-03-20 --blackout 2024-03-15
  rangepick grid 2024 3 --min 2024-03-05 --max 2024-03-25 --today 2024-03-12
  rangepick --json grid 2024 12""",
)
@click.argument("year", type=click.IntRange(1, 9999))
@click.argument("month", type=click.IntRange(1, 12))
@range_options
@constraint_options
@click.option("--today", type=DATE, default=None, help="Reference day for highlighting.")
@click.pass_obj
def grid(
    app: AppContext,
    year: int,
    month: int,
    start: datetime | None,
    end: datetime | None,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
    today: datetime | None,
) -> None:
    """Show the calendar grid for YEAR MONTH with the selection marked."""
    app.emit(
        app.service.render_month(
            year,
            month,
            build_state(start, end),
            build_constraints(app, min_date, max_date, blackout, max_days),
            today=today.date() if today else date.today(),
        )
    )
