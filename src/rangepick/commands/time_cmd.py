"""Command: combine a day and a clock reading into an instant."""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from rangepick.commands._base import RangeCommand
from rangepick.commands._options import DATE
from rangepick.domain.timeofday import TimeState
from rangepick.domain.types import TimePeriod

if TYPE_CHECKING:
    from rangepick.commands._context import AppContext

_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})$")


@click.command(
    "time",
    cls=RangeCommand,
    examples="""\
  rangepick time 2024-01-15 09:00 --tz America/New_York
  rangepick time 2024-07-04 9:30 --period PM --tz Europe/London""",
)
@click.argument("day", type=DATE)
@click.argument("clock")
@click.option(
    "--period",
    type=click.Choice([p.value for p in TimePeriod], case_sensitive=False),
    default=None,
    help="AM/PM for a 12-hour CLOCK.",
)
@click.option("--tz", default=None, help="Timezone id (default: [picker] timezone).")
@click.pass_obj
def time_cmd(
    app: AppContext,
    day: datetime,
    clock: str,
    period: str | None,
    tz: str | None,
) -> None:
    """Read CLOCK (HH:MM) on DAY in a timezone and show the instant."""
    match = _CLOCK.match(clock)
    if match is None:
        raise click.BadParameter("expected HH:MM", param_hint="CLOCK")
    try:
        time = TimeState(
            hour=int(match.group(1)),
            minute=int(match.group(2)),
            period=TimePeriod(period.upper()) if period else None,
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc.errors()[0]["msg"]), param_hint="CLOCK") from exc
    app.emit(app.service.combine_time(day.date(), time, tz))
