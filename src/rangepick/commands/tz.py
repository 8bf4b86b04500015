"""Command group: timezone conversion and lookup."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import click

from rangepick.commands._base import RangeGroup
from rangepick.commands._options import DATE

if TYPE_CHECKING:
    from rangepick.commands._context import AppContext

_TZ_EXAMPLES = """\
  rangepick tz convert 2024-01-15T09:00 --from America/New_York --to UTC
  rangepick tz info America/New_York --at 2024-07-01T12:00
  rangepick tz list"""


@click.group(cls=RangeGroup, examples=_TZ_EXAMPLES)
@click.pass_obj
def tz(app: AppContext) -> None:
    """Convert wall-clock times between timezones and inspect offsets."""


@tz.command(
    examples="""\
  rangepick tz convert 2024-01-15T09:00 --from America/New_York --to UTC
  rangepick --json tz convert "2024-03-10 01:30" --from UTC --to Asia/Kolkata"""
)
@click.argument("wall", type=DATE)
@click.option("--from", "from_tz", required=True, help="Zone WALL is read in.")
@click.option("--to", "to_tz", required=True, help="Zone to render WALL in.")
@click.pass_obj
def convert(app: AppContext, wall: datetime, from_tz: str, to_tz: str) -> None:
    """Re-render the wall-clock time WALL from one zone into another."""
    app.emit(app.service.convert(wall, from_tz, to_tz))


@tz.command(
    examples="""\
  rangepick tz info
  rangepick tz info Australia/Sydney --at 2024-01-01T00:00"""
)
@click.argument("zone", required=False)
@click.option("--at", type=DATE, default=None, help="UTC instant to inspect (default: now).")
@click.pass_obj
def info(app: AppContext, zone: str | None, at: datetime | None) -> None:
    """Show offset, abbreviation and DST status of ZONE."""
    instant = at.replace(tzinfo=UTC) if at else datetime.now(UTC)
    app.emit(app.service.timezone_info(instant, zone))


@tz.command("list", examples="  rangepick tz list --at 2024-07-01")
@click.option("--at", type=DATE, default=None, help="UTC instant for offsets (default: now).")
@click.pass_obj
def list_cmd(app: AppContext, at: datetime | None) -> None:
    """List the common timezones with their current offsets."""
    instant = at.replace(tzinfo=UTC) if at else datetime.now(UTC)
    app.emit(app.service.list_timezones(instant))
