"""Command: list preset ranges or apply one."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from rangepick.commands._base import RangeCommand
from rangepick.commands._options import DATE, build_constraints, constraint_options

if TYPE_CHECKING:
    from rangepick.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangepick preset
  rangepick preset today
  rangepick preset "last 7 days" --now 2024-06-15T13:30""",
)
@click.argument("label", required=False)
@click.option("--now", type=DATE, default=None, help="Reference instant (default: now).")
@constraint_options
@click.pass_obj
def preset(
    app: AppContext,
    label: str | None,
    now: datetime | None,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
) -> None:
    """Apply the preset LABEL, or list all presets when LABEL is omitted."""
    reference = now or datetime.now().replace(microsecond=0)
    if label is None:
        app.emit(app.service.list_presets(reference))
        return
    app.emit(
        app.service.apply_preset(
            label,
            reference,
            build_constraints(app, min_date, max_date, blackout, max_days),
        )
    )
