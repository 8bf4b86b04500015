"""Command: apply one navigation key to a focus date."""

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
  rangepick nav ArrowDown --focus 2024-03-14
  rangepick nav pageup --focus 2024-03-31
  rangepick nav enter --focus 2024-03-20 --start 2024-03-10""",
)
@click.argument("key")
@click.option("--focus", type=DATE, required=True, help="Currently focused date.")
@range_options
@constraint_options
@click.pass_obj
def nav(
    app: AppContext,
    key: str,
    focus: datetime,
    start: datetime | None,
    end: datetime | None,
    min_date: datetime | None,
    max_date: datetime | None,
    blackout: tuple[datetime, ...],
    max_days: int | None,
) -> None:
    """Move focus with KEY (arrows, home/end, pageup/pagedown, enter, escape)."""
    app.emit(
        app.service.navigate(
            key,
            focus,
            build_state(start, end),
            build_constraints(app, min_date, max_date, blackout, max_days),
        )
    )
