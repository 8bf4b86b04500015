"""Range selection state machine and preset ranges.

Two-click protocol::

    EMPTY ──pick──> PARTIAL_START ──pick──> COMPLETE
                         ^                     │
                         └────────pick─────────┘

Completing a range with an earlier date swaps the endpoints.  Presets
bypass the protocol and assign a COMPLETE state directly.

The reference instant ``now`` is always passed in; nothing here reads
the system clock.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, model_validator

from rangepick.domain.dates import (
    end_of_day,
    end_of_month,
    is_after,
    is_before,
    start_of_day,
    start_of_month,
    subtract_days,
)
from rangepick.domain.types import SelectionPhase


class DateRangeState(BaseModel):
    """Working selection owned by the caller.

    INVARIANT: ``end`` is set only if ``start`` is set.  Ordering may be
    violated transiently; :meth:`normalized` restores it.
    """

    model_config = {"frozen": True}

    start: datetime | None = None
    end: datetime | None = None

    @model_validator(mode="after")
    def _end_requires_start(self) -> Self:
        if self.end is not None and self.start is None:
            raise ValueError("end cannot be set without start")
        return self

    @property
    def phase(self) -> SelectionPhase:
        if self.start is None:
            return SelectionPhase.EMPTY
        if self.end is None:
            return SelectionPhase.PARTIAL_START
        return SelectionPhase.COMPLETE

    def normalized(self) -> DateRangeState:
        """Copy with endpoints swapped if ``start`` is after ``end``."""
        if self.start is not None and self.end is not None and is_after(self.start, self.end):
            return DateRangeState(start=self.end, end=self.start)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "phase": str(self.phase),
        }


def pick(state: DateRangeState, d: datetime) -> DateRangeState:
    """Apply one date pick to *state* and return the next state."""
    if state.phase != SelectionPhase.PARTIAL_START:
        return DateRangeState(start=d)
    assert state.start is not None
    if is_before(d, state.start):
        return DateRangeState(start=d, end=state.start)
    return DateRangeState(start=state.start, end=d)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Preset:
    """A named range derived from a reference instant."""

    label: str
    resolve: Callable[[datetime], DateRangeState]


def today_range(now: datetime) -> DateRangeState:
    return DateRangeState(start=start_of_day(now), end=end_of_day(now))


def this_month_range(now: datetime) -> DateRangeState:
    return DateRangeState(start=start_of_month(now), end=end_of_month(now))


def last_n_days(days: int, *, floor_start: bool = False) -> Callable[[datetime], DateRangeState]:
    """Resolver for ``[now - days, now]``.

    The start keeps *now*'s time of day unless *floor_start* rounds it
    down to midnight.
    """

    def resolve(now: datetime) -> DateRangeState:
        start = subtract_days(now, days)
        if floor_start:
            start = start_of_day(start)
        return DateRangeState(start=start, end=now)

    return resolve


DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset("Today", today_range),
    Preset("Last 24 Hours", last_n_days(1)),
    Preset("Last 7 Days", last_n_days(7, floor_start=True)),
    Preset("This Month", this_month_range),
)


def apply_preset(preset: Preset, now: datetime) -> DateRangeState:
    """Resolve *preset* at *now* into a COMPLETE, ordered state."""
    return preset.resolve(now).normalized()


def find_preset(presets: tuple[Preset, ...] | list[Preset], label: str) -> Preset | None:
    """Case-insensitive lookup by label."""
    wanted = label.strip().casefold()
    for preset in presets:
        if preset.label.casefold() == wanted:
            return preset
    return None
