"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here and ``rangepick.toml`` only
carries overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, Field

from rangepick.domain.constraints import DateRangeConstraints
from rangepick.domain.dates import end_of_day
from rangepick.domain.selection import DEFAULT_PRESETS, Preset, last_n_days
from rangepick.domain.types import TimeFormat


class PickerConfig(BaseModel):
    """[picker] section.

    ``timezone`` is not validated here: ids may come from unreliable
    sources and are probed where they are used.
    """

    model_config = {"frozen": True}

    timezone: str = "UTC"
    time_format: TimeFormat = TimeFormat.H24
    disabled: bool = False


class ConstraintsConfig(BaseModel):
    """[constraints] section. Bounds are whole days, inclusive."""

    model_config = {"frozen": True}

    min_date: date | None = None
    max_date: date | None = None
    blackout_dates: list[date] = Field(default_factory=list)
    max_duration_days: int | None = Field(default=None, ge=0)

    def to_constraints(self) -> DateRangeConstraints:
        """Build engine constraints; ``max_date`` covers its whole day."""
        return DateRangeConstraints(
            min_date=datetime.combine(self.min_date, time.min) if self.min_date else None,
            max_date=end_of_day(datetime.combine(self.max_date, time.min))
            if self.max_date
            else None,
            blackout_dates=frozenset(self.blackout_dates),
            max_duration=timedelta(days=self.max_duration_days)
            if self.max_duration_days is not None
            else None,
        )


class PresetConfig(BaseModel):
    """One [[presets]] entry: the last *days* days up to now."""

    model_config = {"frozen": True}

    label: str
    days: int = Field(ge=0)
    floor_start: bool = False

    def to_preset(self) -> Preset:
        return Preset(self.label, last_n_days(self.days, floor_start=self.floor_start))


def resolve_presets(configured: list[PresetConfig]) -> tuple[Preset, ...]:
    """Configured presets, or the built-in defaults when none are set."""
    if not configured:
        return DEFAULT_PRESETS
    return tuple(p.to_preset() for p in configured)
