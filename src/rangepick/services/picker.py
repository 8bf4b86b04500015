"""PickerService, the caller-facing boundary of the range engine.

The service is stateless between calls: every method takes the current
selection and constraints and returns the next selection, the rebuilt
grid, or the validation verdict inside a :class:`ServiceResult`.

Callers that want push-style updates pass ``on_change`` and
``on_error`` hooks.  ``on_change`` receives the new
:class:`DateRangeState` after every mutation; ``on_error`` receives the
*full* current violation list (possibly empty) every time the selection
or constraints are re-evaluated.

Constraint arguments default to the ``[constraints]`` section of the
settings.  When a caller changes both selection and constraints it must
pass both in a single call so validation sees the final combined state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from rangepick.config.models import resolve_presets
from rangepick.domain.constraints import (
    ConstraintViolation,
    DateRangeConstraints,
    blackout_dates_in_range,
    validate_range,
)
from rangepick.domain.dates import format_date, format_time
from rangepick.domain.grid import build_month_grid, grid_to_dicts
from rangepick.domain.navigation import navigate
from rangepick.domain.selection import DateRangeState, apply_preset, find_preset, pick
from rangepick.domain.timeofday import TimeState, combine_date_time, combine_in_timezone
from rangepick.domain.timezones import (
    COMMON_TIMEZONES,
    abbreviation,
    convert_preserving_instant,
    is_dst,
    is_valid_timezone,
    offset_minutes,
    offset_string,
    to_instant,
    to_wall_clock,
)
from rangepick.domain.types import NavAction
from rangepick.services.base import BaseService
from rangepick.services.result import ServiceResult

if TYPE_CHECKING:
    from rangepick.config.settings import RangepickSettings

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

ChangeHook = Callable[[DateRangeState], None]
ErrorHook = Callable[[list[ConstraintViolation]], None]


def _errors_payload(errors: list[ConstraintViolation]) -> list[dict[str, Any]]:
    return [e.model_dump(mode="json") for e in errors]


class PickerService(BaseService):
    """Selection, grid, validation and timezone operations."""

    def __init__(
        self,
        settings: RangepickSettings,
        *,
        on_change: ChangeHook | None = None,
        on_error: ErrorHook | None = None,
    ) -> None:
        super().__init__(settings)
        self._on_change = on_change
        self._on_error = on_error
        self._presets = resolve_presets(settings.presets)

    # ── Helpers ──────────────────────────────────────────────────────

    @property
    def default_constraints(self) -> DateRangeConstraints:
        return self._settings.constraints.to_constraints()

    def _resolve(self, constraints: DateRangeConstraints | None) -> DateRangeConstraints:
        return constraints if constraints is not None else self.default_constraints

    def _evaluate(
        self,
        op: str,
        state: DateRangeState,
        constraints: DateRangeConstraints,
        *,
        changed: bool,
        extra: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Validate *state*, fire hooks, and package the result."""
        errors = validate_range(state.start, state.end, constraints)
        warnings = [e.message for e in errors]

        if changed:
            self._notify("on_change", self._on_change, state, warnings)
        self._notify("on_error", self._on_error, list(errors), warnings)

        logger.debug("%s -> %s with %d violation(s)", op, state.phase, len(errors))
        data: dict[str, Any] = {
            "range": state.to_dict(),
            "normalized": state.normalized().to_dict(),
            "errors": _errors_payload(errors),
            "valid": not errors,
        }
        if extra:
            data.update(extra)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _guard_disabled(self, op: str) -> ServiceResult | None:
        if self._settings.picker.disabled:
            return self._failure(op, "PICKER_DISABLED", "The picker is disabled")
        return None

    def _bad_timezones(self, op: str, *zones: str) -> ServiceResult | None:
        for tz in zones:
            if not is_valid_timezone(tz):
                return self._failure(op, "INVALID_TIMEZONE", f"Unknown timezone: {tz}", tz=tz)
        return None

    # ── Grid ─────────────────────────────────────────────────────────

    def render_month(
        self,
        year: int,
        month: int,
        state: DateRangeState | None = None,
        constraints: DateRangeConstraints | None = None,
        *,
        today: date | None = None,
    ) -> ServiceResult:
        """Build the calendar grid for *month* of *year*."""
        op = "render_month"
        if not 1 <= month <= 12:
            return self._failure(op, "INVALID_MONTH", f"Month must be 1-12, got {month}")
        state = state or DateRangeState()
        resolved = self._resolve(constraints)
        grid = build_month_grid(year, month, state, resolved, today)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "year": year,
                "month": month,
                "weekdays": list(WEEKDAY_LABELS),
                "weeks": grid_to_dicts(grid),
                "range": state.to_dict(),
            },
            meta={"today": format_date(today)} if today else None,
        )

    # ── Selection ────────────────────────────────────────────────────

    def select_date(
        self,
        state: DateRangeState,
        picked: datetime,
        constraints: DateRangeConstraints | None = None,
    ) -> ServiceResult:
        """Feed one date pick into the two-click selection protocol."""
        op = "select_date"
        if (blocked := self._guard_disabled(op)) is not None:
            return blocked
        new_state = pick(state, picked)
        return self._evaluate(
            op,
            new_state,
            self._resolve(constraints),
            changed=True,
            extra={"picked": picked.isoformat()},
        )

    def apply_preset(
        self,
        label: str,
        now: datetime,
        constraints: DateRangeConstraints | None = None,
    ) -> ServiceResult:
        """Assign a COMPLETE selection from the preset named *label*."""
        op = "apply_preset"
        if (blocked := self._guard_disabled(op)) is not None:
            return blocked
        preset = find_preset(self._presets, label)
        if preset is None:
            return self._failure(
                op,
                "UNKNOWN_PRESET",
                f"No preset named {label!r}",
                available=[p.label for p in self._presets],
            )
        state = apply_preset(preset, now)
        return self._evaluate(
            op,
            state,
            self._resolve(constraints),
            changed=True,
            extra={"preset": preset.label},
        )

    def list_presets(self, now: datetime) -> ServiceResult:
        """Resolve every configured preset at *now*."""
        items = []
        for preset in self._presets:
            resolved = apply_preset(preset, now)
            items.append({"label": preset.label, **resolved.to_dict()})
        return ServiceResult(
            ok=True,
            op="list_presets",
            data={"items": items, "count": len(items)},
            meta={"now": now.isoformat()},
        )

    def set_time(
        self,
        state: DateRangeState,
        endpoint: str,
        time: TimeState,
        constraints: DateRangeConstraints | None = None,
    ) -> ServiceResult:
        """Apply a time of day to the ``start`` or ``end`` endpoint.

        The endpoint keeps its calendar day and timezone.  A time that puts
        ``end`` before ``start`` is kept as entered and reported.
        """
        op = "set_time"
        if (blocked := self._guard_disabled(op)) is not None:
            return blocked
        if endpoint not in ("start", "end"):
            return self._failure(op, "INVALID_ENDPOINT", f"Unknown endpoint: {endpoint}")
        current: datetime | None = getattr(state, endpoint)
        if current is None:
            return self._failure(op, "NO_ENDPOINT", f"No {endpoint} date selected yet")
        updated = combine_date_time(current, time).replace(tzinfo=current.tzinfo)
        new_state = state.model_copy(update={endpoint: updated})
        return self._evaluate(op, new_state, self._resolve(constraints), changed=True)

    def validate(
        self,
        state: DateRangeState,
        constraints: DateRangeConstraints | None = None,
    ) -> ServiceResult:
        """Re-evaluate *state* against *constraints* without changing it."""
        resolved = self._resolve(constraints)
        extra: dict[str, Any] = {}
        normalized = state.normalized()
        if normalized.start is not None and normalized.end is not None:
            extra["blackout_in_range"] = [
                format_date(d)
                for d in blackout_dates_in_range(
                    normalized.start, normalized.end, resolved.blackout_dates
                )
            ]
        return self._evaluate("validate", state, resolved, changed=False, extra=extra)

    # ── Keyboard ─────────────────────────────────────────────────────

    def navigate(
        self,
        key: str,
        focus: datetime,
        state: DateRangeState | None = None,
        constraints: DateRangeConstraints | None = None,
    ) -> ServiceResult:
        """Move the focus date; Enter/Space also select the focused date."""
        outcome = navigate(key, focus)
        data: dict[str, Any] = {
            "key": key,
            "focus": outcome.focus.isoformat(),
            "action": str(outcome.action) if outcome.action else None,
            "consumed": outcome.consumed,
        }
        if outcome.action == NavAction.SELECT:
            selected = self.select_date(state or DateRangeState(), outcome.focus, constraints)
            if not selected.ok:
                return selected.model_copy(update={"op": "navigate"})
            data.update(selected.data)
            return ServiceResult(ok=True, op="navigate", data=data, warnings=selected.warnings)
        return ServiceResult(ok=True, op="navigate", data=data)

    # ── Time & timezones ─────────────────────────────────────────────

    def combine_time(self, day: date, time: TimeState, tz: str | None = None) -> ServiceResult:
        """Combine a calendar day and time of day into an instant in *tz*."""
        op = "combine_time"
        tz = tz or self._settings.picker.timezone
        if (bad := self._bad_timezones(op, tz)) is not None:
            return bad
        instant = combine_in_timezone(day, time, tz)
        wall = combine_date_time(day, time)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "timezone": tz,
                "wall": wall.isoformat(),
                "display": format_time(wall, self._settings.picker.time_format),
                "instant": instant.isoformat(),
                "utc": to_wall_clock(instant, "UTC").isoformat(),
                "abbreviation": abbreviation(instant, tz),
            },
        )

    def convert(self, wall: datetime, from_tz: str, to_tz: str) -> ServiceResult:
        """Re-render a wall-clock time from one zone into another."""
        op = "convert_timezone"
        if (bad := self._bad_timezones(op, from_tz, to_tz)) is not None:
            return bad
        converted = convert_preserving_instant(wall, from_tz, to_tz)
        instant = to_instant(wall, from_tz)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "from_tz": from_tz,
                "to_tz": to_tz,
                "wall": wall.isoformat(),
                "converted": converted.isoformat(),
                "instant": instant.isoformat(),
                "from_offset": offset_string(instant, from_tz),
                "to_offset": offset_string(instant, to_tz),
            },
        )

    def timezone_info(self, at: datetime, tz: str | None = None) -> ServiceResult:
        """Offset, abbreviation and DST status of *tz* at instant *at*."""
        op = "timezone_info"
        tz = tz or self._settings.picker.timezone
        if (bad := self._bad_timezones(op, tz)) is not None:
            return bad
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "timezone": tz,
                "local": to_wall_clock(at, tz).isoformat(),
                "offset_minutes": offset_minutes(at, tz),
                "offset": offset_string(at, tz),
                "abbreviation": abbreviation(at, tz),
                "is_dst": is_dst(at, tz),
            },
        )

    def list_timezones(self, at: datetime) -> ServiceResult:
        """The common-timezone registry with offsets at *at*."""
        items = [
            {"label": label, "id": tz, "offset": offset_string(at, tz)}
            for label, tz in COMMON_TIMEZONES
            if is_valid_timezone(tz)
        ]
        return ServiceResult(
            ok=True,
            op="list_timezones",
            data={"items": items, "count": len(items)},
        )
