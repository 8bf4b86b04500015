"""Tests for the two-click selection protocol and presets."""

import pytest
from pydantic import ValidationError

from rangepick.domain.selection import (
    DEFAULT_PRESETS,
    DateRangeState,
    apply_preset,
    find_preset,
    last_n_days,
    pick,
    this_month_range,
    today_range,
)
from rangepick.domain.types import SelectionPhase
from tests.conftest import dt


class TestDateRangeState:
    def test_phases(self) -> None:
        assert DateRangeState().phase == SelectionPhase.EMPTY
        assert DateRangeState(start=dt("2024-06-10")).phase == SelectionPhase.PARTIAL_START
        full = DateRangeState(start=dt("2024-06-10"), end=dt("2024-06-15"))
        assert full.phase == SelectionPhase.COMPLETE

    def test_end_requires_start(self) -> None:
        with pytest.raises(ValidationError):
            DateRangeState(end=dt("2024-06-10"))

    def test_normalized_swaps(self) -> None:
        state = DateRangeState(start=dt("2024-06-15"), end=dt("2024-06-10"))
        fixed = state.normalized()
        assert fixed.start == dt("2024-06-10")
        assert fixed.end == dt("2024-06-15")
        assert state.start == dt("2024-06-15")

    def test_normalized_ordered_is_identity(self) -> None:
        state = DateRangeState(start=dt("2024-06-10"), end=dt("2024-06-15"))
        assert state.normalized() is state

    def test_to_dict(self) -> None:
        assert DateRangeState(start=dt("2024-06-10")).to_dict() == {
            "start": "2024-06-10T00:00:00",
            "end": None,
            "phase": "partial_start",
        }


class TestPick:
    def test_two_clicks(self) -> None:
        state = pick(DateRangeState(), dt("2024-06-10"))
        assert state == DateRangeState(start=dt("2024-06-10"))
        state = pick(state, dt("2024-06-15"))
        assert state == DateRangeState(start=dt("2024-06-10"), end=dt("2024-06-15"))

    def test_reverse_pick_swaps(self) -> None:
        state = pick(pick(DateRangeState(), dt("2024-06-15")), dt("2024-06-10"))
        assert state.start == dt("2024-06-10")
        assert state.end == dt("2024-06-15")

    def test_same_day_completes(self) -> None:
        state = pick(pick(DateRangeState(), dt("2024-06-10")), dt("2024-06-10"))
        assert state.phase == SelectionPhase.COMPLETE

    def test_pick_after_complete_restarts(self) -> None:
        full = DateRangeState(start=dt("2024-06-10"), end=dt("2024-06-15"))
        assert pick(full, dt("2024-07-01")) == DateRangeState(start=dt("2024-07-01"))

    def test_pick_does_not_mutate(self) -> None:
        state = DateRangeState(start=dt("2024-06-10"))
        pick(state, dt("2024-06-12"))
        assert state.end is None


class TestPresets:
    NOW = dt("2024-03-15T14:30")

    def test_today(self) -> None:
        state = today_range(self.NOW)
        assert state.start == dt("2024-03-15")
        assert state.end.isoformat() == "2024-03-15T23:59:59.999000"

    def test_last_24_hours_keeps_time(self) -> None:
        state = last_n_days(1)(self.NOW)
        assert state.start == dt("2024-03-14T14:30")
        assert state.end == self.NOW

    def test_last_7_days_floors_start(self) -> None:
        state = last_n_days(7, floor_start=True)(self.NOW)
        assert state.start == dt("2024-03-08")
        assert state.end == self.NOW

    def test_this_month(self) -> None:
        state = this_month_range(dt("2024-02-10T08:00"))
        assert state.start == dt("2024-02-01")
        assert state.end.date().day == 29

    def test_defaults_complete_and_ordered(self) -> None:
        for preset in DEFAULT_PRESETS:
            state = apply_preset(preset, self.NOW)
            assert state.phase == SelectionPhase.COMPLETE
            assert state.start <= state.end

    def test_find_preset_case_insensitive(self) -> None:
        preset = find_preset(DEFAULT_PRESETS, "  last 7 days ")
        assert preset is not None
        assert preset.label == "Last 7 Days"
        assert find_preset(DEFAULT_PRESETS, "Next Week") is None
