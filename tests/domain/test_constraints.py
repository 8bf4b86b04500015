"""Tests for constraint checks and range validation."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from rangepick.domain.constraints import (
    ConstraintViolation,
    DateRangeConstraints,
    blackout_dates_in_range,
    check_blackout,
    check_max,
    check_max_duration,
    check_min,
    is_selectable,
    validate_range,
)
from rangepick.domain.types import ErrorField, ViolationKind
from tests.conftest import dt, fields


class TestDateRangeConstraints:
    def test_defaults_unconstrained(self) -> None:
        c = DateRangeConstraints()
        assert c.min_date is None
        assert c.max_date is None
        assert c.blackout_dates == frozenset()
        assert c.max_duration is None

    def test_blackout_reduced_to_days(self) -> None:
        c = DateRangeConstraints(blackout_dates=[dt("2024-03-15T13:00"), date(2024, 3, 16)])
        assert c.blackout_dates == frozenset({date(2024, 3, 15), date(2024, 3, 16)})
        assert c.is_blackout(dt("2024-03-15T23:59"))
        assert not c.is_blackout(dt("2024-03-17"))

    def test_hashable_for_memoization(self) -> None:
        a = DateRangeConstraints(blackout_dates={date(2024, 1, 1)})
        b = DateRangeConstraints(blackout_dates={date(2024, 1, 1)})
        assert hash(a) == hash(b)


class TestSingleChecks:
    def test_check_min(self) -> None:
        assert check_min(dt("2024-03-10"), dt("2024-03-10")) is None
        assert check_min(dt("2024-03-09"), None) is None
        err = check_min(dt("2024-03-09"), dt("2024-03-10"))
        assert err is not None
        assert err.field == ErrorField.START
        assert err.kind == ViolationKind.MIN_DATE
        assert "2024-03-10" in err.message

    def test_check_max(self) -> None:
        assert check_max(dt("2024-03-10"), dt("2024-03-10")) is None
        err = check_max(dt("2024-03-11"), dt("2024-03-10"))
        assert err is not None
        assert err.field == ErrorField.START
        assert err.kind == ViolationKind.MAX_DATE
        assert "2024-03-10" in err.message

    def test_check_blackout_day_granularity(self) -> None:
        blackout = {date(2024, 3, 15)}
        assert check_blackout(dt("2024-03-14T23:59"), blackout) is None
        err = check_blackout(dt("2024-03-15T08:00"), blackout)
        assert err is not None
        assert err.kind == ViolationKind.BLACKOUT
        assert "2024-03-15" in err.message

    def test_check_blackout_accepts_any_iterable(self) -> None:
        assert check_blackout(dt("2024-03-15"), [date(2024, 3, 15)]) is not None

    def test_check_max_duration_reports_whole_days(self) -> None:
        limit = timedelta(days=7, hours=12)
        assert check_max_duration(dt("2024-01-01"), dt("2024-01-08T12:00"), limit) is None
        err = check_max_duration(dt("2024-01-01"), dt("2024-01-09"), limit)
        assert err is not None
        assert err.field == ErrorField.DURATION
        assert "7 days" in err.message

    def test_check_max_duration_symmetric(self) -> None:
        limit = timedelta(days=1)
        assert check_max_duration(dt("2024-01-05"), dt("2024-01-01"), limit) is not None

    def test_is_selectable(self) -> None:
        c = DateRangeConstraints(
            min_date=dt("2024-03-05"),
            max_date=dt("2024-03-25"),
            blackout_dates={date(2024, 3, 15)},
        )
        assert is_selectable(dt("2024-03-10"), c)
        assert not is_selectable(dt("2024-03-04"), c)
        assert not is_selectable(dt("2024-03-26"), c)
        assert not is_selectable(dt("2024-03-15"), c)
        assert is_selectable(dt("2024-03-15"), DateRangeConstraints())


class TestValidateRange:
    def test_empty_selection_is_valid(self) -> None:
        assert validate_range(None, None, DateRangeConstraints(min_date=dt("2024-01-01"))) == []

    def test_start_before_min(self) -> None:
        c = DateRangeConstraints(min_date=dt("2024-03-10"))
        errors = validate_range(dt("2024-03-05"), None, c)
        assert len(errors) == 1
        assert errors[0].field == ErrorField.START
        assert "2024" in errors[0].message

    def test_end_violation_is_tagged_end(self) -> None:
        c = DateRangeConstraints(max_date=dt("2024-03-20"), blackout_dates={date(2024, 3, 1)})
        errors = validate_range(dt("2024-03-01"), dt("2024-03-21"), c)
        assert fields(errors) == ["start", "end"]
        assert errors[0].kind == ViolationKind.BLACKOUT
        assert errors[1].kind == ViolationKind.MAX_DATE
        assert errors[1].message == "Date cannot be after 2024-03-20"

    def test_end_reuses_message(self) -> None:
        c = DateRangeConstraints(min_date=dt("2024-03-10"))
        errors = validate_range(dt("2024-03-01"), dt("2024-03-02"), c)
        assert fields(errors) == ["start", "end"]
        assert errors[0].message == errors[1].message

    def test_reversed_range_adds_range_error(self) -> None:
        errors = validate_range(dt("2024-03-20"), dt("2024-03-10"), DateRangeConstraints())
        assert fields(errors) == ["range"]
        assert errors[0].kind == ViolationKind.RANGE_ORDER
        assert "2024-03-20" in errors[0].message
        assert "2024-03-10" in errors[0].message

    def test_duration(self) -> None:
        c = DateRangeConstraints(max_duration=timedelta(days=7))
        errors = validate_range(dt("2024-01-01"), dt("2024-01-10"), c)
        assert fields(errors) == ["duration"]
        assert validate_range(dt("2024-01-01"), dt("2024-01-05"), c) == []

    def test_zero_length_range_allowed(self) -> None:
        c = DateRangeConstraints(max_duration=timedelta(0))
        assert validate_range(dt("2024-01-01"), dt("2024-01-01"), c) == []

    def test_full_ordering(self) -> None:
        c = DateRangeConstraints(
            min_date=dt("2024-03-05"),
            max_date=dt("2024-03-25"),
            blackout_dates={date(2024, 3, 30)},
            max_duration=timedelta(days=3),
        )
        errors = validate_range(dt("2024-03-30"), dt("2024-03-01"), c)
        assert fields(errors) == ["start", "start", "end", "range", "duration"]
        assert [e.kind for e in errors] == [
            ViolationKind.MAX_DATE,
            ViolationKind.BLACKOUT,
            ViolationKind.MIN_DATE,
            ViolationKind.RANGE_ORDER,
            ViolationKind.MAX_DURATION,
        ]

    def test_deterministic(self) -> None:
        c = DateRangeConstraints(
            min_date=dt("2024-03-05"),
            blackout_dates={date(2024, 3, 1), date(2024, 3, 2)},
            max_duration=timedelta(days=1),
        )
        runs = [validate_range(dt("2024-03-02"), dt("2024-03-01"), c) for _ in range(5)]
        assert all(r == runs[0] for r in runs)

    def test_violations_are_frozen_models(self) -> None:
        errors = validate_range(dt("2024-03-02"), dt("2024-03-01"), DateRangeConstraints())
        assert isinstance(errors[0], ConstraintViolation)
        assert errors[0].model_dump(mode="json")["field"] == "range"


class TestBlackoutInRange:
    def test_sorted_and_inclusive(self) -> None:
        blackout = {date(2024, 3, 20), date(2024, 3, 10), date(2024, 3, 15), date(2024, 4, 1)}
        found = blackout_dates_in_range(dt("2024-03-10T12:00"), dt("2024-03-20"), blackout)
        assert found == [date(2024, 3, 10), date(2024, 3, 15), date(2024, 3, 20)]

    def test_empty(self) -> None:
        assert blackout_dates_in_range(dt("2024-03-10"), dt("2024-03-20"), []) == []


class TestMixedAwareness:
    NY = ZoneInfo("America/New_York")

    def test_naive_bounds_apply_on_endpoint_clock(self) -> None:
        c = DateRangeConstraints(min_date=dt("2024-06-10"), max_date=dt("2024-06-20T23:59"))
        early = datetime(2024, 6, 9, 23, 30, tzinfo=self.NY)
        late = datetime(2024, 6, 21, 0, 30, tzinfo=self.NY)
        inside = datetime(2024, 6, 15, 9, 0, tzinfo=self.NY)
        errors = validate_range(early, late, c)
        assert fields(errors) == ["start", "end"]
        assert [e.kind for e in errors] == [ViolationKind.MIN_DATE, ViolationKind.MAX_DATE]
        assert validate_range(inside, None, c) == []

    def test_mixed_endpoints_order_and_duration(self) -> None:
        c = DateRangeConstraints(max_duration=timedelta(days=1))
        start = datetime(2024, 6, 15, 9, 0, tzinfo=self.NY)
        errors = validate_range(start, dt("2024-06-10"), c)
        assert fields(errors) == ["range", "duration"]
