"""Classification enums shared across the domain layer."""

from __future__ import annotations

from enum import StrEnum


class ErrorField(StrEnum):
    """Which part of a range a constraint violation is attributed to."""

    START = "start"
    END = "end"
    RANGE = "range"
    DURATION = "duration"


class ViolationKind(StrEnum):
    """Constraint violation taxonomy."""

    MIN_DATE = "min_date"
    MAX_DATE = "max_date"
    BLACKOUT = "blackout"
    RANGE_ORDER = "range_order"
    MAX_DURATION = "max_duration"


class SelectionPhase(StrEnum):
    """Phases of the two-click range selection protocol."""

    EMPTY = "empty"
    PARTIAL_START = "partial_start"
    COMPLETE = "complete"


class TimeFormat(StrEnum):
    """Clock display format."""

    H12 = "12h"
    H24 = "24h"


class TimePeriod(StrEnum):
    """Half of day for 12-hour clocks."""

    AM = "AM"
    PM = "PM"


class NavAction(StrEnum):
    """What a consumed navigation key asks the caller to do."""

    MOVE = "move"
    SELECT = "select"
    CLOSE = "close"
