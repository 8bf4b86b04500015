"""Timezone conversion between wall-clock datetimes and instants.

Zone rules come from :mod:`zoneinfo` (backed by the ``tzdata``
distribution when the host has no system database).  Offsets are always
evaluated for the specific instant in question, so results stay correct
across DST transitions.

Sign convention for :func:`offset_minutes`: the offset is
``UTC rendering - local rendering``, so zones west of Greenwich are
positive (New York in January is ``300``) and zones east are negative
(Kolkata is ``-330``).  :func:`offset_string` uses the conventional
ISO sign instead (``-05:00`` and ``+05:30``).

Naive datetimes passed where an instant is expected are read as UTC.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_ONE_MINUTE = timedelta(minutes=1)

COMMON_TIMEZONES: list[tuple[str, str]] = [
    ("UTC", "UTC"),
    ("Eastern Time (US)", "America/New_York"),
    ("Central Time (US)", "America/Chicago"),
    ("Mountain Time (US)", "America/Denver"),
    ("Pacific Time (US)", "America/Los_Angeles"),
    ("Alaska Time", "America/Anchorage"),
    ("Hawaii Time", "Pacific/Honolulu"),
    ("London", "Europe/London"),
    ("Paris", "Europe/Paris"),
    ("Berlin", "Europe/Berlin"),
    ("Moscow", "Europe/Moscow"),
    ("Dubai", "Asia/Dubai"),
    ("Mumbai", "Asia/Kolkata"),
    ("Singapore", "Asia/Singapore"),
    ("Tokyo", "Asia/Tokyo"),
    ("Sydney", "Australia/Sydney"),
    ("Auckland", "Pacific/Auckland"),
]


class InvalidTimeZoneError(ValueError):
    """Raised when a timezone id cannot be resolved to zone rules."""

    def __init__(self, tz: str) -> None:
        super().__init__(f"Unknown timezone: {tz!r}")
        self.tz = tz


def get_zone(tz: str) -> ZoneInfo:
    """Resolve an IANA id to zone rules.

    Raises:
        InvalidTimeZoneError: If *tz* is not a known zone id.
    """
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError, TypeError) as exc:
        raise InvalidTimeZoneError(str(tz)) from exc


def is_valid_timezone(tz: str) -> bool:
    """Probe whether *tz* names a known zone. Never raises."""
    try:
        get_zone(tz)
    except InvalidTimeZoneError:
        logger.debug("Rejected timezone id %r", tz)
        return False
    return True


def _as_instant(d: datetime) -> datetime:
    if d.tzinfo is None:
        return d.replace(tzinfo=UTC)
    return d


def to_instant(wall: datetime, tz: str) -> datetime:
    """Attach *tz* to the wall-clock value *wall*, producing an instant.

    Wall times that fall in a DST gap or overlap resolve with ``fold=0``.
    Aware inputs are converted to *tz* instead.
    """
    zone = get_zone(tz)
    if wall.tzinfo is not None:
        return wall.astimezone(zone)
    return wall.replace(tzinfo=zone)


def to_wall_clock(instant: datetime, tz: str) -> datetime:
    """Render *instant* in *tz* and drop the zone."""
    return _as_instant(instant).astimezone(get_zone(tz)).replace(tzinfo=None)


def offset_minutes(instant: datetime, tz: str) -> int:
    """Minutes between the UTC and *tz* renderings of *instant*."""
    moment = _as_instant(instant)
    utc_wall = moment.astimezone(UTC).replace(tzinfo=None)
    local_wall = moment.astimezone(get_zone(tz)).replace(tzinfo=None)
    return round((utc_wall - local_wall) / _ONE_MINUTE)


def is_dst(instant: datetime, tz: str) -> bool:
    """Whether *tz* observes daylight saving time at *instant*.

    The standard offset is the larger of the January 1 and July 1 offsets
    of the same year; DST is active when the current offset differs.
    """
    zone = get_zone(tz)
    year = _as_instant(instant).astimezone(zone).year
    jan = offset_minutes(datetime(year, 1, 1, tzinfo=zone), tz)
    jul = offset_minutes(datetime(year, 7, 1, tzinfo=zone), tz)
    standard = max(jan, jul)
    return offset_minutes(instant, tz) != standard


def convert_preserving_instant(wall: datetime, from_tz: str, to_tz: str) -> datetime:
    """Re-render the wall-clock time *wall* from *from_tz* into *to_tz*.

    The wall-clock fields shift by the difference between the two zones'
    offsets at the instant *wall* denotes in *from_tz*, so the moment
    meant is unchanged: 09:00 in New York (January) becomes 14:00 in UTC.
    """
    if wall.tzinfo is not None:
        wall = wall.astimezone(get_zone(from_tz)).replace(tzinfo=None)
    instant = to_instant(wall, from_tz)
    shift = offset_minutes(instant, from_tz) - offset_minutes(instant, to_tz)
    return wall + timedelta(minutes=shift)


def offset_string(instant: datetime, tz: str) -> str:
    """Format the offset of *tz* at *instant* as ``±HH:MM``."""
    offset = offset_minutes(instant, tz)
    hours, minutes = divmod(abs(offset), 60)
    sign = "+" if offset <= 0 else "-"
    return f"{sign}{hours:02d}:{minutes:02d}"


def abbreviation(instant: datetime, tz: str) -> str:
    """Short zone name at *instant* (e.g. ``EST``), or ``""`` if unavailable."""
    try:
        zone = get_zone(tz)
    except InvalidTimeZoneError:
        return ""
    return _as_instant(instant).astimezone(zone).tzname() or ""
