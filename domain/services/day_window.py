"""
Calendar day -> absolute time window.

A calendar date like 2024-01-17 has no time or zone attached. To find the
workouts logged "on" that day we need the absolute interval between local
midnight of that date and local midnight of the next date in the target
timezone:

    [start, end)  with start inclusive and end exclusive

The window is built from the zone's rules (zoneinfo), so days that are 23 or
25 hours long around DST transitions come out right. The end boundary is the
next day's midnight, not ``start + 24h`` and not ``23:59:59.999``.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import NamedTuple, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class InvalidTimezone(ValueError):
    """Raised when a timezone name is not a known IANA zone."""


TimezoneLike = Union[str, tzinfo]


def resolve_timezone(tz: TimezoneLike) -> tzinfo:
    """
    Resolve an IANA zone name (or pass through a tzinfo).

    Args:
        tz: Zone name such as "Asia/Tokyo", or a tzinfo instance

    Returns:
        tzinfo for the zone

    Raises:
        InvalidTimezone: If the name is empty or unknown
    """
    if isinstance(tz, tzinfo):
        return tz
    if not isinstance(tz, str) or not tz.strip():
        raise InvalidTimezone(f"Invalid timezone: {tz!r}")
    try:
        return ZoneInfo(tz.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezone(f"Unknown timezone: {tz!r}") from e


class DayWindow(NamedTuple):
    """Half-open UTC interval covering one local calendar day."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        """True if ``start <= instant < end``. ``instant`` must be aware."""
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("instant must be timezone-aware")
        return self.start <= instant < self.end


def _local_midnight_utc(day: date, zone: tzinfo) -> datetime:
    # fold=0: when midnight is skipped by a DST jump this lands on the first
    # instant that does exist on that day.
    local = datetime.combine(day, time.min, tzinfo=zone)
    return local.astimezone(timezone.utc)


def compute_day_window(calendar_date: date, tz: TimezoneLike) -> DayWindow:
    """
    Compute the UTC window for a civil date in a timezone.

    Args:
        calendar_date: Civil date (a ``datetime`` is rejected, since its time
            part would be silently ignored)
        tz: Target timezone name or tzinfo

    Returns:
        DayWindow(start, end) with both bounds in UTC

    Raises:
        TypeError: If calendar_date is not a plain date
        OverflowError: If a bound falls outside the datetime range, e.g.
            9999-12-31 anywhere or 0001-01-01 east of UTC

    Examples:
        >>> w = compute_day_window(date(2024, 1, 17), "Asia/Tokyo")
        >>> w.start.isoformat(), w.end.isoformat()
        ('2024-01-16T15:00:00+00:00', '2024-01-17T15:00:00+00:00')
    """
    if isinstance(calendar_date, datetime) or not isinstance(calendar_date, date):
        raise TypeError("calendar_date must be a date, not a datetime")

    zone = resolve_timezone(tz)
    start = _local_midnight_utc(calendar_date, zone)
    end = _local_midnight_utc(calendar_date + timedelta(days=1), zone)
    return DayWindow(start=start, end=end)


def today_in_zone(tz: TimezoneLike, now: Optional[datetime] = None) -> date:
    """
    Civil date "today" in the target timezone.

    Args:
        tz: Target timezone name or tzinfo
        now: Aware reference instant (defaults to the current time)

    Returns:
        The local date at ``now`` in ``tz``
    """
    zone = resolve_timezone(tz)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(zone).date()
