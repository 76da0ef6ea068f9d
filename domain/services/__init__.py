"""
Pure domain services.

- day_window: civil date -> half-open UTC interval in a target timezone
"""

from domain.services.day_window import (
    DayWindow,
    InvalidTimezone,
    compute_day_window,
    resolve_timezone,
    today_in_zone,
)

__all__ = [
    "DayWindow",
    "InvalidTimezone",
    "compute_day_window",
    "resolve_timezone",
    "today_in_zone",
]
