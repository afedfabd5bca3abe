"""
Calendar and wall-clock helpers.

Weeks start on Monday and end on Sunday.  Time strings are accepted in
24-hour ``HH:MM`` form or in 12-hour ``HH:MM AM|PM`` form (marker is
case-insensitive).  Anything else raises :class:`ParseError`; no default
duration is ever substituted for a malformed string.
"""

from __future__ import annotations

import datetime
import re

_MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])?\s*$")


class ParseError(ValueError):
    """Raised when a time string does not match the accepted grammar."""

    def __init__(self, value: str, reason: str = "expected HH:MM or HH:MM AM/PM"):
        self.value = value
        super().__init__(f"Invalid time string {value!r}: {reason}")


# ======================================================================
# Calendar
# ======================================================================


def start_of_week(date: datetime.date) -> datetime.date:
    """Monday of the ISO week containing *date* (Sunday maps backwards)."""
    return date - datetime.timedelta(days=date.isoweekday() - 1)


def end_of_week(date: datetime.date) -> datetime.date:
    """Sunday closing the week that starts at ``start_of_week(date)``."""
    return start_of_week(date) + datetime.timedelta(days=6)


def is_weekend(date: datetime.date) -> bool:
    return date.isoweekday() >= 6


# ======================================================================
# Wall clock
# ======================================================================


def _parse_minutes(time_string: str) -> int:
    """Minutes since midnight for a 24-hour or 12-hour time string."""
    match = _TIME_RE.match(time_string)
    if not match:
        raise ParseError(time_string)

    hours, minutes = int(match.group(1)), int(match.group(2))
    period = match.group(3)

    if minutes > 59:
        raise ParseError(time_string, "minutes out of range")

    if period is None:
        if hours > 23:
            raise ParseError(time_string, "hours out of range")
    else:
        if not 1 <= hours <= 12:
            raise ParseError(time_string, "hours out of range for 12-hour clock")
        period = period.upper()
        if period == "PM" and hours != 12:
            hours += 12
        elif period == "AM" and hours == 12:
            hours = 0

    return hours * 60 + minutes


def to_24_hour(time_string: str) -> str:
    """Normalise *time_string* to zero-padded 24-hour ``HH:MM``.

    >>> to_24_hour("9:05 pm")
    '21:05'
    """
    hours, minutes = divmod(_parse_minutes(time_string), 60)
    return f"{hours:02d}:{minutes:02d}"


def parse_duration(start_time: str, end_time: str) -> float:
    """Hours between *start_time* and *end_time*.

    A negative difference means the session crossed midnight, so a full
    day is added.  No upper bound is enforced here.

    Raises:
        ParseError: if either string is malformed.
    """
    duration_min = _parse_minutes(end_time) - _parse_minutes(start_time)
    if duration_min < 0:
        duration_min += _MINUTES_PER_DAY
    return duration_min / 60
