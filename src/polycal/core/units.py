"""
polycal.core.units
------------------
Fixed unit scales and the shared reference epoch.

A timestamp is an integer count of milliseconds since 1970-01-01T00:00:00.
Calendars work internally on calendar ticks (milliseconds since
0001-01-01T00:00:00, proleptic Gregorian) and on day numbers
(0-based days since 0001-01-01). Astronomical code uses fixed days
(R.D., 0001-01-01 = 1).
"""

from __future__ import annotations

from typing import Tuple

from .errors import InvalidParameterError
from .types import TimeUnits

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

MAX_YEAR = 9999

# Day number of 1970-01-01 counted from 0001-01-01.
EPOCH_DAY_NUMBER = 719162
EPOCH_OFFSET_MS = EPOCH_DAY_NUMBER * MS_PER_DAY

# Julian Day Number of 0001-01-01 (proleptic Gregorian).
JDN_DAY_ZERO = 1721426


# ------------------------------------------------------------
# Timestamp <-> calendar ticks <-> day numbers
# ------------------------------------------------------------

def to_calendar_ticks(ts: int) -> int:
    """Timestamp -> milliseconds since 0001-01-01T00:00:00."""
    return ts + EPOCH_OFFSET_MS


def from_calendar_ticks(ticks: int) -> int:
    """Milliseconds since 0001-01-01T00:00:00 -> timestamp."""
    return ticks - EPOCH_OFFSET_MS


def day_number(ts: int) -> int:
    """0-based day count since 0001-01-01 of the day containing ts."""
    return to_calendar_ticks(ts) // MS_PER_DAY


def ms_of_day(ts: int) -> int:
    """Milliseconds elapsed since midnight (always in [0, MS_PER_DAY))."""
    return to_calendar_ticks(ts) % MS_PER_DAY


def timestamp_from_day_number(days: int, time_ms: int = 0) -> int:
    return from_calendar_ticks(days * MS_PER_DAY + time_ms)


def fixed_from_day_number(days: int) -> int:
    """Day number -> fixed day (R.D.)."""
    return days + 1


def day_number_from_fixed(fixed: int) -> int:
    """Fixed day (R.D.) -> day number."""
    return fixed - 1


# ------------------------------------------------------------
# Time of day
# ------------------------------------------------------------

def time_units(ts: int) -> TimeUnits:
    t = ms_of_day(ts)
    return TimeUnits(
        hour=t // MS_PER_HOUR,
        minute=(t // MS_PER_MINUTE) % 60,
        second=(t // MS_PER_SECOND) % 60,
        ms=t % MS_PER_SECOND,
    )


def time_to_ms(hour: int, minute: int, second: int, ms: int) -> int:
    """Compose a time of day, validating each field."""
    if not 0 <= hour < 24:
        raise InvalidParameterError("hour", hour)
    if not 0 <= minute < 60:
        raise InvalidParameterError("minute", minute)
    if not 0 <= second < 60:
        raise InvalidParameterError("second", second)
    if not 0 <= ms < MS_PER_SECOND:
        raise InvalidParameterError("ms", ms)
    return hour * MS_PER_HOUR + minute * MS_PER_MINUTE + second * MS_PER_SECOND + ms


# ------------------------------------------------------------
# Proleptic Gregorian civil date <-> day number (Fliegel-Van Flandern)
# ------------------------------------------------------------

def to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def civil_to_day_number(year: int, month: int, day: int) -> int:
    return to_jdn(year, month, day) - JDN_DAY_ZERO


def civil_from_day_number(days: int) -> Tuple[int, int, int]:
    return from_jdn(days + JDN_DAY_ZERO)


def civil_year_from_fixed(fixed: float) -> int:
    """Gregorian year containing a (possibly fractional) fixed moment."""
    return civil_from_day_number(day_number_from_fixed(int(fixed // 1)))[0]
