"""
polycal.engines.persian
-----------------------
Astronomical Persian (Solar Hijri) calendar.

A year begins on the day whose apparent noon at the Iran Standard Time
meridian (52.5° E) falls after the vernal equinox. Leap years are not given
by any cycle: a year is a leap year exactly when the next new year starts
366 days after its own.

Months 1..6 have 31 days, 7..11 have 30, and month 12 has 29 or 30.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Tuple

from ..core.calendar import Calendar
from ..core.errors import InvalidParameterError, RangeOverflowError
from ..core.types import DateTimeUnits
from ..core.units import (
    MAX_YEAR,
    civil_to_day_number,
    day_number,
    day_number_from_fixed,
    fixed_from_day_number,
    ms_of_day,
    time_to_ms,
    time_units,
    timestamp_from_day_number,
)
from ..reference.astro_args import wrap180
from ..reference.solar import (
    MEAN_TROPICAL_YEAR_IN_DAYS,
    estimate_prior_solar_longitude,
    midday,
    solar_longitude,
)
from .gregorian import split_months

# Day number of 1 Farvardin 1 (0622-03-22, proleptic Gregorian).
PERSIAN_EPOCH = civil_to_day_number(622, 3, 22)
APPROXIMATE_HALF_YEAR = 180
MONTHS_PER_YEAR = 12
# The Persian year containing 9999-12-31 Gregorian.
PERSIAN_MAX_YEAR = 9378
MAX_MONTHS_DELTA = 120000

# Cumulative days before each month, laid out for a 366-day year.
DAYS_TO_MONTH: Tuple[int, ...] = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336, 366)

IRAN_STANDARD_MERIDIAN = 52.5  # degrees east, UTC+03:30
SPRING = 0.0
TWO_DEGREES_AFTER_SPRING = 2.0


# ---------------------------------------------------------
# Astronomical new year
# ---------------------------------------------------------

def midday_in_tehran(fixed_date: int) -> float:
    return midday(fixed_date, wrap180(IRAN_STANDARD_MERIDIAN))


def new_year_on_or_before(fixed_date: int) -> int:
    """
    Fixed day (R.D.) of the last Persian new year (Nowruz) on or before
    the given fixed day.
    """
    approx = estimate_prior_solar_longitude(SPRING, midday_in_tehran(fixed_date))
    lower = math.floor(approx) - 1
    # The estimate is good to about a day either way.
    for day in range(lower, lower + 3):
        lon = solar_longitude(midday_in_tehran(day))
        if SPRING <= lon <= TWO_DEGREES_AFTER_SPRING:
            return day
    raise RangeOverflowError(f"No Persian new year found near fixed day {fixed_date}")


def days_in_previous_months(month: int) -> int:
    return DAYS_TO_MONTH[month - 1]


def month_from_ordinal_day(ordinal_day: int) -> int:
    """1-based ordinal day of the year -> month (1..12)."""
    index = 0
    while ordinal_day > DAYS_TO_MONTH[index]:
        index += 1
    return index


@lru_cache(maxsize=16384)
def year_start(year: int) -> int:
    """Day number of 1 Farvardin of the given year."""
    approx = math.trunc(MEAN_TROPICAL_YEAR_IN_DAYS * (year - 1))
    probe = fixed_from_day_number(PERSIAN_EPOCH + approx + APPROXIMATE_HALF_YEAR)
    return day_number_from_fixed(new_year_on_or_before(probe))


def absolute_date_persian(year: int, month: int, day: int, *, max_year: int = PERSIAN_MAX_YEAR) -> int:
    """Day number of a Persian date."""
    if not 1 <= year <= max_year:
        raise InvalidParameterError("year", year)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidParameterError("month", month)
    ordinal_day = days_in_previous_months(month) + day - 1
    return year_start(year) + ordinal_day


def year_from_day_number(days: int) -> Tuple[int, int]:
    """Day number -> (Persian year, day number of that year's 1 Farvardin)."""
    start = day_number_from_fixed(new_year_on_or_before(fixed_from_day_number(days)))
    # The search gives the exact boundary; the year index itself is recovered
    # by rounding the elapsed mean years.
    year = math.floor((start - PERSIAN_EPOCH) / MEAN_TROPICAL_YEAR_IN_DAYS + 0.5) + 1
    return year, start


# ---------------------------------------------------------
# Calendar
# ---------------------------------------------------------

class PersianCalendar(Calendar):
    """Persian calendar with astronomically determined new years."""

    max_year = PERSIAN_MAX_YEAR

    def __init__(
        self,
        id: str = "persian",
        type: str = "persian",
        *,
        min_date: Tuple[int, int, int] = (622, 3, 22),
        max_date: Tuple[int, int, int] = (MAX_YEAR, 12, 31),
    ):
        super().__init__(id, type, min_date=min_date, max_date=max_date)
        last = self._date_units(day_number(self.max_timestamp))
        self._last_date = (last[0], last[1], last[2])

    def _date_units(self, days: int) -> Tuple[int, int, int]:
        year, _ = year_from_day_number(days)
        ordinal_day = days - absolute_date_persian(year, 1, 1, max_year=self.max_year) + 1
        month = month_from_ordinal_day(ordinal_day)
        return year, month, ordinal_day - days_in_previous_months(month)

    def add_months(self, ts: int, months: int) -> int:
        if isinstance(months, bool) or not isinstance(months, int) \
                or not -MAX_MONTHS_DELTA <= months <= MAX_MONTHS_DELTA:
            raise InvalidParameterError("months", months)
        self.check_range(ts)
        y, m, d = self._date_units(day_number(ts))
        y, m = split_months(y, m, months)
        if not 1 <= y <= self.max_year:
            raise RangeOverflowError(f"Year {y} is outside the range of calendar '{self.id}'")
        d = min(d, self.days_in_month(y, m))
        out = timestamp_from_day_number(absolute_date_persian(y, m, d, max_year=self.max_year), ms_of_day(ts))
        self.check_range(out)
        return out

    def day_of_year(self, ts: int) -> int:
        days = day_number(ts)
        _, start = year_from_day_number(days)
        return days - start + 1

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= MONTHS_PER_YEAR:
            raise InvalidParameterError("month", month)
        n = DAYS_TO_MONTH[month] - DAYS_TO_MONTH[month - 1]
        if month == MONTHS_PER_YEAR and not self.is_leap_year(year):
            n -= 1
        return n

    def is_leap_year(self, year: int) -> bool:
        if year == self.max_year:
            # The following new year is beyond the supported range.
            return False
        return (
            absolute_date_persian(year + 1, 1, 1, max_year=self.max_year)
            - absolute_date_persian(year, 1, 1, max_year=self.max_year)
        ) == 366

    def is_valid(self, year: int, month: int, day: int) -> bool:
        if not super().is_valid(year, month, day):
            return False
        return year < self.max_year or (year, month, day) <= self._last_date

    def get_timestamp(self, units: DateTimeUnits) -> int:
        if not 1 <= units.year <= self.max_year:
            raise InvalidParameterError("year", units.year)
        if not 1 <= units.month <= MONTHS_PER_YEAR:
            raise InvalidParameterError("month", units.month)
        if not 1 <= units.day <= self.days_in_month(units.year, units.month):
            raise InvalidParameterError("day", units.day)
        days = absolute_date_persian(units.year, units.month, units.day, max_year=self.max_year)
        ts = timestamp_from_day_number(days, time_to_ms(units.hour, units.minute, units.second, units.ms))
        self.check_range(ts)
        return ts

    def get_units(self, ts: int) -> DateTimeUnits:
        self.check_range(ts)
        y, m, d = self._date_units(day_number(ts))
        t = time_units(ts)
        return DateTimeUnits(year=y, month=m, day=d, hour=t.hour, minute=t.minute, second=t.second, ms=t.ms)
