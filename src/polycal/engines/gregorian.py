"""
polycal.engines.gregorian
-------------------------
Proleptic Gregorian calendar.
"""

from __future__ import annotations

from typing import Tuple

from ..core.calendar import Calendar
from ..core.errors import InvalidParameterError, RangeOverflowError
from ..core.types import DateTimeUnits
from ..core.units import (
    MAX_YEAR,
    civil_from_day_number,
    civil_to_day_number,
    day_number,
    ms_of_day,
    time_to_ms,
    time_units,
    timestamp_from_day_number,
)

DAYS_TO_MONTH_365: Tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
DAYS_TO_MONTH_366: Tuple[int, ...] = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def split_months(year: int, month: int, months: int) -> Tuple[int, int]:
    """Normalize (year, month + months) with floor division; month stays in 1..12."""
    i = month - 1 + months
    return year + i // 12, i % 12 + 1


class GregorianCalendar(Calendar):
    """Gregorian leap rule and fixed month lengths, extended backwards to year 1."""

    max_year = MAX_YEAR

    def __init__(
        self,
        id: str = "gregorian",
        type: str = "gregory",
        *,
        min_date: Tuple[int, int, int] = (1, 1, 1),
        max_date: Tuple[int, int, int] = (MAX_YEAR, 12, 31),
    ):
        super().__init__(id, type, min_date=min_date, max_date=max_date)

    @staticmethod
    def _days_to_month(year: int) -> Tuple[int, ...]:
        return DAYS_TO_MONTH_366 if is_gregorian_leap_year(year) else DAYS_TO_MONTH_365

    def add_months(self, ts: int, months: int) -> int:
        if isinstance(months, bool) or not isinstance(months, int):
            raise InvalidParameterError("months", months)
        self.check_range(ts)
        y, m, d = civil_from_day_number(day_number(ts))
        y, m = split_months(y, m, months)
        if not 1 <= y <= self.max_year:
            raise RangeOverflowError(f"Year {y} is outside the range of calendar '{self.id}'")
        d = min(d, self.days_in_month(y, m))
        out = timestamp_from_day_number(civil_to_day_number(y, m, d), ms_of_day(ts))
        self.check_range(out)
        return out

    def day_of_year(self, ts: int) -> int:
        y, m, d = civil_from_day_number(day_number(ts))
        return self._days_to_month(y)[m - 1] + d

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise InvalidParameterError("month", month)
        table = self._days_to_month(year)
        return table[month] - table[month - 1]

    def days_in_year(self, year: int) -> int:
        return self._days_to_month(year)[12]

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year)

    def get_timestamp(self, units: DateTimeUnits) -> int:
        if not 1 <= units.year <= self.max_year:
            raise InvalidParameterError("year", units.year)
        if not 1 <= units.month <= 12:
            raise InvalidParameterError("month", units.month)
        if not 1 <= units.day <= self.days_in_month(units.year, units.month):
            raise InvalidParameterError("day", units.day)
        days = civil_to_day_number(units.year, units.month, units.day)
        ts = timestamp_from_day_number(days, time_to_ms(units.hour, units.minute, units.second, units.ms))
        self.check_range(ts)
        return ts

    def get_units(self, ts: int) -> DateTimeUnits:
        self.check_range(ts)
        y, m, d = civil_from_day_number(day_number(ts))
        t = time_units(ts)
        return DateTimeUnits(year=y, month=m, day=d, hour=t.hour, minute=t.minute, second=t.second, ms=t.ms)
