"""
polycal.core.calendar
---------------------
The calendar contract. Concrete calendars supply the calendar-specific
primitives (month arithmetic, month/year lengths, timestamp <-> units);
the generic date arithmetic and week-number algorithms live here and are
shared by every calendar.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import InvalidParameterError, RangeOverflowError
from .types import DateTimeUnits, Period
from .units import (
    MAX_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    civil_to_day_number,
    day_number,
    timestamp_from_day_number,
)

PeriodLike = Union[Period, DateTimeUnits, Mapping[str, Optional[int]], None]


def as_period(units: PeriodLike, extra: Mapping[str, Optional[int]]) -> Period:
    """Normalize add/subtract arguments into one validated Period; keywords win."""
    if units is None:
        units = {}
    if isinstance(units, Period):
        base = units
    elif isinstance(units, DateTimeUnits):
        base = Period(**units.as_dict())
    else:
        base = Period.from_mapping(units)
    if extra:
        Period.from_mapping(extra)  # unknown units
        base = replace(base, **{k: v for k, v in extra.items() if v is not None})
    for name, value in base.__dict__.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParameterError(name, value, f"Unit '{name}' must be an integer, got {value!r}")
    return base


def first_day_week_of_year(first_day_of_week: int, day_of_year: int, week_day: int) -> int:
    """Week number under the rule "week 1 contains the first day of the year"."""
    day_of_year -= 1
    day_for_jan1 = week_day - (day_of_year % 7)
    offset = (day_for_jan1 - first_day_of_week + 14) % 7
    return (day_of_year + offset) // 7 + 1


class Calendar(ABC):
    """
    Base class for all calendars.

    A calendar is an immutable, stateless function table over timestamps:
    instances may be shared freely between threads.
    """

    max_year: int = MAX_YEAR

    def __init__(
        self,
        id: str,
        type: str,
        *,
        min_date: Tuple[int, int, int] = (1, 1, 1),
        max_date: Tuple[int, int, int] = (MAX_YEAR, 12, 31),
    ):
        if not isinstance(id, str) or not id:
            raise InvalidParameterError("id", id, "Calendar id must be a non-empty string")
        if not isinstance(type, str) or not type:
            raise InvalidParameterError("type", type, "Calendar type must be a non-empty string")
        self._id = id
        self._type = type
        self._min_ts = timestamp_from_day_number(civil_to_day_number(*min_date))
        self._max_ts = timestamp_from_day_number(civil_to_day_number(*max_date) + 1) - 1

    @property
    def id(self) -> str:
        """Unique instance name."""
        return self._id

    @property
    def type(self) -> str:
        """
        Calendar family ("gregory", "persian", ...). Several calendars may
        share a type with different ids (alternative implementations).
        """
        return self._type

    @property
    def min_timestamp(self) -> int:
        return self._min_ts

    @property
    def max_timestamp(self) -> int:
        return self._max_ts

    def check_range(self, ts: int) -> None:
        if ts < self._min_ts or ts > self._max_ts:
            raise RangeOverflowError(
                f"Timestamp {ts} is outside the supported range of calendar "
                f"'{self._id}' [{self._min_ts}, {self._max_ts}]"
            )

    def info(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "type": self._type,
            "max_year": self.max_year,
            "min_timestamp": self._min_ts,
            "max_timestamp": self._max_ts,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, type={self._type!r})"

    # ---------------------------------------------------------
    # Generic arithmetic
    # ---------------------------------------------------------

    def add(self, ts: int, units: PeriodLike = None, **kwargs: int) -> int:
        """
        Adds a period of time to a timestamp and returns the resulting timestamp.

        Time units and days are linear; months and then years go through
        add_months/add_years so the time of day survives month boundaries.
        """
        p = as_period(units, kwargs)
        if p.ms:
            ts += p.ms
        if p.second:
            ts += p.second * MS_PER_SECOND
        if p.minute:
            ts += p.minute * MS_PER_MINUTE
        if p.hour:
            ts += p.hour * MS_PER_HOUR
        if p.day:
            ts += p.day * MS_PER_DAY
        if p.month:
            ts = self.add_months(ts, p.month)
        if p.year:
            ts = self.add_years(ts, p.year)
        return ts

    def subtract(self, ts: int, units: PeriodLike = None, **kwargs: int) -> int:
        """Subtracts a period of time from a timestamp."""
        return self.add(ts, -as_period(units, kwargs))

    def is_valid(self, year: int, month: int, day: int) -> bool:
        """Returns True if the given date exists in this calendar. Months are 1..12."""
        return (
            1 <= year <= self.max_year
            and 1 <= month <= 12
            and 1 <= day <= self.days_in_month(year, month)
        )

    def week_day(self, ts: int) -> int:
        """Day of the week, 0 = Sunday ... 6 = Saturday."""
        return (day_number(ts) + 1) % 7

    def week_number(self, ts: int, first_day_of_week: int, offset: int = 1) -> int:
        """
        Week number of the week year.

        offset is the minimum number of days of the new year the first week
        must contain; offset=1 means week 1 is the week holding the first day
        of the year.
        """
        if isinstance(first_day_of_week, bool) or not isinstance(first_day_of_week, int) \
                or not 0 <= first_day_of_week <= 6:
            raise InvalidParameterError("first_day_of_week", first_day_of_week)
        if isinstance(offset, bool) or not isinstance(offset, int) or not 1 <= offset <= 7:
            raise InvalidParameterError("offset", offset)

        if offset == 1:
            return first_day_week_of_year(first_day_of_week, self.day_of_year(ts), self.week_day(ts))

        # A date before the first full week belongs to the last week of the
        # previous year. Each pass moves to the last day of an earlier year, so
        # the year strictly decreases; a year-end date never falls before the
        # first week, so at most one step back is taken.
        while True:
            doy = self.day_of_year(ts) - 1
            day_for_jan1 = self.week_day(ts) - (doy % 7)
            shift = (first_day_of_week - day_for_jan1 + 14) % 7
            if shift != 0 and shift >= offset:
                shift -= 7
            day = doy - shift
            if day >= 0:
                return day // 7 + 1
            ts -= (doy + 1) * MS_PER_DAY

    def add_years(self, ts: int, years: int) -> int:
        """Adds whole years; defaults to adding 12 * years months."""
        return self.add_months(ts, years * 12)

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    # ---------------------------------------------------------
    # Calendar-specific primitives
    # ---------------------------------------------------------

    @abstractmethod
    def add_months(self, ts: int, months: int) -> int:
        """Adds months, clamping the day to the length of the target month."""

    @abstractmethod
    def day_of_year(self, ts: int) -> int:
        """Day of the year (1 to 366)."""

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int:
        """Number of days in the given year and month (month is 1..12)."""

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        ...

    @abstractmethod
    def get_timestamp(self, units: DateTimeUnits) -> int:
        """Timestamp of the given units."""

    @abstractmethod
    def get_units(self, ts: int) -> DateTimeUnits:
        """Units (year, month, ...) of the given timestamp."""
