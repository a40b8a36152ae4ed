"""
polycal.datetime
----------------
Immutable date-time value bound to a calendar.

A DateTime is a timestamp plus the calendar used to read it. Two values
compare by instant, whatever their calendars.
"""

from __future__ import annotations

import datetime as _dt
from functools import total_ordering
from typing import Any, Dict, Tuple, Union

from . import api
from .core.calendar import Calendar, PeriodLike, as_period
from .core.types import UNIT_NAMES, DateTimeUnits
from .core.units import ms_of_day

CalendarLike = Union[str, Calendar, None]

_UNIX_EPOCH = _dt.datetime(1970, 1, 1)
_ONE_MS = _dt.timedelta(milliseconds=1)


@total_ordering
class DateTime:
    __slots__ = ("_ts", "_calendar", "_units")

    def __init__(self, ts: int, calendar: CalendarLike = None):
        if isinstance(ts, bool) or not isinstance(ts, int):
            raise TypeError(f"Timestamp must be an int, got {ts!r}")
        cal = api._resolve(calendar)
        # Reading the units also checks the calendar range.
        self._units = cal.get_units(ts)
        self._ts = ts
        self._calendar = cal

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def from_units(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        ms: int = 0,
        *,
        calendar: CalendarLike = None,
    ) -> "DateTime":
        cal = api._resolve(calendar)
        units = DateTimeUnits(year, month, day, hour, minute, second, ms)
        return cls(cal.get_timestamp(units), cal)

    @classmethod
    def now(cls, calendar: CalendarLike = None) -> "DateTime":
        return cls(api.now(), calendar)

    @classmethod
    def from_datetime(cls, value: _dt.datetime, calendar: CalendarLike = None) -> "DateTime":
        """Aware datetimes are taken in UTC; naive ones are read as-is."""
        if value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc).replace(tzinfo=None)
        return cls((value - _UNIX_EPOCH) // _ONE_MS, calendar)

    # ---------------------------------------------------------
    # Units
    # ---------------------------------------------------------

    @property
    def ts(self) -> int:
        return self._ts

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def units(self) -> DateTimeUnits:
        return self._units

    @property
    def year(self) -> int:
        return self._units.year

    @property
    def month(self) -> int:
        """Month of the year (1 to 12)."""
        return self._units.month

    @property
    def day(self) -> int:
        return self._units.day

    @property
    def hour(self) -> int:
        return self._units.hour

    @property
    def minute(self) -> int:
        return self._units.minute

    @property
    def second(self) -> int:
        return self._units.second

    @property
    def ms(self) -> int:
        return self._units.ms

    def get(self, unit: str) -> int:
        if unit not in UNIT_NAMES:
            raise KeyError(unit)
        return getattr(self._units, unit)

    @property
    def week_day(self) -> int:
        """0 = Sunday ... 6 = Saturday."""
        return self._calendar.week_day(self._ts)

    @property
    def day_of_year(self) -> int:
        return self._calendar.day_of_year(self._ts)

    @property
    def days_in_month(self) -> int:
        return self._calendar.days_in_month(self.year, self.month)

    @property
    def days_in_year(self) -> int:
        return self._calendar.days_in_year(self.year)

    @property
    def is_in_leap_year(self) -> bool:
        return self._calendar.is_leap_year(self.year)

    @property
    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    def week_number(self, first_day_of_week: int = 0, offset: int = 1) -> int:
        return self._calendar.week_number(self._ts, first_day_of_week, offset)

    def weeks_in_year(self, first_day_of_week: int = 0, offset: int = 1) -> int:
        """Week number of the last day of this year."""
        last = self._calendar.get_timestamp(
            DateTimeUnits(self.year, 12, self._calendar.days_in_month(self.year, 12))
        )
        return self._calendar.week_number(last, first_day_of_week, offset)

    # ---------------------------------------------------------
    # Manipulation
    # ---------------------------------------------------------

    def add(self, period: PeriodLike = None, **units: int) -> "DateTime":
        return DateTime(self._calendar.add(self._ts, period, **units), self._calendar)

    def subtract(self, period: PeriodLike = None, **units: int) -> "DateTime":
        return DateTime(self._calendar.subtract(self._ts, period, **units), self._calendar)

    def clone(self, **changes: int) -> "DateTime":
        """
        Copy with some units replaced. The day is clamped to the length of
        the resulting month, so clone(month=2) on the 31st lands on the
        last day of February.
        """
        # Reject unknown units the same way add() does.
        as_period(None, changes)
        units = self._units.clone(**changes)
        last = self._calendar.days_in_month(units.year, units.month)
        if units.day > last:
            units = units.clone(day=last)
        return DateTime(self._calendar.get_timestamp(units), self._calendar)

    def clear_time(self) -> "DateTime":
        return DateTime(self._ts - ms_of_day(self._ts), self._calendar)

    def with_calendar(self, calendar: CalendarLike) -> "DateTime":
        return DateTime(self._ts, calendar)

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ts == other._ts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ts < other._ts

    def __hash__(self) -> int:
        return hash(self._ts)

    def is_same(self, other: "DateTime") -> bool:
        return self._ts == other._ts

    def is_before(self, other: "DateTime") -> bool:
        return self._ts < other._ts

    def is_after(self, other: "DateTime") -> bool:
        return self._ts > other._ts

    def is_same_or_before(self, other: "DateTime") -> bool:
        return self._ts <= other._ts

    def is_same_or_after(self, other: "DateTime") -> bool:
        return self._ts >= other._ts

    def is_between(self, first: "DateTime", second: "DateTime") -> bool:
        """Strictly between the two instants."""
        return first._ts < self._ts < second._ts

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_units(self) -> DateTimeUnits:
        return self._units

    def to_tuple(self) -> Tuple[int, ...]:
        return self._units.as_tuple()

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = self._units.as_dict()
        out["calendar"] = self._calendar.id
        return out

    def to_datetime(self) -> _dt.datetime:
        """Naive stdlib datetime of the same instant (proleptic Gregorian)."""
        return _UNIX_EPOCH + self._ts * _ONE_MS

    def __repr__(self) -> str:
        u = self._units
        return (
            f"DateTime({u.year:04d}-{u.month:02d}-{u.day:02d}T"
            f"{u.hour:02d}:{u.minute:02d}:{u.second:02d}.{u.ms:03d}, calendar={self._calendar.id!r})"
        )

    def __str__(self) -> str:
        u = self._units
        return f"{u.year:04d}-{u.month:02d}-{u.day:02d} {u.hour:02d}:{u.minute:02d}:{u.second:02d}"

