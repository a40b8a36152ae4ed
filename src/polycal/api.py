from __future__ import annotations

import time
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .core.calendar import Calendar
from .core.registry import CalendarRegistry
from .core.types import CalendarSpec, DateTimeUnits
from .core.units import civil_from_day_number, day_number
from .engines.factory import make_calendar as _make_calendar

CalendarLike = Union[str, Calendar, None]
UnitsLike = Union[DateTimeUnits, Mapping[str, int], Sequence[int]]

_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def get_registry() -> CalendarRegistry:
    return _reg()


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def _resolve(calendar: CalendarLike) -> Calendar:
    if isinstance(calendar, Calendar):
        return calendar
    if calendar is None:
        return _reg().default
    return _reg().get(calendar)


def _as_units(units: UnitsLike) -> DateTimeUnits:
    if isinstance(units, DateTimeUnits):
        return units
    if isinstance(units, Mapping):
        return DateTimeUnits(**units)
    return DateTimeUnits(*units)


def list_calendars() -> List[str]:
    return _reg().list()


def calendar_info(calendar: CalendarLike = None) -> Dict[str, Any]:
    return _resolve(calendar).info()


def get_calendar(id: Optional[str] = None) -> Calendar:
    """Calendar by id; the registry default when id is None."""
    return _resolve(id)


def make_calendar(spec: CalendarSpec) -> Calendar:
    return _make_calendar(spec)


def register_calendar(calendar: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(calendar, overwrite=overwrite)


def now() -> int:
    """Current host time as a timestamp (ms since 1970-01-01, UTC)."""
    return time.time_ns() // 1_000_000


def to_units(ts: int, *, calendar: CalendarLike = None) -> DateTimeUnits:
    return _resolve(calendar).get_units(ts)


def to_timestamp(units: UnitsLike, *, calendar: CalendarLike = None) -> int:
    return _resolve(calendar).get_timestamp(_as_units(units))


def convert(units: UnitsLike, *, source: CalendarLike, target: CalendarLike) -> DateTimeUnits:
    """Re-express a date given in one calendar in another."""
    ts = _resolve(source).get_timestamp(_as_units(units))
    return _resolve(target).get_units(ts)


# ============================================================
# Year-level helpers
# ============================================================

def new_year_day(year: int, *, calendar: CalendarLike = "persian") -> Dict[str, Any]:
    """First day of a year in the given calendar, with its Gregorian date."""
    cal = _resolve(calendar)
    ts = cal.get_timestamp(DateTimeUnits(year=year, month=1, day=1))
    return {
        "year": year,
        "calendar": cal.id,
        "timestamp": ts,
        "gregorian": civil_from_day_number(day_number(ts)),
        "week_day": cal.week_day(ts),
        "is_leap_year": cal.is_leap_year(year),
        "days_in_year": cal.days_in_year(year),
    }


def month_lengths(year: int, *, calendar: CalendarLike = None) -> List[int]:
    cal = _resolve(calendar)
    return [cal.days_in_month(year, m) for m in range(1, 13)]
