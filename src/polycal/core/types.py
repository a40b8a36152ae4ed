from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

UNIT_NAMES: Tuple[str, ...] = ("year", "month", "day", "hour", "minute", "second", "ms")


@dataclass(frozen=True)
class TimeUnits:
    hour: int
    minute: int
    second: int
    ms: int


@dataclass(frozen=True)
class DateTimeUnits:
    """A full set of calendar units. Produced by Calendar.get_units."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    ms: int = 0

    def clone(self, **changes: int) -> "DateTimeUnits":
        return replace(self, **changes)

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, name) for name in UNIT_NAMES)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class Period:
    """
    A partial set of units used as a delta for add/subtract.
    A zero field means "no change".
    """
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    ms: int = 0

    def __neg__(self) -> "Period":
        return Period(**{f.name: -getattr(self, f.name) for f in fields(self)})

    def __bool__(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    @classmethod
    def from_mapping(cls, units: Mapping[str, Optional[int]]) -> "Period":
        unknown = set(units) - set(UNIT_NAMES)
        if unknown:
            raise TypeError(f"Unknown unit(s): {sorted(unknown)}. Expected: {list(UNIT_NAMES)}")
        return cls(**{k: v for k, v in units.items() if v is not None})


@dataclass(frozen=True)
class CalendarId:
    id: str
    type: str


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar."""
    kind: str          # implementation key understood by engines.factory
    id: CalendarId
    min_date: Tuple[int, int, int]   # proleptic Gregorian (Y, M, D), start of day
    max_date: Tuple[int, int, int]   # proleptic Gregorian (Y, M, D), end of day
    meta: Optional[Dict[str, Any]] = None

    def tweak(self, **kwargs: Any) -> "CalendarSpec":
        return replace(self, **kwargs)

    def with_id(self, new_id: str) -> "CalendarSpec":
        return replace(self, id=CalendarId(id=new_id, type=self.id.type))
