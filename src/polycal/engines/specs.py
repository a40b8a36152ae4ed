"""
polycal.engines.specs
---------------------
Standard calendar specifications, as pure data. Live calendars are built from
these by polycal.engines.factory.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec
from ..core.units import MAX_YEAR

GREGORIAN = CalendarSpec(
    kind="gregorian",
    id=CalendarId(id="gregorian", type="gregory"),
    min_date=(1, 1, 1),
    max_date=(MAX_YEAR, 12, 31),
    meta={"leap_rule": "y % 4 == 0 and y % 100 != 0 or y % 400 == 0"},
)

PERSIAN = CalendarSpec(
    kind="persian",
    id=CalendarId(id="persian", type="persian"),
    min_date=(622, 3, 22),
    max_date=(MAX_YEAR, 12, 31),
    meta={
        "new_year_rule": "first apparent noon at 52.5E on or after the vernal equinox",
        "epoch": "0622-03-22",
    },
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    spec.id.id: spec
    for spec in (GREGORIAN, PERSIAN)
}
