from __future__ import annotations

from polycal.core.registry import CalendarRegistry
from polycal.engines.factory import make_calendar
from polycal.engines.specs import ALL_SPECS, GREGORIAN


def build_registry() -> CalendarRegistry:
    reg = CalendarRegistry(make_calendar(spec) for spec in ALL_SPECS.values())
    reg.set_default(GREGORIAN.id.id)
    return reg
