"""
polycal.engines.factory
-----------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations

import logging
from typing import Dict, Type

from ..core.calendar import Calendar
from ..core.types import CalendarSpec
from .gregorian import GregorianCalendar
from .persian import PersianCalendar

logger = logging.getLogger(__name__)

CALENDAR_KINDS: Dict[str, Type[Calendar]] = {
    "gregorian": GregorianCalendar,
    "persian": PersianCalendar,
}


def make_calendar(spec: CalendarSpec) -> Calendar:
    """The universal entry point."""
    try:
        cls = CALENDAR_KINDS[spec.kind]
    except KeyError:
        raise TypeError(f"Unknown calendar kind '{spec.kind}'. Available: {sorted(CALENDAR_KINDS)}") from None
    cal = cls(spec.id.id, spec.id.type, min_date=spec.min_date, max_date=spec.max_date)
    logger.debug("Built calendar %r from spec kind=%s", cal, spec.kind)
    return cal
