"""polycal public API.

Calendar-independent date arithmetic over integer timestamps, with
Gregorian and astronomical Persian calendars registered on import.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401,E402

from .api import (  # noqa: E402
    list_calendars,
    calendar_info,
    get_calendar,
    get_registry,
    set_registry,
    make_calendar,
    register_calendar,
    now,
    to_units,
    to_timestamp,
    convert,
    new_year_day,
    month_lengths,
)
from .core.calendar import Calendar  # noqa: E402
from .core.errors import (  # noqa: E402
    PolycalError,
    InvalidParameterError,
    RangeOverflowError,
    CalendarNotFoundError,
)
from .core.registry import CalendarRegistry  # noqa: E402
from .core.types import DateTimeUnits, Period, CalendarId, CalendarSpec  # noqa: E402
from .datetime import DateTime  # noqa: E402
from .engines.gregorian import GregorianCalendar  # noqa: E402
from .engines.persian import PersianCalendar  # noqa: E402

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "get_registry",
    "set_registry",
    "make_calendar",
    "register_calendar",
    "now",
    "to_units",
    "to_timestamp",
    "convert",
    "new_year_day",
    "month_lengths",
    "Calendar",
    "CalendarRegistry",
    "DateTimeUnits",
    "Period",
    "CalendarId",
    "CalendarSpec",
    "DateTime",
    "GregorianCalendar",
    "PersianCalendar",
    "PolycalError",
    "InvalidParameterError",
    "RangeOverflowError",
    "CalendarNotFoundError",
]
