from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from .calendar import Calendar
from .errors import CalendarNotFoundError

logger = logging.getLogger(__name__)


class CalendarRegistry:
    """
    Keyed store of calendar instances.

    The default calendar is never chosen implicitly: it must be set with
    set_default() (or the `default` setter) before it is read.
    """

    def __init__(self, calendars: Iterable[Calendar] = (), *, default: Optional[str] = None):
        self._calendars: Dict[str, Calendar] = {}
        self._default: Optional[str] = None
        self._lock = threading.RLock()
        for cal in calendars:
            self.register(cal)
        if default is not None:
            self.set_default(default)

    def __len__(self) -> int:
        return len(self._calendars)

    def __contains__(self, id: object) -> bool:
        return id in self._calendars

    def add(self, calendar: Calendar) -> None:
        """Adds a calendar; a calendar whose id is already registered is ignored."""
        with self._lock:
            if calendar.id not in self._calendars:
                self._calendars[calendar.id] = calendar
                logger.debug("Registered calendar %r", calendar)

    def register(self, calendar: Calendar, *, overwrite: bool = False) -> None:
        with self._lock:
            if (not overwrite) and (calendar.id in self._calendars):
                raise KeyError(f"Calendar '{calendar.id}' already exists. Use overwrite=True to replace.")
            self._calendars[calendar.id] = calendar
            logger.debug("Registered calendar %r (overwrite=%s)", calendar, overwrite)

    def get(self, id: str) -> Calendar:
        with self._lock:
            if id not in self._calendars:
                raise CalendarNotFoundError(f"Unknown calendar '{id}'. Available: {sorted(self._calendars)}")
            return self._calendars[id]

    def find(self, id: str) -> Optional[Calendar]:
        with self._lock:
            return self._calendars.get(id)

    def find_by_type(self, type: str) -> List[Calendar]:
        with self._lock:
            return [c for c in self._calendars.values() if c.type == type]

    def list(self) -> List[str]:
        with self._lock:
            return sorted(self._calendars.keys())

    def count(self) -> int:
        return len(self)

    def set_default(self, id: str) -> None:
        with self._lock:
            self.get(id)
            self._default = id
            logger.debug("Default calendar set to '%s'", id)

    @property
    def default(self) -> Calendar:
        with self._lock:
            if self._default is None:
                raise CalendarNotFoundError("No default calendar has been set")
            return self._calendars[self._default]

    @default.setter
    def default(self, calendar: Calendar) -> None:
        with self._lock:
            self.add(calendar)
            self.set_default(calendar.id)
