from __future__ import annotations

from typing import Any


class PolycalError(Exception):
    """Base error."""


class InvalidParameterError(PolycalError, ValueError):
    """Raised when a value falls outside its documented domain."""

    def __init__(self, name: str, value: Any = None, message: str | None = None):
        self.name = name
        self.value = value
        if message is None:
            message = f"Invalid value for '{name}': {value!r}"
        super().__init__(message)


class RangeOverflowError(PolycalError, OverflowError):
    """Raised when a computed instant falls outside a calendar's supported range."""


class CalendarNotFoundError(PolycalError, KeyError):
    """Raised when a calendar id (or the default calendar) is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
