"""
polycal.reference.deltat

Ephemeris correction (ΔT = TT − UT) used to move civil moments to dynamical time
before evaluating the solar series.

Piecewise model from Reingold & Dershowitz, *Calendrical Calculations*:
polynomial fits for 1620–1987, a linear segment for 1988–2019 and the
Morrison–Stephenson parabola everywhere else. Precision is ample for
locating the day of an equinox; it is not an IERS-grade ΔT.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Tuple

from ..core.units import civil_to_day_number, civil_year_from_fixed
from .astro_args import DAYS_PER_CENTURY, poly

SECONDS_PER_DAY = 86400.0

_START_OF_1810 = civil_to_day_number(1810, 1, 1)
_START_OF_1900 = civil_to_day_number(1900, 1, 1)

_C_1900_1987: Tuple[float, ...] = (
    -0.00002, 0.000297, 0.025184, -0.181133, 0.553040, -0.861938, 0.677066, -0.212591,
)
_C_1800_1899: Tuple[float, ...] = (
    -0.000009, 0.003844, 0.083563, 0.865736, 4.867575, 15.845535,
    31.332267, 38.291999, 28.316289, 11.636204, 2.043794,
)
_C_1700_1799: Tuple[float, ...] = (8.118780842, -0.005092142, 0.003336121, -0.0000266484)
_C_1620_1699: Tuple[float, ...] = (196.58333, -4.0675, 0.0219167)


def _centuries_from_1900(year: int) -> float:
    july1 = civil_to_day_number(year, 7, 1)
    return (july1 - _START_OF_1900) / DAYS_PER_CENTURY


def _default(year: int) -> float:
    x = 0.5 + (civil_to_day_number(year, 1, 1) - _START_OF_1810)
    return ((x * x) / 41048480.0 - 15.0) / SECONDS_PER_DAY


def _y1988_2019(year: int) -> float:
    return (year - 1933) / SECONDS_PER_DAY


def _y1900_1987(year: int) -> float:
    return poly(_C_1900_1987, _centuries_from_1900(year))


def _y1800_1899(year: int) -> float:
    return poly(_C_1800_1899, _centuries_from_1900(year))


def _y1700_1799(year: int) -> float:
    return poly(_C_1700_1799, year - 1700) / SECONDS_PER_DAY


def _y1620_1699(year: int) -> float:
    return poly(_C_1620_1699, year - 1600) / SECONDS_PER_DAY


# (lowest year the segment applies to, model); scanned top-down.
_SEGMENTS: Tuple[Tuple[int, Callable[[int], float]], ...] = (
    (2020, _default),
    (1988, _y1988_2019),
    (1900, _y1900_1987),
    (1800, _y1800_1899),
    (1700, _y1700_1799),
    (1620, _y1620_1699),
)


@lru_cache(maxsize=4096)
def ephemeris_correction_for_year(year: int) -> float:
    """ΔT in days for a Gregorian year."""
    for lowest, model in _SEGMENTS:
        if year >= lowest:
            return model(year)
    return _default(year)


def ephemeris_correction(moment: float) -> float:
    """ΔT in days at a fixed moment (universal time)."""
    return ephemeris_correction_for_year(civil_year_from_fixed(moment))


def delta_t_seconds(moment: float) -> float:
    return ephemeris_correction(moment) * SECONDS_PER_DAY


def dynamical_from_universal(moment: float) -> float:
    return moment + ephemeris_correction(moment)
