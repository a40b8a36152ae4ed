from __future__ import annotations

import math
from math import fmod
from typing import Sequence


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


def angle_deg(degrees: int, minutes: int, seconds: float) -> float:
    """Sexagesimal angle -> decimal degrees."""
    return (seconds / 60.0 + minutes) / 60.0 + degrees


def sin_deg(x: float) -> float:
    return math.sin(math.radians(x))


def cos_deg(x: float) -> float:
    return math.cos(math.radians(x))


def tan_deg(x: float) -> float:
    return math.tan(math.radians(x))


def poly(coeffs: Sequence[float], x: float) -> float:
    """c0 + c1*x + c2*x^2 + ..."""
    total = coeffs[0]
    xp = 1.0
    for c in coeffs[1:]:
        xp *= x
        total += c * xp
    return total


# ------------------------------------------------------------
# Time variable (dynamical time, fixed moments)
# ------------------------------------------------------------

# Fixed moment (R.D. days, 0001-01-01 00:00 = 1.0) of J2000.0.
J2000_MOMENT = 730120.5
DAYS_PER_CENTURY = 36525.0


def T_centuries(moment_tt: float) -> float:
    """Julian centuries from J2000.0 for a fixed moment in dynamical time."""
    return (moment_tt - J2000_MOMENT) / DAYS_PER_CENTURY


# ------------------------------------------------------------
# Mean obliquity epsilon
# ------------------------------------------------------------

def mean_obliquity_deg(T: float) -> float:
    """
    Mean obliquity of the ecliptic (degrees), Lieske/IAU1980 cubic:
        eps = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    """
    eps0 = angle_deg(23, 26, 21.448)
    return eps0 - arcsec_to_deg(46.8150 * T + 0.00059 * (T * T) - 0.001813 * (T * T * T))
