# reference/solar.py

from __future__ import annotations

import math
from typing import Tuple

from . import astro_args as aa
from .deltat import dynamical_from_universal

# Mean solar year used for all solar approximations (days).
MEAN_TROPICAL_YEAR_IN_DAYS = 365.24219878
MEAN_SPEED_OF_SUN = MEAN_TROPICAL_YEAR_IN_DAYS / 360.0  # days per degree

HALF_DAY = 0.5

# (amplitude, phase deg, rate deg/century) for the long solar longitude series.
_LONGITUDE_TERMS: Tuple[Tuple[int, float, float], ...] = (
    (403406, 270.54861, 0.9287892),
    (195207, 340.19128, 35999.1376958),
    (119433, 63.91854, 35999.4089666),
    (112392, 331.2622, 35998.7287385),
    (3891, 317.843, 71998.20261),
    (2819, 86.631, 71998.4403),
    (1721, 240.052, 36000.35726),
    (660, 310.26, 71997.4812),
    (350, 247.23, 32964.4678),
    (334, 260.87, -19.441),
    (314, 297.82, 445267.1117),
    (268, 343.14, 45036.884),
    (242, 166.79, 3.1008),
    (234, 81.53, 22518.4434),
    (158, 3.5, -19.9739),
    (132, 132.75, 65928.9345),
    (129, 182.95, 9038.0293),
    (114, 162.03, 3034.7684),
    (99, 29.8, 33718.148),
    (93, 266.4, 3034.448),
    (86, 249.2, -2280.773),
    (78, 157.6, 29929.992),
    (72, 257.8, 31556.493),
    (68, 185.1, 149.588),
    (64, 69.9, 9037.75),
    (46, 8.0, 107997.405),
    (38, 197.1, -4444.176),
    (37, 250.4, 151.771),
    (32, 65.3, 67555.316),
    (29, 162.7, 31556.08),
    (28, 341.5, -4561.54),
    (27, 291.6, 107996.706),
    (27, 98.5, 1221.655),
    (25, 146.7, 62894.167),
    (24, 110.0, 31437.369),
    (21, 5.2, 14578.298),
    (21, 342.6, -31931.757),
    (20, 230.9, 34777.243),
    (18, 256.1, 1221.999),
    (17, 45.3, 62894.511),
    (14, 242.9, -4442.039),
    (13, 115.2, 107997.909),
    (13, 151.8, 119.066),
    (13, 285.3, 16859.071),
    (12, 53.3, -4.578),
    (10, 126.6, 26895.292),
    (10, 205.7, -39.127),
    (10, 85.9, 12297.536),
    (10, 146.1, 90073.778),
)

_LAMBDA_COEFFS = (280.46645, 36000.76983, 0.0003032)
_ANOMALY_COEFFS = (357.52910, 35999.05030, -0.0001559, -0.00000048)
_ECCENTRICITY_COEFFS = (0.016708617, -0.000042037, -0.0000001236)
_NUTATION_A = (124.90, -1934.134, 0.002063)
_NUTATION_B = (201.11, 72001.5377, 0.00057)


def julian_centuries(moment: float) -> float:
    """Julian centuries from J2000.0 (dynamical time) for a fixed moment in universal time."""
    return aa.T_centuries(dynamical_from_universal(moment))


def aberration_deg(T: float) -> float:
    return 0.0000974 * aa.cos_deg(177.63 + 35999.01848 * T) - 0.005575


def nutation_deg(T: float) -> float:
    a = aa.poly(_NUTATION_A, T)
    b = aa.poly(_NUTATION_B, T)
    return -0.004778 * aa.sin_deg(a) - 0.0003667 * aa.sin_deg(b)


def solar_longitude(moment: float) -> float:
    """
    Apparent geocentric longitude of the sun (degrees, [0,360)) at a fixed
    moment in universal time. Accurate to about 0.001 degree over several
    millennia around J2000.
    """
    T = julian_centuries(moment)
    series = sum(x * aa.sin_deg(y + z * T) for x, y, z in _LONGITUDE_TERMS)
    lam = 282.7771834 + 36000.76953744 * T + 0.000005729577951308232 * series
    return aa.wrap_deg(lam + aberration_deg(T) + nutation_deg(T))


def equation_of_time(moment: float) -> float:
    """
    Apparent minus mean solar time, as a fraction of a day.
    Clamped to half a day; the approximation diverges far from the present.
    """
    T = julian_centuries(moment)
    lam = aa.poly(_LAMBDA_COEFFS, T)
    anomaly = aa.poly(_ANOMALY_COEFFS, T)
    ecc = aa.poly(_ECCENTRICITY_COEFFS, T)
    eps = aa.mean_obliquity_deg(T)
    y = aa.tan_deg(eps / 2.0) ** 2

    equation = (
        y * aa.sin_deg(2 * lam)
        - 2 * ecc * aa.sin_deg(anomaly)
        + 4 * ecc * y * aa.sin_deg(anomaly) * aa.cos_deg(2 * lam)
        - 0.5 * y * y * aa.sin_deg(4 * lam)
        - 1.25 * ecc * ecc * aa.sin_deg(2 * anomaly)
    ) / (2 * math.pi)

    return math.copysign(min(abs(equation), HALF_DAY), equation)


def local_from_apparent(moment: float, longitude_deg: float) -> float:
    """Local mean time of a local apparent moment at the given longitude."""
    # The equation of time should take mean time; the difference is negligible.
    universal = moment - longitude_deg / 360.0
    return moment - equation_of_time(universal)


def midday(fixed_date: int, longitude_deg: float) -> float:
    """Universal moment of local apparent noon on a fixed date at a longitude (degrees east)."""
    return local_from_apparent(fixed_date + HALF_DAY, longitude_deg) - longitude_deg / 360.0


def estimate_prior_solar_longitude(longitude_deg: float, moment: float) -> float:
    """
    Approximate moment, at or before `moment`, when the sun last reached the
    given apparent longitude. Good to about a day.
    """
    tau = moment - MEAN_SPEED_OF_SUN * aa.wrap_deg(solar_longitude(moment) - longitude_deg)
    delta = aa.wrap180(solar_longitude(tau) - longitude_deg)
    return min(moment, tau - MEAN_SPEED_OF_SUN * delta)
