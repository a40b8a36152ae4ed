# tests/test_solar.py

import pytest

from polycal.core.units import civil_to_day_number
from polycal.reference import astro_args as aa
from polycal.reference import deltat, solar


def _moment(y, m, d, hour=0.0):
    """Fixed moment (R.D.) of a UT civil time."""
    return civil_to_day_number(y, m, d) + 1 + hour / 24.0


@pytest.mark.parametrize(
    "moment, target",
    [
        (_moment(2020, 3, 20, 3 + 50 / 60), 0.0),      # March equinox 03:50 UT
        (_moment(2021, 6, 21, 3 + 32 / 60), 90.0),     # June solstice 03:32 UT
        (_moment(2019, 9, 23, 7 + 50 / 60), 180.0),    # September equinox 07:50 UT
        (_moment(2018, 12, 21, 22 + 23 / 60), 270.0),  # December solstice 22:23 UT
    ],
)
def test_solar_longitude_at_equinoxes_and_solstices(moment, target):
    lon = solar.solar_longitude(moment)
    assert 0.0 <= lon < 360.0
    assert abs(aa.wrap180(lon - target)) < 0.02


def test_solar_longitude_advances_about_a_degree_a_day():
    m = _moment(2020, 1, 1)
    step = aa.wrap_deg(solar.solar_longitude(m + 1) - solar.solar_longitude(m))
    assert 0.95 < step < 1.03


def test_estimate_prior_solar_longitude():
    equinox = _moment(2020, 3, 20, 3 + 50 / 60)
    est = solar.estimate_prior_solar_longitude(0.0, _moment(2020, 6, 1))
    assert est == pytest.approx(equinox, abs=1.0)
    # Never later than the moment given.
    m = _moment(2020, 3, 19)
    assert solar.estimate_prior_solar_longitude(0.0, m) <= m


@pytest.mark.parametrize(
    "moment, minutes",
    [
        (_moment(2020, 11, 3, 12), 16.4),
        (_moment(2020, 2, 11, 12), -14.2),
    ],
)
def test_equation_of_time_extremes(moment, minutes):
    assert solar.equation_of_time(moment) * 1440.0 == pytest.approx(minutes, abs=0.5)


def test_equation_of_time_is_clamped():
    # Far outside the validity of the series the value saturates at half a day.
    for m in (_moment(1, 1, 1), _moment(9999, 6, 1)):
        assert abs(solar.equation_of_time(m)) <= 0.5


def test_midday_follows_equation_of_time():
    day = civil_to_day_number(2020, 11, 3) + 1
    noon = solar.midday(day, 0.0)
    assert noon == pytest.approx(day + 0.5 - 16.4 / 1440.0, abs=1.0 / 1440.0)
    # 52.5 E is 3.5 hours ahead of Greenwich.
    assert solar.midday(day, 52.5) == pytest.approx(noon - 3.5 / 24.0, abs=1.0 / 1440.0)


def test_delta_t():
    assert deltat.delta_t_seconds(aa.J2000_MOMENT) == pytest.approx(67.0)
    assert 1500.0 < deltat.delta_t_seconds(_moment(1000, 7, 1)) < 2500.0
    assert deltat.dynamical_from_universal(aa.J2000_MOMENT) == pytest.approx(
        aa.J2000_MOMENT + 67.0 / 86400.0
    )


def test_mean_obliquity():
    assert aa.mean_obliquity_deg(0.0) == pytest.approx(23.4392911, abs=1e-6)
