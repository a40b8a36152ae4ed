# tests/test_units.py

import random
from datetime import date

import pytest

from polycal.core import units as u
from polycal.core.errors import InvalidParameterError


def test_known_epochs():
    assert u.to_jdn(2000, 1, 1) == 2451545
    assert u.civil_to_day_number(1, 1, 1) == 0
    assert u.civil_to_day_number(1970, 1, 1) == u.EPOCH_DAY_NUMBER
    assert u.day_number(0) == u.EPOCH_DAY_NUMBER


def test_day_number_roundtrip_against_stdlib():
    random.seed(42)
    # date.toordinal() is 1 for 0001-01-01
    for _ in range(10000):
        n = random.randint(0, date(9999, 12, 31).toordinal() - 1)
        d = date.fromordinal(n + 1)
        assert u.civil_from_day_number(n) == (d.year, d.month, d.day)
        assert u.civil_to_day_number(d.year, d.month, d.day) == n


def test_negative_timestamps_floor():
    assert u.day_number(-1) == u.EPOCH_DAY_NUMBER - 1
    assert u.ms_of_day(-1) == u.MS_PER_DAY - 1
    t = u.time_units(-1)
    assert (t.hour, t.minute, t.second, t.ms) == (23, 59, 59, 999)


def test_timestamp_from_day_number():
    assert u.timestamp_from_day_number(u.EPOCH_DAY_NUMBER) == 0
    assert u.timestamp_from_day_number(u.EPOCH_DAY_NUMBER + 1, 1) == u.MS_PER_DAY + 1
    assert u.fixed_from_day_number(0) == 1
    assert u.day_number_from_fixed(1) == 0


def test_time_to_ms():
    assert u.time_to_ms(0, 0, 0, 0) == 0
    assert u.time_to_ms(23, 59, 59, 999) == u.MS_PER_DAY - 1
    assert u.time_to_ms(12, 34, 23, 4) == ((12 * 60 + 34) * 60 + 23) * 1000 + 4


@pytest.mark.parametrize(
    "args, name",
    [
        ((24, 0, 0, 0), "hour"),
        ((-1, 0, 0, 0), "hour"),
        ((0, 60, 0, 0), "minute"),
        ((0, 0, 60, 0), "second"),
        ((0, 0, 0, 1000), "ms"),
    ],
)
def test_time_to_ms_rejects(args, name):
    with pytest.raises(InvalidParameterError) as exc:
        u.time_to_ms(*args)
    assert exc.value.name == name
    assert isinstance(exc.value, ValueError)


def test_civil_year_from_fixed():
    fixed = u.civil_to_day_number(2020, 12, 31) + 1
    assert u.civil_year_from_fixed(fixed + 0.99) == 2020
    assert u.civil_year_from_fixed(fixed + 1.0) == 2021
