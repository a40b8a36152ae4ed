# tests/test_persian.py

import random
from datetime import date, datetime, timedelta

import pytest

from polycal import DateTimeUnits, InvalidParameterError, PersianCalendar, RangeOverflowError
from polycal.core.units import MS_PER_DAY
from polycal.engines import persian as fa

EPOCH = datetime(1970, 1, 1)


@pytest.fixture(scope="module")
def cal():
    return PersianCalendar()


def _ts(*args):
    return (datetime(*args) - EPOCH) // timedelta(milliseconds=1)


def _gregorian(ts):
    d = EPOCH + timedelta(milliseconds=ts)
    return (d.year, d.month, d.day)


def test_epoch_constant():
    assert fa.PERSIAN_EPOCH == 226895
    assert fa.PERSIAN_EPOCH == date(622, 3, 22).toordinal() - 1


@pytest.mark.parametrize(
    "year, gregorian",
    [
        (1380, (2001, 3, 21)),
        (1391, (2012, 3, 20)),
        (1395, (2016, 3, 20)),
        (1396, (2017, 3, 21)),
        (1399, (2020, 3, 20)),
        (1400, (2021, 3, 21)),
        (1402, (2023, 3, 21)),
        (1403, (2024, 3, 20)),
        (1404, (2025, 3, 21)),
    ],
)
def test_nowruz_dates(cal, year, gregorian):
    ts = cal.get_timestamp(DateTimeUnits(year, 1, 1))
    assert _gregorian(ts) == gregorian
    assert cal.get_units(ts) == DateTimeUnits(year, 1, 1)


def test_leap_years(cal):
    leaps = [y for y in range(1390, 1406) if cal.is_leap_year(y)]
    assert leaps == [1391, 1395, 1399, 1403]


def test_last_day_of_leap_year(cal):
    ts = cal.get_timestamp(DateTimeUnits(1399, 12, 30))
    assert _gregorian(ts) == (2021, 3, 20)
    with pytest.raises(InvalidParameterError):
        cal.get_timestamp(DateTimeUnits(1400, 12, 30))


def test_month_lengths(cal):
    assert [cal.days_in_month(1399, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [30]
    assert [cal.days_in_month(1400, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    for y in range(1380, 1410):
        assert sum(cal.days_in_month(y, m) for m in range(1, 13)) == cal.days_in_year(y)


def test_year_length_matches_consecutive_new_years(cal):
    for y in range(1350, 1450):
        start = cal.get_timestamp(DateTimeUnits(y, 1, 1))
        nxt = cal.get_timestamp(DateTimeUnits(y + 1, 1, 1))
        assert (nxt - start) // MS_PER_DAY == cal.days_in_year(y)


def test_units_roundtrip(cal):
    random.seed(42)
    lo = _ts(1921, 3, 21)
    hi = _ts(2121, 3, 21)
    for _ in range(300):
        ts = random.randint(lo, hi)
        units = cal.get_units(ts)
        assert cal.get_timestamp(units) == ts
        assert 1 <= units.day <= cal.days_in_month(units.year, units.month)
        assert cal.day_of_year(ts) == fa.days_in_previous_months(units.month) + units.day


def test_against_jdatetime(cal):
    jdatetime = pytest.importorskip("jdatetime")
    random.seed(3)
    # 1380-01-01 .. 1399-12-29: the arithmetic rule jdatetime follows agrees
    # with the astronomical one in this window.
    lo = date(2001, 3, 21).toordinal()
    hi = date(2021, 3, 19).toordinal()
    for _ in range(500):
        d = date.fromordinal(random.randint(lo, hi))
        j = jdatetime.date.fromgregorian(date=d)
        units = cal.get_units(_ts(d.year, d.month, d.day))
        assert (units.year, units.month, units.day) == (j.year, j.month, j.day)


def test_day_of_year(cal):
    assert cal.day_of_year(cal.get_timestamp(DateTimeUnits(1399, 1, 1))) == 1
    assert cal.day_of_year(cal.get_timestamp(DateTimeUnits(1399, 7, 1))) == 187
    assert cal.day_of_year(cal.get_timestamp(DateTimeUnits(1399, 12, 30))) == 366


def test_week_day(cal):
    # 2020-03-20 was a Friday
    assert cal.week_day(cal.get_timestamp(DateTimeUnits(1399, 1, 1))) == 5


def test_add_months(cal):
    ts = cal.get_timestamp(DateTimeUnits(1399, 6, 31, 8, 30))
    assert cal.get_units(cal.add_months(ts, 1)) == DateTimeUnits(1399, 7, 30, 8, 30)
    assert cal.get_units(cal.add_months(ts, -6)) == DateTimeUnits(1398, 12, 29, 8, 30)

    ts = cal.get_timestamp(DateTimeUnits(1399, 12, 30))
    assert cal.get_units(cal.add_months(ts, 12)) == DateTimeUnits(1400, 12, 29)
    assert cal.get_units(cal.add_years(ts, 4)) == DateTimeUnits(1403, 12, 30)
    assert cal.get_units(cal.add_months(ts, 1)) == DateTimeUnits(1400, 1, 30)


def test_add_months_bounds(cal):
    ts = cal.get_timestamp(DateTimeUnits(1399, 1, 1))
    with pytest.raises(InvalidParameterError):
        cal.add_months(ts, fa.MAX_MONTHS_DELTA + 1)
    with pytest.raises(InvalidParameterError):
        cal.add_months(ts, -fa.MAX_MONTHS_DELTA - 1)
    with pytest.raises(RangeOverflowError):
        cal.add_months(ts, -1399 * 12)


@pytest.mark.parametrize(
    "units, name",
    [
        (DateTimeUnits(1399, 13, 1), "month"),
        (DateTimeUnits(1399, 1, 32), "day"),
        (DateTimeUnits(1399, 7, 31), "day"),
        (DateTimeUnits(0, 1, 1), "year"),
        (DateTimeUnits(9379, 1, 1), "year"),
        (DateTimeUnits(1399, 1, 1, minute=60), "minute"),
    ],
)
def test_get_timestamp_validates(cal, units, name):
    with pytest.raises(InvalidParameterError) as exc:
        cal.get_timestamp(units)
    assert exc.value.name == name


def test_range(cal):
    assert cal.min_timestamp == _ts(622, 3, 22)
    with pytest.raises(RangeOverflowError):
        cal.get_units(cal.min_timestamp - 1)
    with pytest.raises(RangeOverflowError):
        cal.get_units(cal.max_timestamp + 1)
    assert cal.get_units(cal.max_timestamp).year == fa.PERSIAN_MAX_YEAR


def test_max_year(cal):
    assert cal.max_year == fa.PERSIAN_MAX_YEAR == 9378
    assert cal.is_leap_year(cal.max_year) is False
    assert cal.days_in_year(cal.max_year) == 365
    # The last representable day falls before the end of the final year.
    assert not cal.is_valid(cal.max_year, 12, 1)
    assert cal.is_valid(cal.max_year - 1, 12, 1)


def test_month_from_ordinal_day():
    assert fa.month_from_ordinal_day(1) == 1
    assert fa.month_from_ordinal_day(31) == 1
    assert fa.month_from_ordinal_day(32) == 2
    assert fa.month_from_ordinal_day(186) == 6
    assert fa.month_from_ordinal_day(187) == 7
    assert fa.month_from_ordinal_day(366) == 12


def test_year_from_day_number():
    start = fa.year_start(1399)
    assert fa.year_from_day_number(start) == (1399, start)
    assert fa.year_from_day_number(start - 1) == (1398, fa.year_start(1398))
    assert fa.year_from_day_number(start + 365) == (1399, start)
