# tests/test_cli.py

import pytest

from polycal.cli import main
from polycal.diagnostics import new_years_table


def _run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_list(capsys):
    rc, out, _ = _run(capsys, "list")
    assert rc == 0
    lines = out.strip().splitlines()
    assert lines[0].startswith("gregorian") and "(default)" in lines[0]
    assert lines[1].startswith("persian")


def test_units(capsys):
    rc, out, _ = _run(capsys, "units", "0")
    assert rc == 0
    assert out.strip() == "1970-01-01T00:00:00.000"

    rc, out, _ = _run(capsys, "units", "-1")
    assert out.strip() == "1969-12-31T23:59:59.999"

    rc, out, _ = _run(capsys, "units", "1584662400000", "--calendar", "persian")
    assert out.strip() == "1399-01-01T00:00:00.000"


def test_timestamp(capsys):
    rc, out, _ = _run(capsys, "timestamp", "1970", "1", "2")
    assert rc == 0
    assert out.strip() == "86400000"

    rc, out, _ = _run(capsys, "timestamp", "1970", "1", "1", "0", "0", "1", "5")
    assert out.strip() == "1005"

    rc, out, _ = _run(capsys, "timestamp", "1399", "1", "1", "--calendar", "persian")
    assert out.strip() == "1584662400000"


def test_convert(capsys):
    rc, out, _ = _run(capsys, "convert", "2020-03-20")
    assert rc == 0
    assert out.strip() == "1399-01-01"

    rc, out, _ = _run(capsys, "convert", "1399-12-30", "--from", "persian", "--to", "gregorian")
    assert out.strip() == "2021-03-20"


def test_week(capsys):
    rc, out, _ = _run(capsys, "week", "0")
    assert rc == 0
    assert out.strip() == "1"
    # 2021-01-01 under ISO rules
    rc, out, _ = _run(capsys, "week", "1609459200000", "--first-day", "1", "--offset", "4")
    assert out.strip() == "53"


@pytest.mark.parametrize(
    "argv",
    [
        ("timestamp", "2019", "2", "29"),
        ("units", "0", "--calendar", "julian"),
        ("week", "0", "--offset", "9"),
        ("convert", "1400-12-30", "--from", "persian"),
        ("units", "999999999999999"),
    ],
)
def test_errors_exit_2(capsys, argv):
    rc, out, err = _run(capsys, *argv)
    assert rc == 2
    assert out == ""
    assert err.startswith("error: ")


def test_bad_date_argument(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["convert", "20-3-2020x"])
    assert exc.value.code == 2


def test_new_years(capsys):
    rc, out, _ = _run(capsys, "new-years", "--from-year", "1399", "--to-year", "1404")
    assert rc == 0
    assert "2020-03-20" in out
    assert "2021-03-21" in out
    rows = [ln.split() for ln in out.splitlines()[2:] if ln.strip()]
    assert [r[0] for r in rows] == ["1399", "1400", "1401", "1402", "1403", "1404"]
    leap = {r[0] for r in rows if "yes" in r}
    assert leap == {"1399", "1403"}


def test_new_years_list_day(capsys):
    rc = new_years_table.main(["--from-year", "1399", "--to-year", "1404", "--list-day", "20"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "2020-03-20  (Y=1399)" in out
    assert "2024-03-20  (Y=1403)" in out
    assert "(Y=1400)" not in out


def test_nowruz_margin_without_plotting():
    from polycal.diagnostics import nowruz_scatter

    gy, day, margin = nowruz_scatter.nowruz_point(1399)
    assert (gy, day) == (2020, 20)
    # Equinox 03:50 UT, Tehran apparent noon about 08:37 UT.
    assert 4.0 < margin < 5.5
    for y in range(1390, 1410):
        assert 0.0 <= nowruz_scatter.nowruz_point(y)[2] < 24.0
