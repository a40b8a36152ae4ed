from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Tuple

_DATE_RE = re.compile(r"^(-?\d{1,4})-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    """YYYY-MM-DD in any calendar (no Gregorian validation here)."""
    m = _DATE_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _fmt_units(u) -> str:
    return (
        f"{u.year:04d}-{u.month:02d}-{u.day:02d}T"
        f"{u.hour:02d}:{u.minute:02d}:{u.second:02d}.{u.ms:03d}"
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_list(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal list", description="List registered calendars")
    p.parse_args(argv)

    reg = polycal.get_registry()
    default_id = reg.default.id
    for cid in reg.list():
        cal = reg.get(cid)
        mark = "  (default)" if cid == default_id else ""
        print(f"{cid:<12}  {cal.type:<10}{mark}")
    return 0


def cmd_units(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal units", description="Timestamp -> calendar units")
    p.add_argument("timestamp", type=int, help="milliseconds since 1970-01-01")
    p.add_argument("--calendar", default=None, help="calendar id (default: registry default)")
    args = p.parse_args(argv)

    print(_fmt_units(polycal.to_units(args.timestamp, calendar=args.calendar)))
    return 0


def cmd_timestamp(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal timestamp", description="Calendar units -> timestamp")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("time", type=int, nargs="*", metavar="HOUR MINUTE SECOND MS", help="optional time of day")
    p.add_argument("--calendar", default=None, help="calendar id (default: registry default)")
    args = p.parse_args(argv)

    if len(args.time) > 4:
        p.error("at most four time fields (hour minute second ms)")
    time_fields = list(args.time) + [0] * (4 - len(args.time))
    units = polycal.DateTimeUnits(args.year, args.month, args.day, *time_fields)
    print(polycal.to_timestamp(units, calendar=args.calendar))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal convert", description="Convert a date between calendars")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD in the source calendar")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", dest="target", default="persian")
    args = p.parse_args(argv)

    y, m, d = args.date
    out = polycal.convert(polycal.DateTimeUnits(y, m, d), source=args.source, target=args.target)
    print(f"{out.year:04d}-{out.month:02d}-{out.day:02d}")
    return 0


def cmd_week(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal week", description="Week number of a timestamp")
    p.add_argument("timestamp", type=int, help="milliseconds since 1970-01-01")
    p.add_argument("--first-day", type=int, default=0, help="first day of the week, 0=Sunday .. 6=Saturday")
    p.add_argument("--offset", type=int, default=1, help="minimum days of the new year in week 1 (1..7)")
    p.add_argument("--calendar", default=None)
    args = p.parse_args(argv)

    cal = polycal.get_calendar(args.calendar)
    print(cal.week_number(args.timestamp, args.first_day, args.offset))
    return 0


_COMMANDS = {
    "list": cmd_list,
    "units": cmd_units,
    "timestamp": cmd_timestamp,
    "convert": cmd_convert,
    "week": cmd_week,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="polycal", description="Multi-calendar date toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars", add_help=False)
    sub.add_parser("units", help="Timestamp -> calendar units", add_help=False)
    sub.add_parser("timestamp", help="Calendar units -> timestamp", add_help=False)
    sub.add_parser("convert", help="Convert a YYYY-MM-DD date between calendars", add_help=False)
    sub.add_parser("week", help="Week number of a timestamp", add_help=False)

    # diagnostics
    sub.add_parser("new-years", help="Print Persian New Year table (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from polycal.core.errors import PolycalError

    try:
        if args.cmd in _COMMANDS:
            return _COMMANDS[args.cmd](rest)

        if args.cmd == "new-years":
            return _run_module_main("polycal.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "nowruz-scatter": "polycal.diagnostics.nowruz_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except PolycalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
