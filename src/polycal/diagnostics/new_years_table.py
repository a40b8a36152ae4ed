from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import polycal

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def fmt_gregorian(ymd: Tuple[int, int, int], style: str = "mmdd") -> str:
    y, m, d = ymd
    if style == "mmdd":
        return f"{m:02d}-{d:02d}"
    return f"{y:04d}-{m:02d}-{d:02d}"


def build_rows(from_year: int, to_year: int, *, calendar: str = "persian") -> List[dict]:
    return [polycal.new_year_day(y, calendar=calendar) for y in range(from_year, to_year + 1)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="polycal new-years",
        description="Print Persian New Year (Nowruz) dates, leap flags and year lengths.",
    )
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1410)
    p.add_argument("--calendar", default="persian", help="calendar id (default: persian)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date column (default: iso).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=None,
        help="After the table, list the years whose new year fell on this day of March.",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Gregorian", "Day", "Leap", "Days"]
    colw = [5, 10, 3, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[Tuple[int, int, int], int]] = []

    for row in build_rows(Y0, Y1, calendar=args.calendar):
        g = row["gregorian"]
        cells = [
            str(row["year"]),
            fmt_gregorian(g, args.dates),
            WEEKDAY_NAMES[row["week_day"]],
            "yes" if row["is_leap_year"] else "",
            str(row["days_in_year"]),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))
        if args.list_day is not None and g[1] == 3 and g[2] == args.list_day:
            hits.append((g, row["year"]))

    if args.list_day is None:
        return 0

    print(f"\nNew Year on March {args.list_day:02d}:")
    if not hits:
        print("(none)")
        return 0
    for g, Y in hits:
        print(f"{fmt_gregorian(g, 'iso')}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
