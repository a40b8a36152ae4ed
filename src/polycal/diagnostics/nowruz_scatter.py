#!/usr/bin/env python3
"""
Nowruz diagnostics plot.

Top panel: Gregorian day of March of each Persian new year.
Bottom panel: hours from the vernal equinox to apparent noon in Tehran on
new year's day. Under the astronomical rule this margin lies in [0, 24);
values near either end are the years most sensitive to the solar model.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from polycal.core.units import civil_from_day_number, fixed_from_day_number
from polycal.engines.persian import midday_in_tehran, year_start
from polycal.reference import astro_args as aa
from polycal.reference.solar import estimate_prior_solar_longitude, solar_longitude


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "polycal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "polycal[diagnostics]"') from e


def equinox_moment(approx: float, *, tol: float = 1e-6) -> float:
    """Bisect the zero of solar longitude within a day of an estimate."""
    lo, hi = approx - 1.0, approx + 1.0
    while hi - lo > tol:
        mid = 0.5 * (lo + hi)
        if aa.wrap180(solar_longitude(mid)) < 0.0:
            lo = mid
        else:
            hi = mid
    return 0.5 * (lo + hi)


def nowruz_point(year: int) -> Tuple[int, int, float]:
    """(Gregorian year, day of March, hours from equinox to Tehran noon)."""
    days = year_start(year)
    fixed = fixed_from_day_number(days)
    noon = midday_in_tehran(fixed)
    equinox = equinox_moment(estimate_prior_solar_longitude(0.0, noon))
    # Nowruz always falls in March of the proleptic Gregorian calendar.
    gy, _, gd = civil_from_day_number(days)
    return gy, gd, (noon - equinox) * 24.0


def build_series(np, from_year: int, to_year: int):
    pts = [nowruz_point(y) for y in range(from_year, to_year + 1)]
    x = np.array([p[0] for p in pts], dtype=int)
    day = np.array([p[1] for p in pts], dtype=float)
    margin = np.array([p[2] for p in pts], dtype=float)
    return x, day, margin


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="polycal diag nowruz-scatter",
        description="Plot the Gregorian date of Nowruz and its distance from the equinox.",
    )
    p.add_argument("--from-year", type=int, default=1300, help="first Persian year")
    p.add_argument("--to-year", type=int, default=1500, help="last Persian year")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, day, margin = build_series(np, args.from_year, args.to_year)

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 6.4), sharex=True, constrained_layout=True)
    for ax in (ax0, ax1):
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax0.scatter(x, day, s=12, c="tab:blue", linewidths=0.0, alpha=0.6)
    ax0.set_ylabel("Day of March")
    ax0.set_title("Nowruz under the astronomical Persian calendar")

    ax1.scatter(x, margin, s=12, c="tab:red", linewidths=0.0, alpha=0.6)
    ax1.axhline(0.0, color="0.3", linewidth=0.8)
    ax1.axhline(24.0, color="0.3", linewidth=0.8)
    ax1.set_ylabel("Equinox to Tehran noon (h)")
    ax1.set_xlabel("Gregorian year")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    print(f"Margin range: {margin.min():.2f} h .. {margin.max():.2f} h")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
