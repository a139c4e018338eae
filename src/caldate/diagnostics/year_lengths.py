#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caldate
from caldate.hebrew.molad import new_year

LENGTHS = (353, 354, 355, 383, 384, 385)
RULES = ("molad zaken", "lo ADU rosh", "gatarad", "betutakpat")


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caldate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caldate[diagnostics]"') from e


def collect(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Per year: number of days, start weekday (Sunday = 0), days postponed past the molad."""
    years = np.arange(start_year, end_year + 1)
    days = np.array([caldate.HebrewYear(int(Y)).number_of_days for Y in years], dtype=int)
    weekdays = np.array([new_year(int(Y)).weekday for Y in years], dtype=int)
    postponed = np.array([new_year(int(Y)).days_postponed for Y in years], dtype=int)
    return days, weekdays, postponed


def rule_counts(start_year: int, end_year: int) -> List[int]:
    counts = [0] * len(RULES)
    for Y in range(start_year, end_year + 1):
        for rule in new_year(Y).postponements:
            counts[RULES.index(rule)] += 1
    return counts


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Hebrew year-length and postponement statistics over a range of years."
    )
    p.add_argument("--start-year", type=int, default=5600)
    p.add_argument("--end-year", type=int, default=6000)
    p.add_argument("--out", default="year_lengths.png")
    p.add_argument("--title", default="Hebrew year lengths and postponements")
    p.add_argument("--no-plot", action="store_true", help="Only print the summary table.")
    args = p.parse_args(argv)

    np = _need_numpy()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    days, weekdays, postponed = collect(np, start_year, end_year)
    n = len(days)

    unexpected = sorted(set(days.tolist()) - set(LENGTHS))
    if unexpected:
        raise SystemExit(f"Impossible year lengths found: {unexpected}")

    print(f"Years {start_year}..{end_year}  (n={n})")
    print()
    print("Length  Count   Share")
    for L in LENGTHS:
        c = int(np.count_nonzero(days == L))
        print(f"{L:6d}  {c:5d}  {c / n:6.2%}")
    print()
    print("Rule          Count")
    counts = rule_counts(start_year, end_year)
    for rule, c in zip(RULES, counts):
        print(f"{rule:<12}  {c:5d}")
    print()
    print(f"Mean days postponed: {postponed.mean():.4f}")
    print(f"Mean year length:    {days.mean():.6f}  (molad mean {float(caldate.HebrewYear.mean_duration().in_days):.6f})")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()

    fig, (ax0, ax1, ax2) = plt.subplots(1, 3, figsize=(15, 4))

    ax0.bar([str(L) for L in LENGTHS], [int(np.count_nonzero(days == L)) for L in LENGTHS], color="0.35")
    ax0.set_xlabel("Days in year")
    ax0.set_ylabel("Years")
    ax0.set_title("Year lengths")

    wd_counts = np.bincount(weekdays, minlength=7)
    ax1.bar(["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"], wd_counts, color="0.35")
    ax1.set_xlabel("Weekday of 1 Tishrei")
    ax1.set_title("Rosh Hashanah weekday")

    ax2.bar(list(RULES), counts, color="0.35")
    ax2.set_title("Postponements applied")
    ax2.tick_params(axis="x", labelrotation=20)

    fig.suptitle(f"{args.title} ({start_year}..{end_year})")
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
