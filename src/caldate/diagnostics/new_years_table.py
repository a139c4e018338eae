from __future__ import annotations

import argparse
from typing import List, Tuple

import caldate
from caldate.core.date import epoch
from caldate.hebrew.molad import new_year

RULES = ("molad zaken", "lo ADU rosh", "gatarad", "betutakpat")


def fmt_molad(molad: caldate.CalendarInterval) -> str:
    """Weekday, hour and parts of a molad given as an interval since the epoch."""
    date = epoch() + molad
    part = date.hebrew_part
    return f"{date.hebrew_weekday.english_name[:3]} {int(date.hebrew_hour):2d}h {int(part):4d}p"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Rosh Hashanah table: molad, postponements and the resulting start of each year."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date column (default: iso).",
    )
    p.add_argument(
        "--list-rule",
        choices=RULES,
        default="gatarad",
        help="After the table, list the years in which this postponement applied (default: gatarad).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Molad", "Rosh Hashanah", "Gregorian", "Days", "Postponements"]
    colw = [5, 15, 13, 10, 4, 20]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: List[Tuple[int, str]] = []

    for Y in range(Y0, Y1 + 1):
        ny = new_year(Y)
        # hour 6 is the first civil midnight of the Hebrew day
        start = caldate.CalendarDate.hebrew(caldate.HebrewMonth.TISHREI, 1, Y, hour=6)
        greg = start.date_in_iso_format()
        if args.dates == "mmdd":
            greg = greg[-5:]
        year = caldate.HebrewYear(Y)
        row = [
            str(Y),
            fmt_molad(ny.molad),
            start.hebrew_weekday.english_name,
            greg,
            str(year.number_of_days),
            ", ".join(ny.postponements) or "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if args.list_rule in ny.postponements:
            hits.append((Y, greg))

    print(f"\nYears postponed by {args.list_rule}:")
    if not hits:
        print("(none)")
        return 0

    for Y, greg in hits:
        print(f"{Y}  {greg}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
