from __future__ import annotations

import argparse

import caldate
from caldate import CalendarDate, GregorianMonth, HebrewMonth, HebrewYear


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(pad: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hebrew_month_calendar(year: int, month: HebrewMonth) -> None:
    y = HebrewYear(year)
    month = month.corrected_for_year(y.is_leap_year)
    n_days = month.number_of_days(y.length, y.is_leap_year)

    days = []
    for d in range(1, n_days + 1):
        g = CalendarDate.hebrew(month, d, year, hour=6)
        days.append((f"{d:2d}", g.date_in_iso_format()[5:]))

    first = CalendarDate.hebrew(month, 1, year, hour=6)
    last = CalendarDate.hebrew(month, n_days, year, hour=6)
    title = f"Hebrew month  {month} {year}   ({first.date_in_iso_format()} .. {last.date_in_iso_format()})"
    print_grid(title, to_weeks(first.hebrew_weekday.number_already_elapsed, days))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    month = GregorianMonth.from_ordinal(gm)
    n_days = month.number_of_days(caldate.GregorianYear(gy).is_leap_year)

    days = []
    for d in range(1, n_days + 1):
        g = CalendarDate.gregorian(month, d, gy)
        days.append((f"{d:2d}", f"{g.hebrew_day.value:02d} {g.hebrew_month.english_name[:3]}"))

    first = CalendarDate.gregorian(month, 1, gy)
    title = f"Gregorian month  {gy}-{gm:02d}   (Hebrew day of each midnight)"
    print_grid(title, to_weeks(first.gregorian_weekday.number_already_elapsed, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hebrew-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--hebrew", nargs=2, metavar=("Y", "M"),
                   help="Hebrew month to print: Y M, M = ordinal in the year (e.g. 5785 7)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 4)")

    args = p.parse_args(argv)

    if not args.hebrew and not args.greg:
        # sensible default demo
        today = CalendarDate.hebrew_now()
        hebrew_month_calendar(today.hebrew_year.value, today.hebrew_month)
        g = CalendarDate.gregorian_now()
        gregorian_month_calendar(g.gregorian_year.value, g.gregorian_month.ordinal)
        return 0

    if args.hebrew:
        Y = int(args.hebrew[0])
        month = HebrewMonth.from_ordinal(int(args.hebrew[1]), HebrewYear(Y).is_leap_year)
        hebrew_month_calendar(Y, month)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
