from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys
from typing import Tuple

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _parse_hebrew_month(s: str, leap_year: bool):
    """Month ordinal within the year (1 = Tishrei) or an English name such as 'Adar II'."""
    from caldate import HebrewMonth

    if s.isdigit():
        return HebrewMonth.from_ordinal(int(s), leap_year)
    key = s.strip().lower().replace("-", " ").replace("_", " ")
    for m in HebrewMonth:
        if m.english_name.lower() == key:
            return m
    raise SystemExit(f"Unknown Hebrew month '{s}'")


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


def cmd_hebrew(argv: list[str]) -> int:
    from caldate import CalendarDate, GregorianMonth, HebrewDate

    p = argparse.ArgumentParser(prog="caldate hebrew", description="Gregorian -> Hebrew date")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian, proleptic)")
    p.add_argument("--hour", type=int, default=0)
    p.add_argument("--minute", type=int, default=0)
    p.add_argument("--json", action="store_true", help="also print the encoded date")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    date = CalendarDate.gregorian(GregorianMonth.from_ordinal(m), d, y, args.hour, args.minute)
    print(f"{date.hebrew_date_in_english(with_weekday=True)}  (hour {date.hebrew_hour}, part {date.hebrew_part})")
    if args.json:
        print(CalendarDate(date.convert(HebrewDate)).to_json())
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    from caldate import CalendarDate, HebrewYear

    p = argparse.ArgumentParser(prog="caldate gregorian", description="Hebrew -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", help="ordinal in the year (1 = Tishrei) or name, e.g. 'Adar II'")
    p.add_argument("day", type=int)
    p.add_argument("--hour", type=int, default=0, help="Hebrew hour (0 = 18:00 the evening before)")
    p.add_argument("--part", type=int, default=0)
    args = p.parse_args(argv)

    month = _parse_hebrew_month(args.month, HebrewYear(args.year).is_leap_year)
    date = CalendarDate.hebrew(month, args.day, args.year, args.hour, args.part)
    print(f"{date.gregorian_date_in_english(with_weekday=True)}  {date.time_in_iso_format(include_seconds=True)}")
    return 0


def cmd_year(argv: list[str]) -> int:
    from caldate import CalendarDate, HebrewMonth, HebrewYear

    p = argparse.ArgumentParser(prog="caldate year", description="Structure of a Hebrew year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    year = HebrewYear(args.year)
    start = CalendarDate.hebrew(HebrewMonth.TISHREI, 1, year.value, hour=6)
    print(f"Year {year}: {'leap' if year.is_leap_year else 'common'}, {year.number_of_days} days ({year.length.english_name})")
    print(f"Rosh Hashanah: {start.hebrew_weekday}, {start.gregorian_date_in_english()}")
    print()
    for month in HebrewMonth.months_of_year(year.is_leap_year):
        first = CalendarDate.hebrew(month, 1, year.value, hour=6)
        days = month.number_of_days(year.length, year.is_leap_year)
        print(f"  {month.ordinal(year.is_leap_year):>2}  {month.english_name:<9} {days} days  from {first.date_in_iso_format()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caldate YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_hebrew(argv)

    p = argparse.ArgumentParser(prog="caldate", description="Hebrew/Gregorian calendar date toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("hebrew", help="Gregorian -> Hebrew date", add_help=False)
    sub.add_parser("gregorian", help="Hebrew -> Gregorian date", add_help=False)
    sub.add_parser("year", help="Structure of a Hebrew year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a Hebrew month grid with Gregorian dates (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print Rosh Hashanah table with postponements (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["year-lengths"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "hebrew":
        return cmd_hebrew(rest)

    if args.cmd == "gregorian":
        return cmd_gregorian(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("caldate.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("caldate.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "year-lengths": "caldate.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
