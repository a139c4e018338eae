"""
caldate.hebrew.molad
--------------------
Start of a Hebrew year: the molad of Tishrei followed by the four dehiyot.

Steps for year Y (intervals measured from the start of the reference year):
  1. months elapsed = whole 19-year cycles x 235 + months of the years already
     elapsed in the current cycle
  2. molad = reference moon offset + months elapsed x one moon
  3. start = molad rounded down to whole days
  4. old moon: molad at or after 18h -> +1 day (and skip step 6)
  5. lo ADU rosh: start falls on Sunday, Wednesday or Friday -> +1 day
  6. gatarad: common year, Tuesday, molad at or after 9h 204p -> +2 days
     betutakpat: Y-1 leap, Monday, molad at or after 15h 589p -> +1 day

The weekday tested in steps 5 and 6 is the one reached after step 4.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from ..core.interval import CalendarInterval
from .params import ONE_DAY, TRADITIONAL, MoladParams

ONE_WEEK = CalendarInterval(weeks=1)

TUESDAY = 2
MONDAY = 1


def is_leap_year(year: int, params: MoladParams = TRADITIONAL) -> bool:
    return (year % params.years_per_cycle) in params.leap_residues


def months_in_year(year: int, params: MoladParams = TRADITIONAL) -> int:
    return 13 if is_leap_year(year, params) else 12


def months_elapsed(year: int, params: MoladParams = TRADITIONAL) -> int:
    """Months from the start of the reference year to the start of `year`."""
    years = year - params.reference_year
    cycles = years // params.years_per_cycle
    cycle_start = params.reference_year + cycles * params.years_per_cycle
    partial = sum(months_in_year(y, params) for y in range(cycle_start, year))
    return cycles * params.months_per_cycle + partial


def weekday_of(start: CalendarInterval, params: MoladParams = TRADITIONAL) -> int:
    """Weekday (Sunday = 0) of a whole-day interval from the reference year's start."""
    return int(((start + CalendarInterval(days=params.reference_weekday)) % ONE_WEEK).in_days)


@dataclass(frozen=True)
class NewYear:
    year: int
    molad: CalendarInterval
    start: CalendarInterval
    postponements: Tuple[str, ...]

    @property
    def weekday(self) -> int:
        return weekday_of(self.start)

    @property
    def days_postponed(self) -> int:
        return int((self.start - self.molad.rounded_down(ONE_DAY)).in_days)


@lru_cache(maxsize=8192)
def new_year(year: int, params: MoladParams = TRADITIONAL) -> NewYear:
    molad = params.reference_moon_offset + params.moon * months_elapsed(year, params)
    start = molad.rounded_down(ONE_DAY)
    into_day = molad % ONE_DAY
    applied = []

    old_moon = into_day >= params.old_moon_threshold
    if old_moon:
        start += ONE_DAY
        applied.append("molad zaken")

    weekday = weekday_of(start, params)
    if weekday in params.postponed_weekdays:
        start += ONE_DAY
        applied.append("lo ADU rosh")

    if not old_moon:
        if (not is_leap_year(year, params)) and weekday == TUESDAY and into_day >= params.tuesday_threshold:
            start += CalendarInterval(days=2)
            applied.append("gatarad")
        elif is_leap_year(year - 1, params) and weekday == MONDAY and into_day >= params.monday_threshold:
            start += ONE_DAY
            applied.append("betutakpat")

    return NewYear(year=year, molad=molad, start=start, postponements=tuple(applied))


def start_of_year(year: int, params: MoladParams = TRADITIONAL) -> CalendarInterval:
    """Interval from the start of the reference year to 1 Tishrei of `year`, hour 0."""
    return new_year(year, params).start


def days_in_year(year: int, params: MoladParams = TRADITIONAL) -> int:
    return int((start_of_year(year + 1, params) - start_of_year(year, params)).in_days)
