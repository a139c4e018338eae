"""
caldate.hebrew.date
-------------------
HebrewDate: the definition every CalendarDate is ultimately measured in.

Its intervals are absolute (measured from the epoch, 1 Tishrei 5758 at hour
0), so it has no reference date of its own.

Forward (fields -> interval):
  start of year (molad + dehiyot) + start of month + elapsed days/hours/parts
Inverse (interval -> fields):
  walk from the mean-year estimate to the enclosing year, then scan the
  months of that year, then split the remainder into day/hour/part.
"""

from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from typing import Any

from ..core._search import find_enclosing_index
from ..core.date import CalendarDate
from ..core.definition import decode_fields, encode_fields
from ..core.errors import ComponentRangeError, DecodeError, OutOfRangeError, UnsupportedOperationError
from ..core.interval import CalendarInterval
from .components import (
    HebrewDay,
    HebrewHour,
    HebrewMonth,
    HebrewPart,
    HebrewWeekday,
    HebrewYear,
    hebrew_part_of,
    month_length,
)
from .molad import start_of_year
from .params import TRADITIONAL


def start_of_month(month: HebrewMonth, year: HebrewYear) -> CalendarInterval:
    """Interval from 1 Tishrei to the first day of `month` in `year`."""
    days = 0
    for m in HebrewMonth.months_of_year(year.is_leap_year):
        if m is month:
            return CalendarInterval(days=days)
        days += month_length(m, year)
    raise ComponentRangeError(f"{month} does not occur in year {year}")


class HebrewDate:
    identifier = "עברי"
    measures_from_epoch = True

    __slots__ = ("_year", "_month", "_day", "_hour", "_part", "_interval")

    def __init__(self, month: HebrewMonth, day: Any, year: Any, hour: Any = 0, part: Any = 0) -> None:
        year = HebrewYear.of(year)
        day, month, year = HebrewDay.of(day).correct(month, year)
        self._year = year
        self._month = month
        self._day = day
        self._hour = HebrewHour.of(hour)
        self._part = hebrew_part_of(part)
        self._interval = (
            start_of_year(year.value)
            + start_of_month(month, year)
            + CalendarInterval(days=day.number_already_elapsed, hours=self._hour.value, hebrew_parts=self._part.value)
        )

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def year(self) -> HebrewYear:
        return self._year

    @property
    def month(self) -> HebrewMonth:
        return self._month

    @property
    def day(self) -> HebrewDay:
        return self._day

    @property
    def hour(self) -> HebrewHour:
        return self._hour

    @property
    def part(self) -> HebrewPart:
        return self._part

    # ---------------------------------------------------------
    # DateDefinition
    # ---------------------------------------------------------

    @classmethod
    def reference_date(cls) -> CalendarDate:
        raise UnsupportedOperationError("HebrewDate measures from the epoch itself and has no reference date")

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return self._interval

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "HebrewDate":
        guess = TRADITIONAL.reference_year + round(interval / TRADITIONAL.mean_year)
        year_number = find_enclosing_index(start_of_year, interval, guess=guess)
        year = HebrewYear(year_number)
        remainder = interval - start_of_year(year_number)

        month = None
        for m in HebrewMonth.months_of_year(year.is_leap_year):
            length = CalendarInterval(days=month_length(m, year))
            if remainder < length:
                month = m
                break
            remainder -= length
        if month is None:
            raise OutOfRangeError(f"Interval {interval} overruns year {year}")

        days = int(remainder.in_days // 1)
        remainder -= CalendarInterval(days=days)
        hours = int(remainder.in_hours // 1)
        remainder -= CalendarInterval(hours=hours)
        return cls(month, days + 1, year, hours, remainder.in_hebrew_parts)

    def encode_payload(self) -> str:
        return encode_fields([self._year.value, self._month.to_json(), self._day.value, self._hour.value, self._part.to_json()])

    @classmethod
    def decode_payload(cls, payload: str) -> "HebrewDate":
        year, month, day, hour, part = decode_fields(payload, length=5)
        try:
            return cls(HebrewMonth.from_json(month), day, year, hour, part)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise DecodeError(f"Invalid Hebrew date payload {payload!r}: {e}") from e

    # ---------------------------------------------------------
    # Value behaviour
    # ---------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self._interval == other._interval

    def __hash__(self) -> int:
        return hash(self._interval)

    def __repr__(self) -> str:
        return f"HebrewDate({self._month.name}, {self._day.value}, {self._year.value}, hour={self._hour.value}, part={self._part})"

    def __str__(self) -> str:
        return f"{self._day.value} {self._month} {self._year.value} {self._hour.value}h {self._part}p"


class HebrewWeekdayDate:
    """
    Weeks, weekday, hour and part since a fixed Sunday (4 Tishrei 5758).

    Used to answer weekday queries; never serialized.
    """

    identifier = "שבוע עברי"

    __slots__ = ("_week", "_weekday", "_hour", "_part")

    def __init__(self, week: int, weekday: HebrewWeekday, hour: Any = 0, part: Any = 0) -> None:
        self._week = int(week)
        self._weekday = weekday
        self._hour = HebrewHour.of(hour)
        self._part = hebrew_part_of(part)

    @property
    def week(self) -> int:
        return self._week

    @property
    def weekday(self) -> HebrewWeekday:
        return self._weekday

    @property
    def hour(self) -> HebrewHour:
        return self._hour

    @property
    def part(self) -> HebrewPart:
        return self._part

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return _weekday_reference()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return CalendarInterval(
            weeks=self._week,
            days=self._weekday.number_already_elapsed,
            hours=self._hour.value,
            hebrew_parts=self._part.value,
        )

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "HebrewWeekdayDate":
        week = int(interval.in_weeks // 1)
        remainder = interval - CalendarInterval(weeks=week)
        days = int(remainder.in_days // 1)
        remainder -= CalendarInterval(days=days)
        hours = int(remainder.in_hours // 1)
        remainder -= CalendarInterval(hours=hours)
        return cls(week, HebrewWeekday(days), hours, Fraction(remainder.in_hebrew_parts))

    def encode_payload(self) -> str:
        raise UnsupportedOperationError("Weekday dates are transient and cannot be encoded")

    @classmethod
    def decode_payload(cls, payload: str) -> "HebrewWeekdayDate":
        raise UnsupportedOperationError("Weekday dates are transient and cannot be decoded")

    def __repr__(self) -> str:
        return f"HebrewWeekdayDate(week={self._week}, {self._weekday.name}, hour={self._hour.value}, part={self._part})"


@lru_cache(maxsize=1)
def _weekday_reference() -> CalendarDate:
    return CalendarDate(HebrewDate(HebrewMonth.TISHREI, 4, 5758))
