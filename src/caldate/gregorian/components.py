"""
caldate.gregorian.components
----------------------------
Field types of the proleptic Gregorian calendar (astronomical year numbering:
1 BC is year 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Tuple

from ..core.components import BoundedComponent, EnumerationComponent
from ..core.errors import DecodeError
from ..core.interval import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    CalendarInterval,
)

YEARS_PER_LEAP_YEAR_CYCLE = 400
MONTHS_PER_YEAR = 12


@dataclass(frozen=True, eq=False)
class GregorianYear(BoundedComponent):

    @property
    def is_leap_year(self) -> bool:
        y = self.value
        return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0

    @property
    def number_of_days(self) -> int:
        return 366 if self.is_leap_year else 365

    def in_iso_format(self) -> str:
        y = self.value
        return f"-{-y:04d}" if y < 0 else f"{y:04d}"

    @staticmethod
    def mean_duration() -> CalendarInterval:
        return CalendarInterval(gregorian_leap_year_cycles=Fraction(1, YEARS_PER_LEAP_YEAR_CYCLE))

    @staticmethod
    def minimum_duration() -> CalendarInterval:
        return CalendarInterval(days=365)

    @staticmethod
    def maximum_duration() -> CalendarInterval:
        return CalendarInterval(days=366)


class GregorianMonth(EnumerationComponent):
    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11

    def number_of_days(self, leap_year: bool) -> int:
        if self is GregorianMonth.FEBRUARY:
            return 29 if leap_year else 28
        if self in (GregorianMonth.APRIL, GregorianMonth.JUNE, GregorianMonth.SEPTEMBER, GregorianMonth.NOVEMBER):
            return 30
        return 31

    def in_iso_format(self) -> str:
        return f"{self.ordinal:02d}"

    def to_json(self) -> int:
        return self.ordinal

    @classmethod
    def from_json(cls, value: Any) -> "GregorianMonth":
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"Invalid Gregorian month: {value!r}")
        try:
            return cls.from_ordinal(value)
        except ValueError as e:
            raise DecodeError(f"Invalid Gregorian month: {value!r}") from e

    @staticmethod
    def mean_duration() -> CalendarInterval:
        return GregorianYear.mean_duration() / MONTHS_PER_YEAR

    @staticmethod
    def minimum_duration() -> CalendarInterval:
        return CalendarInterval(days=28)

    @staticmethod
    def maximum_duration() -> CalendarInterval:
        return CalendarInterval(days=31)


@dataclass(frozen=True, eq=False)
class GregorianDay(BoundedComponent):
    valid_range = (1, 32)
    ordinal_based = True

    def correct(self, month: GregorianMonth, year: GregorianYear) -> Tuple["GregorianDay", GregorianMonth, GregorianYear]:
        """Carry a day past the end of its month, e.g. 31 November -> 1 December."""
        day = self.value
        length = month.number_of_days(year.is_leap_year)
        while day > length:
            day -= length
            if month is GregorianMonth.DECEMBER:
                year = year + 1
            month = month.cyclic_successor()
            length = month.number_of_days(year.is_leap_year)
        return GregorianDay(day), month, year

    def in_iso_format(self) -> str:
        return f"{self.value:02d}"


@dataclass(frozen=True, eq=False)
class GregorianHour(BoundedComponent):
    valid_range = (0, HOURS_PER_DAY)

    def in_iso_format(self) -> str:
        return f"{self.value:02d}"

    def in_twelve_hour_format(self) -> int:
        h = self.value % 12
        return 12 if h == 0 else h

    def am_or_pm(self) -> str:
        return "a.m." if self.value < 12 else "p.m."


@dataclass(frozen=True, eq=False)
class GregorianMinute(BoundedComponent):
    valid_range = (0, MINUTES_PER_HOUR)

    def in_iso_format(self) -> str:
        return f"{self.value:02d}"


@dataclass(frozen=True, eq=False)
class GregorianSecond(BoundedComponent):
    """May be fractional; text forms show whole seconds."""
    valid_range = (0, SECONDS_PER_MINUTE)
    integral = False

    def in_iso_format(self) -> str:
        return f"{int(self.value):02d}"


class GregorianWeekday(EnumerationComponent):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
