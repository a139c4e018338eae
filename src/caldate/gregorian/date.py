"""
caldate.gregorian.date
----------------------
GregorianDate and GregorianWeekdayDate.

Intervals are measured from 1 January 2001 00:00 (6 Tevet 5761, hour 6).
2001 opens a 400-year leap cycle, so the start of any year is a whole number
of cycles plus the days of the years remaining in the current cycle.
"""

from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from typing import Any

from ..core._search import find_enclosing_index
from ..core.date import CalendarDate
from ..core.definition import decode_fields, encode_fields
from ..core.errors import DecodeError, OutOfRangeError, UnsupportedOperationError
from ..core.interval import CalendarInterval
from ..hebrew.components import HebrewMonth
from .components import (
    YEARS_PER_LEAP_YEAR_CYCLE,
    GregorianDay,
    GregorianHour,
    GregorianMinute,
    GregorianMonth,
    GregorianSecond,
    GregorianWeekday,
    GregorianYear,
)

REFERENCE_YEAR = 2001


@lru_cache(maxsize=4096)
def start_of_year(year: int) -> CalendarInterval:
    cycles = (year - REFERENCE_YEAR) // YEARS_PER_LEAP_YEAR_CYCLE
    first_remaining = REFERENCE_YEAR + cycles * YEARS_PER_LEAP_YEAR_CYCLE
    days = sum(GregorianYear(y).number_of_days for y in range(first_remaining, year))
    return CalendarInterval(gregorian_leap_year_cycles=cycles, days=days)


def start_of_month(month: GregorianMonth, leap_year: bool) -> CalendarInterval:
    days = sum(m.number_of_days(leap_year) for m in GregorianMonth if m < month)
    return CalendarInterval(days=days)


def _split_time(remainder: CalendarInterval):
    hours = int(remainder.in_hours // 1)
    remainder -= CalendarInterval(hours=hours)
    minutes = int(remainder.in_minutes // 1)
    remainder -= CalendarInterval(minutes=minutes)
    return hours, minutes, remainder.in_seconds


class GregorianDate:
    identifier = "gregoriano"

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_interval")

    def __init__(self, month: GregorianMonth, day: Any, year: Any, hour: Any = 0, minute: Any = 0, second: Any = 0) -> None:
        day, month, year = GregorianDay.of(day).correct(month, GregorianYear.of(year))
        self._year = year
        self._month = month
        self._day = day
        self._hour = GregorianHour.of(hour)
        self._minute = GregorianMinute.of(minute)
        self._second = GregorianSecond.of(second)
        self._interval = (
            start_of_year(year.value)
            + start_of_month(month, year.is_leap_year)
            + CalendarInterval(
                days=day.number_already_elapsed,
                hours=self._hour.value,
                minutes=self._minute.value,
                seconds=self._second.value,
            )
        )

    @property
    def year(self) -> GregorianYear:
        return self._year

    @property
    def month(self) -> GregorianMonth:
        return self._month

    @property
    def day(self) -> GregorianDay:
        return self._day

    @property
    def hour(self) -> GregorianHour:
        return self._hour

    @property
    def minute(self) -> GregorianMinute:
        return self._minute

    @property
    def second(self) -> GregorianSecond:
        return self._second

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return _reference()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return self._interval

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "GregorianDate":
        guess = REFERENCE_YEAR + round(interval / GregorianYear.mean_duration())
        year = GregorianYear(find_enclosing_index(start_of_year, interval, guess=guess))
        remainder = interval - start_of_year(year.value)

        month = None
        for m in GregorianMonth:
            length = CalendarInterval(days=m.number_of_days(year.is_leap_year))
            if remainder < length:
                month = m
                break
            remainder -= length
        if month is None:
            raise OutOfRangeError(f"Interval {interval} overruns year {year}")

        days = int(remainder.in_days // 1)
        hours, minutes, seconds = _split_time(remainder - CalendarInterval(days=days))
        return cls(month, days + 1, year, hours, minutes, seconds)

    def encode_payload(self) -> str:
        return encode_fields([
            self._year.value,
            self._month.to_json(),
            self._day.value,
            self._hour.value,
            self._minute.value,
            self._second.to_json(),
        ])

    @classmethod
    def decode_payload(cls, payload: str) -> "GregorianDate":
        year, month, day, hour, minute, second = decode_fields(payload, length=6)
        try:
            if isinstance(second, str):
                second = Fraction(second)
            return cls(GregorianMonth.from_json(month), day, year, hour, minute, second)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise DecodeError(f"Invalid Gregorian date payload {payload!r}: {e}") from e

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._interval == other._interval

    def __hash__(self) -> int:
        return hash(self._interval)

    def __repr__(self) -> str:
        return (
            f"GregorianDate({self._month.name}, {self._day.value}, {self._year.value}, "
            f"hour={self._hour.value}, minute={self._minute.value}, second={self._second.to_json()})"
        )

    def __str__(self) -> str:
        return (
            f"{self._year.in_iso_format()}-{self._month.in_iso_format()}-{self._day.in_iso_format()} "
            f"{self._hour.in_iso_format()}:{self._minute.in_iso_format()}:{self._second.in_iso_format()}"
        )


class GregorianWeekdayDate:
    """Weeks and weekday since Sunday 7 January 2001; never serialized."""

    identifier = "settimana gregoriana"

    __slots__ = ("_week", "_weekday", "_hour", "_minute", "_second")

    def __init__(self, week: int, weekday: GregorianWeekday, hour: Any = 0, minute: Any = 0, second: Any = 0) -> None:
        self._week = int(week)
        self._weekday = weekday
        self._hour = GregorianHour.of(hour)
        self._minute = GregorianMinute.of(minute)
        self._second = GregorianSecond.of(second)

    @property
    def week(self) -> int:
        return self._week

    @property
    def weekday(self) -> GregorianWeekday:
        return self._weekday

    @property
    def hour(self) -> GregorianHour:
        return self._hour

    @property
    def minute(self) -> GregorianMinute:
        return self._minute

    @property
    def second(self) -> GregorianSecond:
        return self._second

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return _weekday_reference()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return CalendarInterval(
            weeks=self._week,
            days=self._weekday.number_already_elapsed,
            hours=self._hour.value,
            minutes=self._minute.value,
            seconds=self._second.value,
        )

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "GregorianWeekdayDate":
        week = int(interval.in_weeks // 1)
        remainder = interval - CalendarInterval(weeks=week)
        days = int(remainder.in_days // 1)
        hours, minutes, seconds = _split_time(remainder - CalendarInterval(days=days))
        return cls(week, GregorianWeekday(days), hours, minutes, seconds)

    def encode_payload(self) -> str:
        raise UnsupportedOperationError("Weekday dates are transient and cannot be encoded")

    @classmethod
    def decode_payload(cls, payload: str) -> "GregorianWeekdayDate":
        raise UnsupportedOperationError("Weekday dates are transient and cannot be decoded")

    def __repr__(self) -> str:
        return f"GregorianWeekdayDate(week={self._week}, {self._weekday.name})"


@lru_cache(maxsize=1)
def _reference() -> CalendarDate:
    return CalendarDate.hebrew(HebrewMonth.TEVET, 6, 5761, hour=6)


@lru_cache(maxsize=1)
def _weekday_reference() -> CalendarDate:
    return CalendarDate(GregorianDate(GregorianMonth.JANUARY, 7, 2001))
