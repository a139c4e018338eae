"""
caldate.hebrew.components
-------------------------
Field types of the Hebrew calendar.

Month order depends on the year: a common year has Adar, a leap year has
Adar I and Adar II instead. HebrewMonth therefore takes `leap_year` in every
ordering operation, and HebrewMonthAndYear re-derives it at each step.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, List, Optional, Tuple

from ..core.components import BoundedComponent, EnumerationComponent
from ..core.errors import CalendarInvariantError, ComponentRangeError, DecodeError
from ..core.interval import HEBREW_PARTS_PER_HOUR, HOURS_PER_DAY, CalendarInterval
from .molad import days_in_year, is_leap_year, months_in_year
from .params import TRADITIONAL


# ---------------------------------------------------------
# Year
# ---------------------------------------------------------

class HebrewYearLength(Enum):
    DEFICIENT = "deficient"
    NORMAL = "normal"
    WHOLE = "whole"

    @classmethod
    def from_number_of_days(cls, days: int) -> "HebrewYearLength":
        try:
            return _LENGTHS_BY_DAYS[days]
        except KeyError:
            raise CalendarInvariantError(f"A Hebrew year cannot have {days} days") from None

    @property
    def english_name(self) -> str:
        return self.name.title()


_LENGTHS_BY_DAYS = {
    353: HebrewYearLength.DEFICIENT,
    354: HebrewYearLength.NORMAL,
    355: HebrewYearLength.WHOLE,
    383: HebrewYearLength.DEFICIENT,
    384: HebrewYearLength.NORMAL,
    385: HebrewYearLength.WHOLE,
}
MINIMUM_DAYS_PER_YEAR = min(_LENGTHS_BY_DAYS)
MAXIMUM_DAYS_PER_YEAR = max(_LENGTHS_BY_DAYS)


@dataclass(frozen=True, eq=False)
class HebrewYear(BoundedComponent):
    """Year of the world (anno mundi). Unbounded."""

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.value)

    @property
    def number_of_months(self) -> int:
        return months_in_year(self.value)

    @property
    def number_of_days(self) -> int:
        return days_in_year(self.value)

    @property
    def length(self) -> HebrewYearLength:
        return HebrewYearLength.from_number_of_days(self.number_of_days)

    @staticmethod
    def mean_duration() -> CalendarInterval:
        return TRADITIONAL.mean_year

    @staticmethod
    def minimum_duration() -> CalendarInterval:
        return CalendarInterval(days=MINIMUM_DAYS_PER_YEAR)

    @staticmethod
    def maximum_duration() -> CalendarInterval:
        return CalendarInterval(days=MAXIMUM_DAYS_PER_YEAR)


# ---------------------------------------------------------
# Month
# ---------------------------------------------------------

class HebrewMonth(Enum):
    TISHREI = 0
    CHESHVAN = 1
    KISLEV = 2
    TEVET = 3
    SHEVAT = 4
    ADAR_I = 5
    ADAR = 6
    ADAR_II = 7
    NISAN = 8
    IYAR = 9
    SIVAN = 10
    TAMMUZ = 11
    AV = 12
    ELUL = 13

    # ----- membership -----

    def is_valid_in(self, leap_year: bool) -> bool:
        if self is HebrewMonth.ADAR:
            return not leap_year
        if self in (HebrewMonth.ADAR_I, HebrewMonth.ADAR_II):
            return leap_year
        return True

    def corrected_for_year(self, leap_year: bool) -> "HebrewMonth":
        """Adar <-> Adar II, Adar I -> Adar, so the month exists in the year."""
        if leap_year:
            return HebrewMonth.ADAR_II if self is HebrewMonth.ADAR else self
        if self in (HebrewMonth.ADAR_I, HebrewMonth.ADAR_II):
            return HebrewMonth.ADAR
        return self

    @classmethod
    def months_of_year(cls, leap_year: bool) -> List["HebrewMonth"]:
        return [m for m in cls if m.is_valid_in(leap_year)]

    # ----- order -----

    def successor(self, leap_year: bool) -> Optional["HebrewMonth"]:
        if self is HebrewMonth.SHEVAT:
            return HebrewMonth.ADAR_I if leap_year else HebrewMonth.ADAR
        if self is HebrewMonth.ADAR_I:
            return HebrewMonth.ADAR_II
        if self in (HebrewMonth.ADAR, HebrewMonth.ADAR_II):
            return HebrewMonth.NISAN
        if self is HebrewMonth.ELUL:
            return None
        return HebrewMonth(self.value + 1)

    def predecessor(self, leap_year: bool) -> Optional["HebrewMonth"]:
        if self is HebrewMonth.NISAN:
            return HebrewMonth.ADAR_II if leap_year else HebrewMonth.ADAR
        if self is HebrewMonth.ADAR_II:
            return HebrewMonth.ADAR_I
        if self in (HebrewMonth.ADAR, HebrewMonth.ADAR_I):
            return HebrewMonth.SHEVAT
        if self is HebrewMonth.TISHREI:
            return None
        return HebrewMonth(self.value - 1)

    def cyclic_successor(self, leap_year: bool) -> Tuple["HebrewMonth", bool]:
        """(next month, whether the year wrapped)."""
        nxt = self.successor(leap_year)
        if nxt is None:
            return HebrewMonth.TISHREI, True
        return nxt, False

    def cyclic_predecessor(self, leap_year: bool) -> Tuple["HebrewMonth", bool]:
        prev = self.predecessor(leap_year)
        if prev is None:
            return HebrewMonth.ELUL, True
        return prev, False

    def ordinal(self, leap_year: bool) -> Optional[int]:
        """Position in the year (Tishrei = 1); None if the month does not exist that year."""
        if self.value <= HebrewMonth.SHEVAT.value:
            return self.value + 1
        if leap_year:
            if self is HebrewMonth.ADAR:
                return None
            if self is HebrewMonth.ADAR_I:
                return 6
            if self is HebrewMonth.ADAR_II:
                return 7
            return self.value
        if self is HebrewMonth.ADAR:
            return 6
        if self in (HebrewMonth.ADAR_I, HebrewMonth.ADAR_II):
            return None
        return self.value - 1

    def number_already_elapsed(self, leap_year: bool) -> Optional[int]:
        n = self.ordinal(leap_year)
        return None if n is None else n - 1

    @classmethod
    def from_ordinal(cls, ordinal: int, leap_year: bool) -> "HebrewMonth":
        months = cls.months_of_year(leap_year)
        if not (1 <= ordinal <= len(months)):
            raise ComponentRangeError(f"Month ordinal {ordinal} does not exist in a {'leap' if leap_year else 'common'} year")
        return months[ordinal - 1]

    # ----- duration -----

    def number_of_days(self, year_length: HebrewYearLength, leap_year: bool) -> int:
        if self in _THIRTY_DAY_MONTHS:
            return 30
        if self in _TWENTY_NINE_DAY_MONTHS:
            return 29
        if self is HebrewMonth.CHESHVAN:
            return 30 if year_length is HebrewYearLength.WHOLE else 29
        if self is HebrewMonth.KISLEV:
            return 29 if year_length is HebrewYearLength.DEFICIENT else 30
        if self is HebrewMonth.ADAR:
            return 0 if leap_year else 29
        if self is HebrewMonth.ADAR_I:
            return 30 if leap_year else 0
        # Adar II
        return 29 if leap_year else 0

    @staticmethod
    def mean_duration() -> CalendarInterval:
        return CalendarInterval(hebrew_moons=1)

    @staticmethod
    def minimum_duration() -> CalendarInterval:
        return CalendarInterval(days=29)

    @staticmethod
    def maximum_duration() -> CalendarInterval:
        return CalendarInterval(days=MAXIMUM_DAYS_PER_MONTH)

    # ----- text -----

    @property
    def english_name(self) -> str:
        return _ENGLISH_NAMES[self]

    def __str__(self) -> str:
        return self.english_name

    def to_json(self) -> str:
        if self is HebrewMonth.ADAR_I:
            return "6א"
        if self is HebrewMonth.ADAR_II:
            return "6ב"
        return str(self.ordinal(False))

    @classmethod
    def from_json(cls, value: Any) -> "HebrewMonth":
        if value == "6א":
            return cls.ADAR_I
        if value == "6ב":
            return cls.ADAR_II
        if isinstance(value, bool):
            raise DecodeError(f"Invalid Hebrew month: {value!r}")
        try:
            return cls.from_ordinal(int(value), False)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid Hebrew month: {value!r}") from e


_THIRTY_DAY_MONTHS = frozenset({HebrewMonth.TISHREI, HebrewMonth.SHEVAT, HebrewMonth.NISAN, HebrewMonth.SIVAN, HebrewMonth.AV})
_TWENTY_NINE_DAY_MONTHS = frozenset({HebrewMonth.TEVET, HebrewMonth.IYAR, HebrewMonth.TAMMUZ, HebrewMonth.ELUL})
MAXIMUM_DAYS_PER_MONTH = 30

_ENGLISH_NAMES = {
    HebrewMonth.TISHREI: "Tishrei",
    HebrewMonth.CHESHVAN: "Cheshvan",
    HebrewMonth.KISLEV: "Kislev",
    HebrewMonth.TEVET: "Tevet",
    HebrewMonth.SHEVAT: "Shevat",
    HebrewMonth.ADAR_I: "Adar I",
    HebrewMonth.ADAR: "Adar",
    HebrewMonth.ADAR_II: "Adar II",
    HebrewMonth.NISAN: "Nisan",
    HebrewMonth.IYAR: "Iyar",
    HebrewMonth.SIVAN: "Sivan",
    HebrewMonth.TAMMUZ: "Tammuz",
    HebrewMonth.AV: "Av",
    HebrewMonth.ELUL: "Elul",
}


def month_length(month: HebrewMonth, year: HebrewYear) -> int:
    return month.number_of_days(year.length, year.is_leap_year)


# ---------------------------------------------------------
# Day, hour, part
# ---------------------------------------------------------

@dataclass(frozen=True, eq=False)
class HebrewDay(BoundedComponent):
    valid_range = (1, MAXIMUM_DAYS_PER_MONTH + 1)
    ordinal_based = True

    def correct(self, month: HebrewMonth, year: HebrewYear) -> Tuple["HebrewDay", HebrewMonth, HebrewYear]:
        """
        Carry a day past the end of its month into the following month(s).

        HebrewDay(30) in a 29-day Adar becomes 1 Nisan; in Elul it becomes
        1 Tishrei of the next year.
        """
        day = self.value
        month = month.corrected_for_year(year.is_leap_year)
        length = month_length(month, year)
        while day > length:
            day -= length
            month, wrapped = month.cyclic_successor(year.is_leap_year)
            if wrapped:
                year = year + 1
            length = month_length(month, year)
        return HebrewDay(day), month, year

    @staticmethod
    def duration() -> CalendarInterval:
        return CalendarInterval(days=1)


@dataclass(frozen=True, eq=False)
class HebrewHour(BoundedComponent):
    """Hours since 18:00 of the preceding civil evening (hour 6 is midnight)."""
    valid_range = (0, HOURS_PER_DAY)

    @staticmethod
    def duration() -> CalendarInterval:
        return CalendarInterval(hours=1)


@dataclass(frozen=True, eq=False)
class HebrewPart(BoundedComponent):
    """Parts (halakim) into the hour; may be fractional."""
    valid_range = (0, HEBREW_PARTS_PER_HOUR)
    integral = False

    def __str__(self) -> str:
        v = self.value
        return str(v.numerator) if v.denominator == 1 else str(v)

    @staticmethod
    def duration() -> CalendarInterval:
        return CalendarInterval(hebrew_parts=1)


class HebrewWeekday(EnumerationComponent):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# ---------------------------------------------------------
# Month and year
# ---------------------------------------------------------

class HebrewMonthAndYear:
    """A month within a particular year; steps one month at a time."""

    __slots__ = ("month", "year")

    def __init__(self, month: HebrewMonth, year: Any) -> None:
        year = HebrewYear.of(year)
        self.month = month.corrected_for_year(year.is_leap_year)
        self.year = year

    def _key(self) -> Tuple[int, int]:
        return (self.year.value, self.month.value)

    def successor(self) -> "HebrewMonthAndYear":
        month, wrapped = self.month.cyclic_successor(self.year.is_leap_year)
        return HebrewMonthAndYear(month, self.year + 1 if wrapped else self.year)

    def predecessor(self) -> "HebrewMonthAndYear":
        month, wrapped = self.month.cyclic_predecessor(self.year.is_leap_year)
        return HebrewMonthAndYear(month, self.year - 1 if wrapped else self.year)

    @property
    def number_of_days(self) -> int:
        return month_length(self.month, self.year)

    def __add__(self, steps: Any) -> "HebrewMonthAndYear":
        if not isinstance(steps, int) or isinstance(steps, bool):
            return NotImplemented
        point = self
        for _ in range(abs(steps)):
            point = point.successor() if steps > 0 else point.predecessor()
        return point

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, HebrewMonthAndYear):
            distance = 0
            point = other
            while point != self:
                if point < self:
                    point = point.successor()
                    distance += 1
                else:
                    point = point.predecessor()
                    distance -= 1
            return distance
        if isinstance(other, int) and not isinstance(other, bool):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HebrewMonthAndYear):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "HebrewMonthAndYear") -> bool:
        if not isinstance(other, HebrewMonthAndYear):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: "HebrewMonthAndYear") -> bool:
        if not isinstance(other, HebrewMonthAndYear):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: "HebrewMonthAndYear") -> bool:
        if not isinstance(other, HebrewMonthAndYear):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: "HebrewMonthAndYear") -> bool:
        if not isinstance(other, HebrewMonthAndYear):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self.month} {self.year}"

    def __repr__(self) -> str:
        return f"HebrewMonthAndYear({self.month.name}, {self.year.value})"

    def to_json(self) -> List[Any]:
        return [self.month.to_json(), self.year.value]

    @classmethod
    def from_json(cls, value: Any) -> "HebrewMonthAndYear":
        if not isinstance(value, list) or len(value) != 2 or not isinstance(value[1], int):
            raise DecodeError(f"Expected [month, year], got {value!r}")
        return cls(HebrewMonth.from_json(value[0]), value[1])


def hebrew_part_of(value: Any) -> HebrewPart:
    return value if isinstance(value, HebrewPart) else HebrewPart(Fraction(value) if isinstance(value, str) else value)
