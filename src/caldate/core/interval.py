"""
caldate.core.interval
---------------------
Exact calendar durations.

Every duration is stored as a rational count of one integral unit, chosen as
the least common multiple of Hebrew parts per day (24 x 1080) and seconds per
day (86 400). With that base, days, hours, minutes, seconds, weeks, Hebrew
parts, Hebrew moons and Gregorian leap-year cycles are all exact multiples of
the unit, so converting between them never drifts.

Seconds are calendar seconds (1/86400 of a day); leap seconds do not exist here.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering
from typing import Any, List, Union

from .errors import CalendarArithmeticError, DecodeError

NumT = Union[int, float, Fraction, Decimal]

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
DAYS_PER_WEEK = 7
HEBREW_PARTS_PER_HOUR = 1080
GREGORIAN_DAYS_PER_LEAP_YEAR_CYCLE = 146097

HEBREW_PARTS_PER_DAY = HOURS_PER_DAY * HEBREW_PARTS_PER_HOUR
SECONDS_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR * SECONDS_PER_MINUTE

UNITS_PER_DAY = math.lcm(HEBREW_PARTS_PER_DAY, SECONDS_PER_DAY)
UNITS_PER_WEEK = UNITS_PER_DAY * DAYS_PER_WEEK
UNITS_PER_HOUR = UNITS_PER_DAY // HOURS_PER_DAY
UNITS_PER_MINUTE = UNITS_PER_HOUR // MINUTES_PER_HOUR
UNITS_PER_SECOND = UNITS_PER_MINUTE // SECONDS_PER_MINUTE
UNITS_PER_HEBREW_PART = UNITS_PER_HOUR // HEBREW_PARTS_PER_HOUR
# 29 days, 12 hours, 793 parts
UNITS_PER_HEBREW_MOON = 29 * UNITS_PER_DAY + 12 * UNITS_PER_HOUR + 793 * UNITS_PER_HEBREW_PART
UNITS_PER_GREGORIAN_LEAP_YEAR_CYCLE = GREGORIAN_DAYS_PER_LEAP_YEAR_CYCLE * UNITS_PER_DAY


def to_scalar(value: NumT) -> Fraction:
    """Exact conversion of a number to the scalar type (Fraction)."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a calendar scalar")
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CalendarArithmeticError(f"Non-finite scalar: {value!r}")
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise CalendarArithmeticError(f"Non-finite scalar: {value!r}")
        return Fraction(value)
    raise TypeError(f"Unsupported scalar type: {type(value).__name__}")


def _decimal_string(x: Fraction, places: int) -> str:
    scaled = round(x * 10 ** places)
    sign = "-" if scaled < 0 else ""
    whole, frac = divmod(abs(scaled), 10 ** places)
    digits = str(frac).rjust(places, "0").rstrip("0")
    return f"{sign}{whole}.{digits}" if digits else f"{sign}{whole}"


@total_ordering
class CalendarInterval:
    """
    A time interval measured in exact integral units.

    Construct from any combination of units; the amounts are summed:

        CalendarInterval(days=29, hours=12, hebrew_parts=793)
    """

    __slots__ = ("_units",)

    def __init__(
        self,
        *,
        weeks: NumT = 0,
        days: NumT = 0,
        hours: NumT = 0,
        minutes: NumT = 0,
        seconds: NumT = 0,
        hebrew_parts: NumT = 0,
        hebrew_moons: NumT = 0,
        gregorian_leap_year_cycles: NumT = 0,
    ) -> None:
        units = Fraction(0)
        for amount, per in (
            (weeks, UNITS_PER_WEEK),
            (days, UNITS_PER_DAY),
            (hours, UNITS_PER_HOUR),
            (minutes, UNITS_PER_MINUTE),
            (seconds, UNITS_PER_SECOND),
            (hebrew_parts, UNITS_PER_HEBREW_PART),
            (hebrew_moons, UNITS_PER_HEBREW_MOON),
            (gregorian_leap_year_cycles, UNITS_PER_GREGORIAN_LEAP_YEAR_CYCLE),
        ):
            if amount:
                units += to_scalar(amount) * per
        self._units = units

    @classmethod
    def from_units(cls, units: NumT) -> "CalendarInterval":
        out = cls.__new__(cls)
        out._units = to_scalar(units)
        return out

    # ---------------------------------------------------------
    # Read-back in each unit
    # ---------------------------------------------------------

    @property
    def in_units(self) -> Fraction:
        return self._units

    @property
    def in_weeks(self) -> Fraction:
        return self._units / UNITS_PER_WEEK

    @property
    def in_days(self) -> Fraction:
        return self._units / UNITS_PER_DAY

    @property
    def in_hours(self) -> Fraction:
        return self._units / UNITS_PER_HOUR

    @property
    def in_minutes(self) -> Fraction:
        return self._units / UNITS_PER_MINUTE

    @property
    def in_seconds(self) -> Fraction:
        return self._units / UNITS_PER_SECOND

    @property
    def in_hebrew_parts(self) -> Fraction:
        return self._units / UNITS_PER_HEBREW_PART

    @property
    def in_hebrew_moons(self) -> Fraction:
        return self._units / UNITS_PER_HEBREW_MOON

    @property
    def in_gregorian_leap_year_cycles(self) -> Fraction:
        return self._units / UNITS_PER_GREGORIAN_LEAP_YEAR_CYCLE

    @property
    def is_negative(self) -> bool:
        return self._units < 0

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: Any) -> "CalendarInterval":
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarInterval.from_units(self._units + other._units)

    def __sub__(self, other: Any) -> "CalendarInterval":
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarInterval.from_units(self._units - other._units)

    def __neg__(self) -> "CalendarInterval":
        return CalendarInterval.from_units(-self._units)

    def __pos__(self) -> "CalendarInterval":
        return self

    def __abs__(self) -> "CalendarInterval":
        return CalendarInterval.from_units(abs(self._units))

    def __mul__(self, other: Any) -> "CalendarInterval":
        if isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarInterval.from_units(self._units * to_scalar(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Union["CalendarInterval", Fraction]:
        if isinstance(other, CalendarInterval):
            if other._units == 0:
                raise CalendarArithmeticError("Division by a zero interval")
            return self._units / other._units
        divisor = to_scalar(other)
        if divisor == 0:
            raise CalendarArithmeticError("Division of an interval by zero")
        return CalendarInterval.from_units(self._units / divisor)

    def __floordiv__(self, other: Any) -> int:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        if other._units == 0:
            raise CalendarArithmeticError("Division by a zero interval")
        return self._units // other._units

    def __mod__(self, other: Any) -> "CalendarInterval":
        """Euclidean remainder; lies in [0, other) for a positive divisor."""
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        if other._units == 0:
            raise CalendarArithmeticError("Modulo by a zero interval")
        return CalendarInterval.from_units(self._units % other._units)

    def rounded_down(self, to_multiple_of: "CalendarInterval") -> "CalendarInterval":
        return self - self % to_multiple_of

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return self._units == other._units

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return self._units < other._units

    def __hash__(self) -> int:
        return hash(self._units)

    def __bool__(self) -> bool:
        return self._units != 0

    # ---------------------------------------------------------
    # Serialization
    # ---------------------------------------------------------

    def to_json(self) -> List[Any]:
        """[units, units_per_day]; units is an int when integral, else a 'p/q' string."""
        units: Any = self._units.numerator if self._units.denominator == 1 else str(self._units)
        return [units, UNITS_PER_DAY]

    @classmethod
    def from_json(cls, value: Any) -> "CalendarInterval":
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise DecodeError(f"Expected [units, units_per_day], got {value!r}")
        raw, per_day = value
        if isinstance(per_day, bool) or not isinstance(per_day, int) or per_day <= 0:
            raise DecodeError(f"Invalid units per day: {per_day!r}")
        try:
            units = Fraction(raw) if isinstance(raw, str) else to_scalar(raw)
        except (TypeError, ValueError, ZeroDivisionError, CalendarArithmeticError) as e:
            raise DecodeError(f"Invalid unit count: {raw!r}") from e
        return cls(days=units / per_day)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def __str__(self) -> str:
        if self._units == UNITS_PER_DAY:
            return "1 day"
        places = len(str(UNITS_PER_DAY)) + 1
        return f"{_decimal_string(self.in_days, places)} days"

    def __repr__(self) -> str:
        return f"CalendarInterval(days={self.in_days})"
