"""
caldate.core.date
-----------------
CalendarDate: one instant, held in whichever calendar it was created with.

Equality, ordering, hashing and subtraction only look at the instant (the
interval since the epoch, 1 Tishrei 5758 at hour 0). Field queries convert
to the owning calendar on first use and memoize the result per definition
type. Values never change after construction; `date + interval` returns a new
CalendarDate whose cache starts empty.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from functools import lru_cache, total_ordering
from typing import TYPE_CHECKING, Any, Dict, List, Type, TypeVar

from .definition import DateDefinition, measures_from_epoch
from .errors import DecodeError
from .interval import CalendarInterval, NumT, to_scalar
from .registry import resolve_definition

if TYPE_CHECKING:
    from ..gregorian.components import (
        GregorianDay,
        GregorianHour,
        GregorianMinute,
        GregorianMonth,
        GregorianSecond,
        GregorianWeekday,
        GregorianYear,
    )
    from ..hebrew.components import HebrewDay, HebrewHour, HebrewMonth, HebrewPart, HebrewWeekday, HebrewYear

logger = logging.getLogger(__name__)

D = TypeVar("D")


@lru_cache(maxsize=1)
def epoch() -> "CalendarDate":
    from ..hebrew.components import HebrewMonth
    from ..hebrew.date import HebrewDate

    return CalendarDate(HebrewDate(HebrewMonth.TISHREI, 1, 5758))


@total_ordering
class CalendarDate:
    __slots__ = ("_definition", "_conversions", "_instant")

    def __init__(self, definition: DateDefinition) -> None:
        self._definition = definition
        self._conversions: Dict[type, Any] = {type(definition): definition}
        self._instant = None

    # ---------------------------------------------------------
    # Convenience constructors
    # ---------------------------------------------------------

    @classmethod
    def hebrew(cls, month: "HebrewMonth", day: Any, year: Any, hour: Any = 0, part: Any = 0) -> "CalendarDate":
        from ..hebrew.date import HebrewDate

        return cls(HebrewDate(month, day, year, hour, part))

    @classmethod
    def from_hebrew(cls, year: Any, month: Any = None, day: Any = 1, hour: Any = 0, part: Any = 0) -> "CalendarDate":
        from ..hebrew.components import HebrewMonth

        return cls.hebrew(HebrewMonth.TISHREI if month is None else month, day, year, hour, part)

    @classmethod
    def gregorian(
        cls, month: "GregorianMonth", day: Any, year: Any, hour: Any = 0, minute: Any = 0, second: Any = 0
    ) -> "CalendarDate":
        from ..gregorian.date import GregorianDate

        return cls(GregorianDate(month, day, year, hour, minute, second))

    @classmethod
    def from_gregorian(
        cls, year: Any, month: Any = None, day: Any = 1, hour: Any = 0, minute: Any = 0, second: Any = 0
    ) -> "CalendarDate":
        from ..gregorian.components import GregorianMonth

        return cls.gregorian(GregorianMonth.JANUARY if month is None else month, day, year, hour, minute, second)

    @classmethod
    def from_datetime(cls, value: datetime) -> "CalendarDate":
        from ..definitions.foundation import FoundationDate

        return cls(FoundationDate.from_datetime(value))

    @classmethod
    def from_timestamp(cls, seconds: NumT) -> "CalendarDate":
        from ..definitions.foundation import FoundationDate

        return cls(FoundationDate(seconds))

    @classmethod
    def hebrew_now(cls) -> "CalendarDate":
        from ..definitions.foundation import FoundationDate
        from ..hebrew.date import HebrewDate

        return cls(cls(FoundationDate.now()).convert(HebrewDate))

    @classmethod
    def gregorian_now(cls) -> "CalendarDate":
        from ..definitions.foundation import FoundationDate
        from ..gregorian.date import GregorianDate

        return cls(cls(FoundationDate.now()).convert(GregorianDate))

    # ---------------------------------------------------------
    # Instant and conversion
    # ---------------------------------------------------------

    @property
    def definition(self) -> DateDefinition:
        return self._definition

    @property
    def interval_since_epoch(self) -> CalendarInterval:
        if self._instant is None:
            d = self._definition
            if measures_from_epoch(type(d)):
                self._instant = d.interval_since_reference_date
            else:
                self._instant = type(d).reference_date().interval_since_epoch + d.interval_since_reference_date
        return self._instant

    def convert(self, definition_type: Type[D]) -> D:
        """The same instant expressed in `definition_type`; computed once per type."""
        cached = self._conversions.get(definition_type)
        if cached is None:
            if measures_from_epoch(definition_type):
                interval = self.interval_since_epoch
            else:
                interval = self.interval_since_epoch - definition_type.reference_date().interval_since_epoch
            cached = definition_type.from_interval_since_reference_date(interval)
            self._conversions[definition_type] = cached
        return cached

    # ---------------------------------------------------------
    # Hebrew fields
    # ---------------------------------------------------------

    def _hebrew(self) -> Any:
        from ..hebrew.date import HebrewDate

        return self.convert(HebrewDate)

    @property
    def hebrew_year(self) -> "HebrewYear":
        return self._hebrew().year

    @property
    def hebrew_month(self) -> "HebrewMonth":
        return self._hebrew().month

    @property
    def hebrew_day(self) -> "HebrewDay":
        return self._hebrew().day

    @property
    def hebrew_hour(self) -> "HebrewHour":
        return self._hebrew().hour

    @property
    def hebrew_part(self) -> "HebrewPart":
        return self._hebrew().part

    @property
    def hebrew_weekday(self) -> "HebrewWeekday":
        from ..hebrew.date import HebrewWeekdayDate

        return self.convert(HebrewWeekdayDate).weekday

    # ---------------------------------------------------------
    # Gregorian fields
    # ---------------------------------------------------------

    def _gregorian(self) -> Any:
        from ..gregorian.date import GregorianDate

        return self.convert(GregorianDate)

    @property
    def gregorian_year(self) -> "GregorianYear":
        return self._gregorian().year

    @property
    def gregorian_month(self) -> "GregorianMonth":
        return self._gregorian().month

    @property
    def gregorian_day(self) -> "GregorianDay":
        return self._gregorian().day

    @property
    def gregorian_hour(self) -> "GregorianHour":
        return self._gregorian().hour

    @property
    def gregorian_minute(self) -> "GregorianMinute":
        return self._gregorian().minute

    @property
    def gregorian_second(self) -> "GregorianSecond":
        return self._gregorian().second

    @property
    def gregorian_weekday(self) -> "GregorianWeekday":
        from ..gregorian.date import GregorianWeekdayDate

        return self.convert(GregorianWeekdayDate).weekday

    # ---------------------------------------------------------
    # Host platform
    # ---------------------------------------------------------

    def to_datetime(self) -> datetime:
        """Aware UTC datetime (microsecond resolution)."""
        from ..definitions.foundation import FoundationDate

        return self.convert(FoundationDate).to_datetime()

    def timestamp(self) -> float:
        from ..definitions.foundation import FoundationDate

        return float(self.convert(FoundationDate).seconds)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def date_in_iso_format(self) -> str:
        g = self._gregorian()
        return f"{g.year.in_iso_format()}-{g.month.in_iso_format()}-{g.day.in_iso_format()}"

    def time_in_iso_format(self, include_seconds: bool = False) -> str:
        g = self._gregorian()
        out = f"{g.hour.in_iso_format()}:{g.minute.in_iso_format()}"
        if include_seconds:
            out += f":{g.second.in_iso_format()}"
        return out

    def floating_icalendar_format(self) -> str:
        g = self._gregorian()
        return (
            f"{g.year.in_iso_format()}{g.month.in_iso_format()}{g.day.in_iso_format()}"
            f"T{g.hour.in_iso_format()}{g.minute.in_iso_format()}{g.second.in_iso_format()}"
        )

    def icalendar_format(self) -> str:
        return self.floating_icalendar_format() + "Z"

    def hebrew_date_in_english(self, with_year: bool = True, with_weekday: bool = False, american: bool = False) -> str:
        h = self._hebrew()
        return _date_in_english(h.year, h.month, h.day, self.hebrew_weekday, with_year, with_weekday, american)

    def gregorian_date_in_english(self, with_year: bool = True, with_weekday: bool = False, american: bool = False) -> str:
        g = self._gregorian()
        return _date_in_english(g.year, g.month, g.day, self.gregorian_weekday, with_year, with_weekday, american)

    def twenty_four_hour_time_in_english(self) -> str:
        g = self._gregorian()
        return f"{g.hour.value}:{g.minute.in_iso_format()}"

    def twelve_hour_time_in_english(self) -> str:
        g = self._gregorian()
        return f"{g.hour.in_twelve_hour_format()}:{g.minute.in_iso_format()} {g.hour.am_or_pm()}"

    def __repr__(self) -> str:
        return f"CalendarDate({self._definition!r})"

    def __str__(self) -> str:
        return str(self._definition)

    # ---------------------------------------------------------
    # Adjustments
    # ---------------------------------------------------------

    def adjusted_by(self, offset: CalendarInterval) -> "CalendarDate":
        """Shift by a fixed offset, e.g. a zone's distance from UTC."""
        return self + offset

    def adjusted_to_mean_solar_time(self, longitude_degrees: NumT) -> "CalendarDate":
        """Local mean time at a longitude (east positive): one day per 360 degrees."""
        return self + CalendarInterval(days=to_scalar(longitude_degrees) / 360)

    # ---------------------------------------------------------
    # Comparison and arithmetic
    # ---------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.interval_since_epoch == other.interval_since_epoch

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.interval_since_epoch < other.interval_since_epoch

    def __hash__(self) -> int:
        return hash(self.interval_since_epoch)

    def __add__(self, other: Any) -> "CalendarDate":
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        from ..definitions.relative import RelativeDate

        d = self._definition
        if isinstance(d, RelativeDate):
            return CalendarDate(RelativeDate(d.offset + other, after=d.base))
        return CalendarDate(RelativeDate(other, after=self))

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, CalendarDate):
            return self.interval_since_epoch - other.interval_since_epoch
        if isinstance(other, CalendarInterval):
            return self + (-other)
        return NotImplemented

    # ---------------------------------------------------------
    # Serialization
    # ---------------------------------------------------------

    def encode(self) -> List[Any]:
        """[identifier, payload, instant] where instant is the interval since the epoch."""
        from ..definitions.unknown import UnknownDate

        d = self._definition
        if isinstance(d, UnknownDate):
            return d.encoded()
        return [type(d).identifier, d.encode_payload(), self.interval_since_epoch.to_json()]

    def to_json(self) -> str:
        return json.dumps(self.encode(), ensure_ascii=False)

    @classmethod
    def decode(cls, value: Any) -> "CalendarDate":
        from ..definitions.unknown import UnknownDate

        if not isinstance(value, (list, tuple)) or len(value) != 3:
            raise DecodeError(f"Expected [identifier, payload, instant], got {value!r}")
        identifier, payload, instant = value
        if not isinstance(identifier, str) or not isinstance(payload, str):
            raise DecodeError(f"Identifier and payload must be strings, got {value!r}")
        last_instant = CalendarInterval.from_json(instant)

        definition_type = resolve_definition(identifier)
        if definition_type is None:
            logger.warning("No date definition registered for %r; keeping it as an unknown date", identifier)
            return cls(UnknownDate(identifier, payload, last_instant, raw_instant=list(instant)))
        return cls(definition_type.decode_payload(payload))

    @classmethod
    def from_json(cls, text: str) -> "CalendarDate":
        try:
            value = json.loads(text)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Not a JSON-encoded date: {text!r}") from e
        return cls.decode(value)


def _date_in_english(year: Any, month: Any, day: Any, weekday: Any, with_year: bool, with_weekday: bool, american: bool) -> str:
    if american:
        out = f"{month.english_name} {day.value}"
        if with_year:
            out += f", {year.value}"
    else:
        out = f"{day.value} {month.english_name}"
        if with_year:
            out += f" {year.value}"
    if with_weekday:
        out = f"{weekday.english_name}, {out}"
    return out

