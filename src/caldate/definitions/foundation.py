"""
caldate.definitions.foundation
------------------------------
Bridge to the host platform's clock: POSIX seconds since 1970-01-01 00:00 UTC,
i.e. what `datetime.timestamp()` and `time.time()` report.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from fractions import Fraction
from functools import lru_cache
from typing import Any

from ..core.date import CalendarDate
from ..core.definition import decode_fields, encode_fields
from ..core.errors import DecodeError
from ..core.interval import CalendarInterval, NumT, to_scalar

_POSIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class FoundationDate:
    identifier = "posix"

    __slots__ = ("_seconds",)

    def __init__(self, seconds: NumT) -> None:
        self._seconds = to_scalar(seconds)

    @classmethod
    def now(cls) -> "FoundationDate":
        return cls(Fraction(time.time_ns(), 10 ** 9))

    @classmethod
    def from_datetime(cls, value: datetime) -> "FoundationDate":
        """Naive datetimes are taken to be UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - _POSIX_EPOCH
        micros = (delta.days * 86400 + delta.seconds) * 10 ** 6 + delta.microseconds
        return cls(Fraction(micros, 10 ** 6))

    @property
    def seconds(self) -> Fraction:
        return self._seconds

    def to_datetime(self) -> datetime:
        """Aware UTC datetime, rounded to the nearest microsecond."""
        return _POSIX_EPOCH + timedelta(microseconds=round(self._seconds * 10 ** 6))

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return _reference()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return CalendarInterval(seconds=self._seconds)

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "FoundationDate":
        return cls(interval.in_seconds)

    def encode_payload(self) -> str:
        s = self._seconds
        return encode_fields([s.numerator if s.denominator == 1 else str(s)])

    @classmethod
    def decode_payload(cls, payload: str) -> "FoundationDate":
        (raw,) = decode_fields(payload, length=1)
        try:
            return cls(Fraction(raw) if isinstance(raw, str) else raw)
        except (TypeError, ValueError, ZeroDivisionError, ArithmeticError) as e:
            raise DecodeError(f"Invalid POSIX seconds payload {payload!r}") from e

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FoundationDate):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"FoundationDate({self._seconds})"

    def __str__(self) -> str:
        return self.to_datetime().isoformat()


@lru_cache(maxsize=1)
def _reference() -> CalendarDate:
    from ..gregorian.components import GregorianMonth

    return CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 1970)
