from __future__ import annotations

from typing import Any

from ..core.date import CalendarDate, epoch
from ..core.definition import decode_fields, encode_fields
from ..core.errors import DecodeError
from ..core.interval import CalendarInterval


class RelativeDate:
    """
    A base date plus a signed offset.

    CalendarDate folds repeated additions into a single offset on the same
    base, so a chain of additions never nests RelativeDates.
    """

    identifier = "Δ"

    __slots__ = ("_offset", "_base", "_interval")

    def __init__(self, offset: CalendarInterval, *, after: CalendarDate) -> None:
        self._offset = offset
        self._base = after
        self._interval = (after - epoch()) + offset

    @property
    def offset(self) -> CalendarInterval:
        return self._offset

    @property
    def base(self) -> CalendarDate:
        return self._base

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return epoch()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return self._interval

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "RelativeDate":
        return cls(interval, after=epoch())

    def encode_payload(self) -> str:
        return encode_fields([self._offset.to_json(), self._base.encode()])

    @classmethod
    def decode_payload(cls, payload: str) -> "RelativeDate":
        offset, base = decode_fields(payload, length=2)
        return cls(CalendarInterval.from_json(offset), after=CalendarDate.decode(base))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RelativeDate):
            return NotImplemented
        return self._interval == other._interval

    def __hash__(self) -> int:
        return hash(self._interval)

    def __repr__(self) -> str:
        return f"RelativeDate({self._offset!r}, after={self._base!r})"

    def __str__(self) -> str:
        return f"{self._base} + {self._offset}"
