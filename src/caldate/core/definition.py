"""
caldate.core.definition
-----------------------
The capability every calendar system implements so that a CalendarDate can
hold it, convert it and serialize it.

A definition knows:
  * a unique identifier (used as the type tag when encoding),
  * its reference date (the instant its intervals are measured from),
  * how to rebuild itself from an interval since that reference date,
  * its own interval since the reference date,
  * how to encode/decode only its defining fields as a string payload.

Example: a definition counting days into the millennium.

    class DaysIntoMillennium:
        identifier = "example.DaysIntoMillennium"

        def __init__(self, days):
            self.days = days
            self.interval_since_reference_date = CalendarInterval(days=days)

        @classmethod
        def reference_date(cls):
            return CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 2001)

        @classmethod
        def from_interval_since_reference_date(cls, interval):
            return cls(interval.in_days)

        def encode_payload(self):
            return encode_fields([str(self.days)])

        @classmethod
        def decode_payload(cls, payload):
            (days,) = decode_fields(payload, length=1)
            return cls(Fraction(days))

Register custom definitions with `caldate.register_definition` before decoding
data that uses them; otherwise they decode as UnknownDate.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar, List, Optional, Protocol, Sequence, runtime_checkable

from .errors import DecodeError
from .interval import CalendarInterval

if TYPE_CHECKING:
    from .date import CalendarDate


@runtime_checkable
class DateDefinition(Protocol):
    identifier: ClassVar[str]

    @classmethod
    def reference_date(cls) -> "CalendarDate":
        """The instant this definition measures from."""
        ...

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "DateDefinition":
        ...

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        ...

    def encode_payload(self) -> str:
        """Encode the defining fields only; derived fields are recomputed on decode."""
        ...

    @classmethod
    def decode_payload(cls, payload: str) -> "DateDefinition":
        """Raises DecodeError when the payload does not have the expected shape."""
        ...


def measures_from_epoch(definition_type: type) -> bool:
    """True for definitions whose intervals are already absolute (the epoch's own calendar)."""
    return bool(getattr(definition_type, "measures_from_epoch", False))


def encode_fields(fields: Sequence[Any]) -> str:
    return json.dumps(list(fields), ensure_ascii=False, separators=(",", ":"))


def decode_fields(payload: str, *, length: Optional[int] = None) -> List[Any]:
    try:
        fields = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Payload is not valid JSON: {payload!r}") from e
    if not isinstance(fields, list):
        raise DecodeError(f"Expected a JSON array payload, got {payload!r}")
    if not fields:
        raise DecodeError("Empty container array.")
    if length is not None and len(fields) != length:
        raise DecodeError(f"Expected {length} fields, got {len(fields)} in {payload!r}")
    return fields
