from __future__ import annotations

from typing import Any, List, Optional

from ..core.date import CalendarDate, epoch
from ..core.errors import UnsupportedOperationError
from ..core.interval import CalendarInterval


class UnknownDate:
    """
    A decoded date whose definition is not registered.

    Keeps the identifier, the payload and the instant exactly as they were
    read, so the date still compares correctly and re-encodes unchanged. It
    cannot be rebuilt from an interval or decoded directly.
    """

    identifier = "unknown"

    __slots__ = ("encoding_identifier", "encoded_definition", "last_calculated_instant", "_raw_instant")

    def __init__(
        self,
        encoding_identifier: str,
        encoded_definition: str,
        last_calculated_instant: CalendarInterval,
        *,
        raw_instant: Optional[List[Any]] = None,
    ) -> None:
        self.encoding_identifier = encoding_identifier
        self.encoded_definition = encoded_definition
        self.last_calculated_instant = last_calculated_instant
        self._raw_instant = raw_instant

    @classmethod
    def reference_date(cls) -> CalendarDate:
        return epoch()

    @property
    def interval_since_reference_date(self) -> CalendarInterval:
        return self.last_calculated_instant

    @classmethod
    def from_interval_since_reference_date(cls, interval: CalendarInterval) -> "UnknownDate":
        raise UnsupportedOperationError("An unknown date cannot be reconstructed from an interval")

    def encode_payload(self) -> str:
        return self.encoded_definition

    @classmethod
    def decode_payload(cls, payload: str) -> "UnknownDate":
        raise UnsupportedOperationError("An unknown date cannot be decoded directly")

    def encoded(self) -> List[Any]:
        instant = self._raw_instant if self._raw_instant is not None else self.last_calculated_instant.to_json()
        return [self.encoding_identifier, self.encoded_definition, list(instant)]

    def __repr__(self) -> str:
        return f"UnknownDate({self.encoding_identifier!r}, {self.encoded_definition!r}, {self.last_calculated_instant!r})"

    def __str__(self) -> str:
        return f"{self.encoding_identifier}: {self.encoded_definition}"
