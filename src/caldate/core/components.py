"""
caldate.core.components
-----------------------
Shared behaviour of calendar components (days, hours, parts, weekdays...).

A component is either:
  * a bounded number (validated against a half-open range at construction), or
  * an enumeration whose order never depends on the year (weekdays, Gregorian months).

Hebrew months are neither: their order depends on the year, so they live with
the Hebrew calendar.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, ClassVar, Optional, Tuple, Type, TypeVar

from .errors import ComponentRangeError
from .interval import NumT, to_scalar

B = TypeVar("B", bound="BoundedComponent")
E = TypeVar("E", bound="EnumerationComponent")


@dataclass(frozen=True, eq=False)
class BoundedComponent:
    """
    A numeric component with an optional legal range.

    `ordinal_based` components store their ordinal (day 1 is the first day);
    the others store the count already elapsed (hour 0 is the first hour).
    """
    value: Any

    valid_range: ClassVar[Optional[Tuple[NumT, NumT]]] = None
    ordinal_based: ClassVar[bool] = False
    integral: ClassVar[bool] = True

    def __post_init__(self) -> None:
        v = self.value
        if self.integral:
            if isinstance(v, Fraction) and v.denominator == 1:
                v = int(v)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"{type(self).__name__} requires an integer, got {v!r}")
        elif not isinstance(v, int) or isinstance(v, bool):
            v = to_scalar(v)
        if not type(self).is_valid(v):
            raise ComponentRangeError(f"Raw value invalid for {type(self).__name__}: {v}")
        object.__setattr__(self, "value", v)

    @classmethod
    def is_valid(cls, value: NumT) -> bool:
        if cls.valid_range is None:
            return True
        lo, hi = cls.valid_range
        return lo <= value < hi

    @classmethod
    def of(cls: Type[B], value: Any) -> B:
        """Accept either an instance or a raw value."""
        return value if isinstance(value, cls) else cls(value)

    @classmethod
    def from_number_already_elapsed(cls: Type[B], n: NumT) -> B:
        return cls(n + 1 if cls.ordinal_based else n)

    @classmethod
    def from_ordinal(cls: Type[B], n: NumT) -> B:
        return cls(n if cls.ordinal_based else n - 1)

    @property
    def number_already_elapsed(self) -> Any:
        return self.value - 1 if self.ordinal_based else self.value

    @property
    def ordinal(self) -> Any:
        return self.value if self.ordinal_based else self.value + 1

    # point arithmetic: component + int, component - component
    def __add__(self: B, other: Any) -> B:
        if isinstance(other, BoundedComponent):
            return NotImplemented
        return type(self)(self.value + other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return self.value - other.value
        if isinstance(other, BoundedComponent):
            return NotImplemented
        return type(self)(self.value - other)

    def _raw(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, (int, float, Fraction)) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value == raw

    def __lt__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value < raw

    def __le__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value <= raw

    def __gt__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value > raw

    def __ge__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value >= raw

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return str(int(self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def to_json(self) -> Any:
        v = self.value
        if isinstance(v, Fraction):
            return v.numerator if v.denominator == 1 else str(v)
        return v


class EnumerationComponent(Enum):
    """Integer-valued enumeration whose order is fixed (value 0 is the first case)."""

    @classmethod
    def from_number_already_elapsed(cls: Type[E], n: int) -> E:
        try:
            return cls(n)
        except ValueError as e:
            raise ComponentRangeError(f"Invalid raw value {n} for {cls.__name__}") from e

    @classmethod
    def from_ordinal(cls: Type[E], n: int) -> E:
        return cls.from_number_already_elapsed(n - 1)

    @property
    def number_already_elapsed(self) -> int:
        return self.value

    @property
    def ordinal(self) -> int:
        return self.value + 1

    @property
    def english_name(self) -> str:
        return self.name.replace("_", " ").title()

    def successor(self: E) -> Optional[E]:
        try:
            return type(self)(self.value + 1)
        except ValueError:
            return None

    def predecessor(self: E) -> Optional[E]:
        try:
            return type(self)(self.value - 1)
        except ValueError:
            return None

    def cyclic_successor(self: E) -> E:
        return type(self)((self.value + 1) % len(type(self)))

    def cyclic_predecessor(self: E) -> E:
        return type(self)((self.value - 1) % len(type(self)))

    def __add__(self: E, other: Any) -> E:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return type(self).from_number_already_elapsed(self.value + other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return self.value - other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self).from_number_already_elapsed(self.value - other)
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.english_name
