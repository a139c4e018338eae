"""caldate public API.

Keep this surface small: most users need CalendarDate, CalendarInterval and the
field types re-exported here.
"""

# Initialize registry on import
from .api_init import reset_registry

from .core.date import CalendarDate
from .core.definition import DateDefinition, decode_fields, encode_fields
from .core.errors import (
    CaldateError,
    CalendarArithmeticError,
    CalendarInvariantError,
    ComponentRangeError,
    DecodeError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from .core.interval import CalendarInterval
from .core.registry import list_definitions, register_definition, resolve_definition
from .definitions.foundation import FoundationDate
from .definitions.relative import RelativeDate
from .definitions.unknown import UnknownDate
from .gregorian.components import (
    GregorianDay,
    GregorianHour,
    GregorianMinute,
    GregorianMonth,
    GregorianSecond,
    GregorianWeekday,
    GregorianYear,
)
from .gregorian.date import GregorianDate
from .hebrew.components import (
    HebrewDay,
    HebrewHour,
    HebrewMonth,
    HebrewMonthAndYear,
    HebrewPart,
    HebrewWeekday,
    HebrewYear,
    HebrewYearLength,
)
from .hebrew.date import HebrewDate

__all__ = [
    "CalendarDate",
    "CalendarInterval",
    "DateDefinition",
    "encode_fields",
    "decode_fields",
    "register_definition",
    "resolve_definition",
    "list_definitions",
    "reset_registry",
    "HebrewDate",
    "HebrewYear",
    "HebrewYearLength",
    "HebrewMonth",
    "HebrewMonthAndYear",
    "HebrewDay",
    "HebrewHour",
    "HebrewPart",
    "HebrewWeekday",
    "GregorianDate",
    "GregorianYear",
    "GregorianMonth",
    "GregorianDay",
    "GregorianHour",
    "GregorianMinute",
    "GregorianSecond",
    "GregorianWeekday",
    "RelativeDate",
    "FoundationDate",
    "UnknownDate",
    "CaldateError",
    "ComponentRangeError",
    "DecodeError",
    "UnsupportedOperationError",
    "OutOfRangeError",
    "CalendarArithmeticError",
    "CalendarInvariantError",
]
