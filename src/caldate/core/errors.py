class CaldateError(Exception):
    """Base error."""

class ComponentRangeError(CaldateError, ValueError):
    """Raised when a raw value lies outside the legal range of a calendar component."""

class DecodeError(CaldateError, ValueError):
    """Raised when a serialized date or definition payload does not have the expected shape."""

class UnsupportedOperationError(CaldateError, NotImplementedError):
    """Raised when a definition is asked for something it structurally cannot provide."""

class OutOfRangeError(CaldateError, ArithmeticError):
    """Raised when an inverse conversion cannot locate the instant on its calendar."""

class CalendarArithmeticError(CaldateError, ArithmeticError):
    """Raised for division by a zero interval or a non-finite scalar."""

class CalendarInvariantError(CaldateError, AssertionError):
    """Raised when a computed calendar quantity violates a structural rule (e.g. a year length)."""
