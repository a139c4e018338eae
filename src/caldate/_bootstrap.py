from __future__ import annotations
from caldate.core.registry import DefinitionRegistry
from caldate.definitions.foundation import FoundationDate
from caldate.definitions.relative import RelativeDate
from caldate.gregorian.date import GregorianDate
from caldate.hebrew.date import HebrewDate

BUILTIN_DEFINITIONS = (HebrewDate, GregorianDate, FoundationDate, RelativeDate)

def build_registry() -> DefinitionRegistry:
    reg = DefinitionRegistry()
    for definition_type in BUILTIN_DEFINITIONS:
        reg.register(definition_type)
    return reg
