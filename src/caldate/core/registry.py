from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from .definition import DateDefinition

logger = logging.getLogger(__name__)


@dataclass
class DefinitionRegistry:
    """Identifier -> definition type map used when decoding CalendarDates."""
    _definitions: Dict[str, Type[DateDefinition]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def get(self, identifier: str) -> Type[DateDefinition]:
        with self._lock:
            if identifier not in self._definitions:
                raise KeyError(f"Unknown definition '{identifier}'. Available: {sorted(self._definitions)}")
            return self._definitions[identifier]

    def resolve(self, identifier: str) -> Optional[Type[DateDefinition]]:
        with self._lock:
            return self._definitions.get(identifier)

    def list(self) -> List[str]:
        with self._lock:
            return sorted(self._definitions.keys())

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._definitions

    def register(
        self,
        definition_type: Type[DateDefinition],
        *,
        identifier: Optional[str] = None,
        overwrite: bool = False,
    ) -> None:
        name = identifier if identifier is not None else definition_type.identifier
        with self._lock:
            existing = self._definitions.get(name)
            if existing is definition_type:
                return
            if (not overwrite) and (existing is not None):
                raise KeyError(f"Definition '{name}' already exists. Use overwrite=True to replace.")
            self._definitions[name] = definition_type
        logger.debug("Registered date definition %r -> %s", name, definition_type.__qualname__)


_registry: Optional[DefinitionRegistry] = None


def set_registry(reg: DefinitionRegistry) -> None:
    global _registry
    _registry = reg


def get_registry() -> DefinitionRegistry:
    if _registry is None:
        raise RuntimeError("Definition registry not initialized")
    return _registry


def register_definition(
    definition_type: Type[DateDefinition],
    *,
    identifier: Optional[str] = None,
    overwrite: bool = False,
) -> None:
    """Make a custom definition decodable. Call before decoding data that uses it."""
    get_registry().register(definition_type, identifier=identifier, overwrite=overwrite)


def resolve_definition(identifier: str) -> Optional[Type[DateDefinition]]:
    return get_registry().resolve(identifier)


def list_definitions() -> List[str]:
    return get_registry().list()
