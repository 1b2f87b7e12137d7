"""Type registry: maps RPSL type names to record schemas."""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from .attribute import AttributeDef
from .errors import UnknownTypeError
from .record import Record
from .schema import KeyParser, RecordCheck, Schema

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r"-?\b([a-z])")


def type_key(type_name: str) -> str:
    """Convert an RPSL type name into its registry key (e.g. 'aut-num' -> 'AutNum')."""
    return _WORD_START.sub(lambda m: m.group(1).upper(), type_name)


class TypeRegistry:
    """Registry of record schemas keyed by type.

    Registration happens once per type, normally at import time; after
    that the registry is only read and may be shared between threads.
    """

    def __init__(self):
        self._schemas: Dict[str, Schema] = {}

    def register(
        self,
        type_name: str,
        attributes: Iterable[AttributeDef],
        primary_key: Iterable[str],
        key_parser: Optional[KeyParser] = None,
        checks: Iterable[RecordCheck] = (),
    ) -> Schema:
        """Create a schema and register it under the type's registry key.

        Raises:
            ValueError: the type is already registered or the schema is invalid.
        """
        key = type_key(type_name)
        if key in self._schemas:
            raise ValueError(f"Record type '{type_name}' is already registered")

        schema = Schema(
            type_name=type_name,
            attributes=tuple(attributes),
            primary_key=tuple(primary_key),
            key_parser=key_parser,
            checks=tuple(checks),
        )
        self._schemas[key] = schema
        logger.debug("Registered record type %s as %s", type_name, key)
        return schema

    def get_schema(self, type_name: str) -> Schema:
        """Get the schema for an RPSL type name or registry key.

        Raises:
            UnknownTypeError: no schema is registered for this type.
        """
        try:
            return self._schemas[type_key(type_name)]
        except KeyError:
            raise UnknownTypeError(type_name) from None

    def has_type(self, type_name: str) -> bool:
        return type_key(type_name) in self._schemas

    def create(self, type_name: str, key: Any = None) -> Record:
        """Create a new record of the given type, optionally setting its primary key."""
        return Record(self.get_schema(type_name), key)

    def get_all_types(self) -> List[str]:
        """Registered RPSL type names, sorted."""
        return sorted(schema.type_name for schema in self._schemas.values())

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.has_type(type_name)

    def __len__(self) -> int:
        return len(self._schemas)


default_registry = TypeRegistry()


def register(
    type_name: str,
    attributes: Iterable[AttributeDef],
    primary_key: Iterable[str],
    key_parser: Optional[KeyParser] = None,
    checks: Iterable[RecordCheck] = (),
) -> Schema:
    """Register a record type in the default registry."""
    return default_registry.register(type_name, attributes, primary_key, key_parser, checks)
