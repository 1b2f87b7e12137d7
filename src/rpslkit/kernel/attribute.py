"""Attribute definitions and attribute value slots.

An ``AttributeDef`` is the immutable part of a schema (name, cardinality,
flags, validator). An ``Attribute`` is the mutable slot a record owns for
each definition; it holds the attribute's values as an ordered list of
single-line strings.
"""

import re
from numbers import Number
from typing import Any, Callable, Iterable, Iterator, List, Optional, Protocol, Tuple, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .errors import InvalidDataTypeError, InvalidValueError

Validator = Callable[[Any], Any]

_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")


@runtime_checkable
class PrimaryKeyed(Protocol):
    """Anything that can stand in for its own handle (usually a Record)."""

    def primary_key(self) -> Optional[str]:
        ...


class AttributeDef(BaseModel):
    """Definition of a single attribute within a schema."""
    name: str
    required: bool = False
    multiple: bool = False
    generated: bool = False
    locked: bool = False
    validator: Optional[Validator] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Attribute names are lowercase RPSL names (e.g. 'mnt-by', 'route6')."""
        if not _NAME_PATTERN.match(v):
            raise ValueError(
                f"Attribute name '{v}' must be lowercase letters, digits and hyphens (e.g. 'mnt-by')"
            )
        return v

    @model_validator(mode='after')
    def validate_generated_optional(self):
        """Generated attributes are assigned by the registry and can never be required."""
        if self.generated and self.required:
            raise ValueError(f"Generated attribute '{self.name}' cannot be required")
        return self


def required(name: str, multiple: bool = False, validator: Optional[Validator] = None) -> AttributeDef:
    """Shortcut for a mandatory attribute definition."""
    return AttributeDef(name=name, required=True, multiple=multiple, validator=validator)


def optional(name: str, multiple: bool = False, validator: Optional[Validator] = None) -> AttributeDef:
    """Shortcut for an optional attribute definition."""
    return AttributeDef(name=name, required=False, multiple=multiple, validator=validator)


def generated(name: str, multiple: bool = False) -> AttributeDef:
    """Shortcut for a generated attribute. Generated attributes are optional
    and locked, they accept only the value the registry assigned."""
    return AttributeDef(name=name, multiple=multiple, generated=True, locked=True)


class Attribute:
    """A named value slot owned by one record.

    Values are always stored as strings without trailing whitespace.
    Single-valued attributes hold at most one value; multi-valued
    attributes keep every value in insertion order.
    """

    def __init__(self, definition: AttributeDef):
        self.definition = definition
        self._values: List[str] = []

    @property
    def name(self) -> str:
        return self.definition.name

    def is_defined(self) -> bool:
        """Whether the attribute holds at least one value."""
        return len(self._values) > 0

    def is_required(self) -> bool:
        return self.definition.required

    def is_multiple(self) -> bool:
        return self.definition.multiple

    def is_generated(self) -> bool:
        return self.definition.generated

    def is_locked(self) -> bool:
        return self.definition.locked

    def count(self) -> int:
        """Number of stored values."""
        return len(self._values)

    def get(self) -> Union[None, str, List[str]]:
        """Get the current value(s).

        Returns None if unset, the value itself for a single-valued
        attribute, otherwise a list of all values.
        """
        if not self._values:
            return None
        if self.definition.multiple:
            return list(self._values)
        return self._values[0]

    def set(self, value: Any) -> "Attribute":
        """Replace the attribute's values.

        ``set(None)`` clears an unlocked attribute. A locked attribute
        that already holds a value ignores the call.
        """
        if self._frozen():
            return self
        if value is None:
            self._values = []
            return self
        self._values = self._convert_all(value)
        return self

    def add(self, value: Any) -> "Attribute":
        """Add value(s) to the attribute.

        For single-valued attributes this replaces the current value, so
        ``add()`` and ``set()`` behave the same except for ``None``, which
        ``add()`` ignores. A multi-line string is split into one value per
        line regardless of the attribute's cardinality.

        Raises:
            InvalidDataTypeError: a value cannot be stringified, or a
                sequence was given to a single-valued attribute.
            InvalidValueError: the validator rejected a value.
        """
        if value is None or self._frozen():
            return self
        converted = self._convert_all(value)
        if self.definition.multiple:
            self._values.extend(converted)
        else:
            self._values = converted
        return self

    def reset(self) -> "Attribute":
        """Clear all values, including those of a locked attribute."""
        self._values = []
        return self

    def serialize(self) -> List[Tuple[str, str]]:
        """Name/value pairs for every non-empty value, in insertion order."""
        return [(self.name, value) for value in self._values if value]

    def _frozen(self) -> bool:
        # an empty string does not lock the attribute
        return self.definition.locked and any(self._values)

    def _convert_all(self, value: Any) -> List[str]:
        # All items are converted before any stored value changes, so a
        # failing item leaves the attribute in its prior state.
        return [self._convert(item) for item in self._items(value)]

    def _items(self, value: Any) -> Iterable[Any]:
        if isinstance(value, str) and "\n" in value:
            value = value.split("\n")

        if not self.definition.multiple:
            if _is_sequence(value):
                raise InvalidDataTypeError(self.name, _kind(value))
            return [value]

        if _is_sequence(value):
            return value
        return [value]

    def _convert(self, item: Any) -> str:
        validator = self.definition.validator
        if validator is not None:
            try:
                item = validator(item)
            except InvalidValueError:
                raise
            except ValueError as e:
                raise InvalidValueError(f"Invalid value for the [{self.name}] attribute: {e}") from e
        return self._stringify(item).rstrip()

    def _stringify(self, item: Any) -> str:
        if item is True:
            return "true"
        if item is False:
            return "false"
        if isinstance(item, str):
            return item
        if isinstance(item, PrimaryKeyed):
            handle = item.primary_key()
            if handle is None:
                raise InvalidValueError(
                    f"The record passed to the [{self.name}] attribute has no primary key"
                )
            return handle
        if isinstance(item, Number):
            return str(item)
        raise InvalidDataTypeError(self.name, _kind(item))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, values={self._values!r})"


def _is_sequence(value: Any) -> bool:
    """Whether a value is iterated item by item rather than stored as one value."""
    if isinstance(value, (str, bytes, dict)) or isinstance(value, PrimaryKeyed):
        return False
    return isinstance(value, (list, tuple, Attribute)) or isinstance(value, Iterator)


def _kind(value: Any) -> str:
    if isinstance(value, (list, tuple)) or isinstance(value, Iterator):
        return "list"
    return type(value).__name__
