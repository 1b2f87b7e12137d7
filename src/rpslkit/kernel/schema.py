"""Record schemas: the immutable definition of a record type."""

from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .attribute import AttributeDef

KeyParser = Callable[[Any], Dict[str, Any]]


class RecordCheck(BaseModel):
    """A record-level validity rule layered on top of the required-attribute check.

    The predicate receives the record and returns True when the rule holds,
    e.g. "at least one of 'peering' or 'mp-peering' is defined".
    """
    name: str
    predicate: Callable[[Any], bool]
    message: str

    model_config = ConfigDict(frozen=True, extra="forbid")


def any_defined(*names: str) -> RecordCheck:
    """Build a check requiring at least one of the given attributes to be defined."""
    return RecordCheck(
        name="any_defined:" + ",".join(names),
        predicate=lambda record: any(record.attr(name).is_defined() for name in names),
        message="At least one of " + ", ".join(f"'{n}'" for n in names) + " must be defined",
    )


class Schema(BaseModel):
    """Definition of a record type.

    - type_name: RPSL type name (e.g. 'aut-num'), usually also the name of
      the record's first attribute
    - attributes: attribute definitions in declaration order, which is the
      iteration and serialization order
    - primary_key: names of the attribute(s) whose values form the handle
    - key_parser: optional hook splitting one compound key input into
      values for several primary key attributes
    - checks: additional record-level validity rules
    """
    type_name: str
    attributes: Tuple[AttributeDef, ...]
    primary_key: Tuple[str, ...] = Field(..., min_length=1)
    key_parser: Optional[KeyParser] = None
    checks: Tuple[RecordCheck, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('type_name')
    @classmethod
    def validate_type_name(cls, v: str) -> str:
        if not v:
            raise ValueError("The record type name must not be empty.")
        return v

    @model_validator(mode='after')
    def validate_attribute_names(self):
        """Attribute names must be unique and every primary key name must be defined."""
        seen = set()
        duplicates = set()
        for definition in self.attributes:
            if definition.name in seen:
                duplicates.add(definition.name)
            seen.add(definition.name)
        if duplicates:
            raise ValueError(
                f"Duplicate attribute names in schema '{self.type_name}': {sorted(duplicates)}"
            )

        missing = [name for name in self.primary_key if name not in seen]
        if missing:
            raise ValueError(
                f"Primary key attribute(s) {missing} are not defined in schema '{self.type_name}'"
            )
        return self

    def has(self, name: str) -> bool:
        """Check whether an attribute name is part of this schema."""
        return any(d.name == name for d in self.attributes)

    def get_definition(self, name: str) -> Optional[AttributeDef]:
        """Get an attribute definition by name."""
        for definition in self.attributes:
            if definition.name == name:
                return definition
        return None

    def attribute_names(self, include_generated: bool = True) -> List[str]:
        """Attribute names in declaration order."""
        return [d.name for d in self.attributes if include_generated or not d.generated]

    def required_names(self) -> List[str]:
        return [d.name for d in self.attributes if d.required]
