"""Records: schema instances holding one attribute slot per definition."""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .attribute import Attribute
from .errors import UndefinedAttributeError
from .schema import Schema


class Record:
    """An RPSL object of a registered type.

    All attribute slots exist (empty) as soon as the record is constructed.
    Values are read and written by attribute name; names outside the schema
    raise UndefinedAttributeError.

    Iterating a record yields its defined, non-generated attributes in
    declaration order. Use ``attributes()`` to reach every slot, including
    generated ones.
    """

    def __init__(self, schema: Schema, key: Any = None):
        self.schema = schema
        self._attributes: Dict[str, Attribute] = {
            definition.name: Attribute(definition) for definition in schema.attributes
        }
        if key is not None:
            self.set_key(key)

    @property
    def type(self) -> str:
        """The RPSL type name of this record."""
        return self.schema.type_name

    # --- primary key -------------------------------------------------

    def primary_key_names(self) -> List[str]:
        return list(self.schema.primary_key)

    def primary_key(self) -> Optional[str]:
        """The record handle: the primary key values concatenated in key order.

        Returns None while any primary key attribute is undefined.
        """
        parts = []
        for name in self.schema.primary_key:
            value = self._attributes[name].get()
            if value is None:
                return None
            if isinstance(value, list):
                value = "".join(value)
            parts.append(value)
        return "".join(parts)

    def set_key(self, key: Any) -> "Record":
        """Set the primary key attribute(s) through the normal attribute pipeline.

        Accepted inputs:
        - a mapping of primary key attribute names to values
        - a sequence with one value per primary key attribute
        - any input the schema's key parser understands (composite keys)
        - a single value for a single-attribute primary key
        """
        names = self.schema.primary_key
        if isinstance(key, Mapping):
            values = dict(key)
        elif isinstance(key, (list, tuple)) and len(names) > 1:
            values = dict(zip(names, key))
        elif self.schema.key_parser is not None:
            values = self.schema.key_parser(key)
        else:
            values = {names[0]: key}

        for name, value in values.items():
            if name not in names:
                raise UndefinedAttributeError(name, self.type)
            self.set(name, value)
        return self

    # --- attribute access --------------------------------------------

    def has(self, name: str) -> bool:
        """Check whether the attribute exists in this record's schema."""
        return name in self._attributes

    def attr(self, name: str) -> Attribute:
        """Get an attribute slot by name.

        Raises:
            UndefinedAttributeError: the name is not part of the schema.
        """
        try:
            return self._attributes[name]
        except KeyError:
            raise UndefinedAttributeError(name, self.type) from None

    def get(self, name: str) -> Union[None, str, List[str]]:
        return self.attr(name).get()

    def set(self, name: str, value: Any) -> "Record":
        self.attr(name).set(value)
        return self

    def add(self, name: str, value: Any) -> "Record":
        self.attr(name).add(value)
        return self

    def reset(self, name: str) -> "Record":
        """Clear an attribute, including a locked one."""
        self.attr(name).reset()
        return self

    def attributes(self) -> List[Attribute]:
        """All attribute slots in declaration order, defined or not, including generated ones."""
        return list(self._attributes.values())

    def attribute_names(self) -> List[str]:
        return list(self._attributes)

    # --- validation --------------------------------------------------

    def missing(self) -> List[str]:
        """Names of required attributes that are not defined."""
        return [
            attr.name for attr in self._attributes.values()
            if attr.is_required() and not attr.is_defined()
        ]

    def failed_checks(self) -> List[str]:
        """Messages of the schema's record checks that do not hold."""
        return [check.message for check in self.schema.checks if not check.predicate(self)]

    def is_valid(self) -> bool:
        """True if every required attribute is defined and every record check holds."""
        return not self.missing() and not self.failed_checks()

    # --- serialization -----------------------------------------------

    def serialize(self) -> List[Tuple[str, str]]:
        """Flatten the defined, non-generated attributes into name/value pairs."""
        pairs: List[Tuple[str, str]] = []
        for attr in self:
            pairs.extend(attr.serialize())
        return pairs

    def to_list(self) -> List[Dict[str, str]]:
        """The array interchange shape: one ``{"name", "value"}`` item per value."""
        return [{"name": name, "value": value} for name, value in self.serialize()]

    def to_text(self) -> str:
        """Render the record in WHOIS text format, one padded line per value.

        Values are written as stored. The decoder drops leading whitespace
        and skips values starting with ``#``, so such values do not survive
        ``decode(record.to_text())`` unchanged.
        """
        width = 3 + max((len(name) for name in self._attributes), default=0)
        return "".join(
            f"{name + ':':<{width}} {value}\n" for name, value in self.serialize()
        )

    # --- container protocol ------------------------------------------

    def __iter__(self) -> Iterator[Attribute]:
        return iter([
            attr for attr in self._attributes.values()
            if attr.is_defined() and not attr.is_generated()
        ])

    def __len__(self) -> int:
        """Number of defined attributes (generated ones included)."""
        return sum(1 for attr in self._attributes.values() if attr.is_defined())

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __getitem__(self, name: str) -> Union[None, str, List[str]]:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.set(name, None)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Record({self.type!r}, primary_key={self.primary_key()!r})"
