"""Public API for the rpslkit package.

High-level functions for decoding WHOIS text, creating records and
converting records into their text and JSON forms.
"""

import json
from typing import Any, Dict, List, Optional, Union

from rpslkit.codes import ValidationCode
from rpslkit.contracts import AttributeItem, RecordDocument, ValidationIssue, ValidationResult
from rpslkit.kernel.decoder import WhoisDecoder
from rpslkit.kernel.record import Record
from rpslkit.kernel.registry import TypeRegistry, default_registry


def _registry(registry: Optional[TypeRegistry]) -> TypeRegistry:
    return registry if registry is not None else default_registry


def _decoder(registry: Optional[TypeRegistry]) -> WhoisDecoder:
    return WhoisDecoder(_registry(registry))


def decode(text: str, record: Optional[Record] = None, registry: Optional[TypeRegistry] = None) -> Optional[Record]:
    """Decode the first record of a WHOIS text.

    Args:
        text: WHOIS text output.
        record: Optional record to populate instead of detecting the type.
        registry: Type registry (defaults to the APNIC catalogue).

    Returns:
        The record, or None if the text contains no attribute lines.
    """
    return _decoder(registry).decode(text, record)


def decode_all(text: str, registry: Optional[TypeRegistry] = None) -> Dict[Optional[str], Record]:
    """Decode every blank-line separated record block, keyed by primary key."""
    return _decoder(registry).decode_all(text)


def create(type_name: str, key: Any = None, registry: Optional[TypeRegistry] = None) -> Record:
    """Create an empty record of a registered type, optionally with its primary key."""
    return _registry(registry).create(type_name, key)


def to_text(record: Record) -> str:
    """Render a record in WHOIS text format."""
    return record.to_text()


def to_document(record: Record) -> RecordDocument:
    """Convert a record into its array interchange document."""
    return RecordDocument(
        type=record.type,
        primary_key=record.primary_key(),
        attributes=[AttributeItem(name=name, value=value) for name, value in record.serialize()],
    )


def to_json(record: Record, indent: Optional[int] = None) -> str:
    """Serialize a record's attributes as a JSON list of name/value objects."""
    return json.dumps(record.to_list(), indent=indent, ensure_ascii=False)


def from_document(
    document: Union[str, Dict[str, Any], List[Dict[str, Any]], RecordDocument],
    registry: Optional[TypeRegistry] = None,
) -> Record:
    """Rebuild a record from its array form.

    Accepts a RecordDocument, its dict form, a bare list of
    ``{"name", "value"}`` items, or any of these as a JSON string. The record
    type is taken from the document, or from the first item's name.

    Raises:
        ValueError: the document has no attributes.
        UnknownTypeError: the record type is not registered.
    """
    if isinstance(document, str):
        document = json.loads(document)
    if isinstance(document, list):
        items = [AttributeItem(**item) for item in document]
        type_name = items[0].name if items else None
    else:
        if isinstance(document, dict):
            document = RecordDocument(**document)
        items = document.attributes
        type_name = document.type

    if not items or type_name is None:
        raise ValueError("Cannot build a record from a document without attributes")

    record = _registry(registry).create(type_name)
    for item in items:
        record.add(item.name, item.value)
    return record


def validate(record: Record) -> ValidationResult:
    """Check a record for completeness.

    Missing required attributes and failed record checks are errors; an
    undefined primary key is a warning.
    """
    errors = [
        ValidationIssue(
            code=ValidationCode.MISSING_REQUIRED.value,
            message=f"Required attribute '{name}' is not defined",
            attribute=name,
        )
        for name in record.missing()
    ]
    errors.extend(
        ValidationIssue(code=ValidationCode.CHECK_FAILED.value, message=message)
        for message in record.failed_checks()
    )

    warnings = []
    if record.primary_key() is None:
        warnings.append(ValidationIssue(
            code=ValidationCode.MISSING_PRIMARY_KEY.value,
            message="Primary key is not defined: " + ", ".join(record.primary_key_names()),
        ))

    return ValidationResult(
        ok=not errors,
        type=record.type,
        primary_key=record.primary_key(),
        errors=errors,
        warnings=warnings,
    )
