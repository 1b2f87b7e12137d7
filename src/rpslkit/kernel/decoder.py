"""Decode WHOIS text output into records.

Assumptions about the text format:
- an attribute is ``<name>: <value>``, one per line
- a record block starts with the attribute named after the record type
- a record block ends with the ``source`` attribute
- blocks are separated by blank lines
- lines starting with ``%`` are comments, ``ERROR:<code>:<message>``
  lines (usually inside a comment) report a failed query
"""

import logging
import re
from typing import Dict, List, Optional

from .errors import RemoteError
from .record import Record
from .registry import TypeRegistry, default_registry

logger = logging.getLogger(__name__)

ERROR_LINE = re.compile(r"^[%#\s]*ERROR:(\d+):(.+)")
# comment-only values (e.g. "auth: # Filtered") and empty values do not match
ATTRIBUTE_LINE = re.compile(r"^\s*([a-z0-9-]+)\s*:\s*([^#\s].*)")
BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")

TERMINAL_ATTRIBUTE = "source"


def split_lines(text: str) -> List[str]:
    """Split text into lines without trailing whitespace (drops the CR of CRLF)."""
    return [line.rstrip() for line in text.split("\n")]


def split_blocks(text: str) -> List[str]:
    """Split text into blank-line separated blocks. Splitting is purely positional."""
    text = text.replace("\r\n", "\n")
    return BLOCK_SEPARATOR.split(text)


def check_error(line: str) -> None:
    """Raise RemoteError if the line is a WHOIS error line."""
    match = ERROR_LINE.match(line)
    if match:
        raise RemoteError(int(match.group(1)), match.group(2).strip())


def is_comment(line: str) -> bool:
    return line.startswith("%")


class WhoisDecoder:
    """Build records from WHOIS text using a type registry."""

    def __init__(self, registry: Optional[TypeRegistry] = None):
        self.registry = registry if registry is not None else default_registry

    def decode(self, text: str, record: Optional[Record] = None) -> Optional[Record]:
        """Parse a text block for a single record.

        If the target record is known beforehand it can be passed in to be
        populated; otherwise the record type is taken from the first
        attribute line. Scanning stops after the ``source`` attribute.

        Args:
            text: WHOIS text.
            record: Record to fill with data.

        Returns:
            The populated record, or None if the text has no attribute lines.

        Raises:
            RemoteError: an error line was found.
            UnknownTypeError: no record type is registered for the first attribute.
            UndefinedAttributeError: an attribute does not belong to the record.
        """
        for line in split_lines(text):
            # error lines look like comments, so they are tested first
            check_error(line)

            if is_comment(line):
                continue

            match = ATTRIBUTE_LINE.match(line)
            if match is None:
                continue
            name, value = match.group(1), match.group(2)

            if record is None:
                record = self._create(name, value)
            else:
                record.add(name, value)

            if name == TERMINAL_ATTRIBUTE:
                break

        return record

    def decode_all(self, text: str) -> Dict[Optional[str], Record]:
        """Parse every record block of a text.

        Returns:
            Records keyed by their primary key. A later record with the same
            key replaces an earlier one.
        """
        records: Dict[Optional[str], Record] = {}
        blocks = split_blocks(text)
        for block in blocks:
            record = self.decode(block)
            if record is not None:
                records[record.primary_key()] = record
        logger.debug("Decoded %d record(s) from %d block(s)", len(records), len(blocks))
        return records

    def _create(self, name: str, value: str) -> Record:
        # The primary key of person/role records is not the type attribute,
        # so records start keyless and the type attribute is set explicitly.
        schema = self.registry.get_schema(name)
        record = Record(schema)
        if schema.key_parser is not None and name in schema.primary_key:
            record.set_key(value)
        else:
            record.set(name, value)
        logger.debug("Created %s record from attribute line", schema.type_name)
        return record


def decode(text: str, record: Optional[Record] = None) -> Optional[Record]:
    """Decode a single record using the default registry."""
    return WhoisDecoder().decode(text, record)


def decode_all(text: str) -> Dict[Optional[str], Record]:
    """Decode all records of a text using the default registry."""
    return WhoisDecoder().decode_all(text)
