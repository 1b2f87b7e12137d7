"""rpslkit: RPSL/WHOIS record model and text decoder."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("rpslkit")
except PackageNotFoundError:
    __version__ = "dev"

# Importing the catalogue registers the APNIC record types in default_registry
import rpslkit.rpsl.types  # noqa: F401

# Public API exports
from rpslkit.api import create, decode, decode_all, from_document, to_document, to_json, to_text, validate
from rpslkit.codes import ErrorCode, ValidationCode
from rpslkit.contracts import RecordDocument, ValidationResult
from rpslkit.kernel.errors import (
    InvalidDataTypeError,
    InvalidValueError,
    RemoteError,
    RPSLError,
    UndefinedAttributeError,
    UnknownTypeError,
)
from rpslkit.kernel.record import Record
from rpslkit.kernel.registry import TypeRegistry, default_registry

__all__ = [
    "__version__",
    "create",
    "decode",
    "decode_all",
    "from_document",
    "to_document",
    "to_json",
    "to_text",
    "validate",
    "Record",
    "TypeRegistry",
    "default_registry",
    "RecordDocument",
    "ValidationResult",
    "ErrorCode",
    "ValidationCode",
    "RPSLError",
    "UndefinedAttributeError",
    "InvalidDataTypeError",
    "InvalidValueError",
    "UnknownTypeError",
    "RemoteError",
]
