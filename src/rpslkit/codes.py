"""Error and validation code constants for rpslkit.

These constants prevent stringly-typed error codes and ensure
client code uses the correct codes when inspecting failures.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Codes carried by every rpslkit exception."""

    UNDEFINED_ATTRIBUTE = "UNDEFINED_ATTRIBUTE"
    INVALID_DATA_TYPE = "INVALID_DATA_TYPE"
    INVALID_VALUE = "INVALID_VALUE"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    REMOTE_ERROR = "REMOTE_ERROR"


class ValidationCode(str, Enum):
    """Validation error and warning codes."""

    # Errors (record is incomplete)
    MISSING_REQUIRED = "MISSING_REQUIRED"
    CHECK_FAILED = "CHECK_FAILED"

    # Warnings (non-blocking)
    MISSING_PRIMARY_KEY = "MISSING_PRIMARY_KEY"
