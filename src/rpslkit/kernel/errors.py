"""Exception taxonomy for the record kernel."""

from rpslkit.codes import ErrorCode


class RPSLError(Exception):
    """Base exception for all record, attribute and decoder errors."""
    error_code: ErrorCode


class UndefinedAttributeError(RPSLError, LookupError):
    """Raised when an attribute name is not part of a record's schema."""
    error_code = ErrorCode.UNDEFINED_ATTRIBUTE

    def __init__(self, name: str, type_name: str):
        self.name = name
        self.type_name = type_name
        super().__init__(
            f'Attribute "{name}" is not defined for the {type_name.upper()} object.'
        )


class InvalidDataTypeError(RPSLError, TypeError):
    """Raised when a value cannot be stored as an attribute string."""
    error_code = ErrorCode.INVALID_DATA_TYPE

    def __init__(self, name: str, kind: str):
        self.name = name
        self.kind = kind
        super().__init__(f"The [{name}] attribute does not allow the {kind} data type.")


class InvalidValueError(RPSLError, ValueError):
    """Raised by attribute validators to reject an input value."""
    error_code = ErrorCode.INVALID_VALUE


class UnknownTypeError(RPSLError, LookupError):
    """Raised when no schema is registered for a type name."""
    error_code = ErrorCode.UNKNOWN_TYPE

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"No record type registered for '{type_name}'")


class RemoteError(RPSLError, RuntimeError):
    """Raised when the WHOIS text contains an ``ERROR:<code>:<message>`` line."""
    error_code = ErrorCode.REMOTE_ERROR

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"ERROR:{code}: {message}")
