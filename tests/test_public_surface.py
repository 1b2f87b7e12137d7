"""Test public API surface - ensure imports work correctly and the catalogue registers on import."""

import types


def test_root_exports():
    import rpslkit

    for name in rpslkit.__all__:
        assert hasattr(rpslkit, name), name
    assert rpslkit.__version__ == "1.0.0" or rpslkit.__version__ == "dev"


def test_api_exports_core_functions():
    from rpslkit.api import create, decode, decode_all, from_document, to_document, to_json, to_text, validate

    for func in (create, decode, decode_all, from_document, to_document, to_json, to_text, validate):
        assert isinstance(func, types.FunctionType)


def test_importing_package_registers_catalogue():
    import rpslkit

    assert "aut-num" in rpslkit.default_registry
    assert len(rpslkit.default_registry) == 21


def test_errors_share_a_base_and_carry_codes():
    import rpslkit
    from rpslkit.codes import ErrorCode

    expected = {
        rpslkit.UndefinedAttributeError: ErrorCode.UNDEFINED_ATTRIBUTE,
        rpslkit.InvalidDataTypeError: ErrorCode.INVALID_DATA_TYPE,
        rpslkit.InvalidValueError: ErrorCode.INVALID_VALUE,
        rpslkit.UnknownTypeError: ErrorCode.UNKNOWN_TYPE,
        rpslkit.RemoteError: ErrorCode.REMOTE_ERROR,
    }
    for error_class, code in expected.items():
        assert issubclass(error_class, rpslkit.RPSLError)
        assert error_class.error_code == code


def test_errors_keep_builtin_categories():
    import rpslkit

    assert issubclass(rpslkit.UndefinedAttributeError, LookupError)
    assert issubclass(rpslkit.UnknownTypeError, LookupError)
    assert issubclass(rpslkit.InvalidDataTypeError, TypeError)
    assert issubclass(rpslkit.InvalidValueError, ValueError)


def test_remote_error_fields():
    from rpslkit import RemoteError

    error = RemoteError(101, "no entries found")
    assert error.code == 101
    assert error.message == "no entries found"
    assert str(error) == "ERROR:101: no entries found"
