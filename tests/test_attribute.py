"""Tests for attribute definitions and attribute value slots."""

import pytest

from rpslkit.kernel.attribute import Attribute, AttributeDef, generated, optional, required
from rpslkit.kernel.errors import InvalidDataTypeError, InvalidValueError
from rpslkit.rpsl import validators as v


class Handle:
    """Minimal object exposing a primary key, standing in for a record."""

    def __init__(self, key):
        self.key = key

    def primary_key(self):
        return self.key


def _single(name="descr", **kwargs):
    return Attribute(AttributeDef(name=name, **kwargs))


def _multi(name="descr", **kwargs):
    return Attribute(AttributeDef(name=name, multiple=True, **kwargs))


def test_definition_rejects_bad_names():
    """Attribute names are lowercase RPSL names."""
    with pytest.raises(ValueError):
        AttributeDef(name="Mnt-By")
    with pytest.raises(ValueError):
        AttributeDef(name="")
    with pytest.raises(ValueError):
        AttributeDef(name="-descr")


def test_generated_definition_cannot_be_required():
    with pytest.raises(ValueError):
        AttributeDef(name="last-modified", generated=True, required=True)


def test_definition_helpers():
    """required/optional/generated set the expected flags."""
    req = required("mnt-by", True, v.handle)
    assert req.required and req.multiple and req.validator is v.handle

    opt = optional("remarks")
    assert not opt.required and not opt.multiple and opt.validator is None

    gen = generated("last-modified")
    assert gen.generated and gen.locked and not gen.required


def test_definition_is_frozen():
    definition = optional("remarks")
    with pytest.raises(Exception):
        definition.name = "descr"


def test_new_attribute_is_undefined():
    attr = _single(required=True)
    assert attr.name == "descr"
    assert attr.is_defined() is False
    assert attr.is_required() is True
    assert attr.is_multiple() is False
    assert attr.is_locked() is False
    assert attr.is_generated() is False
    assert attr.count() == 0
    assert attr.get() is None


def test_single_value_set_replaces():
    """After set(a) then set(b), get() is b and exactly one value is stored."""
    attr = _single()
    attr.set("first")
    attr.set("second")
    assert attr.get() == "second"
    assert attr.count() == 1


def test_single_value_add_replaces():
    attr = _single()
    attr.add("first")
    attr.add("second")
    assert attr.get() == "second"
    assert attr.count() == 1


def test_multiple_values_keep_order():
    """add(a) then add(b) gives [a, b]."""
    attr = _multi()
    attr.add("a")
    attr.add("b")
    attr.add("a")
    assert attr.get() == ["a", "b", "a"]
    assert attr.count() == 3


def test_multiple_set_replaces_all_values():
    attr = _multi()
    attr.add(["a", "b"])
    attr.set("c")
    assert attr.get() == ["c"]


def test_multiple_accepts_sequences():
    attr = _multi()
    attr.add(["a", "b"])
    attr.add(("c",))
    attr.add(iter(["d"]))
    assert attr.get() == ["a", "b", "c", "d"]


def test_multiple_accepts_another_attribute():
    source = _multi()
    source.add(["x", "y"])
    attr = _multi()
    attr.add(source)
    assert attr.get() == ["x", "y"]


def test_get_returns_a_copy():
    attr = _multi()
    attr.add("a")
    attr.get().append("b")
    assert attr.get() == ["a"]


def test_set_none_clears():
    attr = _multi()
    attr.add(["a", "b"])
    attr.set(None)
    assert attr.is_defined() is False
    assert attr.get() is None


def test_add_none_is_noop():
    attr = _single()
    attr.set("keep")
    attr.add(None)
    assert attr.get() == "keep"


def test_multiline_string_splits_per_line():
    """Each line becomes one value and is validated on its own."""
    seen = []

    def record_calls(value):
        seen.append(value)
        return value.upper()

    attr = _multi(validator=record_calls)
    attr.add("one\ntwo\nthree")
    assert attr.get() == ["ONE", "TWO", "THREE"]
    assert seen == ["one", "two", "three"]


def test_multiline_string_on_single_value_fails():
    attr = _single()
    with pytest.raises(InvalidDataTypeError) as excinfo:
        attr.set("one\ntwo")
    assert "[descr]" in str(excinfo.value)
    assert "list" in str(excinfo.value)
    assert attr.is_defined() is False


def test_sequence_on_single_value_fails():
    attr = _single()
    attr.set("before")
    with pytest.raises(InvalidDataTypeError):
        attr.set(["a", "b"])
    assert attr.get() == "before"


def test_locked_attribute_keeps_first_value():
    """set/add after the first non-empty value leave it unchanged."""
    attr = _single(locked=True)
    attr.set("first")
    attr.set("second")
    attr.add("third")
    attr.set(None)
    assert attr.get() == "first"


def test_locked_attribute_ignores_empty_value():
    """An empty string does not lock; the first non-empty value does."""
    attr = _single(name="seal", locked=True)
    attr.set("")
    attr.set("real")
    assert attr.get() == "real"
    attr.set("other")
    assert attr.get() == "real"


def test_locked_attribute_reset_allows_new_value():
    attr = _single(locked=True)
    attr.set("first")
    attr.reset()
    assert attr.is_defined() is False
    attr.set("second")
    assert attr.get() == "second"


def test_generated_attribute_accepts_first_value_only():
    attr = Attribute(generated("last-modified"))
    attr.add("1970-01-01")
    attr.add("2024-01-01")
    assert attr.get() == "1970-01-01"


def test_booleans_become_words():
    attr = _multi()
    attr.add([True, False])
    assert attr.get() == ["true", "false"]


def test_numbers_are_stringified():
    attr = _multi()
    attr.add([42, 1.5])
    assert attr.get() == ["42", "1.5"]


def test_primary_keyed_value_resolves_to_handle():
    attr = _multi()
    attr.add(Handle("XL1-AP"))
    assert attr.get() == ["XL1-AP"]


def test_primary_keyed_value_without_handle_fails():
    attr = _single()
    with pytest.raises(InvalidValueError):
        attr.set(Handle(None))


def test_unsupported_type_fails():
    attr = _single()
    with pytest.raises(InvalidDataTypeError) as excinfo:
        attr.set({"a": 1})
    assert "dict" in str(excinfo.value)
    with pytest.raises(InvalidDataTypeError):
        attr.set(object())


def test_trailing_whitespace_is_trimmed():
    attr = _single()
    attr.set("value \t ")
    assert attr.get() == "value"


def test_validator_failure_raises_invalid_value():
    attr = _single(name="e-mail", validator=v.email)
    with pytest.raises(InvalidValueError):
        attr.set("not-an-email")
    assert attr.is_defined() is False


def test_plain_value_error_is_wrapped():
    def reject(value):
        raise ValueError("nope")

    attr = _single(validator=reject)
    with pytest.raises(InvalidValueError) as excinfo:
        attr.set("x")
    assert "[descr]" in str(excinfo.value)


def test_failed_item_leaves_prior_values():
    """Conversion of every item happens before any stored value changes."""
    attr = _multi(name="e-mail", validator=v.email)
    attr.add("noc@example.com")
    with pytest.raises(InvalidValueError):
        attr.add(["ops@example.com", "broken"])
    assert attr.get() == ["noc@example.com"]


def test_serialize_pairs_and_skips_empty():
    attr = _multi(validator=lambda value: "" if value == "drop" else value)
    attr.add(["a", "drop", "b"])
    assert attr.serialize() == [("descr", "a"), ("descr", "b")]


def test_len_and_iter():
    attr = _multi()
    attr.add(["a", "b"])
    assert len(attr) == 2
    assert list(attr) == ["a", "b"]
