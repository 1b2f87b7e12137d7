"""Tests for record schemas and record checks."""

import pytest

from rpslkit.kernel.attribute import generated, optional, required
from rpslkit.kernel.record import Record
from rpslkit.kernel.schema import RecordCheck, Schema, any_defined


def _schema(**kwargs):
    data = {
        "type_name": "thing",
        "attributes": (
            required("thing"),
            optional("descr", True),
            required("source"),
            generated("last-modified"),
        ),
        "primary_key": ("thing",),
    }
    data.update(kwargs)
    return Schema(**data)


def test_schema_lookups():
    schema = _schema()
    assert schema.has("descr")
    assert not schema.has("remarks")
    assert schema.get_definition("descr").multiple is True
    assert schema.get_definition("remarks") is None
    assert schema.attribute_names() == ["thing", "descr", "source", "last-modified"]
    assert schema.attribute_names(include_generated=False) == ["thing", "descr", "source"]
    assert schema.required_names() == ["thing", "source"]


def test_empty_type_name_rejected():
    with pytest.raises(ValueError):
        _schema(type_name="")


def test_duplicate_attribute_names_rejected():
    with pytest.raises(ValueError) as excinfo:
        _schema(attributes=(required("thing"), optional("descr"), optional("descr")))
    assert "descr" in str(excinfo.value)


def test_primary_key_must_name_attributes():
    with pytest.raises(ValueError):
        _schema(primary_key=("nic-hdl",))


def test_primary_key_must_not_be_empty():
    with pytest.raises(ValueError):
        _schema(primary_key=())


def test_schema_is_frozen():
    schema = _schema()
    with pytest.raises(Exception):
        schema.type_name = "other"


def test_any_defined_check():
    check = any_defined("left", "right")
    assert isinstance(check, RecordCheck)
    assert check.message == "At least one of 'left', 'right' must be defined"

    schema = Schema(
        type_name="choice",
        attributes=(required("choice"), optional("left"), optional("right")),
        primary_key=("choice",),
        checks=(check,),
    )
    record = Record(schema, "c1")
    assert check.predicate(record) is False
    record.set("right", "r")
    assert check.predicate(record) is True
