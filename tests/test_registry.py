"""Tests for the type registry."""

import pytest

from rpslkit.kernel.attribute import optional, required
from rpslkit.kernel.errors import UnknownTypeError
from rpslkit.kernel.record import Record
from rpslkit.kernel.registry import TypeRegistry, default_registry, type_key


def test_type_key_conversion():
    """Kebab-case type names map to CamelCase registry keys."""
    assert type_key("aut-num") == "AutNum"
    assert type_key("inet6num") == "Inet6num"
    assert type_key("route-set") == "RouteSet"
    assert type_key("poetic-form") == "PoeticForm"
    assert type_key("AutNum") == "AutNum"


def test_register_and_create(registry):
    record = registry.create("thing", "abc")
    assert isinstance(record, Record)
    assert record.type == "thing"
    assert record.primary_key() == "ABC"


def test_create_without_key(registry):
    record = registry.create("contact")
    assert record.primary_key() is None


def test_lookup_by_registry_key(registry):
    assert registry.get_schema("Thing").type_name == "thing"


def test_unknown_type_raises(registry):
    with pytest.raises(UnknownTypeError) as excinfo:
        registry.get_schema("address")
    assert "address" in str(excinfo.value)


def test_duplicate_registration_rejected(registry):
    with pytest.raises(ValueError):
        registry.register("thing", [required("thing")], ["thing"])


def test_invalid_schema_rejected():
    reg = TypeRegistry()
    with pytest.raises(ValueError):
        reg.register("thing", [required("thing")], ["missing"])
    assert "thing" not in reg


def test_contains_len_and_listing(registry):
    assert "thing" in registry
    assert "path" in registry
    assert "nope" not in registry
    assert 42 not in registry
    assert len(registry) == 4
    assert registry.get_all_types() == ["choice", "contact", "path", "thing"]


def test_empty_registry():
    reg = TypeRegistry()
    assert len(reg) == 0
    assert reg.get_all_types() == []
    assert not reg.has_type("thing")


def test_registrations_are_isolated(registry):
    """A throwaway registry does not leak into the default one."""
    assert "thing" not in default_registry
    other = TypeRegistry()
    other.register("thing", [required("thing"), optional("descr")], ["thing"])
    assert other.get_schema("thing") is not registry.get_schema("thing")


def test_registration_is_logged(caplog):
    reg = TypeRegistry()
    with caplog.at_level("DEBUG", logger="rpslkit.kernel.registry"):
        reg.register("aut-num", [required("aut-num")], ["aut-num"])
    assert any("AutNum" in message for message in caplog.messages)
