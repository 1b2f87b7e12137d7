"""Pytest configuration for tests.

No sys.path hacks - tests import from the installed rpslkit package.
"""

from pathlib import Path

import pytest

from rpslkit.kernel.attribute import AttributeDef, generated, optional, required
from rpslkit.kernel.registry import TypeRegistry
from rpslkit.kernel.schema import any_defined
from rpslkit.rpsl import validators as v
from rpslkit.rpsl.types import route_key

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def load_text(name: str) -> str:
    """Read a WHOIS text fixture by name (without the .txt suffix)."""
    return (FIXTURES / f"{name}.txt").read_text(encoding="utf-8")


@pytest.fixture
def whois_text():
    """Loader for WHOIS text fixtures."""
    return load_text


@pytest.fixture
def registry() -> TypeRegistry:
    """A throwaway registry with a few small record types.

    - thing: single key, a locked and a generated attribute
    - contact: keyed by a handle that is not the leading attribute
    - path: composite key (path + origin) with a key parser
    - choice: record check requiring 'left' or 'right'
    """
    reg = TypeRegistry()
    reg.register("thing", [
        required("thing", False, v.upper),
        optional("descr", True),
        optional("flag", False),
        optional("owner", False),
        AttributeDef(name="seal", locked=True),
        required("source", False, v.upper),
        generated("created"),
    ], ["thing"])
    reg.register("contact", [
        required("contact", False),
        required("e-mail", True, v.email),
        required("handle", False, v.upper),
        required("source", False, v.upper),
    ], ["handle"])
    reg.register("path", [
        required("path", False),
        required("origin", False, v.as_number),
        optional("descr", True),
        required("source", False, v.upper),
    ], ["path", "origin"], key_parser=route_key("path"))
    reg.register("choice", [
        required("choice", False),
        optional("left", True),
        optional("right", True),
        required("source", False),
    ], ["choice"], checks=[any_defined("left", "right")])
    return reg
