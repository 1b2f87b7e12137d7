"""Attribute validators for the APNIC record types.

Each validator takes the raw input value and returns the value to store,
or raises InvalidValueError. Validators may normalize (e.g. upper-case)
their input.
"""

import ipaddress
import re
from typing import Any, Callable

from rpslkit.kernel.attribute import PrimaryKeyed
from rpslkit.kernel.errors import InvalidValueError

_EMAIL = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)+$")
_PHONE = re.compile(r"^\+[1-9]\d*([ .-]\d+)*( ext\. \d+)?$")
_HANDLE_CHARS = re.compile(r"[^A-Za-z0-9-]")
_COUNTRY = re.compile(r"^[A-Za-z]{2}$")
_AS_NUMBER = re.compile(r"^AS\d+$")
_AS_BLOCK = re.compile(r"^(AS\d+)\s*-\s*(AS\d+)$")


def _text(value: Any) -> str:
    # a record given as value is validated by its handle
    if isinstance(value, PrimaryKeyed):
        value = value.primary_key() or ""
    return str(value).strip()


def email(value: Any) -> str:
    value = _text(value)
    if _EMAIL.match(value):
        return value
    raise InvalidValueError(f"Invalid email address: {value!r}")


def phone(value: Any) -> str:
    """Phone & fax numbers in international format (+<country> <number> [ext. <n>])."""
    value = _text(value)
    if _PHONE.match(value):
        return value
    raise InvalidValueError(f"Invalid phone/fax number: {value!r}")


def handle(value: Any) -> str:
    """RPSL object handles (NIC handles, maintainer names). Returned upper-cased
    with surrounding hyphens removed."""
    value = _text(value)
    if value and not _HANDLE_CHARS.search(value):
        return value.strip("-").upper()
    raise InvalidValueError(f"Invalid RPSL object handle: {value!r}")


def country(value: Any) -> str:
    """Two-letter ISO 3166 country code."""
    value = _text(value)
    if _COUNTRY.match(value):
        return value.upper()
    raise InvalidValueError(f"Invalid country code: {value!r}")


def upper(value: Any) -> str:
    return _text(value).upper()


def as_number(value: Any) -> str:
    value = _text(value).upper()
    if _AS_NUMBER.match(value):
        return value
    raise InvalidValueError(f"Invalid AS number: {value!r}")


def as_block(value: Any) -> str:
    """AS number range, normalized to 'AS<n> - AS<m>'."""
    match = _AS_BLOCK.match(_text(value).upper())
    if match:
        return f"{match.group(1)} - {match.group(2)}"
    raise InvalidValueError(f"Invalid AS block: {value!r}")


def ipv4_range(value: Any) -> str:
    """IPv4 address range ('a.b.c.d - w.x.y.z'); a CIDR is expanded into its range."""
    value = _text(value)
    try:
        if "/" in value:
            network = ipaddress.IPv4Network(value, strict=False)
            first, last = network.network_address, network.broadcast_address
        else:
            start, end = (part.strip() for part in value.split("-"))
            first, last = ipaddress.IPv4Address(start), ipaddress.IPv4Address(end)
    except ValueError:
        raise InvalidValueError(f"Invalid IPv4 address range: {value!r}") from None
    return f"{first} - {last}"


def ipv4_prefix(value: Any) -> str:
    value = _text(value)
    try:
        ipaddress.IPv4Network(value, strict=False)
    except ValueError:
        raise InvalidValueError(f"Invalid IPv4 route: {value!r}") from None
    if "/" not in value:
        raise InvalidValueError(f"Invalid IPv4 route: {value!r}")
    return value


def ipv6_prefix(value: Any) -> str:
    """IPv6 network in prefix notation, used by inet6num and route6."""
    value = _text(value)
    try:
        ipaddress.IPv6Network(value, strict=False)
    except ValueError:
        raise InvalidValueError(f"Invalid IPv6 prefix: {value!r}") from None
    if "/" not in value:
        raise InvalidValueError(f"Invalid IPv6 prefix: {value!r}")
    return value


def reverse_domain(value: Any) -> str:
    value = _text(value)
    if ".in-addr.arpa" in value or ".ip6.arpa" in value:
        return value
    raise InvalidValueError(f"Invalid reverse delegation: {value!r}")


def one_of(*allowed: str) -> Callable[[Any], str]:
    """Build a validator accepting only the given (upper-case) values."""
    choices = tuple(a.upper() for a in allowed)

    def validate(value: Any) -> str:
        value = _text(value).upper()
        if value in choices:
            return value
        raise InvalidValueError(f"Invalid value {value!r}, expected one of: {', '.join(choices)}")

    return validate
