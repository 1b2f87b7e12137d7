"""APNIC record type catalogue.

Registers every supported RPSL type in the default registry. This module
is pure configuration: attribute names, cardinality, validators and
primary keys. Importing ``rpslkit`` imports it.

Attribute order follows the APNIC database documentation and is the
order used when a record is serialized.
"""

import re
from typing import Any, Dict

from rpslkit.kernel.attribute import generated, optional, required
from rpslkit.kernel.registry import register
from rpslkit.kernel.schema import any_defined
from rpslkit.rpsl import validators as v

SINGLE = False
MULTIPLE = True

STATUS = (
    "ALLOCATED PORTABLE",
    "ALLOCATED NON-PORTABLE",
    "ASSIGNED PORTABLE",
    "ASSIGNED NON-PORTABLE",
)

_AS_TOKEN = re.compile(r"AS\d+", re.IGNORECASE)


def route_key(prefix_attribute: str):
    """Key parser for route/route6: split '<prefix> AS<n>' (either order, with
    or without whitespace) into the prefix and the origin attribute."""

    def parse(value: Any) -> Dict[str, Any]:
        text = str(value)
        match = _AS_TOKEN.search(text)
        if match is None:
            return {prefix_attribute: text.strip()}
        prefix = (text[:match.start()] + text[match.end():]).strip()
        values = {"origin": match.group(0)}
        if prefix:
            values = {prefix_attribute: prefix, **values}
        return values

    return parse


def _last_modified():
    return generated("last-modified", SINGLE)


register("as-block", [
    required("as-block", SINGLE, v.as_block),
    optional("descr", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("country", SINGLE, v.country),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["as-block"])

register("as-set", [
    required("as-set", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("country", SINGLE, v.country),
    optional("members", MULTIPLE),
    optional("mbrs-by-ref", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("tech-c", MULTIPLE, v.handle),
    required("admin-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["as-set"])

register("aut-num", [
    required("aut-num", SINGLE, v.as_number),
    required("as-name", SINGLE),
    required("descr", MULTIPLE),
    required("country", SINGLE, v.country),
    optional("member-of", MULTIPLE),
    optional("import-via", MULTIPLE),
    optional("import", MULTIPLE),
    optional("mp-import", MULTIPLE),
    optional("export-via", MULTIPLE),
    optional("export", MULTIPLE),
    optional("mp-export", MULTIPLE),
    optional("default", MULTIPLE),
    optional("mp-default", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", SINGLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    optional("abuse-c", SINGLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    optional("mnt-lower", MULTIPLE),
    optional("mnt-routes", MULTIPLE),
    required("mnt-by", MULTIPLE, v.handle),
    required("mnt-irt", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["aut-num"])

register("domain", [
    required("domain", SINGLE, v.reverse_domain),
    required("descr", MULTIPLE),
    optional("country", SINGLE, v.country),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    required("zone-c", MULTIPLE, v.handle),
    optional("nserver", MULTIPLE),
    optional("ds-rdata", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["domain"])

register("filter-set", [
    required("filter-set", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("filter", SINGLE),
    optional("mp-filter", SINGLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("tech-c", MULTIPLE, v.handle),
    required("admin-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["filter-set"], checks=[any_defined("filter", "mp-filter")])

register("inet6num", [
    required("inet6num", SINGLE, v.ipv6_prefix),
    required("netname", SINGLE),
    required("descr", MULTIPLE),
    required("country", MULTIPLE, v.country),
    optional("geoloc", SINGLE),
    optional("language", MULTIPLE),
    optional("org", SINGLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    optional("abuse-c", SINGLE, v.handle),
    required("status", SINGLE, v.one_of(*STATUS)),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("mnt-routes", MULTIPLE),
    required("mnt-irt", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["inet6num"])

register("inet-rtr", [
    required("inet-rtr", SINGLE),
    required("descr", MULTIPLE),
    optional("alias", MULTIPLE),
    required("local-as", SINGLE, v.as_number),
    required("ifaddr", MULTIPLE),
    optional("interface", MULTIPLE),
    optional("peer", MULTIPLE),
    optional("mp-peer", MULTIPLE),
    optional("member-of", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["inet-rtr"])

register("inetnum", [
    required("inetnum", SINGLE, v.ipv4_range),
    required("netname", SINGLE),
    required("descr", MULTIPLE),
    required("country", MULTIPLE, v.country),
    optional("geoloc", SINGLE),
    optional("language", MULTIPLE),
    optional("org", SINGLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    optional("abuse-c", SINGLE, v.handle),
    required("status", SINGLE, v.one_of(*STATUS)),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("mnt-routes", MULTIPLE),
    optional("mnt-domains", MULTIPLE),
    required("mnt-irt", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["inetnum"])

register("irt", [
    required("irt", SINGLE, v.upper),
    required("address", MULTIPLE),
    optional("phone", MULTIPLE, v.phone),
    optional("fax-no", MULTIPLE, v.phone),
    required("e-mail", MULTIPLE, v.email),
    required("abuse-mailbox", MULTIPLE, v.email),
    optional("signature", MULTIPLE),
    optional("encryption", MULTIPLE),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    required("auth", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("irt-nfy", MULTIPLE, v.email),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["irt"])

register("key-cert", [
    required("key-cert", SINGLE, v.upper),
    generated("method", SINGLE),
    generated("owner", MULTIPLE),
    generated("fingerpr", SINGLE),
    required("certif", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("admin-c", MULTIPLE, v.handle),
    optional("tech-c", MULTIPLE, v.handle),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["key-cert"])

register("mntner", [
    # MAINT-{ISO 3166}-{NAME}, except the APNIC system maintainers
    required("mntner", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("country", SINGLE, v.country),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    optional("tech-c", MULTIPLE, v.handle),
    required("upd-to", MULTIPLE, v.email),
    optional("mnt-nfy", MULTIPLE, v.email),
    required("auth", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("abuse-mailbox", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("referral-by", SINGLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["mntner"])

register("organisation", [
    required("organisation", SINGLE, v.upper),
    required("org-name", SINGLE),
    required("org-type", SINGLE),
    optional("descr", MULTIPLE),
    optional("country", MULTIPLE, v.country),
    required("address", MULTIPLE),
    optional("phone", MULTIPLE, v.phone),
    optional("fax-no", MULTIPLE, v.phone),
    required("e-mail", MULTIPLE, v.email),
    optional("geoloc", SINGLE),
    optional("language", MULTIPLE),
    optional("org", MULTIPLE),
    optional("admin-c", MULTIPLE, v.handle),
    optional("tech-c", MULTIPLE, v.handle),
    optional("abuse-c", SINGLE, v.handle),
    optional("ref-nfy", MULTIPLE, v.email),
    required("mnt-ref", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("abuse-mailbox", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["organisation"])

register("peering-set", [
    required("peering-set", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("peering", MULTIPLE),
    optional("mp-peering", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("tech-c", MULTIPLE, v.handle),
    required("admin-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["peering-set"], checks=[any_defined("peering", "mp-peering")])

register("person", [
    required("person", SINGLE),
    required("address", MULTIPLE),
    required("country", SINGLE, v.country),
    required("phone", MULTIPLE, v.phone),
    optional("fax-no", MULTIPLE, v.phone),
    required("e-mail", MULTIPLE, v.email),
    optional("org", MULTIPLE),
    required("nic-hdl", SINGLE, v.upper),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("abuse-mailbox", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["nic-hdl"])

register("poem", [
    required("poem", SINGLE, v.upper),
    optional("descr", MULTIPLE),
    required("form", SINGLE, v.upper),
    required("text", MULTIPLE),
    optional("author", MULTIPLE, v.handle),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", SINGLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["poem"])

register("poetic-form", [
    required("poetic-form", SINGLE, v.upper),
    optional("descr", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", SINGLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["poetic-form"])

register("role", [
    required("role", SINGLE),
    required("address", MULTIPLE),
    required("country", SINGLE, v.country),
    required("phone", MULTIPLE, v.phone),
    optional("fax-no", MULTIPLE, v.phone),
    required("e-mail", MULTIPLE, v.email),
    optional("org", MULTIPLE),
    required("admin-c", MULTIPLE, v.handle),
    required("tech-c", MULTIPLE, v.handle),
    required("nic-hdl", SINGLE, v.upper),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("abuse-mailbox", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["nic-hdl"])

register("route", [
    required("route", SINGLE, v.ipv4_prefix),
    required("descr", MULTIPLE),
    optional("country", SINGLE, v.country),
    required("origin", SINGLE, v.as_number),
    optional("holes", MULTIPLE),
    optional("member-of", MULTIPLE),
    optional("inject", MULTIPLE),
    optional("aggr-mtd", SINGLE),
    optional("aggr-bndry", SINGLE),
    optional("export-comps", SINGLE),
    optional("components", SINGLE),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("mnt-lower", MULTIPLE),
    optional("mnt-routes", MULTIPLE),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["route", "origin"], key_parser=route_key("route"))

register("route6", [
    required("route6", SINGLE, v.ipv6_prefix),
    required("descr", MULTIPLE),
    optional("country", SINGLE, v.country),
    required("origin", SINGLE, v.as_number),
    optional("holes", MULTIPLE),
    optional("member-of", MULTIPLE),
    optional("inject", MULTIPLE),
    optional("aggr-mtd", SINGLE),
    optional("aggr-bndry", SINGLE),
    optional("export-comps", SINGLE),
    optional("components", SINGLE),
    optional("remarks", MULTIPLE),
    optional("notify", MULTIPLE, v.email),
    optional("mnt-lower", MULTIPLE),
    optional("mnt-routes", MULTIPLE),
    required("mnt-by", MULTIPLE, v.handle),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["route6", "origin"], key_parser=route_key("route6"))

register("route-set", [
    required("route-set", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("members", MULTIPLE),
    optional("mp-members", MULTIPLE),
    optional("mbrs-by-ref", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("tech-c", MULTIPLE, v.handle),
    required("admin-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["route-set"])

register("rtr-set", [
    required("rtr-set", SINGLE, v.upper),
    required("descr", MULTIPLE),
    optional("members", MULTIPLE),
    optional("mp-members", MULTIPLE),
    optional("mbrs-by-ref", MULTIPLE),
    optional("remarks", MULTIPLE),
    optional("org", MULTIPLE),
    required("tech-c", MULTIPLE, v.handle),
    required("admin-c", MULTIPLE, v.handle),
    optional("notify", MULTIPLE, v.email),
    required("mnt-by", MULTIPLE, v.handle),
    optional("mnt-lower", MULTIPLE),
    optional("changed", MULTIPLE),
    required("source", SINGLE, v.upper),
    _last_modified(),
], ["rtr-set"])
