#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Remote object introspection.

Fetches the introspection document of a daemon object and
flattens it into a set of capability strings: the bare
interface name for every interface, plus "<interface>;<method>"
for every method it declares.
"""

import xml.etree.ElementTree as ET

from razertray.log import Log

from .errors import IntrospectionParseError
from .proxy import INTROSPECTABLE_INTERFACE, InterfaceProxy


logger = Log.get("razertray.introspect")


def capability_key(interface: str, method: str | None = None) -> str:
    """
    Build the key used in the capability set.

    :param interface: interface name
    :param method: optional method name
    :return: "interface" or "interface;method"
    """
    if method is None:
        return interface
    return "%s;%s" % (interface, method)


def strip_doctype(xml: str) -> str:
    """
    Remove a DOCTYPE preamble from an introspection document.

    Some daemons emit declarations that a strict parser rejects.
    Removal works line by line and handles a declaration spread
    over several lines.
    """
    out = []
    in_doctype = False

    for line in xml.splitlines():
        trimmed = line.lstrip()
        if in_doctype:
            if ">" in trimmed:
                in_doctype = False
            continue

        if trimmed.startswith("<!DOCTYPE"):
            in_doctype = ">" not in trimmed
            continue

        out.append(line)

    return "\n".join(out)


def parse_introspection(xml: str) -> frozenset:
    """
    Parse an introspection document into a capability set.

    Interfaces or methods without a usable name are skipped.

    :param xml: the raw document
    :raises IntrospectionParseError: if the document is not well-formed
    :return: frozenset of capability strings
    """
    try:
        root = ET.fromstring(strip_doctype(xml))
    except ET.ParseError as err:
        raise IntrospectionParseError("Failed to parse introspection XML: %s" % err) from err

    entries = set()
    for iface in root.iter("interface"):
        iface_name = iface.get("name")
        if not iface_name:
            continue

        entries.add(iface_name)
        for method in iface.findall("method"):
            method_name = method.get("name")
            if method_name is None:
                continue
            entries.add(capability_key(iface_name, method_name))

    return frozenset(entries)


async def introspect(bus, object_path: str) -> frozenset:
    """
    Introspect a daemon object.

    :param bus: a connected MessageBus
    :param object_path: path of the object to introspect
    :raises TransportError: if the call failed
    :raises IntrospectionParseError: if the reply could not be parsed
    :return: frozenset of capability strings
    """
    proxy = InterfaceProxy(bus, object_path, INTROSPECTABLE_INTERFACE)
    xml = await proxy.call_one("Introspect")

    if not isinstance(xml, str):
        raise IntrospectionParseError("Introspection reply for %s is not a string" % object_path)

    entries = parse_introspection(xml)
    logger.debug("Introspected %s: %d entries", object_path, len(entries))
    return entries
