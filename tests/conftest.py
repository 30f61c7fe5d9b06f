# razertray test configuration and shared fixtures
from __future__ import annotations

import pytest
from dbus_fast import Message


# ─────────────────────────────────────────────────────────────────────────────
# Introspection documents
# ─────────────────────────────────────────────────────────────────────────────

DOCTYPE = (
    '<!DOCTYPE node PUBLIC "-//freedesktop//DTD D-BUS Object Introspection 1.0//EN"\n'
    '"http://www.freedesktop.org/standards/dbus/1.0/introspect.dtd">\n'
)


def build_introspection(interfaces: dict, doctype: bool = True) -> str:
    """
    Build an introspection document.

    :param interfaces: mapping of interface name to a list of method names
    """
    xml = DOCTYPE if doctype else ""
    xml += "<node>\n"
    for iface, methods in interfaces.items():
        xml += '  <interface name="%s">\n' % iface
        for method in methods:
            xml += '    <method name="%s">\n' % method
            xml += '      <arg direction="out" type="s" />\n'
            xml += "    </method>\n"
        xml += "  </interface>\n"
    xml += "</node>\n"
    return xml


MOUSE_INTERFACES = {
    "org.freedesktop.DBus.Introspectable": ["Introspect"],
    "razer.device.misc": [
        "getSerial", "getDeviceName", "getDeviceType", "getFirmware", "getDeviceMode",
        "getRazerUrls", "getPollRate", "setPollRate", "getMatrixDimensions",
    ],
    "razer.device.dpi": ["getDPI", "setDPI", "maxDPI", "getDPIStages", "setDPIStages"],
    "razer.device.power": [
        "getBattery", "isCharging", "getIdleTime", "setIdleTime",
        "getLowBatteryThreshold", "setLowBatteryThreshold",
    ],
    "razer.device.lighting.chroma": ["setStatic", "setNone", "setCustom", "setKeyRow"],
    "razer.device.lighting.logo": ["setLogoStatic"],
    "razer.device.lighting.scroll": ["setScrollStatic"],
}

KEYBOARD_INTERFACES = {
    "razer.device.misc": [
        "getSerial", "getDeviceName", "getDeviceType", "getKeyboardLayout",
        "getMatrixDimensions",
    ],
    "razer.device.lighting.brightness": [],
    "razer.device.lighting.profile_led": ["setRedLED", "setGreenLED", "setBlueLED"],
}


@pytest.fixture
def introspection_xml():
    """Factory for introspection documents."""
    return build_introspection


@pytest.fixture
def mouse_xml() -> str:
    """Introspection document of a wireless mouse."""
    return build_introspection(MOUSE_INTERFACES)


@pytest.fixture
def keyboard_xml() -> str:
    """Introspection document of a keyboard without a battery."""
    return build_introspection(KEYBOARD_INTERFACES)


# ─────────────────────────────────────────────────────────────────────────────
# Fake bus
# ─────────────────────────────────────────────────────────────────────────────


class FakeBus:
    """
    Stand-in for dbus_fast.aio.MessageBus.

    Handlers are keyed by (path, interface, member) or by
    (interface, member) and return a (signature, body) tuple,
    a callable producing one, or an exception to raise.
    Unhandled calls get an UnknownMethod error reply.
    """

    def __init__(self, handlers=None):
        self.handlers = dict(handlers or {})
        self.calls = []
        self.connected = True
        self._serial = 0

    def on(self, interface, member, signature, body, path=None):
        key = (interface, member) if path is None else (path, interface, member)
        self.handlers[key] = (signature, body)
        return self

    def calls_to(self, member):
        return [msg for msg in self.calls if msg.member == member]

    async def call(self, msg):
        self._serial += 1
        msg.serial = self._serial
        self.calls.append(msg)

        handler = self.handlers.get((msg.path, msg.interface, msg.member))
        if handler is None:
            handler = self.handlers.get((msg.interface, msg.member))
        if handler is None:
            return Message.new_error(
                msg, "org.freedesktop.DBus.Error.UnknownMethod", f"No such method {msg.member}"
            )
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            handler = handler(msg)

        signature, body = handler
        return Message.new_method_return(msg, signature, body)

    def disconnect(self):
        self.connected = False


@pytest.fixture
def fake_bus_cls():
    return FakeBus


@pytest.fixture
def fake_bus() -> FakeBus:
    """Empty fake bus."""
    return FakeBus()


@pytest.fixture
def mouse_bus(mouse_xml) -> FakeBus:
    """Fake bus hosting a single wireless mouse."""
    bus = FakeBus()
    bus.on("razer.devices", "getDevices", "as", [["PM1234"]])
    bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [mouse_xml])
    return bus


# ─────────────────────────────────────────────────────────────────────────────
# Pytest configuration
# ─────────────────────────────────────────────────────────────────────────────


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
