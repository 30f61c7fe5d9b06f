#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name

"""
Session with the OpenRazer daemon.
"""

import json

from dbus_fast import BusType
from dbus_fast.aio import MessageBus
from dbus_fast.errors import DBusError

from razertray.log import Log

from .device import Device
from .errors import DecodeError, TransportError
from .proxy import ROOT_PATH, SERVICE, InterfaceProxy


DAEMON_INTERFACE = "razer.daemon"
DEVICES_INTERFACE = "razer.devices"

BUS_SERVICE = "org.freedesktop.DBus"
BUS_PATH = "/org/freedesktop/DBus"

BUS_TYPES = {
    "session": BusType.SESSION,
    "system": BusType.SYSTEM,
}


def device_path(serial: str) -> str:
    """Object path of the device with the given serial."""
    return "%s/device/%s" % (ROOT_PATH, serial)


class Manager:
    """
    Directory of devices and daemon-wide settings.

    The bus connection is shared with every Device built through
    get_device(); the Manager opens it and is the only one to close
    it. Nothing else is cached, every query goes to the daemon.

    Usage:
        manager = await Manager.connect()
        for path in await manager.get_devices():
            device = await manager.get_device(path)
    """

    def __init__(self, bus):
        self._bus = bus
        self._logger = Log.get("razertray.manager")


    @classmethod
    async def connect(cls, bus_type: str = "session") -> "Manager":
        """
        Connect to the bus and return a Manager for it.

        :param bus_type: 'session' or 'system'
        :raises TransportError: if the bus is unreachable
        """
        if bus_type not in BUS_TYPES:
            raise ValueError("Unknown bus type: %s" % bus_type)

        try:
            bus = await MessageBus(bus_type=BUS_TYPES[bus_type]).connect()
        except (DBusError, OSError, EOFError) as err:
            raise TransportError("Failed to connect to the %s bus: %s" % (bus_type, err)) from err

        return cls(bus)


    def disconnect(self):
        """Close the bus connection. Devices built from it become unusable."""
        if self._bus is not None:
            self._bus.disconnect()
            self._bus = None


    async def __aenter__(self):
        return self


    async def __aexit__(self, *exc):
        self.disconnect()


    @property
    def bus(self):
        return self._bus


    def _bus_or_raise(self):
        if self._bus is None:
            raise TransportError("Not connected")
        return self._bus


    def _daemon(self) -> InterfaceProxy:
        return InterfaceProxy(self._bus_or_raise(), ROOT_PATH, DAEMON_INTERFACE)


    def _devices(self) -> InterfaceProxy:
        return InterfaceProxy(self._bus_or_raise(), ROOT_PATH, DEVICES_INTERFACE)


    async def is_daemon_running(self) -> bool:
        proxy = InterfaceProxy(self._bus_or_raise(), BUS_PATH, BUS_SERVICE, service=BUS_SERVICE)
        return await proxy.call_one("NameHasOwner", "s", SERVICE)


    async def get_daemon_version(self) -> str:
        return await self._daemon().call_one("version")


    async def get_supported_devices(self):
        """
        Get the daemon's table of supported hardware.

        :raises DecodeError: if the payload is not JSON
        :return: the decoded JSON value
        """
        payload = await self._devices().call_one("supportedDevices")
        try:
            return json.loads(payload)
        except (TypeError, ValueError) as err:
            raise DecodeError("Invalid JSON from supportedDevices: %s" % err) from err


    async def get_devices(self) -> list:
        """
        Get the object paths of all connected devices.

        Devices are not introspected here, see get_device().
        """
        serials = await self._devices().call_one("getDevices")
        paths = [device_path(serial) for serial in serials]
        self._logger.debug("Found %d device(s)", len(paths))
        return paths


    async def get_device(self, object_path: str) -> Device:
        """
        Build a Device for the given path, introspecting it.

        :raises TransportError: if the device could not be reached
        :raises IntrospectionParseError: if its introspection data is malformed
        """
        return await Device.create(self._bus_or_raise(), object_path)


    async def sync_effects(self, yes: bool):
        await self._devices().call("syncEffects", "b", bool(yes))


    async def get_sync_effects(self) -> bool:
        return await self._devices().call_one("getSyncEffects")


    async def set_turn_off_on_screensaver(self, turn_off: bool):
        await self._devices().call("enableTurnOffOnScreensaver", "b", bool(turn_off))


    async def get_turn_off_on_screensaver(self) -> bool:
        return await self._devices().call_one("getOffOnScreensaver")
