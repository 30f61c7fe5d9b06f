#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name

"""
Interface-scoped method calls against the OpenRazer daemon.

The daemon's interfaces vary per device, so no static proxy
classes are generated from introspection data. Calls are built
as raw messages instead, one request/response pair at a time.
"""

from dbus_fast import Message, MessageType
from dbus_fast.errors import DBusError

from razertray.log import LOG_TRACE, Log

from .errors import DecodeError, TransportError


SERVICE = "org.razer"
ROOT_PATH = "/org/razer"

INTROSPECTABLE_INTERFACE = "org.freedesktop.DBus.Introspectable"


class InterfaceProxy:
    """
    A single interface on a single object of the daemon.

    Instances are cheap and hold nothing but the shared bus
    reference, so one is created for every operation.
    """

    def __init__(self, bus, path: str, interface: str, service: str = SERVICE):
        self._bus = bus
        self._path = path
        self._interface = interface
        self._service = service
        self._logger = Log.get("razertray.proxy")

    @property
    def path(self) -> str:
        return self._path

    @property
    def interface(self) -> str:
        return self._interface

    async def call(self, member: str, signature: str = "", *args) -> list:
        """
        Invoke a method and return the reply body.

        :param member: the method name
        :param signature: D-Bus signature of the positional arguments
        :param args: the arguments
        :raises TransportError: the call failed or the daemon returned an error
        :return: the list of returned values (empty for void methods)
        """
        msg = Message(
            destination=self._service,
            path=self._path,
            interface=self._interface,
            member=member,
            signature=signature,
            body=list(args),
        )

        self._logger.log(LOG_TRACE, "call %s %s.%s%r", self._path, self._interface, member, args)

        try:
            reply = await self._bus.call(msg)
        except (DBusError, OSError, EOFError) as err:
            raise TransportError(
                "Call to %s.%s on %s failed: %s" % (self._interface, member, self._path, err),
                getattr(err, "type", None),
            ) from err

        if reply is None:
            raise TransportError("No reply to %s.%s on %s" % (self._interface, member, self._path))

        if reply.message_type == MessageType.ERROR:
            text = reply.body[0] if reply.body and isinstance(reply.body[0], str) else ""
            raise TransportError(
                "%s.%s on %s: %s %s" % (self._interface, member, self._path, reply.error_name, text),
                reply.error_name,
            )

        self._logger.log(LOG_TRACE, "reply %s.%s -> %r", self._interface, member, reply.body)
        return reply.body

    async def call_one(self, member: str, signature: str = "", *args):
        """
        Invoke a method returning exactly one value and return that value.
        """
        body = await self.call(member, signature, *args)
        if len(body) != 1:
            raise DecodeError(
                "Expected one value from %s.%s, got %d" % (self._interface, member, len(body))
            )
        return body[0]
