#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""Errors raised while talking to the OpenRazer daemon."""


class OpenRazerError(Exception):
    """Base error for the OpenRazer client layer."""


class TransportError(OpenRazerError):
    """
    Raised when the bus call itself failed.

    Covers a lost connection, a missing object and a daemon that
    is not running. ``error_name`` holds the D-Bus error name when
    the daemon (or the bus) replied with one.
    """

    def __init__(self, message: str, error_name: str | None = None):
        super().__init__(message)
        self.error_name = error_name


class ProtocolError(OpenRazerError):
    """Raised when a reply could not be understood."""


class IntrospectionParseError(ProtocolError):
    """Raised when an introspection document is not well-formed."""


class DecodeError(ProtocolError):
    """Raised when a reply does not have the expected shape."""
