#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
CLI output styling.

Commands format text through semantic methods (device, key,
value, ...); the palette stays private to this module.

Respects NO_COLOR and TTY detection.
"""

import os
import re
import sys
from enum import Enum, auto


class _Token(Enum):
    DEVICE = auto()
    KEY = auto()
    VALUE = auto()
    HEADER = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    MUTED = auto()


_THEME: dict[_Token, tuple[int, int, int] | None] = {
    _Token.DEVICE: (68, 214, 44),  # Razer green
    _Token.KEY: (120, 190, 255),
    _Token.VALUE: (255, 255, 255),
    _Token.HEADER: None,  # bold only
    _Token.SUCCESS: (80, 250, 123),
    _Token.ERROR: (255, 99, 99),
    _Token.WARNING: (241, 250, 140),
    _Token.MUTED: (128, 128, 128),
}


CHECKMARK = "✓"
CROSS = "✗"
PIPE = "│"

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub("", str(text))


class Output:
    """
    Semantic text styling for the CLI.
    """

    def __init__(self, force_color: bool | None = None):
        self._color_enabled = self._detect_color(force_color)

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def _detect_color(self, force: bool | None) -> bool:
        if force is not None:
            return force
        if os.environ.get("NO_COLOR"):
            return False
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        return os.environ.get("TERM") != "dumb"

    def _apply(self, token: _Token, text: str, bold: bool = False) -> str:
        if not self._color_enabled:
            return text
        rgb = _THEME.get(token)
        if rgb is not None:
            text = "\x1b[38;2;%d;%d;%dm%s\x1b[0m" % (*rgb, text)
        if bold:
            text = "\x1b[1m%s\x1b[0m" % text
        return text

    def device(self, text: str) -> str:
        return self._apply(_Token.DEVICE, text, bold=True)

    def key(self, text: str) -> str:
        return self._apply(_Token.KEY, text)

    def value(self, text: str) -> str:
        return self._apply(_Token.VALUE, text)

    def header(self, text: str) -> str:
        return self._apply(_Token.HEADER, text, bold=True)

    def muted(self, text: str) -> str:
        return self._apply(_Token.MUTED, text)

    def success(self, message: str) -> str:
        return "%s %s" % (self._apply(_Token.SUCCESS, CHECKMARK), message)

    def error(self, message: str) -> str:
        return "%s %s" % (self._apply(_Token.ERROR, CROSS), message)

    def warning(self, message: str) -> str:
        return "%s %s" % (self._apply(_Token.WARNING, "!"), message)

    def kv(self, k: str, v: str) -> str:
        return "%s = %s" % (self.key(k), self.value(v))

    def table_row(self, key_width: int, key: str, value: str) -> str:
        """Format a row with a right-justified key and a vertical separator."""
        padding = " " * max(key_width - len(strip_ansi(key)), 0)
        return " %s%s %s %s" % (padding, key, PIPE, value)

    def battery(self, level: int) -> str:
        """Format a battery level, colored by how full it is."""
        text = "%d%%" % level
        if level <= 25:
            return self._apply(_Token.ERROR, text)
        if level <= 50:
            return self._apply(_Token.WARNING, text)
        return self._apply(_Token.SUCCESS, text)
