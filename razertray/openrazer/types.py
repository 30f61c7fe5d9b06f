#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Value types shared by the OpenRazer client layer.
"""

from enum import Enum
from typing import NamedTuple


def to_u8(value: int) -> int:
    """Reinterpret an integer as an unsigned 8-bit value."""
    return int(value) & 0xFF


def to_u16(value: int) -> int:
    """Reinterpret an integer as an unsigned 16-bit value."""
    return int(value) & 0xFFFF


class Dpi(NamedTuple):
    """
    DPI setting of a pointing device.

    A ``y`` of zero means the device only reports a single axis.
    """

    x: int
    y: int = 0

    @property
    def single_axis(self) -> bool:
        return self.y == 0


class Rgb(NamedTuple):
    r: int
    g: int
    b: int


class MatrixDimensions(NamedTuple):
    rows: int
    columns: int


class LedId(Enum):
    """
    Physical light zones known to the daemon.

    Not all zones are available on all devices.
    """

    Unspecified = 0
    LogoLED = 1
    ScrollWheelLED = 2
    BacklightLED = 3
    LeftSideLED = 4
    RightSideLED = 5
    KeymapRedLED = 6
    KeymapGreenLED = 7
    KeymapBlueLED = 8
    ChargingLED = 9
    FastChargingLED = 10
    FullyChargedLED = 11


class Feature(str, Enum):
    """
    Boolean capabilities derived from a device's introspection data.
    """

    KEYBOARD_LAYOUT = "keyboard_layout"
    DPI = "dpi"
    RESTRICTED_DPI = "restricted_dpi"
    DPI_STAGES = "dpi_stages"
    POLL_RATE = "poll_rate"
    CUSTOM_FRAME = "custom_frame"
    BATTERY = "battery"
    LOW_BATTERY_THRESHOLD = "low_battery_threshold"
    IDLE_TIME = "idle_time"
