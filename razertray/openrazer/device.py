#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name

"""
Typed access to a single OpenRazer device object.
"""

import json

from razertray.log import Log

from .capabilities import DPI, LIGHTING_CHROMA, MISC, POWER, DeviceCapabilities
from .errors import DecodeError
from .introspect import introspect
from .proxy import InterfaceProxy
from .types import Dpi, Feature, LedId, MatrixDimensions, to_u8, to_u16


DEVICE_TYPE_NAMES = {
    "core": "accessory",
    "mousemat": "mousepad",
    "mug": "accessory",
}

KEYBOARD_LAYOUT_NAMES = {
    "de_DE": "German",
    "el_GR": "Greek",
    "en_GB": "UK",
    "en_US": "US",
    "en_US_mac": "US-mac",
    "es_ES": "Spanish",
    "fr_FR": "French",
    "it_IT": "Italian",
    "ja_JP": "Japanese",
    "pt_PT": "Portuguese",
}

DEFAULT_POLL_RATES = (125, 500, 1000)


def map_device_type(device_type: str) -> str:
    return DEVICE_TYPE_NAMES.get(device_type, device_type)


def map_keyboard_layout(layout: str) -> str:
    return KEYBOARD_LAYOUT_NAMES.get(layout, layout)


def decode_dpi(values) -> Dpi:
    """
    Decode the reply of getDPI.

    :param values: one or two integers
    :raises DecodeError: for any other length
    """
    if len(values) == 1:
        return Dpi(to_u16(values[0]), 0)
    if len(values) == 2:
        return Dpi(to_u16(values[0]), to_u16(values[1]))
    raise DecodeError("Invalid return array from DPI: %r" % (values,))


def decode_allowed_dpi(values) -> list:
    if len(values) == 0:
        raise DecodeError("Invalid return array from availableDPI")
    return [to_u16(value) for value in values]


def decode_matrix_dimensions(values) -> MatrixDimensions:
    if len(values) != 2:
        raise DecodeError("Invalid return array from getMatrixDimensions: %r" % (values,))
    return MatrixDimensions(to_u8(values[0]), to_u8(values[1]))


def decode_image_url(payload: str) -> str:
    """
    Extract the top image URL from the getRazerUrls payload.

    :raises DecodeError: if the payload is not JSON
    :return: the URL, or an empty string if there is none
    """
    try:
        value = json.loads(payload)
    except (TypeError, ValueError) as err:
        raise DecodeError("Invalid JSON from getRazerUrls: %s" % err) from err

    if not isinstance(value, dict):
        return ""

    url = value.get("top_img")
    return url if isinstance(url, str) else ""


def encode_key_row(row: int, start_column: int, end_column: int, colors) -> bytes:
    """
    Build the setKeyRow payload.

    Row index, first and last column (inclusive), then three
    bytes per pixel in column order.
    """
    data = bytearray((to_u8(row), to_u8(start_column), to_u8(end_column)))
    for color in colors:
        data.extend((to_u8(color.r), to_u8(color.g), to_u8(color.b)))
    return bytes(data)


class Device:
    """
    A peripheral exposed by the OpenRazer daemon.

    Use the create() coroutine to build one; the object is only
    usable after its introspection data has been fetched. The
    capability set is computed once and never changes.

    All remote operations are coroutines. They do not check
    features themselves, callers should consult has_feature()
    first.
    """

    def __init__(self, bus, object_path: str, introspection: frozenset):
        self._bus = bus
        self._object_path = object_path
        self._capabilities = DeviceCapabilities(frozenset(introspection))
        self._logger = Log.get("razertray.device")


    @classmethod
    async def create(cls, bus, object_path: str) -> "Device":
        """
        Introspect the object at object_path and build a Device for it.

        :raises TransportError: if the introspection call failed
        :raises IntrospectionParseError: if the document was malformed
        """
        introspection = await introspect(bus, object_path)
        return cls(bus, object_path, introspection)


    def __repr__(self):
        return "Device(%s)" % self._object_path


    @property
    def object_path(self) -> str:
        return self._object_path

    @property
    def bus(self):
        return self._bus

    @property
    def capabilities(self) -> DeviceCapabilities:
        return self._capabilities

    @property
    def introspection(self) -> frozenset:
        return self._capabilities.introspection

    @property
    def features(self) -> frozenset:
        return self._capabilities.features

    @property
    def supported_leds(self):
        """Mapping of LedId to display label."""
        return self._capabilities.leds


    def has_feature(self, feature: Feature | str) -> bool:
        return self._capabilities.has_feature(feature)


    def has_led(self, led: LedId) -> bool:
        return self._capabilities.has_led(led)


    def _proxy(self, interface: str) -> InterfaceProxy:
        return InterfaceProxy(self._bus, self._object_path, interface)


    def _misc(self) -> InterfaceProxy:
        return self._proxy(MISC)


    def _dpi(self) -> InterfaceProxy:
        return self._proxy(DPI)


    def _power(self) -> InterfaceProxy:
        return self._proxy(POWER)


    def _lighting_chroma(self) -> InterfaceProxy:
        return self._proxy(LIGHTING_CHROMA)


    # ─────────────────────────────────────────────────────────────────────────
    # Metadata
    # ─────────────────────────────────────────────────────────────────────────

    async def get_device_image_url(self) -> str:
        payload = await self._misc().call_one("getRazerUrls")
        return decode_image_url(payload)

    async def get_device_mode(self) -> str:
        return await self._misc().call_one("getDeviceMode")

    async def get_serial(self) -> str:
        return await self._misc().call_one("getSerial")

    async def get_device_name(self) -> str:
        return await self._misc().call_one("getDeviceName")

    async def get_device_type(self) -> str:
        """
        Get the device type, with daemon-specific names folded into
        the generic ones (a mousemat is a mousepad, etc).
        """
        return map_device_type(await self._misc().call_one("getDeviceType"))

    async def get_firmware_version(self) -> str:
        return await self._misc().call_one("getFirmware")

    async def get_keyboard_layout(self) -> str:
        """
        Get the keyboard layout as a display name.

        Unknown locale codes are returned unchanged.
        """
        return map_keyboard_layout(await self._misc().call_one("getKeyboardLayout"))

    async def get_matrix_dimensions(self) -> MatrixDimensions:
        values = await self._misc().call_one("getMatrixDimensions")
        return decode_matrix_dimensions(values)

    # ─────────────────────────────────────────────────────────────────────────
    # Polling rate
    # ─────────────────────────────────────────────────────────────────────────

    async def get_poll_rate(self) -> int:
        return to_u16(await self._misc().call_one("getPollRate"))

    async def set_poll_rate(self, poll_rate: int):
        await self._misc().call("setPollRate", "q", to_u16(poll_rate))

    async def get_supported_poll_rates(self) -> list:
        """
        Get the polling rates the device accepts.

        Devices which cannot enumerate them get the rates every
        device supports.
        """
        if not self._capabilities.has_capability(MISC, "getSupportedPollRates"):
            self._logger.debug("%s: no getSupportedPollRates, using defaults", self._object_path)
            return list(DEFAULT_POLL_RATES)

        values = await self._misc().call_one("getSupportedPollRates")
        return [to_u16(value) for value in values]

    # ─────────────────────────────────────────────────────────────────────────
    # DPI
    # ─────────────────────────────────────────────────────────────────────────

    async def set_dpi(self, dpi: Dpi):
        await self._dpi().call("setDPI", "qq", to_u16(dpi.x), to_u16(dpi.y))

    async def get_dpi(self) -> Dpi:
        return decode_dpi(await self._dpi().call_one("getDPI"))

    async def set_dpi_stages(self, active_stage: int, dpi_stages):
        stages = [[to_u16(stage.x), to_u16(stage.y)] for stage in dpi_stages]
        await self._dpi().call("setDPIStages", "ya(qq)", to_u8(active_stage), stages)

    async def get_dpi_stages(self) -> tuple:
        """
        Get the DPI stages.

        :return: tuple of (active stage, list of Dpi)
        """
        body = await self._dpi().call("getDPIStages")
        # the daemon replies with a single (ya(qq)) struct
        if len(body) == 1 and isinstance(body[0], (list, tuple)) and len(body[0]) == 2:
            body = body[0]
        if len(body) != 2:
            raise DecodeError("Invalid reply from getDPIStages: %r" % (body,))

        active, stages = body
        try:
            return to_u8(active), [Dpi(to_u16(x), to_u16(y)) for x, y in stages]
        except (TypeError, ValueError) as err:
            raise DecodeError("Invalid DPI stages: %r" % (stages,)) from err

    async def max_dpi(self) -> int:
        return to_u16(await self._dpi().call_one("maxDPI"))

    async def get_allowed_dpi(self) -> list:
        return decode_allowed_dpi(await self._dpi().call_one("availableDPI"))

    # ─────────────────────────────────────────────────────────────────────────
    # Power
    # ─────────────────────────────────────────────────────────────────────────

    async def get_battery_percent(self) -> float:
        """
        Get the battery level.

        The raw value is returned; it is not rounded or clamped.
        """
        return await self._power().call_one("getBattery")

    async def is_charging(self) -> bool:
        return await self._power().call_one("isCharging")

    async def get_idle_time(self) -> int:
        return to_u16(await self._power().call_one("getIdleTime"))

    async def set_idle_time(self, idle_time: int):
        await self._power().call("setIdleTime", "q", to_u16(idle_time))

    async def get_low_battery_threshold(self) -> int:
        return to_u8(await self._power().call_one("getLowBatteryThreshold"))

    async def set_low_battery_threshold(self, threshold: float):
        await self._power().call("setLowBatteryThreshold", "y", to_u8(threshold))

    # ─────────────────────────────────────────────────────────────────────────
    # Custom frame
    # ─────────────────────────────────────────────────────────────────────────

    async def define_custom_frame(self, row: int, start_column: int, end_column: int, color_data):
        """
        Load one row of the custom frame buffer.

        Nothing is shown until display_custom_frame() is called.

        :param row: row index
        :param start_column: first column, inclusive
        :param end_column: last column, inclusive
        :param color_data: sequence of Rgb, one per column
        """
        payload = encode_key_row(row, start_column, end_column, color_data)
        await self._lighting_chroma().call("setKeyRow", "ay", payload)

    async def display_custom_frame(self):
        await self._lighting_chroma().call("setCustom")
