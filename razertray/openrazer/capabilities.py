#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#

"""Device capability derivation from introspection data."""

from __future__ import annotations

from dataclasses import dataclass, field

from frozendict import frozendict

from .introspect import capability_key
from .types import Feature, LedId


MISC = "razer.device.misc"
DPI = "razer.device.dpi"
POWER = "razer.device.power"
LIGHTING_CHROMA = "razer.device.lighting.chroma"
LIGHTING_BW2013 = "razer.device.lighting.bw2013"
LIGHTING_BRIGHTNESS = "razer.device.lighting.brightness"
LIGHTING_LOGO = "razer.device.lighting.logo"
LIGHTING_SCROLL = "razer.device.lighting.scroll"
LIGHTING_BACKLIGHT = "razer.device.lighting.backlight"
LIGHTING_LEFT = "razer.device.lighting.left"
LIGHTING_RIGHT = "razer.device.lighting.right"
LIGHTING_PROFILE_LED = "razer.device.lighting.profile_led"
LIGHTING_CHARGING = "razer.device.lighting.charging"
LIGHTING_FAST_CHARGING = "razer.device.lighting.fast_charging"
LIGHTING_FULLY_CHARGED = "razer.device.lighting.fully_charged"


# Feature -> (interface, method). A method of None means the interface alone suffices.
FEATURE_TABLE: tuple[tuple[Feature, str, str | None], ...] = (
    (Feature.KEYBOARD_LAYOUT, MISC, "getKeyboardLayout"),
    (Feature.DPI, DPI, "setDPI"),
    (Feature.RESTRICTED_DPI, DPI, "availableDPI"),
    (Feature.DPI_STAGES, DPI, "setDPIStages"),
    (Feature.POLL_RATE, MISC, "setPollRate"),
    (Feature.CUSTOM_FRAME, LIGHTING_CHROMA, "setCustom"),
    (Feature.BATTERY, POWER, "getBattery"),
    (Feature.LOW_BATTERY_THRESHOLD, POWER, "getLowBatteryThreshold"),
    (Feature.IDLE_TIME, POWER, "getIdleTime"),
)

# LedId -> (label, triggers). Any single trigger asserts the LED.
# The base zone is exposed through several interface generations.
LED_TABLE: tuple[tuple[LedId, str, tuple[tuple[str, str | None], ...]], ...] = (
    (LedId.Unspecified, "Chroma", (
        (LIGHTING_CHROMA, "setNone"),
        (LIGHTING_CHROMA, "setStatic"),
        (LIGHTING_BW2013, None),
        (LIGHTING_BRIGHTNESS, None))),
    (LedId.LogoLED, "Logo", ((LIGHTING_LOGO, None),)),
    (LedId.ScrollWheelLED, "Scroll", ((LIGHTING_SCROLL, None),)),
    (LedId.BacklightLED, "Backlight", ((LIGHTING_BACKLIGHT, None),)),
    (LedId.LeftSideLED, "Left", ((LIGHTING_LEFT, None),)),
    (LedId.RightSideLED, "Right", ((LIGHTING_RIGHT, None),)),
    (LedId.KeymapRedLED, "RedLED", ((LIGHTING_PROFILE_LED, "setRedLED"),)),
    (LedId.KeymapGreenLED, "GreenLED", ((LIGHTING_PROFILE_LED, "setGreenLED"),)),
    (LedId.KeymapBlueLED, "BlueLED", ((LIGHTING_PROFILE_LED, "setBlueLED"),)),
    (LedId.ChargingLED, "Charging", ((LIGHTING_CHARGING, None),)),
    (LedId.FastChargingLED, "FastCharging", ((LIGHTING_FAST_CHARGING, None),)),
    (LedId.FullyChargedLED, "FullyCharged", ((LIGHTING_FULLY_CHARGED, None),)),
)


def has_capability(introspection: frozenset, interface: str, method: str | None = None) -> bool:
    """
    Test the introspection set for an interface, or one of its methods.

    :param introspection: capability set from the introspector
    :param interface: interface name
    :param method: optional method name
    :return: True if present
    """
    return capability_key(interface, method) in introspection


def derive_features(introspection: frozenset) -> frozenset:
    """
    Compute the set of supported features.

    :param introspection: capability set from the introspector
    :return: frozenset of Feature
    """
    return frozenset(
        feature
        for feature, interface, method in FEATURE_TABLE
        if has_capability(introspection, interface, method)
    )


def derive_leds(introspection: frozenset) -> frozendict:
    """
    Compute the supported LED zones and their labels.

    :param introspection: capability set from the introspector
    :return: frozendict of LedId to label
    """
    leds = {}
    for led, label, triggers in LED_TABLE:
        if any(has_capability(introspection, iface, method) for iface, method in triggers):
            leds[led] = label
    return frozendict(leds)


@dataclass(frozen=True)
class DeviceCapabilities:
    """
    Capabilities of one device object.

    Built once from the introspection set and never changed
    afterwards. All queries are plain membership checks.
    """

    introspection: frozenset
    features: frozenset = field(init=False)
    leds: frozendict = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "features", derive_features(self.introspection))
        object.__setattr__(self, "leds", derive_leds(self.introspection))

    def has_capability(self, interface: str, method: str | None = None) -> bool:
        return has_capability(self.introspection, interface, method)

    def has_feature(self, feature: Feature | str) -> bool:
        """
        Test for a feature.

        :param feature: a Feature, or its string value
        :return: True if supported; unknown names are never supported
        """
        try:
            feature = Feature(feature)
        except ValueError:
            return False
        return feature in self.features

    def has_led(self, led: LedId) -> bool:
        return led in self.leds
