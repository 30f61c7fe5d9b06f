#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""Unit tests for razertray.openrazer.capabilities."""

from __future__ import annotations

import dataclasses

import pytest

from razertray.openrazer.capabilities import (
    FEATURE_TABLE,
    DeviceCapabilities,
    derive_features,
    derive_leds,
    has_capability,
)
from razertray.openrazer.introspect import parse_introspection
from razertray.openrazer.types import Feature, LedId

BASE_LED_TRIGGERS = (
    "razer.device.lighting.chroma;setNone",
    "razer.device.lighting.chroma;setStatic",
    "razer.device.lighting.bw2013",
    "razer.device.lighting.brightness",
)


# ─────────────────────────────────────────────────────────────────────────────
# Features
# ─────────────────────────────────────────────────────────────────────────────


class TestFeatures:
    def test_dpi_requires_set_dpi(self):
        assert Feature.DPI in derive_features(frozenset({"razer.device.dpi;setDPI"}))
        assert Feature.DPI not in derive_features(frozenset({"razer.device.dpi"}))
        assert Feature.DPI not in derive_features(frozenset({"razer.device.dpi;getDPI"}))

    @pytest.mark.parametrize(("feature", "interface", "method"), FEATURE_TABLE)
    def test_each_feature_gated_on_its_method(self, feature, interface, method):
        key = "%s;%s" % (interface, method)
        assert derive_features(frozenset({interface, key})) == frozenset({feature})
        assert feature not in derive_features(frozenset({interface}))

    def test_battery_and_idle_time(self):
        features = derive_features(
            frozenset({"razer.device.power;getBattery", "razer.device.power;getIdleTime"})
        )
        assert features == frozenset({Feature.BATTERY, Feature.IDLE_TIME})

    def test_empty_introspection(self):
        assert derive_features(frozenset()) == frozenset()

    def test_mouse_document(self, mouse_xml):
        features = derive_features(parse_introspection(mouse_xml))
        assert features == frozenset({
            Feature.DPI,
            Feature.DPI_STAGES,
            Feature.POLL_RATE,
            Feature.CUSTOM_FRAME,
            Feature.BATTERY,
            Feature.LOW_BATTERY_THRESHOLD,
            Feature.IDLE_TIME,
        })

    def test_keyboard_document(self, keyboard_xml):
        features = derive_features(parse_introspection(keyboard_xml))
        assert features == frozenset({Feature.KEYBOARD_LAYOUT})


# ─────────────────────────────────────────────────────────────────────────────
# LEDs
# ─────────────────────────────────────────────────────────────────────────────


class TestLeds:
    @pytest.mark.parametrize("trigger", BASE_LED_TRIGGERS)
    def test_base_led_from_any_trigger(self, trigger):
        leds = derive_leds(frozenset({trigger}))
        assert leds == {LedId.Unspecified: "Chroma"}

    def test_base_led_absent(self):
        leds = derive_leds(frozenset({
            "razer.device.lighting.chroma",
            "razer.device.lighting.chroma;setCustom",
            "razer.device.lighting.logo",
        }))
        assert LedId.Unspecified not in leds
        assert leds == {LedId.LogoLED: "Logo"}

    @pytest.mark.parametrize(("interface", "led", "label"), [
        ("razer.device.lighting.logo", LedId.LogoLED, "Logo"),
        ("razer.device.lighting.scroll", LedId.ScrollWheelLED, "Scroll"),
        ("razer.device.lighting.backlight", LedId.BacklightLED, "Backlight"),
        ("razer.device.lighting.left", LedId.LeftSideLED, "Left"),
        ("razer.device.lighting.right", LedId.RightSideLED, "Right"),
        ("razer.device.lighting.charging", LedId.ChargingLED, "Charging"),
        ("razer.device.lighting.fast_charging", LedId.FastChargingLED, "FastCharging"),
        ("razer.device.lighting.fully_charged", LedId.FullyChargedLED, "FullyCharged"),
    ])
    def test_zone_from_interface_presence(self, interface, led, label):
        assert derive_leds(frozenset({interface})) == {led: label}

    def test_profile_leds_need_methods(self):
        assert derive_leds(frozenset({"razer.device.lighting.profile_led"})) == {}

        leds = derive_leds(frozenset({
            "razer.device.lighting.profile_led",
            "razer.device.lighting.profile_led;setRedLED",
            "razer.device.lighting.profile_led;setBlueLED",
        }))
        assert leds == {LedId.KeymapRedLED: "RedLED", LedId.KeymapBlueLED: "BlueLED"}

    def test_keyboard_document(self, keyboard_xml):
        leds = derive_leds(parse_introspection(keyboard_xml))
        assert set(leds) == {
            LedId.Unspecified,
            LedId.KeymapRedLED,
            LedId.KeymapGreenLED,
            LedId.KeymapBlueLED,
        }

    def test_leds_are_immutable(self):
        leds = derive_leds(frozenset({"razer.device.lighting.logo"}))
        with pytest.raises(TypeError):
            leds[LedId.ScrollWheelLED] = "Scroll"


# ─────────────────────────────────────────────────────────────────────────────
# DeviceCapabilities
# ─────────────────────────────────────────────────────────────────────────────


class TestDeviceCapabilities:
    def test_has_capability(self):
        intro = frozenset({"razer.device.misc", "razer.device.misc;getSerial"})
        assert has_capability(intro, "razer.device.misc")
        assert has_capability(intro, "razer.device.misc", "getSerial")
        assert not has_capability(intro, "razer.device.misc", "getFirmware")
        assert not has_capability(intro, "razer.device.dpi")

    def test_has_feature_accepts_strings(self, mouse_xml):
        caps = DeviceCapabilities(parse_introspection(mouse_xml))
        assert caps.has_feature("battery")
        assert caps.has_feature(Feature.BATTERY)
        assert not caps.has_feature("keyboard_layout")

    def test_unknown_feature_is_unsupported(self, mouse_xml):
        caps = DeviceCapabilities(parse_introspection(mouse_xml))
        assert not caps.has_feature("teleport")

    def test_has_led(self, mouse_xml):
        caps = DeviceCapabilities(parse_introspection(mouse_xml))
        assert caps.has_led(LedId.Unspecified)
        assert caps.has_led(LedId.LogoLED)
        assert caps.has_led(LedId.ScrollWheelLED)
        assert not caps.has_led(LedId.BacklightLED)

    def test_frozen(self, mouse_xml):
        caps = DeviceCapabilities(parse_introspection(mouse_xml))
        with pytest.raises(dataclasses.FrozenInstanceError):
            caps.features = frozenset()

    def test_same_document_same_capabilities(self, mouse_xml):
        first = DeviceCapabilities(parse_introspection(mouse_xml))
        second = DeviceCapabilities(parse_introspection(mouse_xml))
        assert first.features == second.features
        assert first.leds == second.leds
