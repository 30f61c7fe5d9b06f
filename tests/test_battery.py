#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""Tests for battery sampling."""

from __future__ import annotations

import asyncio
import math

import pytest

from razertray.battery import BatteryMonitor, clamp_percent, read_battery_percent
from razertray.openrazer.manager import Manager


def run(coro):
    return asyncio.run(coro)


@pytest.mark.parametrize(("raw", "expected"), [
    (57.6, 58),
    (57.4, 57),
    (104.0, 100),
    (-3.0, 0),
    (0.0, 0),
    (100.0, 100),
    (50.5, 51),
    (0.5, 1),
    (99.5, 100),
    (2.5, 3),
])
def test_clamp_percent(raw, expected):
    assert clamp_percent(raw) == expected


class TestReadBatteryPercent:
    def test_reads_first_battery_device(self, mouse_bus):
        mouse_bus.on("razer.device.power", "getBattery", "d", [57.6])
        assert run(read_battery_percent(Manager(mouse_bus))) == 58

    def test_skips_devices_without_battery(self, fake_bus_cls, keyboard_xml, mouse_xml):
        bus = fake_bus_cls()
        bus.on("razer.devices", "getDevices", "as", [["KB01", "PM1234"]])
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [keyboard_xml],
               path="/org/razer/device/KB01")
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [mouse_xml],
               path="/org/razer/device/PM1234")
        bus.on("razer.device.power", "getBattery", "d", [80.0], path="/org/razer/device/PM1234")

        assert run(read_battery_percent(Manager(bus))) == 80
        (call,) = bus.calls_to("getBattery")
        assert call.path == "/org/razer/device/PM1234"

    def test_skips_devices_that_fail(self, fake_bus_cls, mouse_xml):
        bus = fake_bus_cls()
        bus.on("razer.devices", "getDevices", "as", [["BROKEN", "DEAD", "PM1234"]])
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", ["<node"],
               path="/org/razer/device/BROKEN")
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [mouse_xml],
               path="/org/razer/device/DEAD")
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [mouse_xml],
               path="/org/razer/device/PM1234")
        bus.on("razer.device.power", "getBattery", "d", [12.2], path="/org/razer/device/PM1234")

        assert run(read_battery_percent(Manager(bus))) == 12

    def test_no_battery_device(self, fake_bus_cls, keyboard_xml):
        bus = fake_bus_cls()
        bus.on("razer.devices", "getDevices", "as", [["KB01"]])
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [keyboard_xml])
        assert run(read_battery_percent(Manager(bus))) is None

    def test_daemon_not_running(self, fake_bus):
        assert run(read_battery_percent(Manager(fake_bus))) is None

    @pytest.mark.parametrize("reading", [math.nan, math.inf, -math.inf])
    def test_non_finite_reading_is_skipped(self, mouse_bus, reading):
        mouse_bus.on("razer.device.power", "getBattery", "d", [reading])
        assert run(read_battery_percent(Manager(mouse_bus))) is None

    def test_non_finite_reading_falls_through(self, fake_bus_cls, mouse_xml):
        bus = fake_bus_cls()
        bus.on("razer.devices", "getDevices", "as", [["NAN01", "PM1234"]])
        bus.on("org.freedesktop.DBus.Introspectable", "Introspect", "s", [mouse_xml])
        bus.on("razer.device.power", "getBattery", "d", [math.nan], path="/org/razer/device/NAN01")
        bus.on("razer.device.power", "getBattery", "d", [33.0], path="/org/razer/device/PM1234")
        assert run(read_battery_percent(Manager(bus))) == 33


class TestBatteryMonitor:
    def test_invalid_interval(self, fake_bus):
        with pytest.raises(ValueError):
            BatteryMonitor(Manager(fake_bus), lambda value: None, interval=0)

    def test_poll_updates_value(self, mouse_bus):
        seen = []
        mouse_bus.on("razer.device.power", "getBattery", "d", [42.0])
        monitor = BatteryMonitor(Manager(mouse_bus), seen.append)

        assert run(monitor.poll()) == 42
        assert monitor.value == 42
        assert seen == [42]

    def test_failed_poll_keeps_previous_value(self, mouse_bus):
        seen = []
        monitor = BatteryMonitor(Manager(mouse_bus), seen.append)

        mouse_bus.on("razer.device.power", "getBattery", "d", [70.0])
        run(monitor.poll())
        del mouse_bus.handlers[("razer.device.power", "getBattery")]
        run(monitor.poll())

        assert seen == [70, 70]

    def test_start_and_stop(self, mouse_bus):
        seen = []
        mouse_bus.on("razer.device.power", "getBattery", "d", [99.0])
        monitor = BatteryMonitor(Manager(mouse_bus), seen.append, interval=0.01)

        async def scenario():
            monitor.start()
            assert monitor.running
            await asyncio.sleep(0.05)
            await monitor.stop()
            return monitor.running

        assert run(scenario()) is False
        assert seen
        assert set(seen) == {99}

    def test_non_finite_poll_keeps_previous_value(self, mouse_bus):
        seen = []
        monitor = BatteryMonitor(Manager(mouse_bus), seen.append)

        mouse_bus.on("razer.device.power", "getBattery", "d", [64.0])
        run(monitor.poll())
        mouse_bus.on("razer.device.power", "getBattery", "d", [math.nan])
        run(monitor.poll())

        assert seen == [64, 64]

    def test_loop_survives_unexpected_errors(self, mouse_bus):
        mouse_bus.handlers[("razer.devices", "getDevices")] = RuntimeError("boom")
        monitor = BatteryMonitor(Manager(mouse_bus), lambda value: None, interval=0.01)

        async def scenario():
            monitor.start()
            await asyncio.sleep(0.05)
            running = monitor.running
            await monitor.stop()
            return running

        assert run(scenario()) is True
        assert len(mouse_bus.calls_to("getDevices")) >= 2
