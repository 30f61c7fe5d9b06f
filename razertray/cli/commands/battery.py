#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Battery command — battery level of the first wireless device.
"""

import math
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.battery import clamp_percent, read_battery_percent
from razertray.cli.commands.base import Command
from razertray.openrazer import Feature


class BatteryCommand(Command):
    """Battery level and charging status."""

    name = "battery"
    help = "Show battery level"
    aliases: ClassVar[list[str]] = ["bat"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument("-q", "--quiet", action="store_true", help="only show percentage")

    async def run_async(self, manager, args: Namespace) -> int:
        if args.device_spec is None:
            percent = await read_battery_percent(manager)
            if percent is None:
                if not args.quiet:
                    self.print(self.out.muted("No battery-powered device found"))
                return 1
            self.print(f"{percent}%" if args.quiet else self.out.battery(percent))
            return 0

        device = await self.require_device(manager, args)
        if not device.has_feature(Feature.BATTERY):
            if not args.quiet:
                self.print(self.out.muted("Device has no battery"))
            return 1

        raw = await device.get_battery_percent()
        if not math.isfinite(raw):
            return self.error(f"Device reported an invalid battery level: {raw}")

        percent = clamp_percent(raw)
        if args.quiet:
            self.print(f"{percent}%")
            return 0

        status = "charging" if await device.is_charging() else "discharging"
        self.print(f"{self.out.battery(percent)} ({status})")
        return 0
