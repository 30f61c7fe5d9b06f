#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Devices command — list devices and their capabilities.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.commands.base import Command
from razertray.openrazer import OpenRazerError


class DevicesCommand(Command):
    """List devices known to the daemon."""

    name = "devices"
    help = "List connected devices"
    aliases: ClassVar[list[str]] = ["ls", "list"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            help="show features and LEDs",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="only show object paths (for scripting)",
        )

    async def run_async(self, manager, args: Namespace) -> int:
        paths = await manager.get_devices()

        if args.quiet:
            for path in paths:
                self.print(path)
            return 0

        if not paths:
            self.print(self.out.muted("No devices found"))
            return 0

        self.print(self.out.header(f"Devices ({len(paths)})"))
        self.print()

        for index, path in enumerate(paths):
            marker = self.out.muted(f"[{index}]")
            try:
                device = await manager.get_device(path)
                name = await device.get_device_name()
                device_type = await device.get_device_type()
            except OpenRazerError as err:
                self.print(f"{marker} {self.out.warning(f'{path}: {err}')}")
                continue

            self.print(f"{marker} {self.out.device(name)} {self.out.muted(device_type)}"
                       f" {self.out.muted(path)}")

            if args.all:
                features = ", ".join(sorted(f.value for f in device.features)) or "none"
                leds = ", ".join(device.supported_leds.values()) or "none"
                self.print(f"     {self.out.kv('features', features)}")
                self.print(f"     {self.out.kv('leds', leds)}")
                self.print()

        return 0
