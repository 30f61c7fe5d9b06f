#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Info command — show metadata of a single device.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.commands.base import Command
from razertray.openrazer import Feature, OpenRazerError


class InfoCommand(Command):
    """Show device metadata."""

    name = "info"
    help = "Show device details"
    aliases: ClassVar[list[str]] = ["show"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        pass

    async def run_async(self, manager, args: Namespace) -> int:
        device = await self.require_device(manager, args)

        rows = [
            ("name", device.get_device_name),
            ("type", device.get_device_type),
            ("serial", device.get_serial),
            ("firmware", device.get_firmware_version),
            ("mode", device.get_device_mode),
            ("image", device.get_device_image_url),
        ]
        if device.has_feature(Feature.KEYBOARD_LAYOUT):
            rows.append(("layout", device.get_keyboard_layout))
        if device.has_feature(Feature.CUSTOM_FRAME):
            rows.append(("matrix", device.get_matrix_dimensions))

        key_width = 10
        self.print()
        self.print(self.out.table_row(key_width, self.out.header("path"), device.object_path))

        for label, getter in rows:
            try:
                value = await getter()
            except OpenRazerError as err:
                value = self.out.muted(f"unavailable ({err})")
            else:
                if label == "matrix":
                    value = f"{value.rows} x {value.columns}"
            self.print(self.out.table_row(key_width, self.out.key(label), str(value)))

        features = ", ".join(sorted(f.value for f in device.features)) or "none"
        leds = ", ".join(device.supported_leds.values()) or "none"
        self.print(self.out.table_row(key_width, self.out.key("features"), features))
        self.print(self.out.table_row(key_width, self.out.key("leds"), leds))
        self.print()
        return 0
