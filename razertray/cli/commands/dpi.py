#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
DPI command — show or set the DPI of a mouse.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.commands.base import Command
from razertray.openrazer import Dpi, Feature


class DpiCommand(Command):
    """Show or set DPI."""

    name = "dpi"
    help = "Show or set DPI"
    aliases: ClassVar[list[str]] = []

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument("x", type=int, nargs="?", help="DPI, or horizontal DPI")
        parser.add_argument("y", type=int, nargs="?", help="vertical DPI (defaults to x)")
        parser.add_argument("--stages", action="store_true", help="show DPI stages")

    async def run_async(self, manager, args: Namespace) -> int:
        device = await self.require_device(manager, args)
        if not device.has_feature(Feature.DPI):
            return self.error("Device does not support DPI control")

        if args.x is None:
            dpi = await device.get_dpi()
            if dpi.single_axis:
                self.print(self.out.kv("dpi", str(dpi.x)))
            else:
                self.print(self.out.kv("dpi", f"{dpi.x} x {dpi.y}"))

            self.print(self.out.kv("max", str(await device.max_dpi())))
            if device.has_feature(Feature.RESTRICTED_DPI):
                allowed = await device.get_allowed_dpi()
                self.print(self.out.kv("allowed", ", ".join(str(v) for v in allowed)))
            if args.stages and device.has_feature(Feature.DPI_STAGES):
                active, stages = await device.get_dpi_stages()
                for index, stage in enumerate(stages, 1):
                    marker = "*" if index == active else " "
                    self.print(f" {marker} {index}: {stage.x} x {stage.y}")
            return 0

        y = args.y if args.y is not None else args.x
        if device.has_feature(Feature.RESTRICTED_DPI):
            allowed = await device.get_allowed_dpi()
            if args.x not in allowed:
                return self.error(f"DPI must be one of {', '.join(str(v) for v in allowed)}")

        await device.set_dpi(Dpi(args.x, y))
        return self.success(f"DPI set to {args.x} x {y}")
