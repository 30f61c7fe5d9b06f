#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Poll rate command — show or set the USB polling rate.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.commands.base import Command
from razertray.openrazer import Feature


class PollRateCommand(Command):
    """Show or set the polling rate."""

    name = "poll-rate"
    help = "Show or set polling rate (Hz)"
    aliases: ClassVar[list[str]] = ["rate"]

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument("rate", type=int, nargs="?", help="new polling rate in Hz")

    async def run_async(self, manager, args: Namespace) -> int:
        device = await self.require_device(manager, args)
        if not device.has_feature(Feature.POLL_RATE):
            return self.error("Device does not support polling rate control")

        supported = await device.get_supported_poll_rates()

        if args.rate is None:
            current = await device.get_poll_rate()
            self.print(self.out.kv("poll rate", f"{current} Hz"))
            self.print(self.out.kv("supported", ", ".join(str(r) for r in supported)))
            return 0

        if args.rate not in supported:
            return self.error(f"Polling rate must be one of {', '.join(str(r) for r in supported)}")

        await device.set_poll_rate(args.rate)
        return self.success(f"Polling rate set to {args.rate} Hz")
