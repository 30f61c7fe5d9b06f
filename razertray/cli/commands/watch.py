#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Watch command — print the battery level as it changes.
"""

import asyncio
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.battery import BatteryMonitor
from razertray.cli.commands.base import Command
from razertray.log import Log
from razertray.openrazer import TransportError


logger = Log.get("razertray.cli.watch")


class WatchCommand(Command):
    """Poll the battery level until interrupted."""

    name = "watch"
    help = "Watch the battery level"
    aliases: ClassVar[list[str]] = []

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "-i", "--interval", type=float, default=None,
            help="seconds between polls (default from config)",
        )
        parser.add_argument(
            "-n", "--count", type=int, default=0,
            help="stop after this many polls (0 = forever)",
        )

    def _interval(self, args: Namespace) -> float:
        return args.interval or self.cli.settings.poll_interval

    async def _run(self, args: Namespace) -> int:
        """Connect, waiting for the bus to come up instead of giving up."""
        waiting = False
        while True:
            try:
                manager = await self.connect()
            except TransportError as err:
                logger.debug("Connection failed, retrying: %s", err)
                if not waiting:
                    self.print(self.out.muted("Waiting for the bus..."))
                    waiting = True
                await asyncio.sleep(self._interval(args))
                continue

            async with manager:
                return await self.run_async(manager, args)

    async def run_async(self, manager, args: Namespace) -> int:
        interval = self._interval(args)
        last = None

        def _update(value):
            nonlocal last
            if value != last:
                self.print(self.out.battery(value))
                last = value

        monitor = BatteryMonitor(manager, _update, interval=interval)

        if args.count == 0:
            monitor.start()
            try:
                await asyncio.Future()
            finally:
                await monitor.stop()

        for poll in range(args.count):
            if poll:
                await asyncio.sleep(interval)
            await monitor.poll()
        return 0
