#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Daemon command — daemon version and daemon-wide settings.
"""

from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.commands.base import Command


class DaemonCommand(Command):
    """Show or change daemon-wide settings."""

    name = "daemon"
    help = "Show daemon status and settings"
    aliases: ClassVar[list[str]] = []

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--sync", dest="sync", action="store_true", default=None,
            help="sync effects across devices",
        )
        parser.add_argument(
            "--no-sync", dest="sync", action="store_false",
            help="do not sync effects",
        )
        parser.add_argument(
            "--screensaver-off", dest="screensaver", action="store_true", default=None,
            help="turn devices off while the screensaver is active",
        )
        parser.add_argument(
            "--no-screensaver-off", dest="screensaver", action="store_false",
            help="leave devices on while the screensaver is active",
        )

    async def run_async(self, manager, args: Namespace) -> int:
        if not await manager.is_daemon_running():
            return self.error("OpenRazer daemon is not running")

        if args.sync is not None:
            await manager.sync_effects(args.sync)
        if args.screensaver is not None:
            await manager.set_turn_off_on_screensaver(args.screensaver)

        self.print(self.out.kv("version", await manager.get_daemon_version()))
        self.print(self.out.kv("sync effects", str(await manager.get_sync_effects()).lower()))
        self.print(self.out.kv("off on screensaver",
                               str(await manager.get_turn_off_on_screensaver()).lower()))
        return 0
