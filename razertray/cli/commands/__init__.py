#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
CLI command implementations.
"""

from razertray.cli.commands.base import Command
from razertray.cli.commands.battery import BatteryCommand
from razertray.cli.commands.daemon import DaemonCommand
from razertray.cli.commands.devices import DevicesCommand
from razertray.cli.commands.dpi import DpiCommand
from razertray.cli.commands.info import InfoCommand
from razertray.cli.commands.poll_rate import PollRateCommand
from razertray.cli.commands.watch import WatchCommand

# Order determines help output order
COMMANDS: list[type[Command]] = [
    DevicesCommand,
    InfoCommand,
    BatteryCommand,
    DpiCommand,
    PollRateCommand,
    DaemonCommand,
    WatchCommand,
]

__all__ = ["COMMANDS", "Command"]
