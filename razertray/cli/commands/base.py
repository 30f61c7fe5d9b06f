#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
Base command class for CLI commands.
"""

import asyncio
from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from razertray.cli.cli_base import RazerTrayCLI
from razertray.openrazer import Manager


class DeviceSelectionError(ValueError):
    """Raised when a device specifier matches nothing."""


async def select_device(manager: Manager, spec: str | None):
    """
    Resolve a device specifier to a Device.

    :param manager: a connected Manager
    :param spec: None for the first device, an index, a serial
                 or an object path
    :raises DeviceSelectionError: if nothing matches
    """
    paths = await manager.get_devices()
    if not paths:
        raise DeviceSelectionError("No devices found")

    if spec is None:
        path = paths[0]
    elif spec.startswith("/"):
        if spec not in paths:
            raise DeviceSelectionError(f"No device at {spec}")
        path = spec
    elif spec.isdigit():
        index = int(spec)
        if index >= len(paths):
            raise DeviceSelectionError(f"No device with index {index}")
        path = paths[index]
    else:
        matches = [p for p in paths if p.rsplit("/", 1)[-1] == spec]
        if not matches:
            raise DeviceSelectionError(f"No device with serial {spec}")
        path = matches[0]

    return await manager.get_device(path)


class Command(ABC):
    """
    Base class for CLI commands.

    Subclasses must implement:
    - name: Command name (used as subparser name)
    - help: Short help text
    - configure_parser(): Add command-specific arguments
    - run_async(): Execute the command against a connected Manager
    """

    name: ClassVar[str]
    help: ClassVar[str]
    aliases: ClassVar[list[str]] = []

    def __init__(self, cli: RazerTrayCLI):
        self.cli = cli

    @property
    def out(self):
        return self.cli.out

    @classmethod
    def register(cls, cli: RazerTrayCLI, subparsers) -> "Command":
        """Create the subparser and return a command instance."""
        instance = cls(cli)

        parser = subparsers.add_parser(
            cls.name,
            help=cls.help,
            aliases=cls.aliases,
        )
        instance.configure_parser(parser)
        parser.set_defaults(cmd_instance=instance)

        return instance

    @abstractmethod
    def configure_parser(self, parser: ArgumentParser) -> None:
        """Add command-specific arguments to the parser."""
        ...

    @abstractmethod
    async def run_async(self, manager: Manager, args: Namespace) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success)
        """
        ...

    async def connect(self) -> Manager:
        return await Manager.connect(self.cli.settings.bus)

    async def _run(self, args: Namespace) -> int:
        manager = await self.connect()
        async with manager:
            return await self.run_async(manager, args)

    def run(self, args: Namespace) -> int:
        """Run the command on a fresh event loop."""
        return asyncio.run(self._run(args))

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    async def require_device(self, manager: Manager, args: Namespace):
        return await select_device(manager, getattr(args, "device_spec", None))

    def print(self, *args, **kwargs):
        print(*args, **kwargs)

    def error(self, message: str) -> int:
        self.print(self.out.error(message))
        return 1

    def success(self, message: str) -> int:
        self.print(self.out.success(message))
        return 0
