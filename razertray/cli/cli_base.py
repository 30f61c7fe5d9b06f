#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
CLI base infrastructure.

Provides the root parser, subcommand registration, device
selection (--device flag or @device syntax), settings loading
and output styling.
"""

import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter

from argcomplete import autocomplete

from razertray.cli.output import Output
from razertray.config import load_settings
from razertray.log import Log
from razertray.version import __version__


class RazerTrayCLI:
    """
    Root CLI handler.

    Usage:
        cli = RazerTrayCLI()
        subparsers = cli.add_subparsers()
        # Register commands...
        args = cli.parse_args()
    """

    def __init__(self):
        self.out = Output()
        self.settings = None
        self.parser = self._create_parser()
        self._subparsers = None

    def _create_parser(self) -> ArgumentParser:
        parser = ArgumentParser(
            prog="razertray",
            description="Query and control OpenRazer devices",
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._epilog(),
        )

        parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"razertray {__version__}",
        )
        parser.add_argument(
            "-d",
            "--device",
            type=str,
            metavar="DEVICE",
            help="device index, serial or object path (or use @device prefix)",
        )
        parser.add_argument(
            "-c",
            "--config",
            type=str,
            metavar="FILE",
            help="configuration file",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="enable debug output",
        )
        parser.add_argument(
            "--no-color",
            action="store_true",
            help="disable colored output",
        )

        return parser

    def _epilog(self) -> str:
        return """\
Device Selection:
  @0                   Select by index
  @XX0000000001        Select by serial
  -d /org/razer/...    Select by object path

Examples:
  razertray devices            List devices and their capabilities
  razertray battery            Show the battery level
  razertray @0 dpi 1600        Set DPI
  razertray poll-rate 500      Set polling rate
"""

    def _extract_device_spec(self, args: list[str]) -> tuple[str | None, list[str]]:
        """
        Extract the first @device specifier from the argument list.

        Returns:
            (device_spec, remaining_args)
        """
        device_spec = None
        remaining = []

        for arg in args:
            if arg.startswith("@") and device_spec is None:
                device_spec = arg[1:]
            else:
                remaining.append(arg)

        return device_spec, remaining

    def add_subparsers(self):
        """Return the subparser container, creating it on first use."""
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(
                title="commands",
                dest="command",
                metavar="COMMAND",
            )
        return self._subparsers

    def parse_args(self, args: list[str] | None = None) -> Namespace:
        """
        Parse command line arguments and load settings.

        The --device flag takes precedence over @device syntax.
        """
        autocomplete(self.parser)

        if args is None:
            args = sys.argv[1:]

        at_device_spec, remaining = self._extract_device_spec(args)
        parsed = self.parser.parse_args(remaining)

        if parsed.device is not None:
            parsed.device_spec = parsed.device
        else:
            parsed.device_spec = at_device_spec

        self.settings = load_settings(parsed.config)

        color = self.settings.color and not parsed.no_color
        if not color:
            self.out = Output(force_color=False)
        Log.enable_color(color and self.out.color_enabled)
        Log.set_level("debug" if parsed.debug else self.settings.log_level)

        return parsed

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(self.out.error(message), file=sys.stderr)
