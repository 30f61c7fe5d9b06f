#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
CLI main entry point.

Run with:
    python -m razertray.cli.main
    or via the 'razertray' console script
"""

import sys

from razertray.cli.cli_base import RazerTrayCLI
from razertray.cli.commands import COMMANDS
from razertray.cli.commands.base import DeviceSelectionError
from razertray.config import ConfigError
from razertray.openrazer import OpenRazerError


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    cli = RazerTrayCLI()

    subparsers = cli.add_subparsers()
    for cmd_cls in COMMANDS:
        cmd_cls.register(cli, subparsers)

    try:
        parsed = cli.parse_args(args)
    except ConfigError as e:
        cli.error(str(e))
        return 1

    if getattr(parsed, "cmd_instance", None) is None:
        cli.parser.print_help()
        return 0

    try:
        return parsed.cmd_instance.run(parsed)
    except KeyboardInterrupt:
        print()  # Clean line after ^C
        return 130
    except (OpenRazerError, DeviceSelectionError) as e:
        if parsed.debug:
            raise
        cli.error(str(e))
        return 1


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
