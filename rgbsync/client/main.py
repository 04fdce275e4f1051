#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
CLI main entry point.

Run with:
    python -m rgbsync.client.main
    or via the 'rgbsync' console script
"""

import sys

from rgbsync.client.cli_base import RGBSyncCLI
from rgbsync.client.commands import COMMANDS
from rgbsync.errors import RGBSyncError


def main(args: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    cli = RGBSyncCLI()

    subparsers = cli.add_subparsers()
    for cmd_cls in COMMANDS:
        cmd_cls.register(cli, subparsers)

    parsed = cli.parse_args(args)

    if not hasattr(parsed, "cmd_instance"):
        cli.parser.print_help()
        return 0

    try:
        return parsed.cmd_instance.run(parsed)
    except KeyboardInterrupt:
        print()  # Clean line after ^C
        return 130
    except (RGBSyncError, OSError, ValueError) as e:
        if parsed.debug:
            raise
        return cli.report_error(e)


def cli_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
