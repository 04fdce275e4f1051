#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
CLI base infrastructure.

Provides the foundation for the rgbsync CLI with:
- Global flags (debug, color, settings file)
- Output styling integration
- Subcommand registration
- Classified error reporting
"""

import logging
import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter

from argcomplete import autocomplete

from rgbsync.client.output import Output
from rgbsync.errors import PermissionDenied, RGBSyncError
from rgbsync.log import Log
from rgbsync.version import __version__


class RGBSyncCLI:
    """
    Base CLI handler with global options and semantic output.

    Usage:
        cli = RGBSyncCLI()
        subparsers = cli.add_subparsers()
        # Register commands...
        args = cli.parse_args()
    """

    def __init__(self):
        self.out = Output()
        self.parser = self._create_parser()
        self._subparsers = None

    def _create_parser(self) -> ArgumentParser:
        """Create the root argument parser."""
        parser = ArgumentParser(
            prog="rgbsync",
            description="Keyboard and mouse lighting in sync with Omarchy themes",
            formatter_class=RawDescriptionHelpFormatter,
            epilog=self._epilog(),
        )

        parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"rgbsync {__version__}",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="enable debug output",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="log device discovery and writes",
        )
        parser.add_argument(
            "--no-color",
            action="store_true",
            help="disable colored output",
        )
        parser.add_argument(
            "--config",
            type=str,
            metavar="FILE",
            help="settings file (default: ~/.config/rgbsync/config.yaml)",
        )

        return parser

    def _epilog(self) -> str:
        """Generate help epilog with examples."""
        return """\
Colors:
  red, green, blue, white, cyan, magenta, yellow, orange, purple, pink, off
  #FF0000 or FF0000
  255,0,0

Examples:
  rgbsync auto                   Sync with the current theme (use at startup)
  rgbsync set cyan               All keyboards cyan, mouse off
  rgbsync theme hackerman        Keyboards to theme accent, mouse green
  rgbsync legion effect wave     Legion rainbow wave
  rgbsync razer breath purple    Razer breathing effect
"""

    def add_subparsers(self):
        """
        Add subparser container for commands.

        Call this before registering commands. Returns the same
        subparsers object on subsequent calls.
        """
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(
                title="commands",
                dest="command",
                metavar="COMMAND",
            )
        return self._subparsers

    def parse_args(self, args: list[str] | None = None) -> Namespace:
        """
        Parse command line arguments and set up output and logging.
        """
        autocomplete(self.parser)

        if args is None:
            args = sys.argv[1:]

        parsed = self.parser.parse_args(args)

        if parsed.no_color:
            self.out = Output(force_color=False)

        self._setup_logging(parsed)

        return parsed

    def _setup_logging(self, parsed: Namespace) -> None:
        """Logs are diagnostics, results are printed by the commands."""
        Log.enable_color(self.out.color_enabled)

        if parsed.debug:
            Log.set_level(logging.DEBUG)
        elif parsed.verbose:
            Log.set_level(logging.INFO)
        else:
            Log.set_level(logging.CRITICAL)

    # ─────────────────────────────────────────────────────────────────────────
    # Output helpers
    # ─────────────────────────────────────────────────────────────────────────

    def format_error(self, err: Exception) -> str:
        """Classified one-line error message."""
        if isinstance(err, RGBSyncError):
            return f"{err.kind}: {err}"
        return f"{type(err).__name__}: {err}"

    def report_error(self, err: Exception) -> int:
        """Print a classified error, with the udev hint if any. Returns 1."""
        print(self.out.error(self.format_error(err)), file=sys.stderr)

        if isinstance(err, PermissionDenied) and err.hint is not None:
            for line in err.hint.splitlines():
                print(f"  {self.out.muted(line)}", file=sys.stderr)

        return 1
