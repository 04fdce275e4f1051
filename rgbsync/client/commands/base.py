#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
Base command class for CLI commands.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import ClassVar

from rgbsync.client.cli_base import RGBSyncCLI
from rgbsync.device_manager import DeviceManager
from rgbsync.protocol import SysfsProtocol, check_range
from rgbsync.settings import Settings, load_settings
from rgbsync.sync import SyncOrchestrator, SyncResult


def razer_brightness(value) -> int:
    """Parse a 0-255 brightness level, raising ValueError when invalid."""
    return check_range("brightness", value, SysfsProtocol.BRIGHTNESS_RANGE)


class Command(ABC):
    """
    Base class for CLI commands.

    Subclasses must implement:
    - name: Command name (used as subparser name)
    - help: Short help text
    - configure_parser(): Add command-specific arguments
    - run(): Execute the command
    """

    name: ClassVar[str]
    help: ClassVar[str]
    aliases: ClassVar[list[str]] = []

    def __init__(self, cli: RGBSyncCLI):
        self.cli = cli

    @property
    def out(self):
        # the CLI swaps its Output when --no-color is given
        return self.cli.out

    @classmethod
    def register(cls, cli: RGBSyncCLI, subparsers) -> "Command":
        """
        Register this command with the CLI.

        Creates the subparser and returns a command instance.
        """
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
    def run(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed arguments

        Returns:
            Exit code (0 for success)
        """
        ...

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def settings(self, args: Namespace) -> Settings:
        """Load settings, honoring --config."""
        return load_settings(getattr(args, "config", None))

    def devices(self) -> DeviceManager:
        return DeviceManager()

    def orchestrator(self, args: Namespace) -> SyncOrchestrator:
        return SyncOrchestrator(devices=self.devices(), settings=self.settings(args))

    def print(self, *args, **kwargs):
        """Print to stdout."""
        print(*args, **kwargs)

    def success(self, message: str) -> int:
        """Print success and return exit code 0."""
        print(self.out.success(message))
        return 0

    def report(self, result: SyncResult) -> int:
        """
        Print the outcome of a sync, one line per device.

        A sync succeeds once the color is resolved, device failures
        are reported but do not change the exit code.
        """
        color = self.out.swatch(result.color, f"#{result.hex_color}")
        if result.theme is not None:
            self.print(f"Theme {self.out.value(result.theme)}: {color}")
        else:
            self.print(f"Color: {color}")

        for outcome in result.outcomes:
            if outcome.ok:
                self.print(self.out.success(f"{self.out.device(outcome.device)} {outcome.action}"))
            else:
                self.print(self.out.warning(
                    f"{self.out.device(outcome.device)} skipped: "
                    f"{self.cli.format_error(outcome.error)}"))

        return 0
