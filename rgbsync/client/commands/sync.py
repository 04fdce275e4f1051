#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
Sync commands: one color across every device.
"""

from argparse import ArgumentParser, Namespace

from rgbsync.client.commands.base import Command


class SetCommand(Command):
    """Set all keyboards to one color and turn the mouse off."""

    name = "set"
    help = "Set all keyboards to a color"

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "color",
            type=str,
            help="color name, hex code or r,g,b",
        )

    def run(self, args: Namespace) -> int:
        return self.report(self.orchestrator(args).manual(args.color))


class ThemeCommand(Command):
    """Sync all devices with an Omarchy theme."""

    name = "theme"
    help = "Sync with an Omarchy theme"

    def configure_parser(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "theme",
            type=str,
            help="theme name",
        )

    def run(self, args: Namespace) -> int:
        return self.report(self.orchestrator(args).theme(args.theme))


class AutoCommand(Command):
    """Sync with the active theme, for use at login."""

    name = "auto"
    help = "Sync with the current Omarchy theme"

    def configure_parser(self, parser: ArgumentParser) -> None:
        pass

    def run(self, args: Namespace) -> int:
        return self.report(self.orchestrator(args).auto())
