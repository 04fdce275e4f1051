#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
Mouse command: the logo LED of the Razer mouse.
"""

from argparse import ArgumentParser, Namespace

from rgbsync.client.commands.base import Command, razer_brightness
from rgbsync.color import MouseColorResolver
from rgbsync.device_manager import RAZER_MOUSE


class MouseCommand(Command):
    """Control the Razer mouse LED."""

    name = "mouse"
    help = "Control the Razer mouse LED"

    def configure_parser(self, parser: ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="action", metavar="ACTION", required=True)

        static = sub.add_parser("static", help="turn the LED on")
        static.add_argument("color", nargs="?", default="green", help="green (default) or off")
        static.add_argument(
            "brightness", nargs="?", default=255,
            help="0-255, default 255",
        )

        sub.add_parser("off", help="turn the LED off")

        should = sub.add_parser("should-enable", help="exit 0 if the LED is lit for a theme")
        should.add_argument("theme", help="theme name")

    def run(self, args: Namespace) -> int:
        if args.action == "should-enable":
            enabled = self.orchestrator(args).mouse_enabled(args.theme)
            self.print(f"{args.theme}: {'on' if enabled else 'off'}")
            return 0 if enabled else 1

        if args.action == "off":
            device = self.devices().get(RAZER_MOUSE)
            device.off()
            return self.success(f"{device.name}: off")

        rgb = MouseColorResolver().resolve(args.color)
        brightness = razer_brightness(args.brightness)

        device = self.devices().get(RAZER_MOUSE)
        device.set_static(rgb, brightness)

        return self.success(f"{device.name}: {args.action}")
