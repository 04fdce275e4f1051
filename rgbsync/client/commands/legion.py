#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
Legion command: direct control of the laptop keyboard.
"""

from argparse import ArgumentParser, Namespace

from rgbsync.client.commands.base import Command
from rgbsync.color import ColorResolver, to_hex
from rgbsync.device_manager import LEGION
from rgbsync.protocol import ITEEffect, ITEReport, check_range


class LegionCommand(Command):
    """Control the Legion keyboard lighting."""

    name = "legion"
    help = "Control the Legion laptop keyboard"

    def configure_parser(self, parser: ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="action", metavar="ACTION", required=True)

        static = sub.add_parser("static", help="solid color")
        static.add_argument("color", help="color name, hex code or r,g,b")
        static.add_argument(
            "brightness", nargs="?", default=2,
            help="1 (low) or 2 (high), default 2",
        )

        effect = sub.add_parser("effect", help="hardware effect")
        effect.add_argument("effect", type=str.lower, help="static, breath, wave or hue")
        effect.add_argument("color", nargs="?", default="red", help="default red")
        effect.add_argument(
            "speed", nargs="?", default=2,
            help="1 (fast) to 4 (slow), default 2",
        )
        effect.add_argument(
            "brightness", nargs="?", default=2,
            help="1 (low) or 2 (high), default 2",
        )

        sub.add_parser("config", help="apply mode, color, speed and brightness from settings")
        sub.add_parser("off", help="turn lighting off")

    def run(self, args: Namespace) -> int:
        resolver = ColorResolver()

        if args.action == "config":
            settings = self.settings(args)
            self.devices().get(LEGION).apply_settings(settings, resolver)
            return self.success(f"Applied {settings.mode.name.lower()} from settings")

        if args.action == "off":
            device = self.devices().get(LEGION)
            device.off()
            return self.success(f"{device.name}: off")

        rgb = resolver.resolve(args.color)
        brightness = check_range("brightness", args.brightness, ITEReport.BRIGHTNESS_RANGE)

        if args.action == "static":
            device = self.devices().get(LEGION)
            device.set_static(rgb, brightness)
            return self.success(f"{device.name} set to #{to_hex(rgb)}")

        effect = ITEEffect.get(args.effect)
        speed = check_range("speed", args.speed, ITEReport.SPEED_RANGE)

        device = self.devices().get(LEGION)
        device.set_effect(effect, rgb, speed=speed, brightness=brightness)
        return self.success(f"{device.name} {args.effect} effect, #{to_hex(rgb)}")
