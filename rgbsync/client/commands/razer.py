#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
Razer command: direct control of the keyboard through OpenRazer.
"""

from argparse import ArgumentParser, Namespace

from rgbsync.client.commands.base import Command, razer_brightness
from rgbsync.color import ColorResolver
from rgbsync.device_manager import RAZER_KEYBOARD
from rgbsync.protocol import SysfsProtocol, check_range


class RazerCommand(Command):
    """Control the Razer keyboard lighting."""

    name = "razer"
    help = "Control the Razer keyboard"

    def _brightness(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "brightness", nargs="?", default=255,
            help="0-255, default 255",
        )

    def configure_parser(self, parser: ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="action", metavar="ACTION", required=True)

        for action, text in (("static", "solid color"), ("breath", "breathing effect")):
            effect = sub.add_parser(action, help=text)
            effect.add_argument("color", help="color name, hex code or r,g,b")
            self._brightness(effect)

        self._brightness(sub.add_parser("spectrum", help="spectrum cycling"))

        wave = sub.add_parser("wave", help="wave effect")
        self._brightness(wave)
        wave.add_argument(
            "direction", nargs="?", default=1,
            help="1 (right) or 2 (left), default 1",
        )

        reactive = sub.add_parser("reactive", help="light up on key press")
        reactive.add_argument("color", help="color name, hex code or r,g,b")
        self._brightness(reactive)
        reactive.add_argument(
            "speed", nargs="?", default=2,
            help="1 (short) to 3 (long), default 2",
        )

        sub.add_parser("off", help="turn lighting off")

    def run(self, args: Namespace) -> int:
        rgb = None
        if getattr(args, "color", None) is not None:
            rgb = ColorResolver().resolve(args.color)

        brightness = None
        if args.action != "off":
            brightness = razer_brightness(args.brightness)

        device = self.devices().get(RAZER_KEYBOARD)

        if args.action == "static":
            device.set_static(rgb, brightness)
        elif args.action == "breath":
            device.set_breath(rgb, brightness)
        elif args.action == "spectrum":
            device.set_spectrum(brightness)
        elif args.action == "wave":
            device.set_wave(brightness, check_range(
                "wave direction", args.direction, SysfsProtocol.WAVE_DIRECTION_RANGE))
        elif args.action == "reactive":
            device.set_reactive(rgb, brightness, check_range(
                "reactive speed", args.speed, SysfsProtocol.REACTIVE_SPEED_RANGE))
        else:
            device.off()

        return self.success(f"{device.name}: {args.action}")
