#
# rgbsync - Copyright (C) 2026 rgbsync developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
from .color import to_hex
from .device_base import BaseDevice
from .protocol import ITEBrightness, ITEEffect, ITEReport, ITESpeed


class LegionKeyboard(BaseDevice):
    """
    Legion laptop keyboard with an ITE lighting controller
    """

    DEFAULT_BRIGHTNESS = ITEBrightness.HIGH.value
    DEFAULT_SPEED = ITESpeed.MEDIUM.value
    DEFAULT_STATIC_COLOR = 'white'
    DEFAULT_EFFECT_COLOR = (255, 0, 0)


    def set_effect(self, effect, rgb: tuple = DEFAULT_EFFECT_COLOR,
                   speed: int = DEFAULT_SPEED, brightness: int = DEFAULT_BRIGHTNESS) -> bytes:
        """
        Apply a hardware effect

        :param effect: Effect name or ITEEffect
        :param rgb: Tuple of RGB ints, used for all four zones
        :param speed: 1 (fastest) to 4 (slowest)
        :param brightness: 1 (low) or 2 (high)

        :return: The packet written
        """
        report = ITEReport(effect, rgb, speed=speed, brightness=brightness)
        self.logger.info('Setting effect: %s #%s speed=%s brightness=%s',
                         report.effect.name.lower(), to_hex(rgb), speed, brightness)
        return report.send(self.node)


    def set_static(self, rgb: tuple, brightness=None) -> bytes:
        if brightness is None:
            brightness = LegionKeyboard.DEFAULT_BRIGHTNESS
        return self.set_effect(ITEEffect.STATIC, rgb, speed=1, brightness=brightness)


    def off(self) -> bytes:
        return self.set_static((0, 0, 0))


    def apply_settings(self, settings, resolver) -> bytes:
        """
        Apply the lighting mode stored in the local configuration

        :param settings: Settings with mode, color, speed and brightness
        :param resolver: ColorResolver for the configured color
        """
        if settings.mode == ITEEffect.STATIC:
            rgb = resolver.resolve(settings.color or LegionKeyboard.DEFAULT_STATIC_COLOR)
            return self.set_static(rgb, settings.brightness.value)

        rgb = LegionKeyboard.DEFAULT_EFFECT_COLOR
        if settings.color is not None:
            rgb = resolver.resolve(settings.color)

        return self.set_effect(settings.mode, rgb, speed=settings.speed.value,
                               brightness=settings.brightness.value)
