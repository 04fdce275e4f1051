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
"""
Synchronized lighting across all supported devices.

Colors and themes are resolved before any device is touched. After
that each device is handled on its own: a missing or unwritable
device is recorded and the remaining devices are still updated.
"""

from typing import NamedTuple

from .color import ColorResolver, MouseColorResolver, RGBTriple, rgb_from_hex, to_hex
from .device_manager import DeviceManager, KEYBOARD_KEYS, LEGION, RAZER_MOUSE
from .errors import DeviceError
from .hardware import Hardware
from .log import Log
from .protocol import ITEBrightness
from .settings import DEFAULTS, Settings
from .theme import ThemeExtractor


# Legion keyboards are always synced at full brightness
LEGION_SYNC_BRIGHTNESS = ITEBrightness.HIGH.value


DeviceOutcome = NamedTuple('DeviceOutcome', [('device', str),
                                             ('ok', bool),
                                             ('action', str),
                                             ('error', Exception)])


class SyncResult(NamedTuple('SyncResult', [('color', RGBTriple),
                                           ('theme', str),
                                           ('outcomes', tuple)])):
    """
    The color applied and what happened on each device
    """
    __slots__ = ()

    @property
    def failures(self) -> tuple:
        return tuple(x for x in self.outcomes if not x.ok)


    @property
    def hex_color(self) -> str:
        return to_hex(self.color)


class SyncOrchestrator(object):
    """
    Applies one color to every device in the fixed order Legion
    keyboard, Razer keyboard, then the mouse

    The mouse only shows color for whitelisted themes and is
    turned off otherwise.
    """

    def __init__(self, devices: DeviceManager = None, settings: Settings = None,
                 resolver: ColorResolver = None, mouse_resolver: ColorResolver = None,
                 themes: ThemeExtractor = None):
        self._logger = Log.get('rgbsync.sync')

        if devices is None:
            devices = DeviceManager()
        if settings is None:
            settings = DEFAULTS
        if resolver is None:
            resolver = ColorResolver()
        if mouse_resolver is None:
            mouse_resolver = MouseColorResolver()
        if themes is None:
            themes = ThemeExtractor(settings.theme_dirs)

        self._devices = devices
        self._settings = settings
        self._resolver = resolver
        self._mouse_resolver = mouse_resolver
        self._themes = themes
        self._mouse_enabled_themes = frozenset(settings.mouse_enabled_themes)
        self._razer_brightness = int(settings.razer_brightness)


    @property
    def themes(self) -> ThemeExtractor:
        return self._themes


    def mouse_enabled(self, theme: str) -> bool:
        """
        True if the mouse LED should be lit for a theme

        Theme names are matched exactly, case included.
        """
        return theme in self._mouse_enabled_themes


    @staticmethod
    def _device_name(key: str) -> str:
        hardware = Hardware.get_device(key)
        if hardware is None:
            return key
        return hardware.name


    def _apply(self, key: str, action: str, func) -> DeviceOutcome:
        name = self._device_name(key)
        try:
            func(self._devices.get(key))

        except (DeviceError, OSError) as err:
            self._logger.error('%s: %s', name, err)
            return DeviceOutcome(device=name, ok=False, action=action, error=err)

        return DeviceOutcome(device=name, ok=True, action=action, error=None)


    def _sync_keyboards(self, rgb: RGBTriple) -> list:
        outcomes = []
        for key in KEYBOARD_KEYS:
            level = LEGION_SYNC_BRIGHTNESS if key == LEGION else self._razer_brightness
            outcomes.append(self._apply(key, 'static',
                                        lambda dev, level=level: dev.set_static(rgb, level)))
        return outcomes


    def _mouse_off(self) -> DeviceOutcome:
        return self._apply(RAZER_MOUSE, 'off', lambda dev: dev.off())


    def _mouse_on(self) -> DeviceOutcome:
        rgb = self._mouse_resolver.resolve('green')
        return self._apply(RAZER_MOUSE, 'static',
                           lambda dev: dev.set_static(rgb, self._razer_brightness))


    def manual(self, color_spec: str) -> SyncResult:
        """
        Set both keyboards to a color and turn the mouse off

        :param color_spec: Any color token
        :return: The SyncResult
        """
        rgb = self._resolver.resolve(color_spec)
        self._logger.info('Syncing keyboards to #%s', to_hex(rgb))

        outcomes = self._sync_keyboards(rgb)
        outcomes.append(self._mouse_off())

        return SyncResult(color=rgb, theme=None, outcomes=tuple(outcomes))


    def theme(self, name: str) -> SyncResult:
        """
        Set both keyboards to the accent color of a theme

        The mouse LED is lit green for whitelisted themes, and
        turned off for all others.

        :param name: Theme name
        :return: The SyncResult
        """
        accent = self._themes.get_accent(name)
        rgb = rgb_from_hex(accent.accent)
        self._logger.info('Syncing keyboards with theme %s', name)

        outcomes = self._sync_keyboards(rgb)
        if self.mouse_enabled(name):
            self._logger.info('Enabling mouse LED for theme: %s', name)
            outcomes.append(self._mouse_on())
        else:
            outcomes.append(self._mouse_off())

        return SyncResult(color=rgb, theme=name, outcomes=tuple(outcomes))


    def auto(self) -> SyncResult:
        """
        Sync with the active theme
        """
        name = self._themes.current_theme()
        self._logger.info('Detected current theme: %s', name)

        return self.theme(name)
