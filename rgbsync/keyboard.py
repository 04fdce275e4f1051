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
from .locator import DeviceInfo
from .protocol import SysfsProtocol


class RazerKeyboard(BaseDevice):
    """
    Razer keyboard driven by the OpenRazer razerkbd driver
    """

    ATTRS = {
        'brightness': 'matrix_brightness',
        'static': 'matrix_effect_static',
        'breath': 'matrix_effect_breath',
        'spectrum': 'matrix_effect_spectrum',
        'wave': 'matrix_effect_wave',
        'reactive': 'matrix_effect_reactive',
        'none': 'matrix_effect_none'}

    DEFAULT_BRIGHTNESS = 255


    def __init__(self, info: DeviceInfo):
        super().__init__(info)
        self._protocol = SysfsProtocol(self.name, info.sys_path, info.capabilities,
                                       self.ATTRS)


    @property
    def protocol(self) -> SysfsProtocol:
        return self._protocol


    def _apply(self, brightness, writes) -> list:
        if brightness is None:
            brightness = self.DEFAULT_BRIGHTNESS
        return self._protocol.apply(self._protocol.brightness(brightness) + writes)


    def set_static(self, rgb: tuple, brightness=None) -> list:
        self.logger.info('Setting static: #%s brightness=%s', to_hex(rgb), brightness)
        return self._apply(brightness, self._protocol.static(rgb))


    def set_breath(self, rgb: tuple, brightness=None) -> list:
        self.logger.info('Setting breathing effect: #%s', to_hex(rgb))
        return self._apply(brightness, self._protocol.breath(rgb))


    def set_spectrum(self, brightness=None) -> list:
        self.logger.info('Setting spectrum effect')
        return self._apply(brightness, self._protocol.spectrum())


    def set_wave(self, brightness=None, direction: int = 1) -> list:
        self.logger.info('Setting wave effect, direction=%d', direction)
        return self._apply(brightness, self._protocol.wave(direction))


    def set_reactive(self, rgb: tuple, brightness=None, speed: int = 2) -> list:
        self.logger.info('Setting reactive effect: #%s speed=%d', to_hex(rgb), speed)
        return self._apply(brightness, self._protocol.reactive(rgb, speed))


    def off(self) -> list:
        self.logger.info('Turning off keyboard lights')
        return self._protocol.apply(self._protocol.off())
