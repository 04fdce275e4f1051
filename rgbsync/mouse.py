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
from .color import MOUSE_PRESET_COLORS
from .device_base import BaseDevice
from .locator import DeviceInfo
from .protocol import SysfsProtocol


class RazerMouse(BaseDevice):
    """
    Razer mouse with a single-color logo LED
    """

    ATTRS = {
        'brightness': 'logo_led_brightness',
        'static': 'logo_matrix_effect_static',
        'none': 'logo_matrix_effect_none',
        'state': 'logo_led_state'}

    DEFAULT_BRIGHTNESS = 255
    DEFAULT_COLOR = MOUSE_PRESET_COLORS['green']


    def __init__(self, info: DeviceInfo):
        super().__init__(info)
        self._protocol = SysfsProtocol(self.name, info.sys_path, info.capabilities,
                                       self.ATTRS)


    @property
    def protocol(self) -> SysfsProtocol:
        return self._protocol


    def set_static(self, rgb: tuple = DEFAULT_COLOR, brightness=None) -> list:
        if brightness is None:
            brightness = self.DEFAULT_BRIGHTNESS

        writes = []
        # brightness is optional on these devices
        if self._protocol.supports('brightness'):
            writes.extend(self._protocol.brightness(brightness))
        writes.extend(self._protocol.led_on(rgb))

        self.logger.info('Setting mouse LED: RGB%s brightness=%s', rgb, brightness)
        return self._protocol.apply(writes)


    def off(self) -> list:
        self.logger.info('Turning off mouse LED')
        return self._protocol.apply(self._protocol.off())
