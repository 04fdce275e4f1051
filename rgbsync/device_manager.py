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
from .device_base import BaseDevice
from .errors import DeviceNotFound
from .hardware import Hardware
from .keyboard import RazerKeyboard
from .laptop import LegionKeyboard
from .locator import DeviceInfo, DeviceLocator
from .log import Log
from .mouse import RazerMouse


LEGION = 'legion'
RAZER_KEYBOARD = 'razer-keyboard'
RAZER_MOUSE = 'razer-mouse'

# Keyboards are synced in this order, the mouse always last
KEYBOARD_KEYS = (LEGION, RAZER_KEYBOARD)


class DeviceManager(object):
    """
    Creates device objects for entries of the hardware catalog

    Nothing is cached, every call locates the device again so
    a command always acts on the current state of the system.
    """

    def __init__(self, locator: DeviceLocator = None):
        self._logger = Log.get('rgbsync.devicemanager')

        if locator is None:
            locator = DeviceLocator()
        self._locator = locator


    @property
    def locator(self) -> DeviceLocator:
        return self._locator


    @staticmethod
    def _create_device(info: DeviceInfo) -> BaseDevice:
        family = info.hardware.family

        if family == Hardware.Family.LEGION_KEYBOARD:
            return LegionKeyboard(info)

        if family == Hardware.Family.RAZER_KEYBOARD:
            return RazerKeyboard(info)

        if family == Hardware.Family.RAZER_MOUSE:
            return RazerMouse(info)

        raise ValueError('Unsupported device family: %s' % family)


    def get(self, key: str) -> BaseDevice:
        """
        Locate a device and check its permissions

        :param key: Catalog key, like "legion" or "razer-mouse"
        :return: The device object
        """
        hardware = Hardware.get_device(key)
        if hardware is None:
            raise DeviceNotFound('Unknown device: %s' % key)

        device = self._create_device(self._locator.locate(hardware))
        self._logger.debug('Opened %s', device)

        return device
