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
from .hardware import Hardware
from .locator import DeviceInfo
from .log import Log


class BaseDevice(object):
    """
    Base class for device objects

    A device lives for the duration of one command. Control nodes
    are opened per write and never held open.
    """

    def __init__(self, info: DeviceInfo):
        self._info = info
        self.logger = Log.get('rgbsync.device.%s' % info.hardware.key)


    @property
    def hardware(self) -> Hardware:
        """
        The static hardware descriptor
        """
        return self._info.hardware


    @property
    def name(self) -> str:
        return self.hardware.name


    @property
    def key(self) -> str:
        return self.hardware.key


    @property
    def family(self) -> Hardware.Family:
        return self.hardware.family


    @property
    def node(self) -> str:
        """
        Path of the control node, a hidraw device or sysfs directory
        """
        return self._info.node


    @property
    def capabilities(self) -> tuple:
        """
        Control attributes found when the device was located
        """
        return self._info.capabilities


    def set_static(self, rgb: tuple, brightness=None):
        """
        Set a solid color

        :param rgb: Tuple of RGB ints
        :param brightness: Device specific brightness, default if None
        """
        raise NotImplementedError


    def off(self):
        """
        Turn the lighting off
        """
        raise NotImplementedError


    def __str__(self):
        return '%s(%s)' % (self.__class__.__name__, self.node)


    __repr__ = __str__
