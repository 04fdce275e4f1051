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

# pylint: disable=invalid-name

"""
Wire formats for the supported lighting controllers.

ITEReport builds the fixed 32-byte packet of the ITE controller found
in Legion laptops. SysfsProtocol plans the attribute writes understood
by the OpenRazer kernel drivers.
"""

import os
import time

from enum import Enum
from typing import NamedTuple

from .byte_args import ByteArgs
from .errors import InvalidEffect, UnsupportedCapability
from .log import Log, LOG_PROTOCOL_TRACE


def check_range(name, value, range_) -> int:
    """
    Convert a level to int and verify it lies within range_

    :raises ValueError: If the value is not a number or out of range
    """
    if isinstance(value, Enum):
        value = value.value
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValueError('%s must be a number (got %r)' % (name, value)) from None
    if not range_[0] <= value <= range_[1]:
        raise ValueError('%s must be between %d and %d (got %d)' % \
            (name, range_[0], range_[1], value))
    return value


class ITEEffect(Enum):
    """
    Effect codes of the ITE controller
    """
    STATIC = 0x01
    BREATH = 0x03
    WAVE = 0x04
    HUE = 0x06

    @classmethod
    def get(cls, name) -> 'ITEEffect':
        if isinstance(name, ITEEffect):
            return name
        if name is None or name.upper() not in cls.__members__:
            raise InvalidEffect(name, [x.name.lower() for x in cls])
        return cls[name.upper()]


class ITESpeed(Enum):
    """
    Named animation speeds, 1 is fastest
    """
    FAST = 1
    MEDIUM = 2
    SLOW = 4


class ITEBrightness(Enum):
    """
    The ITE controller has two brightness levels
    """
    LOW = 1
    HIGH = 2


class ITEReport(object):
    """
    Generates the lighting packet sent to the ITE controller.

    The packet is always 32 bytes and has the following
    structure:

        Bytes       Contents
        ---------   ----------------------
        0 - 1       Header (0xCC 0x16)
        2           Effect code
        3           Speed (1-4, 1 is fastest)
        4           Brightness (1 low, 2 high)
        5 - 16      RGB for 4 zones, 3 bytes each
        17          Unused
        18 - 19     Wave direction (zero)
        20 - 31     Padding

    All zones always carry the same color.
    """

    HEADER = (0xCC, 0x16)

    BUF_SIZE = 32
    ZONES = 4

    SPEED_RANGE = (1, 4)
    BRIGHTNESS_RANGE = (1, 2)

    # Time to wait after a write so the controller can process it
    SETTLE_TIME = 0.1

    def __init__(self, effect, rgb: tuple, speed: int = 1, brightness: int = 2):
        self._logger = Log.get('rgbsync.protocol')

        self._effect = ITEEffect.get(effect)
        self._speed = check_range('speed', speed, ITEReport.SPEED_RANGE)
        self._brightness = check_range('brightness', brightness,
                                        ITEReport.BRIGHTNESS_RANGE)
        self._rgb = tuple(check_range('color', x, (0, 255)) for x in rgb)

        if len(self._rgb) != 3:
            raise ValueError('Expected an RGB triple, got %s' % (rgb,))


    @property
    def effect(self) -> ITEEffect:
        return self._effect


    def pack(self) -> bytes:
        """
        Assemble the packet

        :return: The 32 packet bytes
        """
        args = ByteArgs(ITEReport.BUF_SIZE)
        args.put(ITEReport.HEADER)
        args.put(self._effect)
        args.put(self._speed)
        args.put(self._brightness)
        for _ in range(ITEReport.ZONES):
            args.put(self._rgb)

        # unused byte and wave direction, the rest is padding
        args.skip(3)

        return bytes(args)


    def _hexdump(self, data: bytes):
        if self._logger.isEnabledFor(LOG_PROTOCOL_TRACE):
            self._logger.log(LOG_PROTOCOL_TRACE, 'ITE packet: %s', data.hex(' '))


    def send(self, node: str) -> bytes:
        """
        Write the packet to the device node and wait for the
        controller to settle.

        :param node: Path of the hidraw node
        :return: The bytes written
        """
        data = self.pack()
        self._hexdump(data)

        with open(node, 'wb', buffering=0) as dev:
            dev.write(data)

        time.sleep(ITEReport.SETTLE_TIME)

        return data


SysfsWrite = NamedTuple('SysfsWrite', [('attr', str), ('payload', bytes)])


class SysfsProtocol(object):
    """
    Plans and performs attribute writes for OpenRazer sysfs devices

    Text values are written with a trailing newline, colors as raw
    bytes. Attribute choice is made from the capabilities found when
    the device was located, the filesystem is not probed again.
    """

    BRIGHTNESS_RANGE = (0, 255)
    WAVE_DIRECTION_RANGE = (1, 2)
    REACTIVE_SPEED_RANGE = (1, 3)

    def __init__(self, name: str, sys_path: str, capabilities: tuple, attrs: dict):
        """
        :param name: Device name used in error messages
        :param sys_path: Directory holding the attributes
        :param capabilities: Attributes present on the device
        :param attrs: Map of control name to attribute name, with keys
                      brightness, static, breath, spectrum, wave,
                      reactive, none and state
        """
        self._logger = Log.get('rgbsync.protocol')
        self._name = name
        self._sys_path = sys_path
        self._capabilities = tuple(capabilities)
        self._attrs = dict(attrs)


    @property
    def capabilities(self) -> tuple:
        return self._capabilities


    def supports(self, control: str) -> bool:
        """
        True if the attribute for a control is present
        """
        attr = self._attrs.get(control)
        return attr is not None and attr in self._capabilities


    def _require(self, control: str) -> str:
        if not self.supports(control):
            raise UnsupportedCapability(self._name, self._attrs.get(control, control))
        return self._attrs[control]


    @staticmethod
    def _text(value) -> bytes:
        return ('%d\n' % value).encode()


    def brightness(self, value: int) -> list:
        value = check_range('brightness', value, SysfsProtocol.BRIGHTNESS_RANGE)
        return [SysfsWrite(self._require('brightness'), self._text(value))]


    def static(self, rgb: tuple) -> list:
        return [SysfsWrite(self._require('static'), bytes(rgb))]


    def breath(self, rgb: tuple) -> list:
        return [SysfsWrite(self._require('breath'), bytes(rgb))]


    def reactive(self, rgb: tuple, speed: int = 2) -> list:
        speed = check_range('reactive speed', speed, SysfsProtocol.REACTIVE_SPEED_RANGE)
        return [SysfsWrite(self._require('reactive'), bytes((speed, *rgb)))]


    def spectrum(self) -> list:
        return [SysfsWrite(self._require('spectrum'), self._text(1))]


    def wave(self, direction: int = 1) -> list:
        direction = check_range('wave direction', direction, SysfsProtocol.WAVE_DIRECTION_RANGE)
        return [SysfsWrite(self._require('wave'), self._text(direction))]


    def led_on(self, rgb: tuple) -> list:
        """
        Static color, or just switch the LED on where the device
        has no color control
        """
        if self.supports('static'):
            return self.static(rgb)
        if self.supports('state'):
            return [SysfsWrite(self._attrs['state'], self._text(1))]
        raise UnsupportedCapability(self._name, 'static color')


    def off(self) -> list:
        """
        Turn lighting off with the first supported control point:
        the "none" effect, the LED state, then zero brightness
        """
        if self.supports('none'):
            return [SysfsWrite(self._attrs['none'], self._text(1))]
        if self.supports('state'):
            return [SysfsWrite(self._attrs['state'], self._text(0))]
        if self.supports('brightness'):
            return [SysfsWrite(self._attrs['brightness'], self._text(0))]
        raise UnsupportedCapability(self._name, 'off')


    def apply(self, writes: list) -> list:
        """
        Perform the planned writes, in order

        :return: The writes performed
        """
        for write in writes:
            path = os.path.join(self._sys_path, write.attr)
            self._logger.debug('%s <- %r', path, write.payload)
            with open(path, 'wb', buffering=0) as attr:
                attr.write(write.payload)
        return writes
