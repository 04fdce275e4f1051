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

# pylint: disable=invalid-name, no-member

import os

from enum import Enum

from .config import Configuration


class HexQuad(int):
    """
    A USB vendor or product id, parsed from hex strings
    """
    def __new__(cls, value):
        if isinstance(value, str):
            return super().__new__(cls, value, 16)
        return super().__new__(cls, value)

    def __str__(self):
        return '%04x' % self

    __repr__ = __str__


class HexQuadList(tuple):
    def __new__(cls, args):
        return super().__new__(cls, [HexQuad(x) for x in args])


# Configuration
BaseHardware = Configuration.create("BaseHardware", [ \
    ('key', str),
    ('name', str),
    ('family', 'Family'),
    ('source', 'Source'),
    ('vendor_id', HexQuad),
    ('product_ids', HexQuadList),
    ('preferred_product', HexQuad),
    ('preferred_interface', str),
    ('drivers', tuple),
    ('markers', tuple),
    ('controls', tuple),
    ('permission_attrs', tuple),
    ('rules_file', str)])


class Hardware(BaseHardware):
    """
    Static hardware configuration data

    Loaded by Configuration from YAML.
    """

    class Family(Enum):
        LEGION_KEYBOARD = 'Legion Keyboard'
        RAZER_KEYBOARD = 'Razer Keyboard'
        RAZER_MOUSE = 'Razer Mouse'


    class Source(Enum):
        """
        Where the control node of a device is found
        """
        # raw character device, /dev/hidrawN
        HIDRAW = 'hidraw'

        # sysfs directory of a HID device bound to a lighting driver
        DRIVER = 'driver'


    @classmethod
    def catalog(cls) -> 'Hardware':
        """
        The root of the built-in hardware hierarchy
        """
        yaml_path = os.path.join(os.path.dirname(__file__), 'data', 'hardware.yaml')

        config = cls.load_yaml(yaml_path)
        assert config is not None

        return config


    @classmethod
    def get_device(cls, key: str) -> 'Hardware':
        """
        Look up a device descriptor by its key

        :param key: The device key, like "legion"
        :return: The descriptor, or None if unknown
        """
        if key is None:
            return None

        result = cls.catalog().search('key', key)
        if not result:
            return None

        return result[0]


    @classmethod
    def all_devices(cls) -> list:
        return cls.catalog().leaves()


    @property
    def uses_hidraw(self) -> bool:
        return self.source == Hardware.Source.HIDRAW
