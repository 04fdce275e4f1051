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
import os

from typing import NamedTuple

from pyudev import Context

from .errors import DeviceNotFound, PermissionDenied, UnsupportedCapability
from .hardware import Hardware, HexQuad
from .log import Log


NodeDescriptor = NamedTuple('NodeDescriptor', [('node', str),
                                               ('sys_path', str),
                                               ('hid_id', str),
                                               ('hid_phys', str)])

DeviceInfo = NamedTuple('DeviceInfo', [('hardware', Hardware),
                                       ('node', str),
                                       ('sys_path', str),
                                       ('product_id', HexQuad),
                                       ('capabilities', tuple)])


def parse_hid_id(hid_id: str) -> tuple:
    """
    Extract vendor and product ids from a HID_ID record

    The record looks like "0003:0000048D:0000C965" (bus, vendor,
    product). Case and zero padding are ignored.

    :return: Tuple of (vendor_id, product_id), or None if malformed
    """
    if not hid_id:
        return None

    parts = hid_id.strip().split(':')
    if len(parts) != 3:
        return None

    try:
        return HexQuad(parts[1]), HexQuad(parts[2])
    except ValueError:
        return None


class DeviceLocator(object):
    """
    Finds the control node of a device described by a Hardware entry

    Enumerates kernel devices through udev, keeps those matching
    the vendor and one of the acceptable product ids, and ranks
    them. The preferred product on the preferred interface wins
    outright, otherwise the first match in enumeration order is
    used.
    """

    def __init__(self, context=None):
        self._logger = Log.get('rgbsync.locator')
        self._context = context


    @property
    def context(self):
        if self._context is None:
            self._context = Context()
        return self._context


    @staticmethod
    def _descriptor(device, hid_device) -> NodeDescriptor:
        props = hid_device.properties
        return NodeDescriptor(node=device.device_node or device.sys_path,
                              sys_path=device.sys_path,
                              hid_id=props.get('HID_ID'),
                              hid_phys=props.get('HID_PHYS', ''))


    def _hidraw_descriptors(self) -> list:
        descriptors = []
        for device in self.context.list_devices(subsystem='hidraw'):
            hid_device = device.find_parent('hid')
            if hid_device is None or device.device_node is None:
                continue
            descriptors.append(self._descriptor(device, hid_device))

        return sorted(descriptors, key=lambda x: x.node)


    def _driver_descriptors(self, drivers) -> list:
        descriptors = []
        for driver in drivers or ():
            devices = self.context.list_devices(subsystem='hid', DRIVER=driver)
            descriptors.extend(sorted([self._descriptor(dev, dev) for dev in devices],
                                      key=lambda x: x.node))
        return descriptors


    def enumerate(self, hardware: Hardware) -> list:
        """
        All control node descriptors which could belong to the device
        family, before filtering by identity
        """
        if hardware.uses_hidraw:
            return self._hidraw_descriptors()
        return self._driver_descriptors(hardware.drivers)


    @staticmethod
    def _has_marker(hardware: Hardware, descriptor: NodeDescriptor) -> bool:
        if not hardware.markers:
            return True
        return any(os.path.exists(os.path.join(descriptor.sys_path, marker)) \
                for marker in hardware.markers)


    @staticmethod
    def _rank(hardware: Hardware, product_id: int, descriptor: NodeDescriptor) -> int:
        if hardware.preferred_product is not None \
                and product_id == hardware.preferred_product \
                and hardware.preferred_interface is not None \
                and hardware.preferred_interface in (descriptor.hid_phys or ''):
            return 0
        return 1


    def candidates(self, hardware: Hardware, descriptors=None) -> list:
        """
        Ranked list of matching descriptors, best first

        :param hardware: The device descriptor to look for
        :param descriptors: Descriptors to consider, enumerated if None
        :return: List of (NodeDescriptor, product_id) tuples
        """
        if descriptors is None:
            descriptors = self.enumerate(hardware)

        ranked = []
        for index, descriptor in enumerate(descriptors):
            ids = parse_hid_id(descriptor.hid_id)
            if ids is None:
                continue

            vendor_id, product_id = ids
            if vendor_id != hardware.vendor_id or product_id not in hardware.product_ids:
                continue

            if not self._has_marker(hardware, descriptor):
                continue

            ranked.append((self._rank(hardware, product_id, descriptor), index,
                           descriptor, product_id))

        ranked.sort(key=lambda x: (x[0], x[1]))
        return [(x[2], x[3]) for x in ranked]


    @staticmethod
    def _capabilities(hardware: Hardware, descriptor: NodeDescriptor) -> tuple:
        if hardware.uses_hidraw:
            return ()
        return tuple(attr for attr in hardware.controls or () \
                if os.path.exists(os.path.join(descriptor.sys_path, attr)))


    def find(self, hardware: Hardware, descriptors=None) -> DeviceInfo:
        """
        Locate the single best control node for a device

        :param hardware: The device descriptor to look for
        :param descriptors: Descriptors to consider, enumerated if None
        :return: DeviceInfo for the chosen node
        """
        ranked = self.candidates(hardware, descriptors)
        if not ranked:
            raise DeviceNotFound('%s not found (vendor:%s, products:%s)' % \
                (hardware.name, hardware.vendor_id,
                 ' '.join(str(x) for x in hardware.product_ids)))

        descriptor, product_id = ranked[0]
        info = DeviceInfo(hardware=hardware,
                          node=descriptor.node,
                          sys_path=descriptor.sys_path,
                          product_id=product_id,
                          capabilities=self._capabilities(hardware, descriptor))

        self._logger.info('Found %s: %s', hardware.name, info.node)
        self._logger.debug('Capabilities of %s: %s', hardware.name, info.capabilities)

        return info


    def check_permissions(self, info: DeviceInfo) -> DeviceInfo:
        """
        Verify the device can be written to

        Checks the hidraw node itself, or the first permission
        attribute present in the sysfs directory.
        """
        hardware = info.hardware

        if hardware.uses_hidraw or not hardware.permission_attrs:
            path = info.node
        else:
            present = [attr for attr in hardware.permission_attrs \
                    if os.path.exists(os.path.join(info.sys_path, attr))]
            if not present:
                raise UnsupportedCapability(hardware.name, '/'.join(hardware.permission_attrs))
            path = os.path.join(info.sys_path, present[0])

        if not os.access(path, os.W_OK):
            raise PermissionDenied(path, hardware.rules_file)

        return info


    def locate(self, hardware: Hardware) -> DeviceInfo:
        """
        Find the device and check that it is writable
        """
        return self.check_permissions(self.find(hardware))
