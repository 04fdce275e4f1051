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
Exceptions raised by rgbsync.

Resolution errors (colors, effects, themes, configuration) abort the
current command. Device errors are recovered per device during a sync
and abort single-device commands.
"""


class RGBSyncError(Exception):
    """
    Base class for all rgbsync errors
    """

    @property
    def kind(self) -> str:
        """
        Short classification used when reporting the error
        """
        return self.__class__.__name__


class InvalidColor(RGBSyncError, ValueError):
    def __init__(self, token):
        super().__init__('Invalid color: %s (use a name like red, #FF0000, or 255,0,0)' % token)
        self.token = token


class InvalidEffect(RGBSyncError, ValueError):
    def __init__(self, name, available=()):
        message = 'Unknown effect: %s' % name
        if available:
            message += ' (available: %s)' % ', '.join(available)
        super().__init__(message)
        self.name = name


class ConfigurationError(RGBSyncError, ValueError):
    pass


class DeviceError(RGBSyncError):
    """
    Errors tied to a single device
    """


class DeviceNotFound(DeviceError):
    pass


class PermissionDenied(DeviceError):
    """
    The control node exists but is not writable by this user
    """

    def __init__(self, path, rules_file=None):
        super().__init__('No write permission: %s' % path)
        self.path = path
        self.rules_file = rules_file


    @property
    def hint(self) -> str:
        if self.rules_file is None:
            return None
        return ('Run: sudo cp %s /etc/udev/rules.d/\n'
                'Then: sudo udevadm control --reload-rules && sudo udevadm trigger'
                % self.rules_file)


class UnsupportedCapability(DeviceError):
    def __init__(self, device, capability):
        super().__init__('%s does not support %s' % (device, capability))
        self.capability = capability


class ThemeError(RGBSyncError):
    pass


class ThemeNotFound(ThemeError):
    pass


class ColorExtractionFailed(ThemeError):
    pass
