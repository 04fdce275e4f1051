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

# pylint: disable=invalid-name, protected-access

"""
User settings.

Settings are read from a YAML file whose fields are validated against
a fixed schema. Fields missing from the file are inherited from the
built-in defaults, which form the root of the hierarchy.
"""

import os

from .config import Configuration
from .errors import ConfigurationError
from .log import Log
from .protocol import ITEBrightness, ITEEffect, ITESpeed


CONFIG_ENV = 'RGBSYNC_CONFIG'
BRIGHTNESS_ENV = 'RGB_BRIGHTNESS'

DEFAULT_CONFIG_PATH = os.path.join('~', '.config', 'rgbsync', 'config.yaml')

DEFAULT_THEME_DIRS = (os.path.join('~', '.config', 'omarchy', 'themes'),
                      os.path.join('~', '.local', 'share', 'omarchy', 'themes'))


class RazerBrightness(int):
    """
    Brightness of the OpenRazer devices, 0-255
    """
    def __new__(cls, value):
        if isinstance(value, bool):
            raise TypeError('expected an integer')
        value = super().__new__(cls, value)
        if not 0 <= value <= 255:
            raise ValueError('must be between 0 and 255')
        return value


Settings = Configuration.create("Settings", [ \
    ('mode', ITEEffect),
    ('color', str),
    ('brightness', ITEBrightness),
    ('speed', ITESpeed),
    ('razer_brightness', RazerBrightness),
    ('mouse_enabled_themes', frozenset),
    ('theme_dirs', tuple)], hierarchical=False)


# color is left unset, the Legion falls back to white for static mode
# and red for effects
DEFAULTS = Settings(mode=ITEEffect.STATIC,
                    brightness=ITEBrightness.HIGH,
                    speed=ITESpeed.MEDIUM,
                    razer_brightness=RazerBrightness(255),
                    mouse_enabled_themes=frozenset(['hackerman']),
                    theme_dirs=DEFAULT_THEME_DIRS)


def config_path(path: str = None, env=None) -> str:
    """
    Location of the settings file

    An explicit path wins, then the RGBSYNC_CONFIG environment
    variable, then the default under ~/.config.
    """
    if env is None:
        env = os.environ

    if path is None:
        path = env.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH

    return os.path.expanduser(path)


def load_settings(path: str = None, env=None) -> Settings:
    """
    Load user settings

    A missing file yields the defaults, unless the path was given
    explicitly. RGB_BRIGHTNESS in the environment overrides the
    Razer brightness.

    :param path: Settings file, located with config_path() if None
    :param env: Environment mapping, os.environ if None

    :return: Settings whose parent holds the defaults
    """
    logger = Log.get('rgbsync.settings')

    if env is None:
        env = os.environ

    explicit = path is not None or bool(env.get(CONFIG_ENV))
    filename = config_path(path, env)

    if os.path.isfile(filename):
        logger.debug('Loading settings from %s', filename)
        settings = Settings.load_yaml(filename, parent=DEFAULTS)
    elif explicit:
        raise ConfigurationError('Settings file not found: %s' % filename)
    else:
        settings = Settings(parent=DEFAULTS)

    override = env.get(BRIGHTNESS_ENV)
    if override is not None and override.strip() != '':
        try:
            brightness = RazerBrightness(override.strip())
        except (TypeError, ValueError) as err:
            raise ConfigurationError('Invalid %s: %s (%s)' \
                % (BRIGHTNESS_ENV, override, err)) from err

        fields = settings._asdict()
        fields['razer_brightness'] = brightness
        settings = Settings(parent=DEFAULTS, **fields)

    return settings
