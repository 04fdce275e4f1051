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
Omarchy theme support.

A theme is a directory of configuration files for the desktop. The
accent color is taken from the first file which declares one.
"""

import os
import re

from typing import NamedTuple

from .errors import ColorExtractionFailed, ThemeNotFound
from .log import Log
from .settings import DEFAULT_THEME_DIRS


Theme = NamedTuple('Theme', [('name', str), ('path', str), ('accent', str)])


HYPRLAND_COLOR = re.compile(r'rgba?\(([0-9a-fA-F]{6})')
WAYBAR_LINE = re.compile(r'@define-color|--accent|--primary')
TOML_LINE = re.compile(r'^accent')
HASH_COLOR = re.compile(r'#([0-9a-fA-F]{6})')

THEME_SOURCE_LINE = re.compile(r'source.*themes')
THEME_SOURCE_NAME = re.compile(r'themes/([^/]+)')


def _read_lines(path: str) -> list:
    if not os.path.isfile(path):
        return []
    with open(path, 'r', errors='replace') as fp:
        return fp.read().splitlines()


def _from_hyprland(theme_path: str):
    for line in _read_lines(os.path.join(theme_path, 'hyprland.conf')):
        match = HYPRLAND_COLOR.search(line)
        if match is not None:
            return match.group(1)
    return None


def _first_hash_color(lines, line_filter):
    for line in lines:
        if line_filter.search(line) is None:
            continue
        match = HASH_COLOR.search(line)
        if match is not None:
            return match.group(1)
    return None


def _from_waybar(theme_path: str):
    return _first_hash_color(_read_lines(os.path.join(theme_path, 'waybar.css')),
                             WAYBAR_LINE)


def _from_colors_toml(theme_path: str):
    return _first_hash_color(_read_lines(os.path.join(theme_path, 'colors.toml')),
                             TOML_LINE)


class ThemeExtractor(object):
    """
    Finds themes and extracts their accent colors

    Theme directories are searched in order, so user themes shadow
    the stock ones.
    """

    EXTRACTORS = (('hyprland.conf', _from_hyprland),
                  ('waybar.css', _from_waybar),
                  ('colors.toml', _from_colors_toml))

    def __init__(self, theme_dirs=DEFAULT_THEME_DIRS, home: str = None):
        """
        :param theme_dirs: Theme roots, highest priority first
        :param home: Home directory, used for ~ and theme detection
        """
        self._logger = Log.get('rgbsync.theme')

        if home is None:
            home = os.path.expanduser('~')
        self._home = home
        self._theme_dirs = tuple(self._expand(d) for d in theme_dirs)


    def _expand(self, path: str) -> str:
        if path == '~' or path.startswith('~/'):
            return os.path.join(self._home, path[2:])
        return path


    @property
    def theme_dirs(self) -> tuple:
        return self._theme_dirs


    def find_theme_path(self, name: str) -> str:
        """
        Locate the directory of a theme

        :param name: Theme name
        :return: Path of the first matching theme directory
        """
        if name and '/' not in name and name not in ('.', '..'):
            for root in self._theme_dirs:
                path = os.path.join(root, name)
                if os.path.isdir(path):
                    return path

        raise ThemeNotFound('Theme not found: %s' % name)


    def extract_color(self, theme_path: str) -> str:
        """
        Extract the accent color of a theme

        :param theme_path: Theme directory
        :return: Six lowercase hex digits, without '#'
        """
        for filename, extract in ThemeExtractor.EXTRACTORS:
            color = extract(theme_path)
            if color is not None:
                self._logger.debug('Accent color from %s: #%s', filename, color)
                return color.lower()

        raise ColorExtractionFailed('Could not extract color from theme: %s' \
            % os.path.basename(theme_path))


    def get_accent(self, name: str) -> Theme:
        """
        Find a theme and extract its accent color
        """
        path = self.find_theme_path(name)
        theme = Theme(name=name, path=path, accent=self.extract_color(path))
        self._logger.info('Extracted theme color: #%s', theme.accent)

        return theme


    def current_theme(self) -> str:
        """
        Detect the active theme

        The current_theme marker file wins, otherwise the theme
        sourced by the Hyprland configuration is used.
        """
        marker = os.path.join(self._home, '.config', 'omarchy', 'current_theme')
        if os.path.isfile(marker):
            with open(marker, 'r', errors='replace') as fp:
                name = fp.read().strip()
            if name:
                return name

        hyprland = os.path.join(self._home, '.config', 'hypr', 'hyprland.conf')
        for line in _read_lines(hyprland):
            if THEME_SOURCE_LINE.search(line) is None:
                continue
            match = THEME_SOURCE_NAME.search(line)
            if match is not None:
                return match.group(1)

        raise ThemeNotFound('Could not detect current theme')
