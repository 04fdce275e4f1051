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
Color token resolution.

A color token is a preset name, an "r,g,b" triplet or a hex code
(with or without the leading '#'). Tokens are resolved once, into
an RGB int tuple, before anything is written to a device.
"""

import re

from typing import Tuple

from coloraide import Color
from frozendict import frozendict

from .errors import InvalidColor


RGBTriple = Tuple[int, int, int]


PRESET_COLORS = frozendict({
    'red': (255, 0, 0),
    'green': (0, 255, 0),
    'blue': (0, 0, 255),
    'white': (255, 255, 255),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'yellow': (255, 255, 0),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'pink': (255, 192, 203),
    'off': (0, 0, 0)})

# The mouse LED is green-only
MOUSE_PRESET_COLORS = frozendict({
    'green': (0, 255, 0),
    'off': (0, 0, 0)})

RGB_TRIPLET = re.compile(r'^([0-9]{1,3}),([0-9]{1,3}),([0-9]{1,3})$')
HEX_CODE = re.compile(r'^#?([0-9a-fA-F]{6})$')


def rgb_from_hex(hexcode: str) -> RGBTriple:
    """
    Convert a six digit hex code to an RGB int tuple

    :param hexcode: Hex digits, with or without leading '#'
    :return: Tuple of RGB ints
    """
    srgb = Color('#' + hexcode.lstrip('#')).convert('srgb')
    return tuple(int(round(srgb[channel] * 255)) for channel in ('red', 'green', 'blue'))


def to_hex(rgb: RGBTriple) -> str:
    """
    Format an RGB int tuple as six lowercase hex digits, no '#'
    """
    color = Color('srgb', [x / 255.0 for x in rgb])
    return color.to_string(hex=True, compress=False)[1:].lower()


class ColorResolver(object):
    """
    Resolves color tokens to RGB tuples

    The first matching form wins: preset name, then an "r,g,b"
    triplet, then a hex code. Anything else raises InvalidColor.
    """

    def __init__(self, presets=PRESET_COLORS):
        self._presets = frozendict(presets)


    @property
    def presets(self) -> frozendict:
        return self._presets


    def _lookup_preset(self, token: str):
        return self._presets.get(token)


    def _parse_triplet(self, token: str):
        match = RGB_TRIPLET.match(token)
        if match is None:
            return None

        rgb = tuple(int(x) for x in match.groups())
        if any(x > 255 for x in rgb):
            raise InvalidColor(token)
        return rgb


    def _parse_hex(self, token: str):
        match = HEX_CODE.match(token)
        if match is None:
            return None
        return rgb_from_hex(match.group(1))


    def resolve(self, token: str) -> RGBTriple:
        """
        Resolve a color token

        :param token: The color token, like "red", "#FF0000" or "255,0,0"
        :return: Tuple of RGB ints
        """
        if not isinstance(token, str):
            raise InvalidColor(token)

        token = token.strip()

        for parse in (self._lookup_preset, self._parse_triplet, self._parse_hex):
            rgb = parse(token)
            if rgb is not None:
                return rgb

        raise InvalidColor(token)


class MouseColorResolver(ColorResolver):
    """
    Color resolver for single-color (green) mouse LEDs

    Accepts the mouse presets and "r,g,b" triplets. Since the LED
    can only show green, any other token resolves to green instead
    of failing.
    """

    FALLBACK = MOUSE_PRESET_COLORS['green']

    def __init__(self, presets=MOUSE_PRESET_COLORS):
        super().__init__(presets)


    def resolve(self, token: str) -> RGBTriple:
        if not isinstance(token, str):
            return self.FALLBACK

        token = token.strip()

        rgb = self._lookup_preset(token)
        if rgb is not None:
            return rgb

        try:
            rgb = self._parse_triplet(token)
        except InvalidColor:
            rgb = None

        if rgb is None:
            return self.FALLBACK

        return rgb
