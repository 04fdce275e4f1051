#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
CLI output styling with semantic design tokens.

Exposes only semantic methods (device, value, success, etc.), not colors.
Respects the NO_COLOR env var and TTY detection.
"""

import os
import re
import sys
from enum import Enum, auto

# ─────────────────────────────────────────────────────────────────────────────
# Design Tokens (internal)
# ─────────────────────────────────────────────────────────────────────────────


class _Token(Enum):
    """Semantic design tokens, mapping UI concepts to colors."""

    DEVICE = auto()  # Device names
    VALUE = auto()  # Colors, levels

    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    MUTED = auto()  # Hints, metadata


_THEME: dict[_Token, tuple[int, int, int] | None] = {
    _Token.DEVICE: (128, 255, 234),  # Neon Cyan
    _Token.VALUE: (225, 53, 255),  # Electric Purple
    _Token.SUCCESS: (80, 250, 123),  # Green
    _Token.ERROR: (255, 99, 99),  # Red
    _Token.WARNING: (241, 250, 140),  # Electric Yellow
    _Token.MUTED: (128, 128, 128),  # Gray
}


CHECKMARK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub("", str(text))


# ─────────────────────────────────────────────────────────────────────────────
# Output Class
# ─────────────────────────────────────────────────────────────────────────────


class Output:
    """
    CLI output with semantic styling.

    Color is used only when stdout is a terminal, unless forced.
    """

    def __init__(self, force_color: bool | None = None):
        self._color_enabled = self._detect_color(force_color)

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def _detect_color(self, force: bool | None) -> bool:
        """Detect if color output should be enabled."""
        if force is not None:
            return force
        # NO_COLOR standard: https://no-color.org/
        if os.environ.get("NO_COLOR"):
            return False
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        return os.environ.get("TERM") != "dumb"

    def _rgb(self, r: int, g: int, b: int, text: str) -> str:
        """Apply RGB color to text."""
        if not self._color_enabled:
            return text
        return f"\x1b[38;2;{r};{g};{b}m{text}\x1b[0m"

    def _bold(self, text: str) -> str:
        if not self._color_enabled:
            return text
        return f"\x1b[1m{text}\x1b[0m"

    def _apply(self, token: _Token, text: str, bold: bool = False) -> str:
        rgb = _THEME.get(token)
        result = text
        if rgb is not None:
            result = self._rgb(*rgb, result)
        if bold:
            result = self._bold(result)
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Semantic methods
    # ─────────────────────────────────────────────────────────────────────────

    def device(self, text: str) -> str:
        """Format a device name."""
        return self._apply(_Token.DEVICE, text, bold=True)

    def value(self, text: str) -> str:
        """Format a value such as a color."""
        return self._apply(_Token.VALUE, text)

    def muted(self, text: str) -> str:
        return self._apply(_Token.MUTED, text)

    def swatch(self, rgb: tuple[int, int, int], text: str) -> str:
        """Show text in the color being applied."""
        return self._rgb(*rgb, text)

    def success(self, message: str) -> str:
        """Format a success message with checkmark."""
        mark = self._apply(_Token.SUCCESS, CHECKMARK)
        return f"{mark} {message}"

    def error(self, message: str) -> str:
        """Format an error message with cross."""
        mark = self._apply(_Token.ERROR, CROSS)
        return f"{mark} {message}"

    def warning(self, message: str) -> str:
        mark = self._apply(_Token.WARNING, "!")
        return f"{mark} {message}"
