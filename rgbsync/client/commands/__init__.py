#
# Copyright (C) 2026 rgbsync developers — LGPL-3.0-or-later
#
"""
CLI command implementations.

Each command module registers itself via the COMMANDS list.
"""

from rgbsync.client.commands.base import Command
from rgbsync.client.commands.legion import LegionCommand
from rgbsync.client.commands.mouse import MouseCommand
from rgbsync.client.commands.razer import RazerCommand
from rgbsync.client.commands.sync import AutoCommand, SetCommand, ThemeCommand

# All available commands, order determines help output order
COMMANDS: list[type[Command]] = [
    AutoCommand,
    SetCommand,
    ThemeCommand,
    LegionCommand,
    RazerCommand,
    MouseCommand,
]

__all__ = ["COMMANDS", "Command"]
