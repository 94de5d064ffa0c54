"""
Command Handler System.

Components:
- base: Command abstract class, CmdResult
- registry: CommandTable for dispatching commands
- prop: PROP command and its change-token parser
- mode: low-level MODE command
"""

from namedmodes.handlers.base import CmdResult, Command
from namedmodes.handlers.registry import CommandTable
from namedmodes.handlers.prop import CommandProp, parse_prop_changes
from namedmodes.handlers.mode import CommandMode

__all__ = [
    "CmdResult",
    "Command",
    "CommandMode",
    "CommandProp",
    "CommandTable",
    "parse_prop_changes",
]
