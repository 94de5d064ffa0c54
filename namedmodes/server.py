"""
Server facade.

Owns the mode registry, hook bus, mode engine, channel directory and command
table, and turns protocol lines from local users into command dispatches.

Usage:
    server = Server()
    server.load_module(NamedModesModule())
    server.handle_line(user, "PROP #chan +key secret")
    lines = server.render_replies(user)
"""

import logging
from typing import List, Optional

from namedmodes.channels import ChannelDirectory, LocalUser
from namedmodes.config.schema import AppConfig
from namedmodes.events import HookBus
from namedmodes.handlers import CmdResult, CommandMode, CommandTable
from namedmodes.logging_config import CommandContext
from namedmodes.modes import ModeEngine, ModeRegistry, register_builtin_modes
from namedmodes.module import Module

logger = logging.getLogger(__name__)


def parse_line(line: str) -> List[str]:
    """
    Split a protocol line into words.

    A leading ":prefix" is dropped; a word starting with ":" takes the rest
    of the line, spaces included.
    """
    line = line.strip("\r\n")
    if line.startswith(":"):
        _, _, line = line.partition(" ")

    words = []
    while line:
        line = line.lstrip(" ")
        if not line:
            break
        if line.startswith(":"):
            words.append(line[1:])
            break
        word, _, line = line.partition(" ")
        words.append(word)
    return words


class Server:
    """Single server instance."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.registry = ModeRegistry()
        register_builtin_modes(self.registry)
        self.hooks = HookBus()
        self.engine = ModeEngine(self.registry, self.hooks)
        self.channels = ChannelDirectory()
        self.commands = CommandTable()
        self.commands.register(CommandMode(self.channels, self.engine))
        self.modules: List[Module] = []

    @property
    def name(self) -> str:
        return self.config.server.name

    def load_module(self, module: Module) -> None:
        module.load(self)
        self.modules.append(module)
        for loaded in self.modules:
            loaded.prioritize(self)
        logger.info(f"Loaded module {module!r}: {module.get_version()}")

    def unload_module(self, module: Module) -> None:
        module.unload(self)
        self.modules.remove(module)
        logger.info(f"Unloaded module {module!r}")

    def handle_line(self, user: LocalUser, line: str) -> Optional[CmdResult]:
        """Dispatch one protocol line. Returns None for blank lines."""
        words = parse_line(line)
        if not words:
            return None

        command, params = words[0], words[1:]
        with CommandContext(nick=user.nick):
            logger.debug(f"Dispatching {command.upper()} with {len(params)} parameter(s)")
            return self.commands.dispatch(command, params, user)

    def render_replies(self, user: LocalUser) -> List[str]:
        """Drain the user's queued replies as protocol lines."""
        return [numeric.to_line(self.name, user.nick) for numeric in user.take_replies()]
