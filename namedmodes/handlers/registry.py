"""
Command table.

Maps command words to Command instances and dispatches parameter lists
to them.
"""

import logging
from typing import Dict, List, Optional

from namedmodes.channels import LocalUser
from namedmodes.handlers.base import CmdResult, Command
from namedmodes.numerics import need_more_params, unknown_command

logger = logging.getLogger(__name__)


class CommandTable:
    """
    Registry for protocol commands.

    Usage:
        table = CommandTable()
        table.register(CommandProp(...))
        table.dispatch("PROP", ["#chan"], user)
    """

    def __init__(self):
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """
        Register a command.

        If a command with the same name already exists, it will be replaced.
        """
        name = command.name.upper()
        if name in self._commands:
            logger.warning(f"Replacing existing handler for command: {name}")
        self._commands[name] = command
        logger.debug(f"Registered command: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a command.

        Returns:
            True if the command was removed, False if not found
        """
        name = name.upper()
        if name in self._commands:
            del self._commands[name]
            logger.debug(f"Unregistered command: {name}")
            return True
        return False

    def get_command(self, name: str) -> Optional[Command]:
        return self._commands.get(name.upper())

    def dispatch(self, name: str, params: List[str], user: LocalUser) -> CmdResult:
        """
        Run a command for a local user.

        Unknown commands get ERR_UNKNOWNCOMMAND; too few parameters get
        ERR_NEEDMOREPARAMS. Both count as failures.
        """
        command = self.get_command(name)
        if command is None:
            user.write_numeric(unknown_command(name.upper()))
            return CmdResult.FAILURE

        if len(params) < command.min_params:
            user.write_numeric(need_more_params(command.name))
            return CmdResult.FAILURE

        return command.handle_local(params, user)
