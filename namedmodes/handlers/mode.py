"""
MODE command - letter-based channel mode changes.

    MODE <channel> <modestring> [<param>]*
"""

import logging
from typing import List

from namedmodes.channels import ChannelDirectory, LocalUser
from namedmodes.errors import NoSuchTargetError
from namedmodes.handlers.base import CmdResult, Command
from namedmodes.logging_config import CommandContext
from namedmodes.modes import ModeEngine
from namedmodes.numerics import no_such_nick

logger = logging.getLogger(__name__)


class CommandMode(Command):
    """Handler for MODE on channels."""

    name = "MODE"
    min_params = 2
    syntax = "<channel> <modestring> [<param>]*"

    def __init__(self, channels: ChannelDirectory, engine: ModeEngine):
        self.channels = channels
        self.engine = engine

    def handle_local(self, params: List[str], user: LocalUser) -> CmdResult:
        target, modestring = params[0], params[1]
        with CommandContext(nick=user.nick, target=target):
            try:
                channel = self.channels.get(target)
            except NoSuchTargetError as e:
                logger.debug(e.message)
                user.write_numeric(no_such_nick(e.target))
                return CmdResult.FAILURE

            self.engine.process_mode_command(user, channel, modestring, params[2:])
            return CmdResult.SUCCESS
