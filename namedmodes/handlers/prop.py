"""
PROP command - view or change channel modes by long name.

    PROP <channel>                          list set modes
    PROP <channel> {[+|-]<mode> [<value>]}* change modes
"""

import logging
from typing import List, Sequence

from namedmodes.channels import ChannelDirectory, LocalUser
from namedmodes.config.schema import NamedModesConfig
from namedmodes.display import display_list
from namedmodes.errors import NoSuchTargetError
from namedmodes.handlers.base import CmdResult, Command
from namedmodes.logging_config import CommandContext
from namedmodes.modes import ChangeList, ModeEngine, ModeLookup, ModeType
from namedmodes.numerics import no_such_nick

logger = logging.getLogger(__name__)


def parse_prop_changes(registry: ModeLookup, tokens: Sequence[str]) -> ChangeList:
    """
    Parse PROP change tokens into a change list.

    Each token is [+|-]<name>, adding when unsigned. Empty tokens and unknown
    names are skipped. A mode that needs a parameter in its direction takes
    the next token verbatim; with no next token the change is dropped.
    """
    changes = ChangeList()
    i = 0
    while i < len(tokens):
        prop = tokens[i]
        i += 1
        if not prop:
            continue

        adding = prop[0] != "-"
        if prop[0] in "+-":
            prop = prop[1:]

        handler = registry.find_mode(prop, ModeType.CHANNEL)
        if handler is None:
            logger.debug(f"Ignoring unknown mode name '{prop}'")
            continue

        if not handler.needs_param(adding):
            changes.push(handler, adding)
        elif i < len(tokens):
            changes.push(handler, adding, tokens[i])
            i += 1
        else:
            logger.debug(f"Ignoring '{prop}': no parameter given")

    return changes


class CommandProp(Command):
    """Handler for PROP."""

    name = "PROP"
    min_params = 1
    syntax = "<user|channel> {[+-]<mode> [<value>]}*"

    def __init__(
        self,
        registry: ModeLookup,
        channels: ChannelDirectory,
        engine: ModeEngine,
        settings: NamedModesConfig,
    ):
        self.registry = registry
        self.channels = channels
        self.engine = engine
        self.settings = settings

    def handle_local(self, params: List[str], user: LocalUser) -> CmdResult:
        target = params[0]
        with CommandContext(nick=user.nick, target=target):
            try:
                channel = self.channels.get(target)
            except NoSuchTargetError as e:
                logger.debug(e.message)
                user.write_numeric(no_such_nick(e.target))
                return CmdResult.FAILURE

            if len(params) == 1:
                display_list(user, channel, self.registry, self.settings)
                return CmdResult.SUCCESS

            changes = parse_prop_changes(self.registry, params[1:])
            logger.debug(f"PROP parsed {len(changes)} change(s) from {len(params) - 1} token(s)")
            self.engine.process(user, channel, changes, check_access=True)
            return CmdResult.SUCCESS
