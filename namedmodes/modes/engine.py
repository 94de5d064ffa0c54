"""
Mode Engine - applies change lists to channels.

Handles:
- Building change lists from letter-based mode strings ("+kl-m secret 10")
- Firing the pre-mode hook so modules can rewrite or veto a batch
- Channel-operator access checks
- Applying changes and firing the post-mode hook with what was applied
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from namedmodes.channels import Channel, User
from namedmodes.events import HookBus, HookEvent, HookResult
from namedmodes.modes.changelist import Change, ChangeList
from namedmodes.modes.handler import ModeHandler, ModeType
from namedmodes.modes.registry import ModeLookup
from namedmodes.numerics import chanop_privs_needed, unknown_mode

logger = logging.getLogger(__name__)


@dataclass
class ParsedModes:
    """Result of parsing a mode string."""
    changes: ChangeList = field(default_factory=ChangeList)
    list_requests: List[ModeHandler] = field(default_factory=list)


class ModeEngine:
    """
    Generic mode-change application engine.

    Every batch passes through the PRE_MODE hook before anything is applied;
    observers see (source, dest, channel, changes) and may rewrite `changes`
    or return DENY to drop the whole batch.
    """

    def __init__(self, registry: ModeLookup, hooks: HookBus):
        self.registry = registry
        self.hooks = hooks

    def parse_mode_string(
        self,
        source: User,
        modestring: str,
        params: Sequence[str],
        mode_type: ModeType = ModeType.CHANNEL,
    ) -> ParsedModes:
        """
        Parse a letter-based mode string into a change list.

        Unknown letters get ERR_UNKNOWNMODE. A list mode given without a
        parameter while adding becomes a list request. Any other mode that
        needs a parameter but has none left is skipped.
        """
        parsed = ParsedModes()
        remaining = list(params)
        adding = True

        for letter in modestring:
            if letter in "+-":
                adding = letter == "+"
                continue

            handler = self.registry.find_mode_by_letter(letter, mode_type)
            if handler is None:
                source.write_numeric(unknown_mode(letter))
                continue

            if not handler.needs_param(adding):
                parsed.changes.push(handler, adding)
                continue

            if not remaining:
                if handler.is_list and adding:
                    parsed.list_requests.append(handler)
                else:
                    logger.debug(f"Mode {handler} needs a parameter, none left")
                continue

            parsed.changes.push(handler, adding, remaining.pop(0))

        return parsed

    def show_list(self, user: User, channel: Channel, handler: ModeHandler) -> None:
        """Answer a list request for a list-style mode."""
        if handler.display_list is None:
            logger.debug(f"No list display for mode {handler}")
            return
        handler.display_list(user, channel)

    def process(
        self,
        source: User,
        channel: Channel,
        changes: ChangeList,
        check_access: bool = True,
    ) -> ChangeList:
        """
        Run a batch of changes against a channel.

        Args:
            source: User requesting the changes
            channel: Target channel
            changes: The batch; PRE_MODE observers may rewrite it
            check_access: Require the source to be a channel operator

        Returns:
            The changes actually applied, in order
        """
        result = self.hooks.fire(HookEvent.PRE_MODE, source, None, channel, changes)
        if result is HookResult.DENY:
            logger.info(f"Mode change on {channel.name} by {source.nick} denied by hook")
            return ChangeList()

        applied: List[Change] = []
        for change in changes:
            if check_access and not channel.is_op(source):
                source.write_numeric(chanop_privs_needed(channel.name, change.handler.letter))
                continue
            if self._apply(channel, change):
                applied.append(change)

        applied_list = ChangeList(applied)
        if applied_list:
            logger.info(f"{source.nick} set modes on {channel.name}: {applied_list!r}")
            self.hooks.fire(HookEvent.POST_MODE, source, None, channel, applied_list)
        return applied_list

    def process_mode_command(
        self,
        source: User,
        channel: Channel,
        modestring: str,
        params: Sequence[str],
    ) -> ChangeList:
        """Parse a mode string, answer list requests, then apply the changes."""
        parsed = self.parse_mode_string(source, modestring, params)
        for handler in parsed.list_requests:
            self.show_list(source, channel, handler)
        if not parsed.changes:
            return ChangeList()
        return self.process(source, channel, parsed.changes)

    def _apply(self, channel: Channel, change: Change) -> bool:
        handler = change.handler
        param: Optional[str] = change.param

        if handler.needs_param(change.adding) and not param:
            logger.debug(f"Skipping {change.to_token()}: missing parameter")
            return False

        if handler.is_list:
            if change.adding:
                return channel.add_list_entry(handler, param)
            return channel.remove_list_entry(handler, param)

        if change.adding:
            if not handler.needs_param(True):
                param = None
            if channel.is_mode_set(handler) and channel.get_mode_parameter(handler) == (param or ""):
                return False
            channel.set_mode(handler, param)
            return True

        if not channel.is_mode_set(handler):
            return False
        channel.unset_mode(handler)
        return True
