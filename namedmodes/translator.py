"""
Placeholder change translation.

Changes on the placeholder mode carry "<name>[=<value>]" as their
parameter. Before any other pre-mode observer runs, each of them is
replaced by a change on the named mode, or dropped when that is not
possible.
"""

import logging
from typing import List, Optional, Tuple

from namedmodes.channels import Channel, User
from namedmodes.events import HookResult
from namedmodes.modes import Change, ChangeList, ModeHandler, ModeLookup, ModeType

logger = logging.getLogger(__name__)


def split_named_param(param: Optional[str]) -> Tuple[str, str]:
    """Split "<name>[=<value>]" on the first "="; value is "" when absent."""
    name, _, value = (param or "").partition("=")
    return name, value


class NamedModeTranslator:
    """Rewrites placeholder changes into changes on real modes."""

    def __init__(self, registry: ModeLookup, placeholder: ModeHandler):
        self.registry = registry
        self.placeholder = placeholder

    def translate_change(self, change: Change) -> Optional[Change]:
        """
        Translate one change.

        Returns:
            The change itself if it is not on the placeholder, the rewritten
            change, or None if it must be dropped
        """
        if change.handler is not self.placeholder:
            return change

        name, value = split_named_param(change.param)

        handler = self.registry.find_mode(name, ModeType.CHANNEL)
        if handler is None or handler is self.placeholder:
            logger.debug(f"Dropping named change for unknown mode '{name}'")
            return None

        if not handler.needs_param(change.adding):
            return Change(handler, change.adding)

        if not value:
            logger.debug(f"Dropping named change for '{name}': parameter required")
            return None

        return Change(handler, change.adding, value)

    def translate(self, changes: ChangeList) -> List[Change]:
        """Translate a snapshot of `changes`, keeping survivors in order."""
        translated = []
        for change in changes.getlist():
            result = self.translate_change(change)
            if result is not None:
                translated.append(result)
        return translated

    def on_pre_mode(
        self,
        source: User,
        dest: Optional[User],
        channel: Optional[Channel],
        changes: ChangeList,
    ) -> HookResult:
        """PRE_MODE observer."""
        if channel is None:
            return HookResult.PASSTHRU

        changes.replace(self.translate(changes))
        return HookResult.PASSTHRU
