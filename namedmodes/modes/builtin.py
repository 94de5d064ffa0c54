"""
Standard channel and user modes.

The set the reference server starts with. Names follow the long names
used by PROP.
"""

import logging
from typing import List

from namedmodes.modes.handler import ModeHandler, ModeType, ParamSpec
from namedmodes.modes.registry import ModeRegistry

logger = logging.getLogger(__name__)

CHANNEL_MODES: List[ModeHandler] = [
    ModeHandler("ban", "b", param_spec=ParamSpec.ALWAYS, is_list=True),
    ModeHandler("inviteonly", "i"),
    ModeHandler("key", "k", param_spec=ParamSpec.ALWAYS),
    ModeHandler("limit", "l", param_spec=ParamSpec.SET_ONLY),
    ModeHandler("moderated", "m"),
    ModeHandler("noextmsg", "n"),
    ModeHandler("private", "p"),
    ModeHandler("secret", "s"),
    ModeHandler("topiclock", "t"),
]

USER_MODES: List[ModeHandler] = [
    ModeHandler("invisible", "i", mode_type=ModeType.USER),
    ModeHandler("wallops", "w", mode_type=ModeType.USER),
]


def register_builtin_modes(registry: ModeRegistry) -> None:
    """
    Register all standard modes with the given registry.

    Args:
        registry: The ModeRegistry to register handlers with
    """
    handlers = CHANNEL_MODES + USER_MODES

    for handler in handlers:
        registry.register(handler)

    logger.info(f"Registered {len(handlers)} builtin modes")
