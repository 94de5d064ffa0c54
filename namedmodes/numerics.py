"""
Numeric replies.

Only the numerics this server emits are defined here.
"""

from dataclasses import dataclass, field
from typing import List

RPL_ENDOFPROPLIST = 960
RPL_PROPLIST = 961
ERR_NOSUCHNICK = 401
ERR_UNKNOWNCOMMAND = 421
ERR_NEEDMOREPARAMS = 461
ERR_UNKNOWNMODE = 472
ERR_CHANOPRIVSNEEDED = 482


@dataclass
class Numeric:
    """A numeric reply: number plus parameters (the last may contain spaces)."""
    number: int
    params: List[str] = field(default_factory=list)

    def to_line(self, server_name: str, nick: str) -> str:
        """Render as a protocol line addressed to `nick`."""
        parts = [f":{server_name}", f"{self.number:03d}", nick or "*"]
        if self.params:
            *middle, last = self.params
            parts.extend(middle)
            if not last or " " in last or last.startswith(":"):
                last = f":{last}"
            parts.append(last)
        return " ".join(parts)


def no_such_nick(target: str) -> Numeric:
    return Numeric(ERR_NOSUCHNICK, [target, "No such nick/channel"])


def need_more_params(command: str) -> Numeric:
    return Numeric(ERR_NEEDMOREPARAMS, [command, "Not enough parameters."])


def unknown_command(command: str) -> Numeric:
    return Numeric(ERR_UNKNOWNCOMMAND, [command, "Unknown command"])


def unknown_mode(letter: str) -> Numeric:
    return Numeric(ERR_UNKNOWNMODE, [letter, "is an unknown mode character"])


def chanop_privs_needed(channel: str, letter: str) -> Numeric:
    return Numeric(
        ERR_CHANOPRIVSNEEDED,
        [channel, f"You must be a channel operator to set channel mode {letter}"],
    )
