"""
Channel and user entities.

Mode state on a Channel is only changed by the mode engine; everything
else reads it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Set

from namedmodes.errors import NoSuchTargetError
from namedmodes.numerics import Numeric

if TYPE_CHECKING:
    from namedmodes.modes.handler import ModeHandler

logger = logging.getLogger(__name__)


@dataclass
class User:
    """A connected user, local or on another server."""
    nick: str
    privileges: Set[str] = field(default_factory=set)

    @property
    def is_local(self) -> bool:
        return False

    def has_priv_permission(self, privilege: str) -> bool:
        """Whether the user holds an operator privilege such as "channels/auspex"."""
        return privilege in self.privileges

    def write_numeric(self, numeric: Numeric) -> None:
        # Remote users receive replies through their own server.
        logger.debug(f"Dropping numeric {numeric.number} for remote user {self.nick}")


@dataclass
class LocalUser(User):
    """A user connected to this server. Replies are queued in `outbox`."""
    outbox: List[Numeric] = field(default_factory=list)

    @property
    def is_local(self) -> bool:
        return True

    def write_numeric(self, numeric: Numeric) -> None:
        self.outbox.append(numeric)

    def take_replies(self) -> List[Numeric]:
        """Return and clear the queued replies."""
        replies, self.outbox = self.outbox, []
        return replies


@dataclass
class Membership:
    user: User
    is_op: bool = False


class Channel:
    """A channel: members plus mode state."""

    def __init__(self, name: str):
        self.name = name
        self.members: Dict[str, Membership] = {}
        self._modes: Dict[str, Optional[str]] = {}
        self._lists: Dict[str, List[str]] = {}

    # Membership

    def add_user(self, user: User, is_op: bool = False) -> Membership:
        membership = Membership(user, is_op)
        self.members[user.nick.lower()] = membership
        return membership

    def remove_user(self, user: User) -> None:
        self.members.pop(user.nick.lower(), None)

    def has_user(self, user: User) -> bool:
        return user.nick.lower() in self.members

    def is_op(self, user: User) -> bool:
        membership = self.members.get(user.nick.lower())
        return membership is not None and membership.is_op

    # Simple and parameter modes

    def is_mode_set(self, handler: ModeHandler) -> bool:
        return handler.name in self._modes

    def get_mode_parameter(self, handler: ModeHandler) -> str:
        return self._modes.get(handler.name) or ""

    def set_mode(self, handler: ModeHandler, param: Optional[str] = None) -> None:
        self._modes[handler.name] = param

    def unset_mode(self, handler: ModeHandler) -> None:
        self._modes.pop(handler.name, None)

    # List modes

    def get_list(self, handler: ModeHandler) -> List[str]:
        return list(self._lists.get(handler.name, []))

    def add_list_entry(self, handler: ModeHandler, entry: str) -> bool:
        entries = self._lists.setdefault(handler.name, [])
        if entry in entries:
            return False
        entries.append(entry)
        return True

    def remove_list_entry(self, handler: ModeHandler, entry: str) -> bool:
        entries = self._lists.get(handler.name, [])
        if entry not in entries:
            return False
        entries.remove(entry)
        return True

    def __repr__(self) -> str:
        return f"<Channel {self.name} modes={sorted(self._modes)}>"


class ChannelDirectory:
    """Channels by case-insensitive name."""

    def __init__(self):
        self._channels: Dict[str, Channel] = {}

    def create(self, name: str) -> Channel:
        key = name.lower()
        if key not in self._channels:
            self._channels[key] = Channel(name)
            logger.debug(f"Created channel {name}")
        return self._channels[key]

    def find(self, name: str) -> Optional[Channel]:
        return self._channels.get(name.lower())

    def get(self, name: str) -> Channel:
        """
        Look up a channel that must exist.

        Raises:
            NoSuchTargetError: If no channel has this name
        """
        channel = self.find(name)
        if channel is None:
            raise NoSuchTargetError(f"No such channel: {name}", target=name)
        return channel

    def __len__(self) -> int:
        return len(self._channels)
