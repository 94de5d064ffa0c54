"""Channel, user and membership entities."""

from namedmodes.channels.channel import (
    Channel,
    ChannelDirectory,
    LocalUser,
    Membership,
    User,
)

__all__ = [
    "Channel",
    "ChannelDirectory",
    "LocalUser",
    "Membership",
    "User",
]
