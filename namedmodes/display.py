"""
Named mode list display.

Lists the modes set on a channel by long name. Used both by PROP with no
change arguments and by a list request on the placeholder mode letter.
"""

from typing import List

from namedmodes.channels import Channel, User
from namedmodes.config.schema import NamedModesConfig
from namedmodes.modes import ModeLookup, ModeType
from namedmodes.numerics import Numeric, RPL_ENDOFPROPLIST, RPL_PROPLIST


def can_see_masked(viewer: User, channel: Channel, settings: NamedModesConfig) -> bool:
    """Members and auspex holders may see the masked mode's value."""
    return channel.has_user(viewer) or viewer.has_priv_permission(settings.auspex_privilege)


def build_prop_list(
    viewer: User,
    channel: Channel,
    registry: ModeLookup,
    settings: NamedModesConfig,
) -> List[Numeric]:
    """
    Build the RPL_PROPLIST replies for a channel, then RPL_ENDOFPROPLIST.

    One reply per set mode in registry order: [channel, "+name"] plus the
    parameter for modes that take one when set.
    """
    replies = []
    for handler in registry.get_modes(ModeType.CHANNEL):
        if not channel.is_mode_set(handler):
            continue

        params = [channel.name, f"+{handler.name}"]
        if handler.needs_param(True):
            if handler.name == settings.masked_mode and not can_see_masked(viewer, channel, settings):
                params.append(settings.masked_value)
            else:
                params.append(channel.get_mode_parameter(handler))
        replies.append(Numeric(RPL_PROPLIST, params))

    replies.append(Numeric(RPL_ENDOFPROPLIST, [channel.name, "End of mode list"]))
    return replies


def display_list(
    viewer: User,
    channel: Channel,
    registry: ModeLookup,
    settings: NamedModesConfig,
) -> None:
    """Send the named mode list for `channel` to `viewer`."""
    for numeric in build_prop_list(viewer, channel, registry, settings):
        viewer.write_numeric(numeric)
