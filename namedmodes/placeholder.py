"""
Placeholder mode.

A channel mode on a reserved letter that transports any named mode change
as "<name>[=<value>]". A list request on its letter shows the named mode
list.
"""

from namedmodes.channels import Channel, User
from namedmodes.config.schema import NamedModesConfig
from namedmodes.display import display_list
from namedmodes.modes import ModeHandler, ModeLookup, ModeType, ParamSpec


def make_placeholder_handler(registry: ModeLookup, settings: NamedModesConfig) -> ModeHandler:
    """Build the placeholder handler for the configured letter and name."""

    def show(user: User, channel: Channel) -> None:
        # Handle /MODE #chan Z
        if user.is_local:
            display_list(user, channel, registry, settings)

    return ModeHandler(
        name=settings.placeholder_name,
        letter=settings.placeholder_letter,
        mode_type=ModeType.CHANNEL,
        param_spec=ParamSpec.ALWAYS,
        is_list=True,
        display_list=show,
    )
