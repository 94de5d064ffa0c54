"""
Mode handler descriptors.

A ModeHandler describes one togglable or parameterized property of a
channel or user. Handlers are plain immutable records tagged by category
and parameter policy; behaviour that varies per handler (list display) is
carried as an optional callback rather than through subclassing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class ModeType(Enum):
    """Entity category a mode applies to."""
    CHANNEL = "channel"
    USER = "user"


class ParamSpec(Enum):
    """When a mode takes a parameter."""
    NONE = "none"           # never
    SET_ONLY = "set_only"   # only when adding
    ALWAYS = "always"       # adding and removing


@dataclass(frozen=True)
class ModeHandler:
    """
    A registered mode.

    Attributes:
        name: Long name used by PROP (e.g. "key")
        letter: Single-character mode letter (e.g. "k")
        mode_type: Category the mode applies to
        param_spec: Parameter policy
        is_list: Whether the mode holds per-invocation list entries rather
            than a single stored value
        display_list: Called with (user, channel) when a list request for
            this mode arrives
    """

    name: str
    letter: str
    mode_type: ModeType = ModeType.CHANNEL
    param_spec: ParamSpec = ParamSpec.NONE
    is_list: bool = False
    display_list: Optional[Callable[[Any, Any], None]] = field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self):
        if len(self.letter) != 1:
            raise ValueError(f"Mode letter must be a single character, got {self.letter!r}")
        if not self.name:
            raise ValueError("Mode name must not be empty")

    def needs_param(self, adding: bool) -> bool:
        """Whether a change in the given direction requires a parameter."""
        if self.param_spec is ParamSpec.ALWAYS:
            return True
        if self.param_spec is ParamSpec.SET_ONLY:
            return adding
        return False

    def __str__(self) -> str:
        return f"{self.name}({self.letter})"
