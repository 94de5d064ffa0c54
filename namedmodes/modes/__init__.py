"""
Mode System - mode handlers, change lists, registry and engine.

Usage:
    from namedmodes.modes import ModeRegistry, ModeHandler, ParamSpec

    registry = ModeRegistry()
    registry.register(ModeHandler("key", "k", param_spec=ParamSpec.ALWAYS))
"""

from namedmodes.modes.handler import ModeHandler, ModeType, ParamSpec
from namedmodes.modes.changelist import Change, ChangeList
from namedmodes.modes.registry import ModeLookup, ModeRegistry
from namedmodes.modes.builtin import register_builtin_modes
from namedmodes.modes.engine import ModeEngine, ParsedModes

__all__ = [
    "Change",
    "ChangeList",
    "ModeEngine",
    "ModeHandler",
    "ModeLookup",
    "ModeRegistry",
    "ModeType",
    "ParamSpec",
    "ParsedModes",
    "register_builtin_modes",
]
