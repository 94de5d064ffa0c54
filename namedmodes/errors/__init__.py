"""
Error classes for the named-modes server core.

Per-entry problems while parsing or translating mode changes are never
raised; they drop the entry. These exceptions cover setup mistakes
(duplicate registrations, bad configuration) and lookups that must succeed.
"""

from namedmodes.errors.exceptions import (
    NamedModesError, DuplicateModeError, ModeNotFoundError,
    NoSuchTargetError, ConfigError, HookConflictError
)

__all__ = [
    "NamedModesError", "DuplicateModeError", "ModeNotFoundError",
    "NoSuchTargetError", "ConfigError", "HookConflictError"
]
