"""
Hook Bus - ordered observer dispatch for server hooks.

This module provides:
- HookBus: ordered, priority-aware dispatcher
- HookEvent / HookPriority / HookResult
"""

from .bus import (
    HookBus,
    HookEvent,
    HookObserver,
    HookPriority,
    HookResult,
)

__all__ = [
    "HookBus",
    "HookEvent",
    "HookObserver",
    "HookPriority",
    "HookResult",
]
