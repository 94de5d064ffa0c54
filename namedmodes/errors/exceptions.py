"""Custom exception hierarchy."""
from typing import Optional, Dict, Any


class NamedModesError(Exception):
    """Base exception for all named-modes errors."""
    code: str = "SYS_001"

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class DuplicateModeError(NamedModesError):
    """A mode name or letter is already registered for the category."""
    code = "MODE_001"

    def __init__(self, message: str, name: str = None, letter: str = None):
        super().__init__(message, {"name": name, "letter": letter})
        self.name = name
        self.letter = letter


class ModeNotFoundError(NamedModesError):
    """A mode handler lookup failed where one was required."""
    code = "MODE_002"

    def __init__(self, message: str, name: str = None):
        super().__init__(message, {"name": name})
        self.name = name


class NoSuchTargetError(NamedModesError):
    """A command target does not resolve to a channel."""
    code = "TARGET_001"

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message, {"target": target})
        self.target = target


class ConfigError(NamedModesError):
    """Configuration could not be loaded or validated."""
    code = "CFG_001"


class HookConflictError(NamedModesError):
    """A second observer tried to take the head slot of a hook event."""
    code = "HOOK_001"

    def __init__(self, message: str, event: str = None, holder: str = None):
        super().__init__(message, {"event": event, "holder": holder})
        self.event = event
        self.holder = holder
