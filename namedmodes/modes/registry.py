"""
Mode Registry - Central mode handler registration and lookup.

Provides:
- ModeLookup: read-only interface the named-mode core depends on
- ModeRegistry: in-memory implementation keyed by category, name and letter
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from namedmodes.errors import DuplicateModeError, ModeNotFoundError
from namedmodes.modes.handler import ModeHandler, ModeType

logger = logging.getLogger(__name__)


class ModeLookup(ABC):
    """Read-only view of registered mode handlers."""

    @abstractmethod
    def find_mode(self, name: str, mode_type: ModeType) -> Optional[ModeHandler]:
        """Find a handler by long name within a category."""
        pass

    @abstractmethod
    def find_mode_by_letter(self, letter: str, mode_type: ModeType) -> Optional[ModeHandler]:
        """Find a handler by mode letter within a category."""
        pass

    @abstractmethod
    def get_modes(self, mode_type: ModeType) -> List[ModeHandler]:
        """All handlers of a category, in registration order."""
        pass


class ModeRegistry(ModeLookup):
    """
    Registry of mode handlers.

    Names and letters are unique per category; the same letter may be used
    by a channel mode and a user mode. Enumeration follows registration
    order.

    Usage:
        registry = ModeRegistry()
        registry.register(ModeHandler("key", "k", param_spec=ParamSpec.ALWAYS))
        handler = registry.find_mode("key", ModeType.CHANNEL)
    """

    def __init__(self):
        self._by_name: Dict[ModeType, Dict[str, ModeHandler]] = {t: {} for t in ModeType}
        self._by_letter: Dict[ModeType, Dict[str, ModeHandler]] = {t: {} for t in ModeType}

    def register(self, handler: ModeHandler) -> None:
        """
        Register a mode handler.

        Args:
            handler: The handler to register

        Raises:
            DuplicateModeError: If the name or letter is taken in the category
        """
        names = self._by_name[handler.mode_type]
        letters = self._by_letter[handler.mode_type]

        if handler.name in names:
            raise DuplicateModeError(
                f"Mode name '{handler.name}' is already registered",
                name=handler.name,
            )
        if handler.letter in letters:
            raise DuplicateModeError(
                f"Mode letter '{handler.letter}' is already used by "
                f"'{letters[handler.letter].name}'",
                letter=handler.letter,
            )

        names[handler.name] = handler
        letters[handler.letter] = handler
        logger.debug(f"Registered {handler.mode_type.value} mode: {handler}")

    def unregister(self, handler: ModeHandler) -> None:
        """
        Remove a previously registered handler.

        Raises:
            ModeNotFoundError: If this exact handler is not registered
        """
        names = self._by_name[handler.mode_type]
        if names.get(handler.name) is not handler:
            raise ModeNotFoundError(f"Mode '{handler.name}' is not registered", name=handler.name)

        del names[handler.name]
        del self._by_letter[handler.mode_type][handler.letter]
        logger.debug(f"Unregistered {handler.mode_type.value} mode: {handler}")

    def find_mode(self, name: str, mode_type: ModeType) -> Optional[ModeHandler]:
        return self._by_name[mode_type].get(name)

    def find_mode_by_letter(self, letter: str, mode_type: ModeType) -> Optional[ModeHandler]:
        return self._by_letter[mode_type].get(letter)

    def get_modes(self, mode_type: ModeType) -> List[ModeHandler]:
        return list(self._by_name[mode_type].values())

    def __contains__(self, handler: ModeHandler) -> bool:
        return self._by_name[handler.mode_type].get(handler.name) is handler

    def __len__(self) -> int:
        return sum(len(names) for names in self._by_name.values())
