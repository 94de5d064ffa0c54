"""
Loadable server modules.

Provides:
- Module: abstract base class for server modules
- NamedModesModule: PROP command, placeholder mode and translator hook
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from namedmodes.config.schema import NamedModesConfig
from namedmodes.events import HookEvent, HookObserver, HookPriority
from namedmodes.handlers.prop import CommandProp
from namedmodes.modes import ModeHandler
from namedmodes.placeholder import make_placeholder_handler
from namedmodes.translator import NamedModeTranslator

if TYPE_CHECKING:
    from namedmodes.server import Server

logger = logging.getLogger(__name__)


class Module(ABC):
    """
    Abstract base class for server modules.

    The server calls load() once, then prioritize() on every loaded module
    each time a module is loaded, so hook ordering can be re-asserted
    against modules loaded later.
    """

    @abstractmethod
    def load(self, server: "Server") -> None:
        pass

    @abstractmethod
    def unload(self, server: "Server") -> None:
        pass

    def prioritize(self, server: "Server") -> None:
        pass

    @abstractmethod
    def get_version(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class NamedModesModule(Module):
    """
    Manipulate modes via long names.

    Registers:
    - the placeholder channel mode
    - the PROP command
    - a PRE_MODE observer holding the head slot that translates placeholder
      changes, so every other observer only sees real modes
    """

    def __init__(self, settings: Optional[NamedModesConfig] = None):
        self.settings = settings or NamedModesConfig()
        self.placeholder: Optional[ModeHandler] = None
        self.translator: Optional[NamedModeTranslator] = None
        self.command: Optional[CommandProp] = None
        self._observer: Optional[HookObserver] = None

    def get_version(self) -> str:
        return "Provides the ability to manipulate modes via long names."

    def load(self, server: "Server") -> None:
        self.placeholder = make_placeholder_handler(server.registry, self.settings)
        server.registry.register(self.placeholder)

        self.translator = NamedModeTranslator(server.registry, self.placeholder)
        self.command = CommandProp(server.registry, server.channels, server.engine, self.settings)
        server.commands.register(self.command)

        self._observer = server.hooks.subscribe(
            HookEvent.PRE_MODE,
            self.translator.on_pre_mode,
            priority=HookPriority.HEAD,
            name="namedmodes.translator",
        )
        logger.info(
            f"Loaded named modes (placeholder {self.placeholder.letter}/{self.placeholder.name})"
        )

    def prioritize(self, server: "Server") -> None:
        if self._observer is not None:
            server.hooks.set_priority(self._observer, HookPriority.HEAD)

    def unload(self, server: "Server") -> None:
        if self._observer is not None:
            server.hooks.unsubscribe(self._observer)
            self._observer = None
        if self.command is not None:
            server.commands.unregister(self.command.name)
            self.command = None
        if self.placeholder is not None:
            server.registry.unregister(self.placeholder)
            self.placeholder = None
        self.translator = None
        logger.info("Unloaded named modes")
