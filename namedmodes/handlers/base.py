"""
Base classes for protocol commands.

Provides:
- CmdResult: outcome of a command
- Command: abstract base class for all commands handled from local users
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from namedmodes.channels import LocalUser


class CmdResult(Enum):
    """Outcome of running a command."""
    SUCCESS = "success"
    FAILURE = "failure"


class Command(ABC):
    """
    Abstract base class for commands.

    All commands must implement:
    - name: The command word (upper case, e.g. "PROP")
    - min_params: Minimum number of parameters
    - syntax: Parameter syntax shown in help
    - handle_local(): Execute the command for a local user

    The command table enforces `min_params` before `handle_local` is called.

    Example:
        class PingCommand(Command):
            name = "PING"
            min_params = 1
            syntax = "<token>"

            def handle_local(self, params, user):
                return CmdResult.SUCCESS
    """

    name: str = ""
    min_params: int = 0
    syntax: str = ""

    @abstractmethod
    def handle_local(self, params: List[str], user: LocalUser) -> CmdResult:
        """
        Execute the command.

        Args:
            params: Command parameters (the command word excluded)
            user: The local user who sent the command

        Returns:
            CmdResult
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} command='{self.name}'>"
