"""
Pending mode changes.

A ChangeList is the ordered batch of mode changes handed to the mode
engine. Order is significant: changes are applied in sequence. Hooks may
rewrite the batch, but only by replacing its contents wholesale from a
snapshot, never by mutating it while iterating.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from namedmodes.modes.handler import ModeHandler


@dataclass(frozen=True)
class Change:
    """A single requested mode change."""
    handler: ModeHandler
    adding: bool
    param: Optional[str] = None

    def to_token(self) -> str:
        """Render as "+name [param]" for logs."""
        sign = "+" if self.adding else "-"
        if self.param is None:
            return f"{sign}{self.handler.name}"
        return f"{sign}{self.handler.name} {self.param}"


class ChangeList:
    """Ordered sequence of Change."""

    def __init__(self, changes: Optional[Iterable[Change]] = None):
        self._changes: List[Change] = list(changes or [])

    def push(self, handler: ModeHandler, adding: bool, param: Optional[str] = None) -> None:
        self._changes.append(Change(handler, adding, param))

    def push_add(self, handler: ModeHandler, param: Optional[str] = None) -> None:
        self.push(handler, True, param)

    def push_remove(self, handler: ModeHandler, param: Optional[str] = None) -> None:
        self.push(handler, False, param)

    def getlist(self) -> List[Change]:
        """Snapshot of the current entries."""
        return list(self._changes)

    def replace(self, changes: Iterable[Change]) -> None:
        """Swap in a new set of entries in one step."""
        self._changes = list(changes)

    def clear(self) -> None:
        self._changes = []

    def __iter__(self) -> Iterator[Change]:
        return iter(list(self._changes))

    def __len__(self) -> int:
        return len(self._changes)

    def __bool__(self) -> bool:
        return bool(self._changes)

    def __repr__(self) -> str:
        tokens = ", ".join(c.to_token() for c in self._changes)
        return f"<ChangeList [{tokens}]>"
