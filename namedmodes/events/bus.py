"""
Hook Bus - Ordered observer dispatch for server hooks.

Enables:
- Modules observing pre/post mode-change events
- Explicit, priority-aware ordering of observers
- Short-circuiting on the first non-passthrough result

Dispatch is synchronous. Observers for each event live in one explicit
ordered list; priority decides where an observer is inserted, and the list
order is the call order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import logging

from namedmodes.errors import HookConflictError

logger = logging.getLogger(__name__)


class HookEvent(Enum):
    """Hook points."""
    PRE_MODE = "mode.pre"     # (source, dest, channel, changes) before application
    POST_MODE = "mode.post"   # (source, dest, channel, changes) after application


class HookPriority(Enum):
    """Where an observer goes in the call order."""
    HEAD = -1    # always index 0; one holder per event
    FIRST = 0    # right after the HEAD observer
    NORMAL = 1   # after FIRST observers, before LAST observers
    LAST = 2     # tail of the list


class HookResult(Enum):
    """Observer verdict."""
    PASSTHRU = "passthru"   # no opinion, continue
    ALLOW = "allow"         # stop, allow
    DENY = "deny"           # stop, deny


@dataclass(eq=False)
class HookObserver:
    """Registered observer."""
    callback: Callable[..., Optional[HookResult]]
    event: HookEvent
    priority: HookPriority = HookPriority.NORMAL
    name: str = ""

    def __post_init__(self):
        if not self.name:
            self.name = getattr(self.callback, "__qualname__", repr(self.callback))


class HookBus:
    """
    Ordered hook dispatcher.

    Ordering rule: the HEAD observer, if any, is always called first and
    only one observer per event may hold HEAD. A FIRST observer is inserted
    right after the HEAD observer (ahead of any earlier FIRST observer); a
    LAST observer is appended; a NORMAL observer is inserted just before the
    first LAST observer.

    If the HEAD observer raises, the dispatch returns DENY.
    """

    def __init__(self):
        self._observers: Dict[HookEvent, List[HookObserver]] = {e: [] for e in HookEvent}

    def subscribe(
        self,
        event: HookEvent,
        callback: Callable[..., Optional[HookResult]],
        priority: HookPriority = HookPriority.NORMAL,
        name: Optional[str] = None,
    ) -> HookObserver:
        """
        Register an observer for an event.

        Usage:
            bus.subscribe(HookEvent.PRE_MODE, translator.on_pre_mode, HookPriority.HEAD)
        """
        observer = HookObserver(callback=callback, event=event, priority=priority, name=name or "")
        self._check_head(observer, priority)
        self._insert(observer)
        logger.debug(
            f"Subscribed {observer.name} to {event.value} "
            f"(priority={priority.name}, position={self.observers(event).index(observer)})"
        )
        return observer

    def _head(self, event: HookEvent) -> Optional[HookObserver]:
        observers = self._observers[event]
        if observers and observers[0].priority is HookPriority.HEAD:
            return observers[0]
        return None

    def _check_head(self, observer: HookObserver, priority: HookPriority) -> None:
        head = self._head(observer.event)
        if priority is HookPriority.HEAD and head is not None and head is not observer:
            raise HookConflictError(
                f"{observer.name} cannot take the head of {observer.event.value}: "
                f"held by {head.name}",
                event=observer.event.value,
                holder=head.name,
            )

    def _insert(self, observer: HookObserver) -> None:
        observers = self._observers[observer.event]

        if observer.priority is HookPriority.HEAD:
            observers.insert(0, observer)
        elif observer.priority is HookPriority.FIRST:
            observers.insert(1 if self._head(observer.event) else 0, observer)
        elif observer.priority is HookPriority.LAST:
            observers.append(observer)
        else:
            index = len(observers)
            for i, existing in enumerate(observers):
                if existing.priority is HookPriority.LAST:
                    index = i
                    break
            observers.insert(index, observer)

    def set_priority(self, observer: HookObserver, priority: HookPriority) -> None:
        """Move an already registered observer according to a new priority."""
        self._check_head(observer, priority)
        self._observers[observer.event].remove(observer)
        observer.priority = priority
        self._insert(observer)

    def unsubscribe(self, observer: HookObserver) -> bool:
        """Remove an observer. Returns False if it was not registered."""
        observers = self._observers[observer.event]
        if observer in observers:
            observers.remove(observer)
            return True
        return False

    def observers(self, event: HookEvent) -> List[HookObserver]:
        """Observers of an event in call order."""
        return list(self._observers[event])

    def fire(self, event: HookEvent, *args: Any) -> HookResult:
        """
        Call observers in order until one returns ALLOW or DENY.

        An observer that raises is logged and skipped, except the HEAD
        observer, whose failure denies the dispatch.

        Returns:
            The first non-passthrough result, DENY if the HEAD observer
            failed, or PASSTHRU
        """
        for observer in self.observers(event):
            try:
                result = observer.callback(*args)
            except Exception as e:
                logger.error(f"Error in hook observer {observer.name} for {event.value}: {e}")
                if observer.priority is HookPriority.HEAD:
                    return HookResult.DENY
                continue

            if result is not None and result is not HookResult.PASSTHRU:
                logger.debug(f"Hook {event.value} stopped by {observer.name}: {result.name}")
                return result

        return HookResult.PASSTHRU

    def get_stats(self) -> Dict[str, Any]:
        """Registered observers per event."""
        return {
            event.value: [
                {"name": o.name, "priority": o.priority.name}
                for o in observers
            ]
            for event, observers in self._observers.items()
        }
