"""
Unit tests for HookBus.

Tests:
- Observer ordering by priority
- Re-prioritizing an observer
- The single HEAD slot
- Short-circuit on ALLOW/DENY
- Failing observers are skipped
"""

import pytest

from namedmodes.errors import HookConflictError
from namedmodes.events import HookBus, HookEvent, HookPriority, HookResult


def _recorder(calls, name, result=HookResult.PASSTHRU):
    def observer(*args):
        calls.append(name)
        return result
    return observer


class TestHookOrdering:
    """Test observer ordering."""

    def test_first_goes_to_head(self):
        """A FIRST observer runs before observers registered earlier."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "normal"))
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "first"), HookPriority.FIRST)

        bus.fire(HookEvent.PRE_MODE)

        assert calls == ["first", "normal"]

    def test_normal_goes_before_last(self):
        """NORMAL observers are inserted ahead of LAST observers."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "last"), HookPriority.LAST)
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "normal1"))
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "normal2"))

        bus.fire(HookEvent.PRE_MODE)

        assert calls == ["normal1", "normal2", "last"]

    def test_set_priority_moves_observer(self):
        """set_priority() re-inserts according to the new priority."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "a"))
        b = bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "b"))

        bus.set_priority(b, HookPriority.FIRST)
        bus.fire(HookEvent.PRE_MODE)

        assert calls == ["b", "a"]

    def test_head_stays_ahead_of_later_first(self):
        """FIRST observers subscribed after the HEAD observer go right behind it."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "head"), HookPriority.HEAD)
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "first1"), HookPriority.FIRST)
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "first2"), HookPriority.FIRST)

        bus.fire(HookEvent.PRE_MODE)

        assert calls == ["head", "first2", "first1"]

    def test_only_one_head_per_event(self):
        """A second HEAD observer is rejected, on subscribe and on set_priority."""
        bus = HookBus()
        bus.subscribe(HookEvent.PRE_MODE, _recorder([], "head"), HookPriority.HEAD, name="head")
        other = bus.subscribe(HookEvent.PRE_MODE, _recorder([], "other"), name="other")

        with pytest.raises(HookConflictError):
            bus.subscribe(HookEvent.PRE_MODE, _recorder([], "again"), HookPriority.HEAD)
        with pytest.raises(HookConflictError):
            bus.set_priority(other, HookPriority.HEAD)

        assert [o.name for o in bus.observers(HookEvent.PRE_MODE)] == ["head", "other"]
        # Other events have their own head slot
        bus.subscribe(HookEvent.POST_MODE, _recorder([], "post"), HookPriority.HEAD)

    def test_head_can_be_reasserted(self):
        """set_priority(HEAD) on the holder itself is allowed."""
        bus = HookBus()
        head = bus.subscribe(HookEvent.PRE_MODE, _recorder([], "head"), HookPriority.HEAD)
        bus.subscribe(HookEvent.PRE_MODE, _recorder([], "first"), HookPriority.FIRST)

        bus.set_priority(head, HookPriority.HEAD)

        assert bus.observers(HookEvent.PRE_MODE)[0] is head

    def test_events_are_independent(self):
        """Observers only see their own event."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.POST_MODE, _recorder(calls, "post"))

        bus.fire(HookEvent.PRE_MODE)

        assert calls == []

    def test_unsubscribe(self):
        """Unsubscribed observers are no longer called."""
        bus = HookBus()
        calls = []
        observer = bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "a"))

        assert bus.unsubscribe(observer) is True
        assert bus.unsubscribe(observer) is False
        bus.fire(HookEvent.PRE_MODE)

        assert calls == []


class TestHookDispatch:
    """Test dispatch results."""

    def test_passthru_when_nobody_objects(self):
        """All-passthrough dispatch returns PASSTHRU."""
        bus = HookBus()
        bus.subscribe(HookEvent.PRE_MODE, _recorder([], "a"))

        assert bus.fire(HookEvent.PRE_MODE) is HookResult.PASSTHRU

    def test_deny_stops_dispatch(self):
        """DENY is returned and later observers are not called."""
        bus = HookBus()
        calls = []
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "deny", HookResult.DENY))
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "after"))

        assert bus.fire(HookEvent.PRE_MODE) is HookResult.DENY
        assert calls == ["deny"]

    def test_failing_observer_is_skipped(self):
        """An observer that raises does not stop the others."""
        bus = HookBus()
        calls = []

        def broken(*args):
            raise RuntimeError("boom")

        bus.subscribe(HookEvent.PRE_MODE, broken)
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "after"))

        assert bus.fire(HookEvent.PRE_MODE) is HookResult.PASSTHRU
        assert calls == ["after"]

    def test_failing_head_observer_denies(self):
        """If the HEAD observer raises, nothing after it runs and DENY is returned."""
        bus = HookBus()
        calls = []

        def broken(*args):
            raise RuntimeError("boom")

        bus.subscribe(HookEvent.PRE_MODE, broken, HookPriority.HEAD)
        bus.subscribe(HookEvent.PRE_MODE, _recorder(calls, "after"))

        assert bus.fire(HookEvent.PRE_MODE) is HookResult.DENY
        assert calls == []

    def test_arguments_are_forwarded(self):
        """Positional arguments reach every observer."""
        bus = HookBus()
        seen = []
        bus.subscribe(HookEvent.PRE_MODE, lambda *args: seen.append(args))

        bus.fire(HookEvent.PRE_MODE, 1, "two")

        assert seen == [(1, "two")]

    def test_stats(self):
        """get_stats() lists observers per event in call order."""
        bus = HookBus()
        bus.subscribe(HookEvent.PRE_MODE, _recorder([], "a"), name="a")
        bus.subscribe(HookEvent.PRE_MODE, _recorder([], "b"), HookPriority.FIRST, name="b")

        stats = bus.get_stats()

        assert [o["name"] for o in stats["mode.pre"]] == ["b", "a"]
        assert stats["mode.post"] == []
