"""
Synchronous signal dispatch.
"""

import pytest

from viewstate import ChangeNotifier, Signal


class Owner:
    pass


class TestSignal:
    """Subscription bookkeeping and dispatch order"""

    def test_handlers_run_in_subscription_order(self):
        signal = Signal()
        calls = []
        signal.subscribe(lambda value: calls.append(("first", value)))
        signal.subscribe(lambda value: calls.append(("second", value)))

        signal.emit(7)

        assert calls == [("first", 7), ("second", 7)]

    def test_duplicate_subscription_runs_twice(self):
        signal = Signal()
        calls = []

        def handler():
            calls.append(1)

        signal.subscribe(handler)
        signal.subscribe(handler)
        signal.emit()

        assert calls == [1, 1]
        assert signal.subscriber_count == 2

    def test_unsubscribe_removes_one_registration(self):
        signal = Signal()
        calls = []

        def handler():
            calls.append(1)

        signal.subscribe(handler)
        signal.subscribe(handler)
        signal.unsubscribe(handler)
        signal.emit()

        assert calls == [1]

    def test_unsubscribe_unknown_handler_is_ignored(self):
        signal = Signal()
        signal.unsubscribe(lambda: None)
        assert signal.subscriber_count == 0

    def test_bound_methods_can_be_unsubscribed(self):
        class Listener:
            def __init__(self):
                self.calls = 0

            def on_emit(self):
                self.calls += 1

        listener = Listener()
        signal = Signal()
        signal.subscribe(listener.on_emit)
        signal.unsubscribe(listener.on_emit)
        signal.emit()

        assert listener.calls == 0

    def test_handler_exceptions_propagate(self):
        signal = Signal()

        def broken():
            raise RuntimeError("handler failed")

        signal.subscribe(broken)

        with pytest.raises(RuntimeError, match="handler failed"):
            signal.emit()

    def test_clear(self):
        signal = Signal()
        signal.subscribe(lambda: None)
        signal.clear()
        assert signal.subscriber_count == 0


class TestDispatchSnapshot:
    """Subscription changes made while a notification is running"""

    def test_handler_may_unsubscribe_itself(self):
        signal = Signal()
        calls = []

        def once():
            calls.append("once")
            signal.unsubscribe(once)

        signal.subscribe(once)
        signal.subscribe(lambda: calls.append("always"))

        signal.emit()
        signal.emit()

        assert calls == ["once", "always", "always"]

    def test_handler_removed_mid_dispatch_still_gets_current_notification(self):
        signal = Signal()
        calls = []

        def later():
            calls.append("later")

        def remover():
            calls.append("remover")
            signal.unsubscribe(later)

        signal.subscribe(remover)
        signal.subscribe(later)

        signal.emit()
        signal.emit()

        assert calls == ["remover", "later", "remover"]

    def test_handler_added_mid_dispatch_waits_for_next_notification(self):
        signal = Signal()
        calls = []

        def added():
            calls.append("added")

        def adder():
            calls.append("adder")
            if added not in signal._handlers:
                signal.subscribe(added)

        signal.subscribe(adder)

        signal.emit()
        assert calls == ["adder"]

        signal.emit()
        assert calls == ["adder", "adder", "added"]


class TestChangeNotifier:
    """Property change notifications"""

    def test_notify_passes_sender_and_property_name(self):
        owner = Owner()
        notifier = ChangeNotifier(owner)
        received = []
        notifier.subscribe(lambda sender, name: received.append((sender, name)))

        notifier.notify("first_name")

        assert received == [(owner, "first_name")]

    def test_notify_without_subscribers(self):
        ChangeNotifier(Owner()).notify("anything")
