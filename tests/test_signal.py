"""Tests for the Signal and ObservableProperty classes."""

from tableview.viewmodels.signal import ObservableProperty, Signal


# ---------------------------------------------------------------------------
# Signal tests
# ---------------------------------------------------------------------------

class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_handlers_run_in_connection_order(self):
        sig = Signal()
        order = []
        sig.connect(lambda: order.append("a"))
        sig.connect(lambda: order.append("b"))
        sig.connect(lambda: order.append("c"))

        sig.emit()

        assert order == ["a", "b", "c"]

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = lambda v: received.append(v)
        sig.connect(handler)
        sig.emit(1)
        sig.disconnect(handler)
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_is_noop(self):
        sig = Signal()
        sig.disconnect(lambda: None)
        assert sig.handler_count == 0

    def test_duplicate_connect_runs_twice(self):
        sig = Signal()
        calls = []
        handler = lambda: calls.append(1)
        sig.connect(handler)
        sig.connect(handler)

        sig.emit()
        assert calls == [1, 1]

        sig.disconnect(handler)
        assert sig.handler_count == 1

    def test_handler_exception_does_not_break_others(self, caplog):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(lambda v: received.append(v))

        sig.emit(1)

        assert received == [1]
        assert "boom" in caplog.text

    def test_handler_may_disconnect_during_emit(self):
        sig = Signal()
        received = []

        def once():
            received.append("once")
            sig.disconnect(once)

        sig.connect(once)
        sig.connect(lambda: received.append("always"))

        sig.emit()
        sig.emit()

        assert received == ["once", "always", "always"]


# ---------------------------------------------------------------------------
# ObservableProperty tests
# ---------------------------------------------------------------------------

class TestObservableProperty:
    def test_default_none(self):
        assert ObservableProperty().value is None

    def test_changed_emits_on_new_value(self):
        prop = ObservableProperty(0)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = 5
        prop.value = 5

        assert changes == [(5, 0)]

    def test_equal_value_is_silent(self):
        prop = ObservableProperty([1, 2])
        changes = []
        prop.changed.connect(lambda new, old: changes.append(new))

        prop.value = [1, 2]

        assert changes == []

    def test_identity_mode_emits_for_equal_new_object(self):
        first = [1, 2]
        prop = ObservableProperty(first, identity=True)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        second = [1, 2]
        prop.value = second
        prop.value = second

        assert len(changes) == 1
        assert changes[0][0] is second
        assert changes[0][1] is first
