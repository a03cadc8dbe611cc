"""Tests for notification signals."""

from wktedit.engine.events import Signal


def test_emit_calls_listeners_in_order():
    sig = Signal("test")
    calls = []
    sig.connect(lambda v: calls.append(("a", v)))
    sig.connect(lambda v: calls.append(("b", v)))
    sig.emit(1)
    assert calls == [("a", 1), ("b", 1)]


def test_connect_is_decorator_and_deduplicates():
    sig = Signal("test")
    calls = []

    @sig.connect
    def on_change():
        calls.append(True)

    sig.connect(on_change)
    assert len(sig) == 1
    sig.emit()
    assert calls == [True]


def test_disconnect():
    sig = Signal("test")
    calls = []
    cb = sig.connect(lambda: calls.append(True))
    sig.disconnect(cb)
    sig.disconnect(cb)
    sig.emit()
    assert calls == []


def test_listener_may_disconnect_during_emit():
    sig = Signal("test")
    calls = []

    def once():
        calls.append("once")
        sig.disconnect(once)

    sig.connect(once)
    sig.connect(lambda: calls.append("always"))
    sig.emit()
    sig.emit()
    assert calls == ["once", "always", "always"]
