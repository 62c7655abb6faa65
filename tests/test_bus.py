"""Unit tests for SignalBus."""
from __future__ import annotations

from sunarc import SignalBus
from sunarc.bus import ANIMATION_PLAN, LABEL_ALPHA


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    bus.subscribe(LABEL_ALPHA, handler)
    bus.publish(LABEL_ALPHA, alpha=0.0)
    assert received == []
    assert bus.flush() == 1

    assert received == [(LABEL_ALPHA, {"alpha": 0.0})]


def test_publish_without_subscribe():
    bus = SignalBus()
    bus.publish(ANIMATION_PLAN, plan=None)
    assert bus.flush() == 1
    assert bus.pending() == 0


def test_flush_preserves_publish_order():
    bus = SignalBus()
    order = []

    bus.subscribe("a", lambda name, data: order.append(data["n"]))
    bus.subscribe("b", lambda name, data: order.append(data["n"]))

    bus.publish("b", n=1)
    bus.publish("a", n=2)
    bus.publish("b", n=3)
    bus.flush()

    assert order == [1, 2, 3]


def test_unsubscribe_callable():
    bus = SignalBus()
    received = []
    unsubscribe = bus.subscribe("x", lambda name, data: received.append(data))

    unsubscribe()
    bus.publish("x", v=1)
    bus.flush()

    assert received == []


def test_unsubscribe_unknown_handler_is_noop():
    bus = SignalBus()
    bus.unsubscribe("missing", lambda name, data: None)


def test_publish_during_flush_waits_for_next_flush():
    bus = SignalBus()
    received = []

    def relay(name: str, data: dict) -> None:
        bus.publish("second", v=data["v"])

    bus.subscribe("first", relay)
    bus.subscribe("second", lambda name, data: received.append(data["v"]))

    bus.publish("first", v=7)
    bus.flush()
    assert received == []
    assert bus.pending() == 1

    bus.flush()
    assert received == [7]


def test_clear_drops_queue():
    bus = SignalBus()
    received = []
    bus.subscribe("x", lambda name, data: received.append(data))

    bus.publish("x", v=1)
    bus.clear()
    bus.flush()

    assert received == []
