"""In-process signal bus carrying view-layer directives.

Signals are queued by :meth:`SignalBus.publish` and dispatched together by
:meth:`SignalBus.flush`, so handlers observe the state left by a complete
controller call rather than an intermediate one.
"""
from __future__ import annotations

from typing import Any, Callable

PHASE_CHANGED = "phase_changed"
MARKER_MOVED = "marker_moved"
MARKER_ALPHA = "marker_alpha"
WILL_ANIMATE = "will_animate"
ANIMATION_PLAN = "animation_plan"
LABEL_ALPHA = "label_alpha"

SIGNALS = (
    PHASE_CHANGED,
    MARKER_MOVED,
    MARKER_ALPHA,
    WILL_ANIMATE,
    ANIMATION_PLAN,
    LABEL_ALPHA,
)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler``. Returns a callable that unsubscribes it."""
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None or handler not in handlers:
            return
        handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch queued signals in publish order. Returns the number dispatched.

        Signals published by handlers during a flush wait for the next flush.
        """
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
