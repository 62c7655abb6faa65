"""Reference keyframe runner for animation plans."""
from __future__ import annotations

from typing import Callable

from sunarc.easing import EASINGS
from sunarc.types import AnimationPlan, ArcCoordinate


def _lerp(a: ArcCoordinate, b: ArcCoordinate, t: float) -> ArcCoordinate:
    return ArcCoordinate(x=a.x + (b.x - a.x) * t, y=a.y + (b.y - a.y) * t)


def sample(keyframes: tuple[ArcCoordinate, ...], progress: float) -> ArcCoordinate:
    """Position at ``progress`` in [0, 1] along evenly spaced keyframes."""
    if len(keyframes) == 1:
        return keyframes[0]
    span = max(0.0, min(1.0, progress)) * (len(keyframes) - 1)
    index = min(int(span), len(keyframes) - 2)
    return _lerp(keyframes[index], keyframes[index + 1], span - index)


class KeyframePlayer:
    """Plays one plan at a time, driven by :meth:`advance`.

    Starting a plan abandons the one playing; only the active plan ever
    reaches ``on_complete``.
    """

    def __init__(self, on_complete: Callable[[int], object] | None = None) -> None:
        self._on_complete = on_complete
        self._plan: AnimationPlan | None = None
        self._elapsed = 0.0
        self._position: ArcCoordinate | None = None

    @property
    def playing(self) -> bool:
        return self._plan is not None

    @property
    def active_plan_id(self) -> int | None:
        return self._plan.plan_id if self._plan is not None else None

    @property
    def position(self) -> ArcCoordinate | None:
        return self._position

    @property
    def progress(self) -> float:
        """Normalized time of the playing plan, 1.0 when idle."""
        if self._plan is None:
            return 1.0
        if self._plan.duration <= 0:
            return 1.0
        return min(self._elapsed / self._plan.duration, 1.0)

    def start(self, plan: AnimationPlan) -> None:
        if plan.easing not in EASINGS:
            raise KeyError(f"Unknown easing {plan.easing!r}")
        self._plan = plan
        self._elapsed = 0.0
        self._position = plan.keyframes[0]

    def stop(self) -> None:
        """Abandon the playing plan without signalling completion."""
        self._plan = None

    def advance(self, dt: float) -> ArcCoordinate | None:
        plan = self._plan
        if plan is None:
            return self._position

        self._elapsed += dt
        t = self.progress
        if t < 1.0:
            self._position = sample(plan.keyframes, EASINGS[plan.easing](t))
            return self._position

        self._position = plan.keyframes[-1]
        self._plan = None
        if self._on_complete is not None:
            self._on_complete(plan.plan_id)
        return self._position
