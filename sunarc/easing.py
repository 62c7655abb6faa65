"""Timing curves for keyframe playback.

The named curves are cubic béziers through (0, 0) and (1, 1) with the same
control points as the standard platform timing functions.
"""
from __future__ import annotations

from typing import Callable

_NEWTON_ITERATIONS = 8
_BISECT_ITERATIONS = 32
_EPSILON = 1e-7


def _clamp(t: float) -> float:
    return max(0.0, min(1.0, t))


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Return an easing function for the curve with control points (x1, y1), (x2, y2)."""
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("control point x values must lie in [0, 1]")

    def sample(a1: float, a2: float, s: float) -> float:
        return ((1.0 - 3.0 * a2 + 3.0 * a1) * s + (3.0 * a2 - 6.0 * a1)) * s * s + 3.0 * a1 * s

    def slope(a1: float, a2: float, s: float) -> float:
        return 3.0 * (1.0 - 3.0 * a2 + 3.0 * a1) * s * s + 2.0 * (3.0 * a2 - 6.0 * a1) * s + 3.0 * a1

    def solve_s(t: float) -> float:
        s = t
        for _ in range(_NEWTON_ITERATIONS):
            err = sample(x1, x2, s) - t
            if abs(err) < _EPSILON:
                return s
            d = slope(x1, x2, s)
            if abs(d) < 1e-6:
                break
            s -= err / d

        lo, hi = 0.0, 1.0
        s = t
        for _ in range(_BISECT_ITERATIONS):
            x = sample(x1, x2, s)
            if abs(x - t) < _EPSILON:
                break
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
        return s

    def ease(t: float) -> float:
        t = _clamp(t)
        if t == 0.0 or t == 1.0:
            return t
        return _clamp(sample(y1, y2, solve_s(t)))

    return ease


def linear(t: float) -> float:
    return _clamp(t)


ease_in = cubic_bezier(0.42, 0.0, 1.0, 1.0)
ease_out = cubic_bezier(0.0, 0.0, 0.58, 1.0)
ease_in_out = cubic_bezier(0.42, 0.0, 0.58, 1.0)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}
