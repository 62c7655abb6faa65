"""Fraction-of-day to arc coordinate mapping.

The arc is the upper half of a sine wave traversed left to right as the
fraction goes from 0 (sunrise) to 1 (sunset).
"""
from __future__ import annotations

import math

from sunarc.config import ArcConfig
from sunarc.types import ArcCoordinate, clamp_fraction

# Representation error tolerated when converting a fraction to a step index,
# so 0.29 lands on step 29 rather than 28, and when snapping the arc's height
# to ground level.
_INDEX_EPSILON = 1e-9


class PositionMapper:

    def __init__(self, config: ArcConfig | None = None) -> None:
        self._config = config if config is not None else ArcConfig()

    @property
    def config(self) -> ArcConfig:
        return self._config

    def locate(self, fraction: float) -> ArcCoordinate:
        """Return the marker's top-left coordinate for ``fraction``."""
        cfg = self._config
        angle = math.pi + clamp_fraction(fraction) * math.pi
        x_pct = 50.0 + math.cos(angle) * 50.0
        y_pct = abs(math.sin(angle) * 100.0)
        if y_pct < _INDEX_EPSILON:
            # sin(pi) and sin(2 pi) leave ~1e-14 here; endpoints sit on the ground.
            y_pct = 0.0

        track = cfg.bounding_width - cfg.marker_size
        x = (track / 100.0) * x_pct
        y = cfg.bounding_height - (cfg.bounding_height / 100.0) * y_pct
        return ArcCoordinate(
            x=max(0.0, min(track, x)),
            y=max(0.0, min(cfg.bounding_height, y)),
        )

    def parked(self) -> ArcCoordinate:
        """Top-centre resting place used while the sky is dark."""
        cfg = self._config
        return ArcCoordinate(x=(cfg.bounding_width - cfg.marker_size) / 2.0, y=0.0)

    def step_index(self, fraction: float) -> int:
        """Whole step (percent by default) reached by ``fraction``, truncated."""
        return math.floor(clamp_fraction(fraction) * self._config.steps + _INDEX_EPSILON)

    def path(self, start: int, end: int) -> tuple[ArcCoordinate, ...]:
        """Keyframes for step indices ``start..end`` inclusive, ascending.

        ``start > end`` yields the single point at ``end``.
        """
        steps = self._config.steps
        if start > end:
            start = end
        return tuple(self.locate(i / steps) for i in range(start, end + 1))


def locate(fraction: float, config: ArcConfig | None = None) -> ArcCoordinate:
    """Module-level shortcut for ``PositionMapper(config).locate(fraction)``."""
    return PositionMapper(config).locate(fraction)
