"""Arc geometry and animation timing configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArcConfig:
    """Immutable configuration for the arc and its animations.

    Attributes:
        bounding_width: Width of the box the arc is drawn in.
        bounding_height: Height of the box; ground level is at this y.
        marker_size: Side length of the square sun marker.
        catch_up_threshold: Largest gap, in percentage points, that is
            reconciled with a catch-up segment instead of a full replay.
        catch_up_duration: Seconds for a catch-up segment.
        replay_base_duration: Seconds for a full replay at fraction 0.
        replay_extra_duration: Extra seconds added per unit of fraction.
        settle_delay: Seconds the time label stays hidden after playback.
        steps: Keyframe resolution; one keyframe per 1/steps of the day.
    """

    bounding_width: float = 295.0
    bounding_height: float = 108.0
    marker_size: float = 18.0
    catch_up_threshold: float = 10.0
    catch_up_duration: float = 0.2
    replay_base_duration: float = 2.0
    replay_extra_duration: float = 2.0
    settle_delay: float = 0.2
    steps: int = 100

    def __post_init__(self) -> None:
        if self.bounding_width <= 0 or self.bounding_height <= 0:
            raise ValueError("bounding box dimensions must be positive")
        if self.marker_size < 0 or self.marker_size > self.bounding_width:
            raise ValueError("marker_size must fit inside bounding_width")
        if self.steps <= 0:
            raise ValueError("steps must be positive")
        for name in (
            "catch_up_threshold",
            "catch_up_duration",
            "replay_base_duration",
            "replay_extra_duration",
            "settle_delay",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
