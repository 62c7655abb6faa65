"""Shared data types for arc positioning and animation sequencing."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkyPhase(Enum):
    """Binary classification gating marker identity and animation."""

    DARK = "dark"
    LIGHT = "light"


class SunPhase(Enum):
    """Richer phase supplied by the host. Only its sky projection matters here."""

    PREDAWN = "predawn"
    DAY = "day"
    DUSK = "dusk"
    NIGHT = "night"

    @property
    def sky(self) -> SkyPhase:
        if self in (SunPhase.DAY, SunPhase.DUSK):
            return SkyPhase.LIGHT
        return SkyPhase.DARK


@dataclass(frozen=True, slots=True)
class ArcCoordinate:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class AnimationPlan:
    """Keyframes and timing for one position animation of the marker.

    ``keyframes`` are in chronological order. ``plan_id`` increases with
    every plan issued; the runner echoes it back on completion.
    """

    plan_id: int
    keyframes: tuple[ArcCoordinate, ...]
    duration: float
    is_full_replay: bool
    easing: str = "ease_out"


@dataclass
class SessionState:
    """Mutable state for one hosting view session."""

    background_gap_fraction: float = 0.0
    current_fraction: float = 0.0
    is_first_update_ever: bool = True
    animation_in_flight: bool = False

    @property
    def label_hidden(self) -> bool:
        return self.animation_in_flight


@dataclass(frozen=True)
class PhaseDirective:
    """Visibility directives produced by a phase report.

    ``parked_at`` is set only for Dark reports. ``reveal`` asks the view to
    make the sun fully opaque without animating it.
    """

    sky: SkyPhase
    sun_phase: SunPhase | None
    changed: bool
    moon_visible: bool
    parked_at: ArcCoordinate | None = None
    reveal: bool = False


def clamp_fraction(fraction: float) -> float:
    return max(0.0, min(1.0, float(fraction)))
