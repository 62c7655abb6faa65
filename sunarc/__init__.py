"""sunarc - Sun/moon marker positioning and animation sequencing along a daylight arc."""
from __future__ import annotations

from sunarc.arc import SunArc
from sunarc.bus import SignalBus
from sunarc.config import ArcConfig
from sunarc.easing import EASINGS
from sunarc.gate import PhaseGate
from sunarc.mapper import PositionMapper, locate
from sunarc.player import KeyframePlayer
from sunarc.sequencer import AnimationSequencer
from sunarc.types import (
    AnimationPlan,
    ArcCoordinate,
    PhaseDirective,
    SessionState,
    SkyPhase,
    SunPhase,
)

__all__ = [
    "SunArc",
    "SignalBus",
    "ArcConfig",
    "EASINGS",
    "PhaseGate",
    "PositionMapper",
    "locate",
    "KeyframePlayer",
    "AnimationSequencer",
    "AnimationPlan",
    "ArcCoordinate",
    "PhaseDirective",
    "SessionState",
    "SkyPhase",
    "SunPhase",
]
