"""Day/night and foreground/background state machine."""
from __future__ import annotations

import logging
from typing import Callable

from sunarc.mapper import PositionMapper
from sunarc.types import PhaseDirective, SessionState, SkyPhase, SunPhase

logger = logging.getLogger(__name__)

FOREGROUND = "foreground"
BACKGROUND = "background"


class PhaseGate:
    """Tracks sky phase and app presence; decides visibility and animation eligibility.

    The combined state is named ``"<sky>.<presence>"`` (e.g.
    ``"light.background"``). ``on_transition(old, new)`` fires whenever
    that name changes.
    """

    def __init__(
        self,
        mapper: PositionMapper,
        session: SessionState | None = None,
        on_transition: Callable[[str, str], None] | None = None,
    ) -> None:
        self._mapper = mapper
        self._session = session if session is not None else SessionState()
        self._on_transition = on_transition
        self._sky = SkyPhase.DARK
        self._sun_phase: SunPhase | None = None
        self._presence = FOREGROUND

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def sky(self) -> SkyPhase:
        return self._sky

    @property
    def sun_phase(self) -> SunPhase | None:
        return self._sun_phase

    @property
    def foreground(self) -> bool:
        return self._presence == FOREGROUND

    @property
    def state(self) -> str:
        return f"{self._sky.value}.{self._presence}"

    @property
    def should_animate(self) -> bool:
        return self.foreground and self._sky is SkyPhase.LIGHT

    def report_phase(self, phase: SunPhase | SkyPhase) -> PhaseDirective:
        """Apply a phase report. Dark effects are reapplied on every Dark report."""
        if isinstance(phase, SunPhase):
            sun_phase: SunPhase | None = phase
            sky = phase.sky
        else:
            sun_phase = None
            sky = phase

        old_state = self.state
        changed = sky is not self._sky
        self._sky = sky
        self._sun_phase = sun_phase

        if sky is SkyPhase.DARK:
            self._session.background_gap_fraction = 0.0
            directive = PhaseDirective(
                sky=sky,
                sun_phase=sun_phase,
                changed=changed,
                moon_visible=True,
                parked_at=self._mapper.parked(),
                reveal=self._session.is_first_update_ever,
            )
        else:
            directive = PhaseDirective(
                sky=sky,
                sun_phase=sun_phase,
                changed=changed,
                moon_visible=False,
            )

        self._transitioned(old_state)
        return directive

    def report_backgrounded(self) -> None:
        self._session.background_gap_fraction = self._session.current_fraction
        old_state = self.state
        self._presence = BACKGROUND
        self._transitioned(old_state)

    def report_foregrounded(self) -> bool:
        """Return to the foreground. Returns True when a catch-up must run."""
        old_state = self.state
        self._presence = FOREGROUND
        self._transitioned(old_state)
        return self._sky is SkyPhase.LIGHT

    def _transitioned(self, old_state: str) -> None:
        new_state = self.state
        if new_state == old_state:
            return
        logger.info(f"Phase gate {old_state} -> {new_state}")
        if self._on_transition is not None:
            self._on_transition(old_state, new_state)
