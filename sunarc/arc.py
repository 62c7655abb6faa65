"""SunArc - host-facing controller for the sun/moon marker."""
from __future__ import annotations

import logging

from sunarc.bus import (
    ANIMATION_PLAN,
    LABEL_ALPHA,
    MARKER_ALPHA,
    MARKER_MOVED,
    PHASE_CHANGED,
    WILL_ANIMATE,
    SignalBus,
)
from sunarc.config import ArcConfig
from sunarc.gate import PhaseGate
from sunarc.mapper import PositionMapper
from sunarc.sequencer import AnimationSequencer
from sunarc.types import AnimationPlan, SessionState, SkyPhase, SunPhase, clamp_fraction

logger = logging.getLogger(__name__)


class SunArc:
    """Wires the phase gate and the sequencer to a signal bus.

    The host calls :meth:`update_interface` on every refresh and reports
    lifecycle changes with :meth:`report_backgrounded` and
    :meth:`report_foregrounded`. Its animation runner plays each published
    plan and calls :meth:`animation_complete` with the plan id; :meth:`advance`
    drives the settle delay that keeps the time label hidden afterwards.
    Every public call ends by flushing the bus.
    """

    def __init__(self, config: ArcConfig | None = None, bus: SignalBus | None = None) -> None:
        self._mapper = PositionMapper(config)
        self._session = SessionState()
        self._bus = bus if bus is not None else SignalBus()
        self._gate = PhaseGate(self._mapper, self._session)
        self._sequencer = AnimationSequencer(self._mapper, self._session)

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def mapper(self) -> PositionMapper:
        return self._mapper

    @property
    def gate(self) -> PhaseGate:
        return self._gate

    @property
    def sequencer(self) -> AnimationSequencer:
        return self._sequencer

    @property
    def session(self) -> SessionState:
        return self._session

    def update_interface(self, fraction: float, sun_phase: SunPhase | SkyPhase) -> AnimationPlan | None:
        """Report the latest fraction of day and phase. Returns the plan issued, if any."""
        fraction = clamp_fraction(fraction)
        first = self._session.is_first_update_ever

        directive = self._gate.report_phase(sun_phase)
        if directive.changed or first:
            self._bus.publish(PHASE_CHANGED, directive=directive)
            if directive.parked_at is not None:
                self._bus.publish(MARKER_MOVED, position=directive.parked_at)
        if directive.reveal:
            self._bus.publish(MARKER_ALPHA, alpha=1.0)
        if directive.parked_at is not None and self._sequencer.cancel():
            self._bus.publish(LABEL_ALPHA, alpha=1.0)

        previous = self._session.current_fraction
        self._session.current_fraction = fraction

        plan = None
        if self._gate.should_animate:
            self._bus.publish(MARKER_ALPHA, alpha=1.0)
            self._bus.publish(MARKER_MOVED, position=self._mapper.locate(fraction))
            plan = self._issue(previous, fraction, was_backgrounded=False)
        elif not self._gate.foreground:
            logger.debug(f"Backgrounded, recorded fraction {fraction:.3f}")

        self._session.is_first_update_ever = False
        self._bus.flush()
        return plan

    def report_backgrounded(self) -> None:
        self._gate.report_backgrounded()
        self._bus.flush()

    def report_foregrounded(self, fraction: float | None = None) -> AnimationPlan | None:
        """Return to the foreground, optionally with a freshly read fraction."""
        previous = self._session.current_fraction
        if fraction is not None:
            self._session.current_fraction = clamp_fraction(fraction)

        plan = None
        if self._gate.report_foregrounded():
            current = self._session.current_fraction
            self._bus.publish(MARKER_MOVED, position=self._mapper.locate(current))
            plan = self._issue(
                previous, current, was_backgrounded=True,
                gap=self._session.background_gap_fraction,
            )
        self._bus.flush()
        return plan

    def cancel_animation(self) -> bool:
        """Abandon the in-flight plan, e.g. when the runner was stopped. Restores the label."""
        cancelled = self._sequencer.cancel()
        if cancelled:
            self._bus.publish(LABEL_ALPHA, alpha=1.0)
        self._bus.flush()
        return cancelled

    def animation_complete(self, plan_id: int) -> bool:
        """Completion callback from the runner. Stale plan ids are dropped."""
        accepted = self._sequencer.complete(plan_id)
        self._bus.flush()
        return accepted

    def advance(self, dt: float) -> None:
        """Advance host time by ``dt`` seconds."""
        if self._sequencer.advance(dt):
            self._bus.publish(LABEL_ALPHA, alpha=1.0)
        self._bus.flush()

    def _issue(
        self,
        previous: float,
        current: float,
        was_backgrounded: bool,
        gap: float = 0.0,
    ) -> AnimationPlan:
        plan = self._sequencer.update(previous, current, was_backgrounded, gap)
        if plan.is_full_replay:
            self._bus.publish(WILL_ANIMATE, plan_id=plan.plan_id, duration=plan.duration)
        self._bus.publish(LABEL_ALPHA, alpha=0.0)
        self._bus.publish(ANIMATION_PLAN, plan=plan)
        return plan
