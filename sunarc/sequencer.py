"""Animation strategy selection: full replay vs. catch-up segment."""
from __future__ import annotations

import logging

from sunarc.mapper import PositionMapper
from sunarc.types import AnimationPlan, SessionState, clamp_fraction

logger = logging.getLogger(__name__)

# Float residue tolerated when comparing gaps in percentage points, so
# 0.30 -> 0.40 counts as exactly 10 points.
_GAP_EPSILON = 1e-9


class AnimationSequencer:
    """Builds keyframe plans and tracks the single in-flight animation slot.

    A plan is in flight from :meth:`update` until the settle delay following
    its completion has elapsed (see :meth:`complete` and :meth:`advance`).
    Issuing a new plan supersedes the previous one; completions carrying an
    older ``plan_id`` are ignored.
    """

    def __init__(self, mapper: PositionMapper, session: SessionState | None = None) -> None:
        self._mapper = mapper
        self._session = session if session is not None else SessionState()
        self._plan_id = 0
        self._settle_remaining: float | None = None

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def current_plan_id(self) -> int:
        return self._plan_id

    @property
    def settling(self) -> bool:
        return self._settle_remaining is not None

    def update(
        self,
        previous_fraction: float,
        new_fraction: float,
        was_backgrounded: bool,
        background_gap_fraction: float,
    ) -> AnimationPlan:
        """Issue the plan moving the marker to ``new_fraction``.

        On resume from background the gap is measured from
        ``background_gap_fraction``; on a plain refresh it is measured from
        ``previous_fraction``.
        """
        new = clamp_fraction(new_fraction)
        origin = clamp_fraction(background_gap_fraction if was_backgrounded else previous_fraction)

        if self._needs_full_replay(origin, new, was_backgrounded):
            plan = self._full_replay(new)
        else:
            plan = self._catch_up(origin, new)

        self._session.animation_in_flight = True
        self._settle_remaining = None
        logger.debug(
            f"Plan {plan.plan_id}: {'replay' if plan.is_full_replay else 'catch-up'} "
            f"to {new:.3f}, {len(plan.keyframes)} keyframes over {plan.duration:.2f}s"
        )
        return plan

    def complete(self, plan_id: int) -> bool:
        """Accept a completion signal. Returns False for stale or repeated ids."""
        if plan_id != self._plan_id or not self._session.animation_in_flight or self.settling:
            logger.debug(f"Ignoring completion for plan {plan_id} (current {self._plan_id})")
            return False
        self._settle_remaining = self._mapper.config.settle_delay
        return True

    def advance(self, dt: float) -> bool:
        """Count down the settle delay. Returns True when the slot is released."""
        if self._settle_remaining is None:
            return False
        self._settle_remaining -= dt
        if self._settle_remaining > 0:
            return False
        self._settle_remaining = None
        self._session.animation_in_flight = False
        return True

    def cancel(self) -> bool:
        """Release the slot without waiting for completion.

        Returns True if a plan was in flight. Its later completion is ignored.
        """
        if not self._session.animation_in_flight:
            return False
        logger.debug(f"Cancelled plan {self._plan_id}")
        self._settle_remaining = None
        self._session.animation_in_flight = False
        return True

    def _needs_full_replay(self, origin: float, new: float, was_backgrounded: bool) -> bool:
        if self._session.is_first_update_ever:
            return True
        gap_points = (new - origin) * 100.0
        if gap_points > self._mapper.config.catch_up_threshold + _GAP_EPSILON:
            return True
        if was_backgrounded:
            # A zero origin means nothing was recorded or night reset it.
            return gap_points <= _GAP_EPSILON or origin == 0.0
        return gap_points < -_GAP_EPSILON

    def _next_id(self) -> int:
        self._plan_id += 1
        return self._plan_id

    def _full_replay(self, new: float) -> AnimationPlan:
        cfg = self._mapper.config
        return AnimationPlan(
            plan_id=self._next_id(),
            keyframes=self._mapper.path(0, self._mapper.step_index(new)),
            duration=cfg.replay_base_duration + cfg.replay_extra_duration * new,
            is_full_replay=True,
        )

    def _catch_up(self, origin: float, new: float) -> AnimationPlan:
        return AnimationPlan(
            plan_id=self._next_id(),
            keyframes=self._mapper.path(
                self._mapper.step_index(origin), self._mapper.step_index(new)
            ),
            duration=self._mapper.config.catch_up_duration,
            is_full_replay=False,
        )
