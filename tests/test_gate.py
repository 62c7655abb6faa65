"""Tests for the PhaseGate state machine."""
import pytest

from sunarc import ArcConfig, PhaseGate, PositionMapper, SessionState, SkyPhase, SunPhase


@pytest.fixture
def mapper():
    return PositionMapper(ArcConfig())


class TestSunPhaseProjection:

    @pytest.mark.parametrize(
        "phase, sky",
        [
            (SunPhase.PREDAWN, SkyPhase.DARK),
            (SunPhase.DAY, SkyPhase.LIGHT),
            (SunPhase.DUSK, SkyPhase.LIGHT),
            (SunPhase.NIGHT, SkyPhase.DARK),
        ],
    )
    def test_sky(self, phase, sky):
        assert phase.sky is sky


class TestInitialState:

    def test_starts_dark_foreground(self, mapper):
        gate = PhaseGate(mapper)
        assert gate.sky is SkyPhase.DARK
        assert gate.foreground
        assert gate.state == "dark.foreground"
        assert not gate.should_animate
        assert gate.session.is_first_update_ever


class TestDarkReport:
    """Dark resets the gap, shows the moon and parks the marker."""

    def test_resets_gap_and_parks(self, mapper):
        session = SessionState(background_gap_fraction=0.73, is_first_update_ever=False)
        gate = PhaseGate(mapper, session)
        gate.report_phase(SunPhase.DAY)
        directive = gate.report_phase(SunPhase.NIGHT)
        assert session.background_gap_fraction == 0.0
        assert directive.moon_visible
        assert directive.parked_at == mapper.parked()
        assert directive.changed

    def test_reveal_only_on_first_update(self, mapper):
        session = SessionState()
        gate = PhaseGate(mapper, session)
        assert gate.report_phase(SunPhase.PREDAWN).reveal
        session.is_first_update_ever = False
        assert not gate.report_phase(SunPhase.PREDAWN).reveal

    def test_repeated_dark_is_unchanged(self, mapper):
        gate = PhaseGate(mapper)
        directive = gate.report_phase(SkyPhase.DARK)
        assert not directive.changed
        assert directive.sun_phase is None


class TestLightReport:

    def test_hides_moon(self, mapper):
        gate = PhaseGate(mapper)
        directive = gate.report_phase(SunPhase.DUSK)
        assert not directive.moon_visible
        assert directive.parked_at is None
        assert directive.changed
        assert gate.sun_phase is SunPhase.DUSK
        assert gate.should_animate

    def test_light_keeps_gap(self, mapper):
        session = SessionState(background_gap_fraction=0.4)
        gate = PhaseGate(mapper, session)
        gate.report_phase(SunPhase.DAY)
        assert session.background_gap_fraction == 0.4


class TestPresence:
    """Background records the gap; foreground reports whether to animate."""

    def test_background_records_gap(self, mapper):
        session = SessionState(current_fraction=0.37)
        gate = PhaseGate(mapper, session)
        gate.report_backgrounded()
        assert session.background_gap_fraction == 0.37
        assert not gate.foreground
        assert gate.state == "dark.background"

    def test_foreground_in_light_animates(self, mapper):
        gate = PhaseGate(mapper)
        gate.report_phase(SunPhase.DAY)
        gate.report_backgrounded()
        assert not gate.should_animate
        assert gate.report_foregrounded() is True
        assert gate.should_animate

    def test_foreground_in_dark_does_not_animate(self, mapper):
        gate = PhaseGate(mapper)
        gate.report_backgrounded()
        assert gate.report_foregrounded() is False


class TestTransitionCallback:

    def test_fires_on_change_only(self, mapper):
        seen = []
        gate = PhaseGate(mapper, on_transition=lambda old, new: seen.append((old, new)))
        gate.report_phase(SunPhase.NIGHT)
        gate.report_phase(SunPhase.DAY)
        gate.report_backgrounded()
        gate.report_foregrounded()
        assert seen == [
            ("dark.foreground", "light.foreground"),
            ("light.foreground", "light.background"),
            ("light.background", "light.foreground"),
        ]
