"""Tests for easing functions."""
import pytest

from sunarc import EASINGS
from sunarc.easing import cubic_bezier


class TestEndpoints:
    """Every curve starts at 0 and ends at 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_zero_and_one(self, name):
        fn = EASINGS[name]
        assert fn(0.0) == 0.0
        assert fn(1.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_clamps_input(self, name):
        fn = EASINGS[name]
        assert fn(-1.0) == 0.0
        assert fn(2.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_monotonic(self, name):
        fn = EASINGS[name]
        values = [fn(i / 200) for i in range(201)]
        assert all(a <= b + 1e-9 for a, b in zip(values, values[1:]))


class TestEaseOut:
    """Ease-out: fast start, slow settle."""

    def test_ahead_of_linear(self):
        ease_out = EASINGS["ease_out"]
        for t in (0.1, 0.25, 0.5, 0.75, 0.9):
            assert ease_out(t) > t

    def test_half_way(self):
        """The (0, 0, 0.58, 1) curve is about 68% complete at half time."""
        assert EASINGS["ease_out"](0.5) == pytest.approx(0.6847, abs=1e-3)


class TestEaseIn:

    def test_behind_linear(self):
        ease_in = EASINGS["ease_in"]
        for t in (0.1, 0.25, 0.5, 0.75, 0.9):
            assert ease_in(t) < t

    def test_mirror_of_ease_out(self):
        """ease_in(t) == 1 - ease_out(1 - t) for mirrored control points."""
        ease_in = EASINGS["ease_in"]
        ease_out = EASINGS["ease_out"]
        for t in (0.2, 0.4, 0.6, 0.8):
            assert ease_in(t) == pytest.approx(1 - ease_out(1 - t), abs=1e-5)


class TestEaseInOut:

    def test_symmetric_midpoint(self):
        assert EASINGS["ease_in_out"](0.5) == pytest.approx(0.5, abs=1e-5)


class TestCubicBezier:

    def test_linear_control_points(self):
        """Control points on the diagonal reproduce linear timing."""
        fn = cubic_bezier(0.25, 0.25, 0.75, 0.75)
        for t in (0.1, 0.3, 0.7):
            assert fn(t) == pytest.approx(t, abs=1e-5)

    def test_rejects_x_outside_unit_interval(self):
        with pytest.raises(ValueError):
            cubic_bezier(1.5, 0.0, 0.5, 1.0)
