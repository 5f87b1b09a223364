"""Tests for view rotation and zoom."""

import math

import pytest

from room3d.view import ViewState, normalize_angle


class TestNormalizeAngle:
    """Tests for normalize_angle."""

    def test_in_range_unchanged(self):
        assert normalize_angle(30.0) == 30.0

    def test_wraps_negative(self):
        assert normalize_angle(-20.0) == 340.0

    def test_wraps_full_turns(self):
        assert normalize_angle(725.0) == 5.0

    def test_360_is_zero(self):
        assert normalize_angle(360.0) == 0.0

    def test_tiny_negative_stays_below_360(self):
        assert 0.0 <= normalize_angle(-1e-15) < 360.0


class TestViewState:
    """Tests for ViewState mutators."""

    def test_defaults(self):
        view = ViewState()
        assert (view.rotation_x, view.rotation_y, view.rotation_z) == (20.0, 30.0, 0.0)
        assert view.zoom == 1.0

    def test_drag_yaws_and_tilts(self):
        view = ViewState()
        view.rotate(dx=100, dy=20)
        assert view.rotation_y == pytest.approx(80.0)
        assert view.rotation_x == pytest.approx(30.0)

    def test_yaw_wraps_around(self):
        view = ViewState()
        view.rotate(dx=-100, dy=0)
        assert view.rotation_y == pytest.approx(340.0)

    def test_pitch_clamped(self):
        view = ViewState()
        view.rotate(dx=0, dy=400)
        assert view.rotation_x == 90.0
        view.rotate(dx=0, dy=-1000)
        assert view.rotation_x == -90.0

    def test_roll_is_not_normalized(self):
        view = ViewState()
        view.rotate_roll(1000)
        assert view.rotation_z == pytest.approx(500.0)

    def test_zoom_clamped(self):
        view = ViewState()
        view.zoom_by(5)
        assert view.zoom == 3.0
        view.zoom_by(-10)
        assert view.zoom == 0.2

    def test_wheel_away_zooms_in(self):
        view = ViewState()
        view.zoom_wheel(-1)
        assert view.zoom == pytest.approx(1.1)
        view.zoom_wheel(2)
        assert view.zoom == pytest.approx(0.9)

    def test_non_finite_input_rejected_without_change(self):
        view = ViewState()
        with pytest.raises(ValueError):
            view.rotate(math.nan, 0)
        with pytest.raises(ValueError):
            view.zoom_by(math.inf)
        assert view.to_dict() == ViewState().to_dict()

    def test_constructor_normalizes(self):
        view = ViewState(rotation_x=120, rotation_y=-30, zoom=10)
        assert view.rotation_x == 90.0
        assert view.rotation_y == pytest.approx(330.0)
        assert view.zoom == 3.0

    def test_direct_assignment_validated(self):
        view = ViewState()
        view.zoom = 10
        view.rotation_y = -30
        view.rotation_x = 200
        assert view.zoom == 3.0
        assert view.rotation_y == pytest.approx(330.0)
        assert view.rotation_x == 90.0
        with pytest.raises(ValueError):
            view.zoom = math.nan
        assert view.zoom == 3.0

    def test_reset(self):
        view = ViewState()
        view.rotate(50, 50)
        view.rotate_roll(20)
        view.zoom_by(1)
        view.reset()
        assert view.to_dict() == {"rotation_x": 20.0, "rotation_y": 30.0, "rotation_z": 0.0, "zoom": 1.0}

    def test_copy_is_independent(self):
        view = ViewState()
        copy = view.copy()
        view.rotate(100, 0)
        assert copy.rotation_y == 30.0
