"""Tests for configuration and the design session."""

import pytest

from room3d import DesignSession, Room3DConfig
from room3d.render.types import Layer
from room3d.scene import ChangeType
from room3d.types import FurnitureItem, FurnitureKind


class TestRoom3DConfig:
    """Tests for Room3DConfig."""

    def test_defaults(self):
        config = Room3DConfig()
        assert config.surface_size == (800, 600)
        assert config.perspective_scaling is False
        assert config.drag_sensitivity == 0.5

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ROOM3D_SURFACE_WIDTH", "1024")
        monkeypatch.setenv("ROOM3D_PERSPECTIVE_SCALING", "true")
        monkeypatch.setenv("ROOM3D_AUTO_ROTATE_STEP", "5")
        monkeypatch.setenv("ROOM3D_LOG_LEVEL", "debug")
        config = Room3DConfig.from_env()
        assert config.surface_width == 1024
        assert config.surface_height == 600
        assert config.perspective_scaling is True
        assert config.auto_rotate_step == 5.0
        assert config.log_level == "DEBUG"


class TestDesignSession:
    """Tests for DesignSession."""

    @pytest.fixture
    def session(self):
        return DesignSession(Room3DConfig(drag_sensitivity=1.0))

    def test_rotate_uses_configured_sensitivity(self, session):
        event = session.rotate(dx=10, dy=5)
        assert session.view.rotation_y == pytest.approx(40.0)
        assert session.view.rotation_x == pytest.approx(25.0)
        assert event.type == ChangeType.VIEW_CHANGED

    def test_view_mutators_publish(self, session):
        session.rotate_roll(10)
        session.zoom(0.5)
        session.reset_view()
        actions = [e.details["action"] for e in session.bus.drain()]
        assert actions == ["roll", "zoom", "reset"]
        assert session.view.zoom == 1.0

    def test_lighting_bound_to_bus(self, session):
        session.lighting.set_shadow_intensity(0.9)
        assert session.bus.drain()[0].type == ChangeType.LIGHTING_CHANGED

    def test_render_uses_current_state(self, session):
        item = FurnitureItem(kind=FurnitureKind.BED, width=160, height=200, depth=50)
        session.scene.add_item(item)
        frame = session.render((300, 200))
        assert frame.surface_size == (300, 200)
        assert frame.box_counts[item.id] == 6
        assert frame.by_layer(Layer.SHADOW)

    def test_stop_without_start(self, session):
        assert session.stop_auto_rotate() is False
