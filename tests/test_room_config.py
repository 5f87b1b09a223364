"""Tests for the room configuration form."""

import pytest

from room3d.errors import InvalidRangeInput
from room3d.scene import ChangeType, SceneModel, apply_room_form, parse_dimension, resolve_room_color
from room3d.types import RoomShape


@pytest.fixture
def scene():
    return SceneModel()


class TestParseDimension:
    """Tests for parse_dimension."""

    def test_valid(self):
        assert parse_dimension("width", " 300 ") == 300

    @pytest.mark.parametrize("text", ["abc", "", "12.5", None])
    def test_not_a_number(self, text):
        with pytest.raises(InvalidRangeInput) as exc:
            parse_dimension("width", text)
        assert exc.value.field == "width"
        assert exc.value.error_type == "invalid_range_input"

    @pytest.mark.parametrize("text", ["0", "-5"])
    def test_not_positive(self, text):
        with pytest.raises(InvalidRangeInput):
            parse_dimension("height", text)


class TestResolveRoomColor:
    """Tests for resolve_room_color."""

    def test_scheme(self):
        assert resolve_room_color("Beige") == (245, 245, 220)

    def test_custom_wins(self):
        assert resolve_room_color("Beige", "#ff0000") == (255, 0, 0)

    def test_default_white(self):
        assert resolve_room_color(None) == (255, 255, 255)

    def test_unknown_scheme(self):
        with pytest.raises(InvalidRangeInput):
            resolve_room_color("Purple")

    def test_bad_custom(self):
        with pytest.raises(InvalidRangeInput):
            resolve_room_color("White", "#12")


class TestApplyRoomForm:
    """Tests for apply_room_form."""

    def test_commits_all_fields(self, scene):
        events = apply_room_form(scene, "600", "450", "270", shape="L-Shape", color_scheme="Blue")
        assert [e.type for e in events] == [ChangeType.ROOM_CHANGED] * 3
        room = scene.room
        assert (room.width, room.length, room.height) == (600, 450, 270)
        assert room.shape == RoomShape.L_SHAPE
        assert room.color == (173, 216, 230)

    def test_invalid_field_commits_nothing(self, scene):
        before = scene.room.to_dict()
        with pytest.raises(InvalidRangeInput):
            apply_room_form(scene, "600", "450", "abc", shape="Square")
        assert scene.room.to_dict() == before
        assert scene.bus.drain() == []

    def test_invalid_shape_commits_nothing(self, scene):
        with pytest.raises(InvalidRangeInput) as exc:
            apply_room_form(scene, "600", "450", "270", shape="Hexagon")
        assert exc.value.field == "shape"
        assert scene.room.width == 500
