"""Tests for the scene model and change events."""

import pytest

from room3d.errors import InvalidRangeInput
from room3d.scene import ChangeEvent, ChangeType, EventBus, SceneModel
from room3d.types import FurnitureItem, FurnitureKind, RoomShape, RoomSpec


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def scene(bus):
    return SceneModel(bus=bus)


class TestFurniture:
    """Tests for furniture mutations."""

    def test_add_publishes(self, scene, bus):
        item = FurnitureItem(kind=FurnitureKind.CHAIR)
        event = scene.add_item(item)
        assert event.type == ChangeType.ITEM_ADDED
        assert event.item_id == item.id
        assert event.needs_resync
        assert bus.drain() == [event]
        assert scene.version == 1

    def test_duplicate_id_rejected(self, scene):
        item = FurnitureItem()
        scene.add_item(item)
        with pytest.raises(ValueError):
            scene.add_item(item)

    def test_remove(self, scene):
        item = FurnitureItem()
        scene.add_item(item)
        event = scene.remove_item(item.id)
        assert event.type == ChangeType.ITEM_REMOVED
        assert len(scene) == 0

    def test_missing_item(self, scene):
        with pytest.raises(KeyError):
            scene.remove_item("nope")
        with pytest.raises(KeyError):
            scene.update_item("nope", x=1)

    def test_update_keeps_order_and_id(self, scene):
        first, second = FurnitureItem(name="a"), FurnitureItem(name="b")
        scene.add_item(first)
        scene.add_item(second)
        event = scene.update_item(first.id, x=42, scale=2.0)
        assert event.details == {"fields": ["scale", "x"]}
        items = scene.items()
        assert [i.id for i in items] == [first.id, second.id]
        assert items[0].x == 42
        assert items[0].scaled_size == (100, 100, 100)

    def test_update_kind_by_name(self, scene):
        item = FurnitureItem(kind=FurnitureKind.CHAIR)
        scene.add_item(item)
        scene.update_item(item.id, kind="Bed")
        assert scene.get_item(item.id).kind == FurnitureKind.BED

    def test_clear(self, scene, bus):
        scene.add_item(FurnitureItem())
        scene.add_item(FurnitureItem())
        bus.drain()
        scene.clear()
        assert len(scene) == 0
        assert [e.type for e in bus.drain()] == [ChangeType.ITEM_REMOVED] * 2

    def test_snapshot_is_frozen(self, scene):
        scene.add_item(FurnitureItem())
        snapshot = scene.snapshot()
        scene.add_item(FurnitureItem())
        scene.set_room_dimensions(100, 100, 100)
        assert len(snapshot.items) == 1
        assert snapshot.room.width == 500
        assert snapshot.version == 1


class TestRoom:
    """Tests for room mutations."""

    def test_dimensions(self, scene):
        event = scene.set_room_dimensions(600, 300, 280)
        assert event.type == ChangeType.ROOM_CHANGED
        assert not event.needs_resync
        assert (scene.room.width, scene.room.length, scene.room.height) == (600, 300, 280)

    def test_invalid_dimensions_keep_state(self, scene, bus):
        with pytest.raises(InvalidRangeInput) as exc:
            scene.set_room_dimensions(600, 0, 280)
        assert exc.value.field == "length"
        assert scene.room.width == 500
        assert bus.drain() == []

    def test_shape_by_name(self, scene):
        scene.set_room_shape("l-shape")
        assert scene.room.shape == RoomShape.L_SHAPE

    def test_unknown_shape(self, scene):
        with pytest.raises(InvalidRangeInput):
            scene.set_room_shape("Circle")

    def test_color(self, scene):
        scene.set_room_color([1, 2, 3])
        assert scene.room.color == (1, 2, 3)


class TestTypes:
    """Tests for data model helpers."""

    def test_kind_aliases(self):
        assert FurnitureKind.from_name("Dining Table") == FurnitureKind.TABLE
        assert FurnitureKind.parse("coffee table") == FurnitureKind.TABLE
        assert FurnitureKind.parse("Piano") == FurnitureKind.UNKNOWN

    def test_strict_kind(self):
        from room3d.errors import UnknownFurnitureKind

        with pytest.raises(UnknownFurnitureKind):
            FurnitureKind.parse("Piano", strict=True)

    def test_room_validation(self):
        with pytest.raises(InvalidRangeInput):
            RoomSpec(width=-1)

    @pytest.mark.parametrize("scale", [0, -1.0, float("nan"), float("inf")])
    def test_item_scale_validation(self, scale):
        with pytest.raises(InvalidRangeInput):
            FurnitureItem(scale=scale)

    def test_update_rejects_nan_scale(self, scene):
        item = FurnitureItem()
        scene.add_item(item)
        with pytest.raises(InvalidRangeInput):
            scene.update_item(item.id, scale=float("nan"))
        assert scene.get_item(item.id).scale == 1.0

    def test_item_round_trip(self):
        item = FurnitureItem(kind=FurnitureKind.SOFA, x=1, y=2, z=3, color=(1, 2, 3), scale=1.5, name="Sofa")
        assert FurnitureItem.from_dict(item.to_dict()) == item

    def test_room_round_trip(self):
        room = RoomSpec(300, 200, 240, RoomShape.SQUARE, (1, 2, 3))
        assert RoomSpec.from_dict(room.to_dict()) == room


class TestEventBus:
    """Tests for EventBus."""

    def test_subscribe_and_unsubscribe(self, bus):
        received = []
        unsubscribe = bus.subscribe(received.append)
        event = bus.publish(ChangeEvent(ChangeType.VIEW_CHANGED))
        unsubscribe()
        bus.publish(ChangeEvent(ChangeType.VIEW_CHANGED))
        assert received == [event]
        assert bus.subscriber_count == 0

    def test_failing_subscriber_isolated(self, bus):
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(broken)
        bus.subscribe(received.append)
        bus.publish(ChangeEvent(ChangeType.ROOM_CHANGED))
        assert len(received) == 1

    def test_drain_clears(self, bus):
        bus.publish(ChangeEvent(ChangeType.ROOM_CHANGED))
        assert len(bus.drain()) == 1
        assert bus.drain() == []

    def test_event_dict(self):
        event = ChangeEvent(ChangeType.ITEM_UPDATED, item_id="abc", details={"fields": ["x"]})
        assert event.to_dict() == {"type": "item_updated", "item_id": "abc", "details": {"fields": ["x"]}}
