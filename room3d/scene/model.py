"""Scene model: the single source of truth for room and furniture state."""

import logging
from dataclasses import replace
from typing import List, Optional

from room3d.errors import InvalidRangeInput
from room3d.types import Color, FurnitureItem, RoomShape, RoomSpec, SceneSnapshot

from .events import ChangeEvent, ChangeType, EventBus

logger = logging.getLogger(__name__)


class SceneModel:
    """Holds the room and the ordered furniture list.

    Every mutation publishes a ChangeEvent on the bus and returns it. Readers
    take a SceneSnapshot instead of sharing the live list.
    """

    def __init__(self, room: Optional[RoomSpec] = None, bus: Optional[EventBus] = None):
        self.room = room or RoomSpec()
        self.bus = bus or EventBus()
        self._items: List[FurnitureItem] = []
        self._version = 0

    def _publish(self, change_type: ChangeType, item_id: Optional[str] = None, **details) -> ChangeEvent:
        self._version += 1
        return self.bus.publish(ChangeEvent(type=change_type, item_id=item_id, details=details))

    # -- furniture ---------------------------------------------------------

    def add_item(self, item: FurnitureItem) -> ChangeEvent:
        """Append an item; insertion order breaks depth ties when rendering."""
        if self.get_item(item.id) is not None:
            raise ValueError(f"Furniture item {item.id} already in scene")
        self._items.append(item)
        logger.debug(f"Added {item.name} ({item.id}) at {item.position}")
        return self._publish(ChangeType.ITEM_ADDED, item.id)

    def remove_item(self, item_id: str) -> ChangeEvent:
        index = self._index_of(item_id)
        if index is None:
            raise KeyError(item_id)
        item = self._items.pop(index)
        logger.debug(f"Removed {item.name} ({item.id})")
        return self._publish(ChangeType.ITEM_REMOVED, item_id)

    def update_item(self, item_id: str, **changes) -> ChangeEvent:
        """Replace an item with a copy carrying ``changes``; position in the list is kept."""
        index = self._index_of(item_id)
        if index is None:
            raise KeyError(item_id)
        self._items[index] = self._items[index].with_changes(**changes)
        return self._publish(ChangeType.ITEM_UPDATED, item_id, fields=sorted(changes))

    def get_item(self, item_id: str) -> Optional[FurnitureItem]:
        index = self._index_of(item_id)
        return None if index is None else self._items[index]

    def items(self) -> List[FurnitureItem]:
        """Copy of the furniture list in insertion order."""
        return list(self._items)

    def clear(self) -> None:
        for item in list(self._items):
            self.remove_item(item.id)

    def _index_of(self, item_id: str) -> Optional[int]:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    # -- room --------------------------------------------------------------

    def set_room_dimensions(self, width: int, length: int, height: int) -> ChangeEvent:
        for name, value in (("width", width), ("length", length), ("height", height)):
            if int(value) <= 0:
                raise InvalidRangeInput(name, value, f"Room {name} must be positive")
        self.room = replace(self.room, width=int(width), length=int(length), height=int(height))
        return self._publish(ChangeType.ROOM_CHANGED, field="dimensions")

    def set_room_shape(self, shape) -> ChangeEvent:
        self.room = replace(self.room, shape=RoomShape.parse(shape))
        return self._publish(ChangeType.ROOM_CHANGED, field="shape")

    def set_room_color(self, color: Color) -> ChangeEvent:
        self.room = replace(self.room, color=tuple(color))
        return self._publish(ChangeType.ROOM_CHANGED, field="color")

    # -- readers -----------------------------------------------------------

    def snapshot(self) -> SceneSnapshot:
        """Consistent read-only state for one rendered frame."""
        return SceneSnapshot(room=replace(self.room), items=tuple(self._items), version=self._version)

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._items)
