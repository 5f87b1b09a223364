"""Change descriptors published by the scene, view and lighting state."""

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)


class ChangeType(Enum):
    """Kind of state change."""
    ITEM_ADDED = "item_added"
    ITEM_REMOVED = "item_removed"
    ITEM_UPDATED = "item_updated"
    ROOM_CHANGED = "room_changed"
    LIGHTING_CHANGED = "lighting_changed"
    VIEW_CHANGED = "view_changed"


@dataclass(frozen=True)
class ChangeEvent:
    """A published change. ``item_id`` is set for item events."""

    type: ChangeType
    item_id: Optional[str] = None
    details: dict = field(default_factory=dict)

    @property
    def needs_resync(self) -> bool:
        """Item events change the furniture list; the rest only need a repaint."""
        return self.type in (
            ChangeType.ITEM_ADDED,
            ChangeType.ITEM_REMOVED,
            ChangeType.ITEM_UPDATED,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "item_id": self.item_id,
            "details": self.details,
        }


Subscriber = Callable[[ChangeEvent], None]


class EventBus:
    """Callback registry plus a bounded queue for polling consumers."""

    def __init__(self, max_pending: int = 1000):
        self._subscribers: Dict[str, Subscriber] = {}
        self._pending: Deque[ChangeEvent] = deque(maxlen=max_pending)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback. Returns a function that unsubscribes it."""
        token = str(uuid.uuid4())[:8]
        self._subscribers[token] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> ChangeEvent:
        """Queue the event and notify every subscriber."""
        self._pending.append(event)
        for token, callback in list(self._subscribers.items()):
            try:
                callback(event)
            except Exception:
                logger.exception(f"Subscriber {token} failed handling {event.type.value}")
        return event

    def drain(self) -> List[ChangeEvent]:
        """Return and clear all events published since the last drain."""
        events = list(self._pending)
        self._pending.clear()
        return events

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
