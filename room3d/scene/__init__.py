"""Scene state: room, furniture and change events."""

from .catalog import FURNITURE_DEFAULTS, FurnitureCatalog, default_depth
from .coordinates import DEFAULT_PLAN_TRANSFORM, PlanTransform
from .events import ChangeEvent, ChangeType, EventBus
from .model import SceneModel
from .room_config import apply_room_form, parse_dimension, resolve_room_color

__all__ = [
    "SceneModel",
    "ChangeEvent",
    "ChangeType",
    "EventBus",
    "FurnitureCatalog",
    "FURNITURE_DEFAULTS",
    "default_depth",
    "PlanTransform",
    "DEFAULT_PLAN_TRANSFORM",
    "apply_room_form",
    "parse_dimension",
    "resolve_room_color",
]
