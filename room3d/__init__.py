"""Room3D: pseudo-3D room and furniture rendering with 2D affine drawing.

Usage:
    from room3d import DesignSession, FurnitureItem, FurnitureKind

    session = DesignSession()
    session.scene.add_item(FurnitureItem(kind=FurnitureKind.CHAIR, width=40, height=40, depth=40))
    session.rotate(dx=10, dy=0)
    frame = session.render()
"""

from .config import Room3DConfig
from .errors import DegenerateGeometry, InvalidRangeInput, Room3DError, UnknownFurnitureKind
from .lighting import LightingModel, LightingState, adjust
from .render import RenderFrame, SceneRenderer, rasterize, render
from .scene import ChangeEvent, ChangeType, EventBus, FurnitureCatalog, SceneModel
from .session import DesignSession
from .types import FurnitureItem, FurnitureKind, RoomShape, RoomSpec, SceneSnapshot
from .view import AutoRotator, ViewState

__all__ = [
    # Main API
    "DesignSession",
    "render",
    "rasterize",
    "SceneRenderer",
    "RenderFrame",
    # State
    "SceneModel",
    "SceneSnapshot",
    "ViewState",
    "AutoRotator",
    "LightingState",
    "LightingModel",
    "adjust",
    # Data model
    "RoomSpec",
    "RoomShape",
    "FurnitureItem",
    "FurnitureKind",
    "FurnitureCatalog",
    # Events
    "ChangeEvent",
    "ChangeType",
    "EventBus",
    # Config and errors
    "Room3DConfig",
    "Room3DError",
    "InvalidRangeInput",
    "UnknownFurnitureKind",
    "DegenerateGeometry",
]
