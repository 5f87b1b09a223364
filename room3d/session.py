"""A design session: scene, lighting and view state with one event bus."""

import logging
from typing import Optional

from .config import Room3DConfig
from .lighting.state import LightingState
from .render.renderer import SceneRenderer
from .render.types import RenderFrame
from .scene.catalog import FurnitureCatalog
from .scene.events import ChangeEvent, ChangeType, EventBus
from .scene.model import SceneModel
from .types import RoomSpec
from .view.auto_rotate import AutoRotator
from .view.state import ViewState

logger = logging.getLogger(__name__)


class DesignSession:
    """Owns all mutable state of one design session.

    Mutation and rendering happen on the same thread (or event loop), so a
    frame always sees one consistent snapshot.
    """

    def __init__(
        self,
        config: Optional[Room3DConfig] = None,
        room: Optional[RoomSpec] = None,
        lighting: Optional[LightingState] = None,
    ):
        self.config = config or Room3DConfig()
        self.bus = EventBus()
        self.scene = SceneModel(room=room, bus=self.bus)
        self.lighting = lighting or LightingState()
        self.lighting.bind(self.bus)
        self.view = ViewState()
        self.catalog = FurnitureCatalog()
        self.renderer = SceneRenderer(self.config)
        self.auto_rotator = AutoRotator(
            self.view,
            interval=self.config.auto_rotate_interval,
            step=self.config.auto_rotate_step,
            on_tick=lambda view: self._view_changed("auto_rotate"),
        )
        logger.info("Design session started")

    def _view_changed(self, action: str) -> ChangeEvent:
        return self.bus.publish(ChangeEvent(type=ChangeType.VIEW_CHANGED, details={"action": action}))

    # -- view mutators -----------------------------------------------------

    def rotate(self, dx: float, dy: float) -> ChangeEvent:
        self.view.rotate(dx, dy, self.config.drag_sensitivity)
        return self._view_changed("rotate")

    def rotate_roll(self, dx: float) -> ChangeEvent:
        self.view.rotate_roll(dx, self.config.drag_sensitivity)
        return self._view_changed("roll")

    def zoom(self, delta: float) -> ChangeEvent:
        self.view.zoom_by(delta)
        return self._view_changed("zoom")

    def reset_view(self) -> ChangeEvent:
        self.view.reset()
        return self._view_changed("reset")

    def start_auto_rotate(self, direction: int) -> None:
        self.auto_rotator.start(direction)

    def stop_auto_rotate(self) -> bool:
        return self.auto_rotator.stop()

    # -- rendering ---------------------------------------------------------

    def render(self, surface_size=None) -> RenderFrame:
        """Render the current state from fresh snapshots."""
        return self.renderer.render(
            self.scene.snapshot(),
            self.view.copy(),
            self.lighting.copy(),
            surface_size=surface_size,
        )

    def close(self) -> None:
        self.auto_rotator.stop()
        logger.info("Design session closed")
