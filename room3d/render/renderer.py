"""Per-frame scene renderer.

Produces the ordered draw commands for one frame: the frame transform, room
geometry, shadows, then furniture back to front. Rendering is a pure function
of (scene snapshot, view, lighting); no state survives between frames.
"""

import logging
from typing import Optional, Tuple

from room3d.config import Room3DConfig
from room3d.errors import Room3DError
from room3d.lighting.model import LightingModel
from room3d.lighting.state import LightingState
from room3d.types import FurnitureItem, SceneSnapshot
from room3d.view.state import ViewState

from .depth import DepthSorter
from .projector import PseudoProjector
from .room import room_commands
from .shadows import ShadowCompositor
from .shapes import ShapeRenderer
from .types import DrawCommand, DrawOp, Layer, RenderError, RenderFrame

logger = logging.getLogger(__name__)


class SceneRenderer:
    """Renders scene snapshots into RenderFrames."""

    def __init__(self, config: Optional[Room3DConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Renderer settings (surface size, perspective scaling).
                    Defaults to Room3DConfig().
        """
        self.config = config or Room3DConfig()
        self.projector = PseudoProjector()
        self.sorter = DepthSorter(perspective_scaling=self.config.perspective_scaling)

    def render(
        self,
        scene: SceneSnapshot,
        view: ViewState,
        lighting: LightingState,
        surface_size: Optional[Tuple[int, int]] = None,
    ) -> RenderFrame:
        """
        Render one frame.

        Args:
            scene: Read-only scene snapshot
            view: View rotation and zoom
            lighting: Lighting settings

        Returns:
            RenderFrame with ordered commands. An item whose shadow or geometry
            fails gets one entry in ``errors`` and no furniture commands; a
            shadow already drawn for it is kept.
        """
        size = surface_size or self.config.surface_size
        transform = self.projector.frame_transform(view, size)
        frame = RenderFrame(transform=transform, surface_size=size)
        frame.commands.append(DrawCommand(op=DrawOp.SET_TRANSFORM, layer=Layer.TRANSFORM, matrix=transform.as_tuple()))

        light_model = LightingModel(lighting)
        frame.commands.extend(room_commands(scene.room, light_model))

        ordered = self.sorter.order(scene.items)

        shadows = ShadowCompositor(lighting)
        if shadows.enabled:
            for item in ordered:
                shadow = self._isolated(frame, item, shadows.item_shadow)
                if shadow is not None:
                    frame.commands.append(shadow)
            frame.commands.extend(shadows.seam_shadows(scene.room))

        shapes = ShapeRenderer(light_model)
        failed = {err.item_id for err in frame.errors}
        for item in ordered:
            if item.id in failed:
                # Shadow already failed; drop the whole item
                continue
            geometry = self._isolated(frame, item, shapes.build, self.sorter.size_factor(item))
            if geometry is None:
                continue
            frame.box_counts[item.id] = len(geometry.boxes)
            frame.commands.extend(shapes.geometry_commands(item, geometry))

        logger.debug(
            f"Rendered frame v{scene.version}: {len(scene.items)} items, "
            f"{len(frame.commands)} commands, {len(frame.errors)} errors"
        )
        return frame

    def _isolated(self, frame: RenderFrame, item: FurnitureItem, build, *args):
        """Run ``build(item, *args)``; a failure is recorded and None returned."""
        try:
            return build(item, *args)
        except Exception as e:
            error_type = e.error_type if isinstance(e, Room3DError) else "unknown"
            logger.warning(f"Skipping furniture {item.name} ({item.id}): {e}")
            frame.errors.append(RenderError(
                item_id=item.id,
                item_name=item.name,
                error_type=error_type,
                message=str(e),
            ))
            return None


def render(
    scene: SceneSnapshot,
    view: ViewState,
    lighting: LightingState,
    config: Optional[Room3DConfig] = None,
) -> RenderFrame:
    """Render one frame with a default-configured SceneRenderer."""
    return SceneRenderer(config).render(scene, view, lighting)
