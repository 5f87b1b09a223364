"""Translucent floor shadows under furniture and along L-shape seams."""

from typing import Iterable, List

from room3d.colors import BLACK
from room3d.lighting.state import LightingState
from room3d.types import FurnitureItem, RoomShape, RoomSpec

from .room import l_cut_size, rect_points
from .shapes import MIN_DIMENSION
from .types import DrawCommand, DrawOp, Layer

# Below this intensity shadows are skipped entirely
SHADOW_THRESHOLD = 0.2

# Fixed light-direction offset of every shadow
SHADOW_OFFSET = (15, 15)

SEAM_THICKNESS = 10


class ShadowCompositor:
    """Emits shadow commands for one frame.

    Shadows are overlay only: they never feed back into layout or hit-testing.
    """

    def __init__(self, lighting: LightingState):
        self.intensity = lighting.shadow_intensity

    @property
    def enabled(self) -> bool:
        return self.intensity > SHADOW_THRESHOLD

    def _command(self, op: DrawOp, points, source_id: str = "", part: str = "") -> DrawCommand:
        return DrawCommand(
            op=op,
            points=tuple(points),
            color=BLACK,
            alpha=int(100 * self.intensity),
            opacity=self.intensity,
            layer=Layer.SHADOW,
            source_id=source_id,
            part=part,
        )

    def item_shadow(self, item: FurnitureItem) -> DrawCommand:
        """Oval of (width, height/2) centred a quarter height above the offset point."""
        width, height, _ = item.scaled_size
        width, height = max(width, MIN_DIMENSION), max(height, MIN_DIMENSION)
        cx = item.x + SHADOW_OFFSET[0]
        cy = item.y + SHADOW_OFFSET[1]
        left, top = cx - width // 2, cy - height // 4
        return self._command(
            DrawOp.FILL_OVAL,
            ((left, top), (left + width, top + height // 2)),
            source_id=item.id,
            part="shadow",
        )

    def seam_shadows(self, room: RoomSpec) -> List[DrawCommand]:
        """Two thin strips along the inner corner of an L-shaped room."""
        if room.shape != RoomShape.L_SHAPE:
            return []
        width, length = room.floor_size
        cut_w, cut_l = l_cut_size(width, length)
        x = width // 2 - cut_w - SEAM_THICKNESS
        y = length // 2 - cut_l - SEAM_THICKNESS
        return [
            self._command(DrawOp.FILL_POLYGON, rect_points(x, y, SEAM_THICKNESS, cut_l), part="seam_vertical"),
            self._command(DrawOp.FILL_POLYGON, rect_points(x, y, cut_w, SEAM_THICKNESS), part="seam_horizontal"),
        ]

    def commands(self, room: RoomSpec, items: Iterable[FurnitureItem]) -> List[DrawCommand]:
        if not self.enabled:
            return []
        shadows = [self.item_shadow(item) for item in items]
        shadows.extend(self.seam_shadows(room))
        return shadows
