"""Room floor and wall geometry.

Uses Shapely for the L-shaped floor outline.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import box as shapely_box

from room3d.colors import BLACK, LIGHT_GRAY
from room3d.lighting.model import LightingModel
from room3d.types import Point2D, RoomShape, RoomSpec

from .types import DrawCommand, DrawOp, Layer

Rect = Tuple[int, int, int, int]  # x, y, width, height

# Fraction of width/length removed from the corner of an L-shaped room
L_CUT_FRACTION = (2, 3)

BACKGROUND = LIGHT_GRAY  # Shown through the L-shape cut
BACK_WALL_COLOR = (240, 240, 240)
LEFT_WALL_COLOR = (220, 220, 220)


def rect_points(x: float, y: float, width: float, height: float) -> Tuple[Point2D, ...]:
    """Corners of an axis-aligned rectangle, clockwise from top-left."""
    return ((x, y), (x + width, y), (x + width, y + height), (x, y + height))


def l_cut_size(width: int, length: int) -> Tuple[int, int]:
    """Width and length of the L-shape cut (two thirds, truncated)."""
    num, den = L_CUT_FRACTION
    return width * num // den, length * num // den


def l_cut_rect(width: int, length: int) -> Rect:
    """The cut rectangle, anchored at the positive-x / positive-y corner."""
    cut_w, cut_l = l_cut_size(width, length)
    return (width // 2 - cut_w, length // 2 - cut_l, cut_w, cut_l)


@dataclass
class RoomGeometry:
    """Floor outline and wall bands of a room in scene coordinates."""

    floor_rect: Rect
    back_wall: Rect
    left_wall: Rect
    cut: Optional[Rect] = None

    @property
    def is_l_shape(self) -> bool:
        return self.cut is not None

    def floor_polygon(self) -> ShapelyPolygon:
        """Floor area; for L-shaped rooms the cut is subtracted."""
        x, y, w, h = self.floor_rect
        floor = shapely_box(x, y, x + w, y + h)
        if self.cut is not None:
            cx, cy, cw, ch = self.cut
            floor = floor.difference(shapely_box(cx, cy, cx + cw, cy + ch))
        return floor

    def floor_outline(self) -> Tuple[Point2D, ...]:
        """Exterior ring of the floor without the repeated closing point."""
        coords = list(self.floor_polygon().exterior.coords)[:-1]
        return tuple((float(px), float(py)) for px, py in coords)

    @property
    def floor_area(self) -> float:
        return self.floor_polygon().area


def build_room_geometry(room: RoomSpec) -> RoomGeometry:
    """Lay out floor and wall bands for ``room`` centred on the origin."""
    width, length = room.floor_size
    left, top = -(width // 2), -(length // 2)
    wall_height = room.height // 3

    if room.shape == RoomShape.L_SHAPE:
        cut = l_cut_rect(width, length)
        return RoomGeometry(
            floor_rect=(left, top, width, length),
            back_wall=(left, top, width, wall_height),
            left_wall=(left, top, width // 6, length * 2 // 3),
            cut=cut,
        )

    return RoomGeometry(
        floor_rect=(left, top, width, length),
        back_wall=(left, top, width, wall_height),
        left_wall=(left, top, width // 6, length),
    )


def _fill(points, color, part: str) -> DrawCommand:
    return DrawCommand(op=DrawOp.FILL_POLYGON, points=tuple(points), color=color, layer=Layer.ROOM, part=part)


def _outline(points, part: str) -> DrawCommand:
    return DrawCommand(op=DrawOp.STROKE_POLYGON, points=tuple(points), color=BLACK, layer=Layer.ROOM, part=part)


def room_commands(room: RoomSpec, lighting: LightingModel) -> List[DrawCommand]:
    """Floor, back wall and left wall, lit, each with a black outline."""
    geometry = build_room_geometry(room)
    commands: List[DrawCommand] = []

    floor_color = lighting.adjust(room.color)
    if geometry.is_l_shape:
        commands.append(_fill(geometry.floor_outline(), floor_color, "floor"))
        commands.append(_fill(rect_points(*geometry.cut), BACKGROUND, "floor_cut"))
        commands.append(_outline(rect_points(*geometry.floor_rect), "floor"))
        commands.append(_outline(rect_points(*geometry.cut), "floor_cut"))
    else:
        commands.append(_fill(rect_points(*geometry.floor_rect), floor_color, "floor"))
        commands.append(_outline(rect_points(*geometry.floor_rect), "floor"))

    back_x, back_y, back_w, back_h = geometry.back_wall
    commands.append(_fill(rect_points(*geometry.back_wall), lighting.adjust(BACK_WALL_COLOR), "back_wall"))
    if geometry.is_l_shape:
        cut_w = geometry.cut[2]
        commands.append(
            _fill(rect_points(back_x + back_w - cut_w, back_y, cut_w, back_h), BACKGROUND, "back_wall_cut")
        )
        commands.append(_outline(rect_points(back_x, back_y, back_w - cut_w, back_h), "back_wall"))
    else:
        commands.append(_outline(rect_points(*geometry.back_wall), "back_wall"))

    commands.append(_fill(rect_points(*geometry.left_wall), lighting.adjust(LEFT_WALL_COLOR), "left_wall"))
    commands.append(_outline(rect_points(*geometry.left_wall), "left_wall"))
    return commands
