"""Procedural furniture geometry.

Every furniture kind is a fixed arrangement of box primitives. A box is drawn
as three faces (top, front, side) offset by a quarter of its depth, which is
what sells the depth illusion without any real projection.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Tuple

from room3d.colors import BLACK, DARK_GRAY, brighter, darker
from room3d.errors import DegenerateGeometry
from room3d.lighting.model import LightingModel
from room3d.types import Color, FurnitureItem, FurnitureKind, Point2D

from .types import DrawCommand, DrawOp, FaceKind, Layer

logger = logging.getLogger(__name__)

MIN_DIMENSION = 1

# Fixed part colors, independent of the item's own color
MATTRESS_COLOR: Color = (220, 220, 220)
PILLOW_COLOR: Color = (240, 240, 240)
BLANKET_COLOR: Color = (70, 130, 180)
HANDLE_COLOR: Color = DARK_GRAY


@dataclass(frozen=True)
class Face:
    """One shaded polygon of a box."""

    kind: FaceKind
    points: Tuple[Point2D, ...]
    color: Color


@dataclass(frozen=True)
class BoxPrimitive:
    """Box centred at (x, y) on screen, with a depth used for the face offset."""

    part: str
    x: int
    y: int
    width: int
    height: int
    depth: int
    color: Color

    @property
    def is_degenerate(self) -> bool:
        return min(self.width, self.height, self.depth) < MIN_DIMENSION

    def validated(self, strict: bool = False) -> "BoxPrimitive":
        """Clamp non-positive dimensions to the minimum.

        Raises:
            DegenerateGeometry: instead of clamping, when ``strict`` is set.
        """
        if not self.is_degenerate:
            return self
        if strict:
            raise DegenerateGeometry(self.part, (self.width, self.height, self.depth))
        logger.debug(f"Clamping degenerate box {self.part}: {(self.width, self.height, self.depth)}")
        return replace(
            self,
            width=max(self.width, MIN_DIMENSION),
            height=max(self.height, MIN_DIMENSION),
            depth=max(self.depth, MIN_DIMENSION),
        )

    @property
    def front_rect(self) -> Tuple[int, int, int, int]:
        """(x, y, width, height) of the front face."""
        return (
            self.x - self.width // 2 - self.depth // 4,
            self.y - self.height // 2,
            self.width,
            self.height,
        )

    def faces(self) -> List[Face]:
        """Top, front and side faces in drawing order."""
        x, y = self.x, self.y
        hw, hh, qd = self.width // 2, self.height // 2, self.depth // 4

        top = (
            (x - hw, y - hh - qd),
            (x + hw, y - hh - qd),
            (x + hw - qd, y - hh),
            (x - hw - qd, y - hh),
        )
        fx, fy, fw, fh = self.front_rect
        front = ((fx, fy), (fx + fw, fy), (fx + fw, fy + fh), (fx, fy + fh))
        side = (
            (x + hw - qd, y - hh),
            (x + hw, y - hh - qd),
            (x + hw, y + hh - qd),
            (x + hw - qd, y + hh),
        )
        return [
            Face(FaceKind.TOP, top, brighter(self.color)),
            Face(FaceKind.FRONT, front, self.color),
            Face(FaceKind.SIDE, side, darker(self.color)),
        ]


@dataclass
class FurnitureGeometry:
    """Boxes plus flat decorations (lines, ovals) drawn after them."""

    boxes: List[BoxPrimitive] = field(default_factory=list)
    decorations: List[DrawCommand] = field(default_factory=list)

    def box(self, part: str, x: int, y: int, width: int, height: int, depth: int, color: Color) -> None:
        self.boxes.append(BoxPrimitive(part, x, y, width, height, depth, color).validated())

    def parts(self) -> List[str]:
        return [b.part for b in self.boxes]


def _table(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("top", x, y - h // 2, w, h // 4, d, color)

    leg_w, leg_d = w // 10, d // 10
    leg_color = darker(color)
    back_y = y - d + leg_d
    g.box("leg_front_left", x - w // 2 + leg_w, y, leg_w, h, leg_d, leg_color)
    g.box("leg_front_right", x + w // 2 - leg_w, y, leg_w, h, leg_d, leg_color)
    g.box("leg_back_left", x - w // 2 + leg_w, back_y, leg_w, h, leg_d, leg_color)
    g.box("leg_back_right", x + w // 2 - leg_w, back_y, leg_w, h, leg_d, leg_color)


def _chair(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("seat", x, y - h // 3, w, h // 6, d, color)
    g.box("back", x, y - h * 2 // 3, w, h * 2 // 3, d // 6, darker(color))

    # Front and back legs on each side merge into one full-depth runner
    leg_w = w // 12
    g.box("legs_left", x - w // 2 + leg_w, y, leg_w, h // 2, d, darker(color))
    g.box("legs_right", x + w // 2 - leg_w, y, leg_w, h // 2, d, darker(color))


def _sofa(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("base", x, y - h // 4, w, h // 2, d, color)
    g.box("back", x, y - h * 3 // 4, w, h // 2, d // 3, darker(color))
    g.box("arm_left", x - w // 2 + w // 10, y - h // 3, w // 5, h // 2, d, darker(color))
    g.box("arm_right", x + w // 2 - w // 10, y - h // 3, w // 5, h // 2, d, darker(color))


def _bed(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("frame", x, y, w, h // 6, d, darker(color))
    g.box("mattress", x, y - h // 8, int(w * 0.95), h // 8, int(d * 0.9), MATTRESS_COLOR)
    g.box("headboard", x - w // 2 + w // 20, y - h // 4, w // 10, h // 2, d // 10, color)
    g.box("pillow_left", x - w // 4, y - h // 6, w // 4, h // 12, d // 3, PILLOW_COLOR)
    g.box("pillow_right", x + w // 4, y - h // 6, w // 4, h // 12, d // 3, PILLOW_COLOR)
    g.box("blanket", x, y, int(w * 0.9), h // 20, int(d * 0.7), BLANKET_COLOR)


def _oval(op: DrawOp, x, y, w, h, color, part: str) -> DrawCommand:
    return DrawCommand(op=op, points=((x, y), (x + w, y + h)), color=color, part=part)


def _wardrobe(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("body", x, y - h // 2, w, h, d, color)

    g.decorations.append(DrawCommand(op=DrawOp.LINE, points=((x, y - h), (x, y)), color=BLACK, part="door_seam"))
    handle = max(w // 20, MIN_DIMENSION)
    g.decorations.append(_oval(DrawOp.FILL_OVAL, x - handle * 2, y - h // 2, handle, handle, HANDLE_COLOR, "handle_left"))
    g.decorations.append(_oval(DrawOp.FILL_OVAL, x + handle, y - h // 2, handle, handle, HANDLE_COLOR, "handle_right"))


def _lamp(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("base", x, y, w // 3, h // 10, w // 3, darker(color))
    g.box("stand", x, y - h // 2, w // 20, h, w // 20, color)

    # Shade seen from above
    shade_h = max(h // 4, MIN_DIMENSION)
    g.decorations.append(_oval(DrawOp.FILL_OVAL, x - w // 2, y - h, w, shade_h, brighter(color), "shade"))
    g.decorations.append(_oval(DrawOp.STROKE_OVAL, x - w // 2, y - h, w, shade_h, BLACK, "shade"))


def _generic(g: FurnitureGeometry, x, y, w, h, d, color) -> None:
    g.box("body", x, y, w, h, d, color)


Builder = Callable[..., None]

BUILDERS: Dict[FurnitureKind, Builder] = {
    FurnitureKind.TABLE: _table,
    FurnitureKind.CHAIR: _chair,
    FurnitureKind.SOFA: _sofa,
    FurnitureKind.BED: _bed,
    FurnitureKind.WARDROBE: _wardrobe,
    FurnitureKind.LAMP: _lamp,
    FurnitureKind.UNKNOWN: _generic,
}


class ShapeRenderer:
    """Turns furniture items into box primitives and draw commands."""

    def __init__(self, lighting: LightingModel):
        self.lighting = lighting

    def item_size(self, item: FurnitureItem, size_factor: float = 1.0) -> Tuple[int, int, int]:
        """Scaled size, clamped so no dimension is below the minimum."""
        width, height, depth = item.scaled_size
        if size_factor != 1.0:
            width, height, depth = int(width * size_factor), int(height * size_factor), int(depth * size_factor)
        clamped = (max(width, MIN_DIMENSION), max(height, MIN_DIMENSION), max(depth, MIN_DIMENSION))
        if clamped != (width, height, depth):
            logger.debug(f"Clamped size of {item.name} ({item.id}) from {(width, height, depth)} to {clamped}")
        return clamped

    def build(self, item: FurnitureItem, size_factor: float = 1.0) -> FurnitureGeometry:
        """Decompose ``item`` into boxes anchored at its floor point (x, z)."""
        width, height, depth = self.item_size(item, size_factor)
        builder = BUILDERS.get(item.kind, _generic)
        if builder is _generic:
            # The generic fallback keeps the raw item color
            logger.debug(f"No dedicated geometry for {item.name} ({item.kind.value}), drawing generic box")
            color = item.color
        else:
            color = self.lighting.adjust(item.color)

        geometry = FurnitureGeometry()
        builder(geometry, item.x, item.z, width, height, depth, color)
        return geometry

    def commands(self, item: FurnitureItem, size_factor: float = 1.0) -> List[DrawCommand]:
        """Fill and outline for every face of every box, then decorations."""
        geometry = self.build(item, size_factor)
        return self.geometry_commands(item, geometry)

    @staticmethod
    def geometry_commands(item: FurnitureItem, geometry: FurnitureGeometry) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        for box in geometry.boxes:
            for face in box.faces():
                commands.append(DrawCommand(
                    op=DrawOp.FILL_POLYGON,
                    points=face.points,
                    color=face.color,
                    layer=Layer.FURNITURE,
                    source_id=item.id,
                    part=box.part,
                    face=face.kind,
                ))
                commands.append(DrawCommand(
                    op=DrawOp.STROKE_POLYGON,
                    points=face.points,
                    color=BLACK,
                    layer=Layer.FURNITURE,
                    source_id=item.id,
                    part=box.part,
                    face=face.kind,
                ))
        for decoration in geometry.decorations:
            commands.append(replace(decoration, layer=Layer.FURNITURE, source_id=item.id))
        return commands
