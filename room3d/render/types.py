"""Data types for the render pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from room3d.types import Color, Point2D

from .projector import Affine2D


class DrawOp(Enum):
    """Drawing primitive."""
    SET_TRANSFORM = "set_transform"
    FILL_POLYGON = "fill_polygon"
    STROKE_POLYGON = "stroke_polygon"
    FILL_OVAL = "fill_oval"
    STROKE_OVAL = "stroke_oval"
    LINE = "line"


class Layer(Enum):
    """Paint pass a command belongs to, in drawing order."""
    TRANSFORM = "transform"
    ROOM = "room"
    SHADOW = "shadow"
    FURNITURE = "furniture"


class FaceKind(Enum):
    """Visible face of a box primitive."""
    TOP = "top"
    FRONT = "front"
    SIDE = "side"


@dataclass(frozen=True)
class DrawCommand:
    """One 2D drawing call in scene coordinates.

    Polygons and lines use ``points``. Ovals use two points, the top-left and
    bottom-right corners of their bounding box. ``alpha`` is the fill color's
    own alpha (0-255); ``opacity`` is the composite applied on top of it.
    """

    op: DrawOp
    points: Tuple[Point2D, ...] = ()
    color: Color = (0, 0, 0)
    alpha: int = 255
    opacity: float = 1.0
    layer: Layer = Layer.FURNITURE
    source_id: str = ""  # Furniture item id, empty for room geometry
    part: str = ""  # seat, leg_front_left, floor, back_wall, ...
    face: Optional[FaceKind] = None
    matrix: Optional[Tuple[float, ...]] = None  # SET_TRANSFORM only (a, b, c, d, e, f)

    @property
    def is_fill(self) -> bool:
        return self.op in (DrawOp.FILL_POLYGON, DrawOp.FILL_OVAL)

    @property
    def effective_alpha(self) -> float:
        """Final coverage in [0, 1]."""
        return (self.alpha / 255.0) * self.opacity

    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the command's points."""
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "op": self.op.value,
            "layer": self.layer.value,
            "points": [list(p) for p in self.points],
            "color": list(self.color),
            "alpha": self.alpha,
            "opacity": round(self.opacity, 4),
        }
        if self.source_id:
            data["source_id"] = self.source_id
        if self.part:
            data["part"] = self.part
        if self.face is not None:
            data["face"] = self.face.value
        if self.matrix is not None:
            data["matrix"] = list(self.matrix)
        return data


@dataclass
class RenderError:
    """Error information for a furniture item that failed to render."""

    item_id: str
    item_name: str
    error_type: str  # "degenerate_geometry", "unknown"
    message: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "item_id": self.item_id,
            "item_name": self.item_name,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass
class RenderFrame:
    """Ordered draw commands for one frame plus per-item diagnostics."""

    commands: List[DrawCommand] = field(default_factory=list)
    transform: Affine2D = field(default_factory=Affine2D)
    surface_size: Tuple[int, int] = (800, 600)
    errors: List[RenderError] = field(default_factory=list)
    box_counts: Dict[str, int] = field(default_factory=dict)  # item id -> box primitives

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index):
        return self.commands[index]

    def by_layer(self, layer: Layer) -> List[DrawCommand]:
        return [c for c in self.commands if c.layer == layer]

    def for_item(self, item_id: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.source_id == item_id and c.layer == Layer.FURNITURE]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "surface_size": list(self.surface_size),
            "transform": list(self.transform.as_tuple()),
            "steps": [step.to_dict() for step in self.transform.steps],
            "commands": [c.to_dict() for c in self.commands],
            "errors": [e.to_dict() for e in self.errors],
            "box_counts": dict(self.box_counts),
        }
