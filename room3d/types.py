"""Data types for rooms and furniture."""

import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .errors import InvalidRangeInput, UnknownFurnitureKind

Color = Tuple[int, int, int]  # RGB 0-255
Point2D = Tuple[float, float]
Point3D = Tuple[int, int, int]
Size3D = Tuple[int, int, int]  # width, height, depth

WHITE: Color = (255, 255, 255)


class RoomShape(Enum):
    """Floor outline of a room."""
    RECTANGLE = "Rectangle"
    SQUARE = "Square"
    L_SHAPE = "L-Shape"

    @classmethod
    def parse(cls, value: "str | RoomShape") -> "RoomShape":
        if isinstance(value, RoomShape):
            return value
        for shape in cls:
            if shape.value.lower() == str(value).strip().lower():
                return shape
        raise InvalidRangeInput("shape", value, f"Unknown room shape: {value}")


class FurnitureKind(Enum):
    """Furniture types with dedicated procedural geometry."""
    TABLE = "Table"
    CHAIR = "Chair"
    SOFA = "Sofa"
    BED = "Bed"
    WARDROBE = "Wardrobe"
    LAMP = "Lamp"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, name: str, strict: bool = False) -> "FurnitureKind":
        """Map a display name ("Dining Table", "chair") to a kind.

        Unrecognised names map to UNKNOWN unless ``strict`` is set, in which
        case UnknownFurnitureKind is raised.
        """
        key = (name or "").strip().lower()
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            if strict:
                raise UnknownFurnitureKind(name)
            return cls.UNKNOWN
        return kind

    @classmethod
    def from_name(cls, name: str) -> "FurnitureKind":
        return cls.parse(name)


_KIND_ALIASES = {
    "table": FurnitureKind.TABLE,
    "dining table": FurnitureKind.TABLE,
    "coffee table": FurnitureKind.TABLE,
    "chair": FurnitureKind.CHAIR,
    "sofa": FurnitureKind.SOFA,
    "bed": FurnitureKind.BED,
    "wardrobe": FurnitureKind.WARDROBE,
    "lamp": FurnitureKind.LAMP,
    "unknown": FurnitureKind.UNKNOWN,
}


def _as_color(value) -> Color:
    r, g, b = (int(c) for c in value)
    return (r, g, b)


@dataclass
class RoomSpec:
    """Room dimensions (centimeters), outline and floor color."""

    width: int = 500
    length: int = 400
    height: int = 250
    shape: RoomShape = RoomShape.RECTANGLE
    color: Color = WHITE

    def __post_init__(self):
        self.shape = RoomShape.parse(self.shape)
        self.color = _as_color(self.color)
        for name in ("width", "length", "height"):
            value = getattr(self, name)
            if int(value) <= 0:
                raise InvalidRangeInput(name, value, f"Room {name} must be positive")
            setattr(self, name, int(value))

    @property
    def floor_size(self) -> Tuple[int, int]:
        """Rendered (width, length); squares use the larger side for both."""
        if self.shape == RoomShape.SQUARE:
            size = max(self.width, self.length)
            return size, size
        return self.width, self.length

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "length": self.length,
            "height": self.height,
            "shape": self.shape.value,
            "color": list(self.color),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoomSpec":
        """Create RoomSpec from dictionary."""
        return cls(
            width=data.get("width", 500),
            length=data.get("length", 400),
            height=data.get("height", 250),
            shape=data.get("shape", RoomShape.RECTANGLE.value),
            color=tuple(data.get("color", WHITE)),
        )


@dataclass(frozen=True)
class FurnitureItem:
    """A furniture record in room-relative units.

    ``y`` is height from the floor, ``z`` is depth from the viewer. Items are
    immutable; the scene model swaps in updated copies.
    """

    kind: FurnitureKind = FurnitureKind.UNKNOWN
    x: int = 0
    y: int = 0
    z: int = 0
    width: int = 50
    height: int = 50
    depth: int = 50
    color: Color = (139, 69, 19)
    scale: float = 1.0
    name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    def __post_init__(self):
        if not isinstance(self.kind, FurnitureKind):
            object.__setattr__(self, "kind", FurnitureKind.parse(str(self.kind)))
        if not self.name:
            object.__setattr__(self, "name", self.kind.value)
        object.__setattr__(self, "color", _as_color(self.color))
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise InvalidRangeInput("scale", self.scale, f"Scale must be a positive number, got {self.scale!r}")

    @property
    def position(self) -> Point3D:
        return (self.x, self.y, self.z)

    @property
    def size(self) -> Size3D:
        return (self.width, self.height, self.depth)

    @property
    def scaled_size(self) -> Size3D:
        """Size with ``scale`` applied to every dimension (truncated)."""
        if self.scale == 1.0:
            return self.size
        return (
            int(self.width * self.scale),
            int(self.height * self.scale),
            int(self.depth * self.scale),
        )

    def with_changes(self, **changes) -> "FurnitureItem":
        """Return a copy with the given fields replaced; the id is kept."""
        changes.pop("id", None)
        if "kind" in changes and not isinstance(changes["kind"], FurnitureKind):
            changes["kind"] = FurnitureKind.parse(str(changes["kind"]))
            changes.setdefault("name", changes["kind"].value)
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "name": self.name,
            "position": list(self.position),
            "size": list(self.size),
            "color": list(self.color),
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FurnitureItem":
        """Create FurnitureItem from dictionary."""
        name = data.get("name", "")
        kind = data.get("kind") or name
        x, y, z = data.get("position", (0, 0, 0))
        width, height, depth = data.get("size", (50, 50, 50))
        kwargs = {}
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(
            kind=FurnitureKind.parse(kind),
            x=int(x),
            y=int(y),
            z=int(z),
            width=int(width),
            height=int(height),
            depth=int(depth),
            color=tuple(data.get("color", (139, 69, 19))),
            scale=float(data.get("scale", 1.0)),
            name=name,
            **kwargs,
        )


@dataclass(frozen=True)
class SceneSnapshot:
    """Read-only view of a scene handed to the renderer for one frame."""

    room: RoomSpec
    items: Tuple[FurnitureItem, ...] = ()
    version: int = 0

    def get(self, item_id: str) -> Optional[FurnitureItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
