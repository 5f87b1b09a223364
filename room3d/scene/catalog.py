"""Furniture catalog: default footprints and item factories."""

from __future__ import annotations

import logging

from room3d.types import Color, FurnitureItem, FurnitureKind

from .coordinates import DEFAULT_PLAN_TRANSFORM, PlanTransform

logger = logging.getLogger(__name__)


# Default plan footprints (centimeters) offered by the floor-plan palette
FURNITURE_DEFAULTS: dict[str, dict[str, int]] = {
    "Dining Table": {"width": 120, "height": 80},
    "Chair": {"width": 40, "height": 40},
    "Sofa": {"width": 150, "height": 60},
    "Coffee Table": {"width": 80, "height": 60},
    "Bed": {"width": 160, "height": 200},
    "Wardrobe": {"width": 100, "height": 50},
    "Lamp": {"width": 40, "height": 40},
}

# Depth as a function of (width, height) per furniture name
_DEPTH_RULES = {
    "Dining Table": lambda w, h: w // 2,
    "Chair": lambda w, h: w,
    "Sofa": lambda w, h: w // 3,
    "Coffee Table": lambda w, h: w // 2,
    "Bed": lambda w, h: h // 4,
    "Wardrobe": lambda w, h: w // 2,
    "Lamp": lambda w, h: w // 2,
}

DEFAULT_COLOR: Color = (139, 69, 19)


def default_depth(name: str, width: int, height: int) -> int:
    """Pick a depth for a plan footprint; unknown names use half the width."""
    rule = _DEPTH_RULES.get(name, lambda w, h: w // 2)
    return rule(width, height)


class FurnitureCatalog:
    """Creates furniture items from floor-plan placements.

    Usage:
        catalog = FurnitureCatalog()
        catalog.list_types()  # ['Bed', 'Chair', 'Coffee Table', ...]
        item = catalog.from_plan("Chair", px=300, py=250)
    """

    def __init__(self, transform: PlanTransform | None = None):
        self.transform = transform or DEFAULT_PLAN_TRANSFORM

    def list_types(self) -> list[str]:
        """Sorted furniture names available in the palette."""
        return sorted(FURNITURE_DEFAULTS)

    def get_dimensions(self, name: str) -> dict[str, int] | None:
        """Plan footprint plus derived depth, or None for names not in the palette."""
        if name not in FURNITURE_DEFAULTS:
            return None
        dims = dict(FURNITURE_DEFAULTS[name])
        dims["depth"] = default_depth(name, dims["width"], dims["height"])
        return dims

    def from_plan(
        self,
        name: str,
        px: int,
        py: int,
        width: int | None = None,
        height: int | None = None,
        color: Color = DEFAULT_COLOR,
    ) -> FurnitureItem:
        """Create a scene item from a plan placement.

        The plan's vertical axis becomes scene depth (z) and the item sits on
        the floor (y = 0). Missing sizes come from FURNITURE_DEFAULTS.
        """
        defaults = FURNITURE_DEFAULTS.get(name)
        if width is None or height is None:
            if defaults is None:
                raise ValueError(f"No default footprint for {name!r}; width and height are required")
            width = defaults["width"] if width is None else width
            height = defaults["height"] if height is None else height

        x, z = self.transform.plan_to_world(px, py)
        depth = default_depth(name, width, height)
        kind = FurnitureKind.parse(name)
        if kind == FurnitureKind.UNKNOWN:
            logger.debug(f"No dedicated geometry for {name!r}, using generic box")

        return FurnitureItem(
            kind=kind,
            name=name,
            x=x,
            y=0,
            z=z,
            width=width,
            height=height,
            depth=depth,
            color=color,
        )

    def plan_position(self, item: FurnitureItem) -> tuple[int, int]:
        """Where the plan editor should draw ``item``."""
        return self.transform.world_to_plan(item.x, item.z)
