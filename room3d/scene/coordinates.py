"""Mapping between floor-plan (2D editor) coordinates and scene coordinates.

The floor-plan editor places items with its origin at the top-left corner of
the drawing; the scene is centred on the room origin. The mapping is a plain
translation, so it is exactly invertible for integer inputs.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PlanTransform:
    """Translation between plan (px, py) and scene floor coordinates (x, z)."""

    offset_x: int = 250
    offset_y: int = 200

    def plan_to_world(self, px: int, py: int) -> Tuple[int, int]:
        """Plan point to scene ``(x, z)``; the plan's vertical axis is scene depth."""
        return px - self.offset_x, py - self.offset_y

    def world_to_plan(self, x: int, z: int) -> Tuple[int, int]:
        """Inverse of :meth:`plan_to_world`."""
        return x + self.offset_x, z + self.offset_y


DEFAULT_PLAN_TRANSFORM = PlanTransform()
