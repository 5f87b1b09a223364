"""Painter's-algorithm ordering for furniture."""

from typing import Iterable, List

from room3d.types import FurnitureItem

MIN_PERSPECTIVE = 0.5


def sort_back_to_front(items: Iterable[FurnitureItem]) -> List[FurnitureItem]:
    """Farther items (larger z) first; equal z keeps insertion order."""
    return sorted(items, key=lambda item: -item.z)


def perspective_factor(z: int) -> float:
    """Cosmetic size cue for depth, never below 0.5. Not used for ordering."""
    return max(MIN_PERSPECTIVE, 1.0 - z / 1000.0)


class DepthSorter:
    """Orders a furniture snapshot for drawing."""

    def __init__(self, perspective_scaling: bool = False):
        self.perspective_scaling = perspective_scaling

    def order(self, items: Iterable[FurnitureItem]) -> List[FurnitureItem]:
        return sort_back_to_front(items)

    def size_factor(self, item: FurnitureItem) -> float:
        if not self.perspective_scaling:
            return 1.0
        return perspective_factor(item.z)
