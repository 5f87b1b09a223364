"""Tests for floor shadows."""

import pytest

from room3d.lighting import LightingState
from room3d.render import SHADOW_OFFSET, ShadowCompositor
from room3d.render.types import DrawOp, Layer
from room3d.types import FurnitureItem, FurnitureKind, RoomShape, RoomSpec


@pytest.fixture
def item():
    return FurnitureItem(kind=FurnitureKind.CHAIR, x=100, y=0, z=30, width=40, height=40, depth=40)


class TestShadowCompositor:
    """Tests for ShadowCompositor."""

    def test_offset(self):
        assert SHADOW_OFFSET == (15, 15)

    def test_disabled_at_low_intensity(self, item):
        shadows = ShadowCompositor(LightingState(shadow_intensity=0.1))
        assert not shadows.enabled
        assert shadows.commands(RoomSpec(), [item]) == []

    def test_threshold_is_exclusive(self):
        assert not ShadowCompositor(LightingState(shadow_intensity=0.2)).enabled

    def test_one_oval_per_item(self, item):
        shadows = ShadowCompositor(LightingState(shadow_intensity=0.5))
        commands = shadows.commands(RoomSpec(), [item, item.with_changes(x=0)])
        assert len(commands) == 2
        assert all(c.op == DrawOp.FILL_OVAL and c.layer == Layer.SHADOW for c in commands)

    def test_oval_geometry_and_alpha(self, item):
        shadow = ShadowCompositor(LightingState(shadow_intensity=0.5)).item_shadow(item)
        assert shadow.points == ((95, 5), (135, 25))
        assert shadow.color == (0, 0, 0)
        assert shadow.alpha == 50
        assert shadow.opacity == 0.5
        assert shadow.source_id == item.id

    def test_shadow_uses_scaled_size(self, item):
        shadow = ShadowCompositor(LightingState()).item_shadow(item.with_changes(scale=2.0))
        (x0, y0), (x1, y1) = shadow.points
        assert (x1 - x0, y1 - y0) == (80, 40)

    def test_negative_size_keeps_oval_upright(self, item):
        shadow = ShadowCompositor(LightingState()).item_shadow(item.with_changes(width=-40, height=-40, depth=-40))
        (x0, y0), (x1, y1) = shadow.points
        assert x1 >= x0
        assert y1 >= y0

    def test_seams_only_for_l_shape(self):
        shadows = ShadowCompositor(LightingState(shadow_intensity=0.8))
        assert shadows.seam_shadows(RoomSpec()) == []
        seams = shadows.seam_shadows(RoomSpec(shape=RoomShape.L_SHAPE))
        assert [s.part for s in seams] == ["seam_vertical", "seam_horizontal"]
        assert seams[0].bounds() == (-93, -76, -83, 190)
        assert seams[1].bounds() == (-93, -76, 240, -66)
