"""Tests for the furniture catalog and plan coordinates."""

import pytest

from room3d.scene import FurnitureCatalog, PlanTransform, default_depth
from room3d.types import FurnitureKind


@pytest.fixture
def catalog():
    return FurnitureCatalog()


class TestPlanTransform:
    """Tests for PlanTransform."""

    def test_default_offset(self):
        assert PlanTransform().plan_to_world(300, 250) == (50, 50)

    @pytest.mark.parametrize("point", [(0, 0), (250, 200), (-40, 913)])
    def test_round_trip(self, point):
        transform = PlanTransform()
        assert transform.world_to_plan(*transform.plan_to_world(*point)) == point

    def test_custom_offset(self):
        assert PlanTransform(offset_x=10, offset_y=20).plan_to_world(10, 20) == (0, 0)


class TestFurnitureCatalog:
    """Tests for FurnitureCatalog."""

    def test_list_types(self, catalog):
        types = catalog.list_types()
        assert types == sorted(types)
        assert "Dining Table" in types
        assert len(types) == 7

    def test_dimensions_include_depth(self, catalog):
        assert catalog.get_dimensions("Chair") == {"width": 40, "height": 40, "depth": 40}
        assert catalog.get_dimensions("Bed") == {"width": 160, "height": 200, "depth": 50}
        assert catalog.get_dimensions("Piano") is None

    def test_from_plan(self, catalog):
        item = catalog.from_plan("Chair", px=300, py=250)
        assert item.kind == FurnitureKind.CHAIR
        assert item.position == (50, 0, 50)
        assert item.size == (40, 40, 40)
        assert catalog.plan_position(item) == (300, 250)

    def test_from_plan_alias(self, catalog):
        item = catalog.from_plan("Coffee Table", px=0, py=0)
        assert item.kind == FurnitureKind.TABLE
        assert item.name == "Coffee Table"
        assert item.depth == 40

    def test_unknown_needs_size(self, catalog):
        with pytest.raises(ValueError):
            catalog.from_plan("Piano", px=0, py=0)

    def test_unknown_with_size(self, catalog):
        item = catalog.from_plan("Piano", px=0, py=0, width=150, height=60, color=(0, 0, 0))
        assert item.kind == FurnitureKind.UNKNOWN
        assert item.depth == 75
        assert item.color == (0, 0, 0)

    def test_default_depth_rules(self):
        assert default_depth("Sofa", 150, 60) == 50
        assert default_depth("Anything", 90, 10) == 45
