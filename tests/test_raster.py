"""Tests for the Pillow raster backend."""

import io

import pytest
from PIL import Image

from room3d.lighting import LightingState
from room3d.render import RasterCanvas, SceneRenderer, rasterize
from room3d.render.raster import oval_points
from room3d.render.types import DrawCommand, DrawOp
from room3d.scene import SceneModel
from room3d.types import FurnitureItem, FurnitureKind, RoomSpec
from room3d.view import ViewState

SIZE = (400, 300)


@pytest.fixture
def renderer():
    return SceneRenderer()


def paint(frame):
    canvas = RasterCanvas.for_frame(frame)
    canvas.paint(frame)
    return canvas


def pixel_at(canvas, frame, x, y):
    px, py = frame.transform.apply_point(x, y)
    return canvas.pixel(int(round(px)), int(round(py)))


class TestRasterize:
    """Tests for rasterize and RasterCanvas."""

    def test_png_output(self, renderer):
        frame = renderer.render(SceneModel().snapshot(), ViewState(), LightingState(), surface_size=(200, 150))
        data = rasterize(frame)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"
        assert Image.open(io.BytesIO(data)).size == (200, 150)

    def test_floor_color_at_centre(self, renderer):
        scene = SceneModel(room=RoomSpec(color=(200, 100, 50)))
        frame = renderer.render(scene.snapshot(), ViewState(), LightingState.identity(), surface_size=SIZE)
        canvas = paint(frame)
        assert canvas.pixel(200, 150) == (200, 100, 50)

    def test_shadow_darkens_floor(self, renderer):
        scene = SceneModel(room=RoomSpec(color=(255, 255, 255)))
        # y lifts the shadow away from the box, which is anchored at (x, z)
        scene.add_item(FurnitureItem(kind=FurnitureKind.UNKNOWN, x=0, y=60, z=0, width=40, height=40, depth=40))
        lighting = LightingState(light_intensity=1.0, shadow_intensity=1.0, contrast=1.0, ambient_color=(255, 255, 255))
        frame = renderer.render(scene.snapshot(), ViewState(), lighting, surface_size=SIZE)
        canvas = paint(frame)

        shadowed = pixel_at(canvas, frame, 15, 75)
        assert shadowed[0] < 200
        assert shadowed[0] == shadowed[1] == shadowed[2]
        assert pixel_at(canvas, frame, -100, 100) == (255, 255, 255)

    def test_furniture_over_floor(self, renderer):
        scene = SceneModel(room=RoomSpec(color=(255, 255, 255)))
        scene.add_item(FurnitureItem(kind=FurnitureKind.UNKNOWN, x=0, z=0, width=60, height=60, depth=4, color=(0, 0, 255)))
        frame = renderer.render(scene.snapshot(), ViewState(), LightingState.identity(), surface_size=SIZE)
        canvas = paint(frame)
        # Centre of the front face
        assert pixel_at(canvas, frame, -5, 5) == (0, 0, 255)


class TestOvalPoints:
    """Tests for oval sampling."""

    def test_points_on_ellipse(self):
        command = DrawCommand(op=DrawOp.FILL_OVAL, points=((0, 0), (20, 10)))
        points = oval_points(command, segments=8)
        assert points.shape == (8, 2)
        for x, y in points:
            assert ((x - 10) / 10) ** 2 + ((y - 5) / 5) ** 2 == pytest.approx(1.0)
