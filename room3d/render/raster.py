"""Rasterize a RenderFrame with Pillow."""

import io
import logging
import math
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from room3d.types import Color

from .projector import Affine2D
from .types import DrawCommand, DrawOp, Layer, RenderFrame

logger = logging.getLogger(__name__)

CANVAS_BACKGROUND: Color = (240, 240, 240)

# Points used to approximate an oval; ovals are sheared by the pitch transform
OVAL_SEGMENTS = 48


def oval_points(command: DrawCommand, segments: int = OVAL_SEGMENTS) -> np.ndarray:
    """Sample the ellipse inscribed in the command's bounding box."""
    (x0, y0), (x1, y1) = command.points
    cx, cy = (x0 + x1) / 2.0, (y0 + y1) / 2.0
    rx, ry = abs(x1 - x0) / 2.0, abs(y1 - y0) / 2.0
    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    return np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])


class RasterCanvas:
    """Paints frames onto an RGBA Pillow image.

    Usage:
        canvas = RasterCanvas(800, 600)
        canvas.paint(frame)
        png = canvas.to_png_bytes()
    """

    def __init__(self, width: int, height: int, background: Color = CANVAS_BACKGROUND):
        self.width = width
        self.height = height
        self.background = background
        self.image = Image.new("RGBA", (width, height), background + (255,))

    @classmethod
    def for_frame(cls, frame: RenderFrame, background: Color = CANVAS_BACKGROUND) -> "RasterCanvas":
        width, height = frame.surface_size
        return cls(width, height, background)

    def paint(self, frame: RenderFrame) -> Image.Image:
        """Draw every command of ``frame`` in order."""
        transform = frame.transform
        draw = ImageDraw.Draw(self.image)
        shadow_layer: Optional[Image.Image] = None

        for command in frame.commands:
            if command.op == DrawOp.SET_TRANSFORM:
                transform = Affine2D(_matrix_from_tuple(command.matrix))
                continue

            if command.layer == Layer.SHADOW:
                # Shadows blend over what is already painted
                if shadow_layer is None:
                    shadow_layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
                self._draw(ImageDraw.Draw(shadow_layer), command, transform)
                continue

            if shadow_layer is not None:
                self.image = Image.alpha_composite(self.image, shadow_layer)
                draw = ImageDraw.Draw(self.image)
                shadow_layer = None
            self._draw(draw, command, transform)

        if shadow_layer is not None:
            self.image = Image.alpha_composite(self.image, shadow_layer)
        return self.image

    def _draw(self, draw: ImageDraw.ImageDraw, command: DrawCommand, transform: Affine2D) -> None:
        fill = command.color + (int(round(255 * command.effective_alpha)),)

        if command.op in (DrawOp.FILL_OVAL, DrawOp.STROKE_OVAL):
            points = transform.apply(oval_points(command))
        else:
            points = transform.apply(command.points)
        xy = [(float(x), float(y)) for x, y in points]

        if command.op == DrawOp.LINE:
            draw.line(xy, fill=fill, width=1)
        elif command.is_fill:
            if len(xy) >= 3:
                draw.polygon(xy, fill=fill)
        elif len(xy) >= 2:
            draw.line(xy + [xy[0]], fill=fill, width=1)

    def to_png_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.image.convert("RGB").save(buffer, format="PNG")
        return buffer.getvalue()

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b, _ = self.image.getpixel((x, y))
        return (r, g, b)


def _matrix_from_tuple(values) -> np.ndarray:
    m00, m10, m01, m11, m02, m12 = values
    return np.array([[m00, m01, m02], [m10, m11, m12], [0.0, 0.0, 1.0]])


def rasterize(frame: RenderFrame, background: Color = CANVAS_BACKGROUND) -> bytes:
    """PNG bytes of ``frame``."""
    canvas = RasterCanvas.for_frame(frame, background)
    canvas.paint(frame)
    logger.debug(f"Rasterized {len(frame)} commands at {frame.surface_size}")
    return canvas.to_png_bytes()
