"""Projection-and-shading engine.

This module turns a scene snapshot, a view state and lighting settings into
an ordered list of shaded 2D draw commands:
- PseudoProjector: frame transform approximating a 3D rotation
- DepthSorter: back-to-front furniture order
- ShapeRenderer: per-kind box decomposition with shaded faces
- ShadowCompositor: translucent floor and seam shadows
- SceneRenderer: the per-frame pipeline
- RasterCanvas: Pillow backend that paints a frame to an image

Example usage:
    from room3d.render import render, rasterize

    frame = render(session.scene.snapshot(), session.view, session.lighting)
    png = rasterize(frame)
"""

from .depth import DepthSorter, perspective_factor, sort_back_to_front
from .projector import Affine2D, PseudoProjector, TransformStep
from .raster import RasterCanvas, rasterize
from .renderer import SceneRenderer, render
from .room import RoomGeometry, build_room_geometry, l_cut_rect, l_cut_size, room_commands
from .shadows import SHADOW_OFFSET, SHADOW_THRESHOLD, ShadowCompositor
from .shapes import BoxPrimitive, Face, FurnitureGeometry, ShapeRenderer
from .types import DrawCommand, DrawOp, FaceKind, Layer, RenderError, RenderFrame

__all__ = [
    # Types
    "DrawCommand",
    "DrawOp",
    "FaceKind",
    "Layer",
    "RenderFrame",
    "RenderError",
    # Pipeline
    "render",
    "SceneRenderer",
    "PseudoProjector",
    "Affine2D",
    "TransformStep",
    "DepthSorter",
    "sort_back_to_front",
    "perspective_factor",
    "ShapeRenderer",
    "BoxPrimitive",
    "Face",
    "FurnitureGeometry",
    "ShadowCompositor",
    "SHADOW_OFFSET",
    "SHADOW_THRESHOLD",
    # Room geometry
    "RoomGeometry",
    "build_room_geometry",
    "l_cut_rect",
    "l_cut_size",
    "room_commands",
    # Raster backend
    "RasterCanvas",
    "rasterize",
]
