"""Render routes: draw-command frames and PNG previews."""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response

from room3d.render import rasterize

from ..state import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


def _surface_size(width: Optional[int], height: Optional[int]):
    config = get_session().config
    return (width or config.surface_width, height or config.surface_height)


@router.get("/commands")
async def render_commands(
    width: Optional[int] = Query(None, gt=0, le=4096),
    height: Optional[int] = Query(None, gt=0, le=4096),
):
    """Render the scene and return the ordered draw commands."""
    frame = get_session().render(_surface_size(width, height))
    if frame.errors:
        logger.warning(f"Frame rendered with {len(frame.errors)} isolated item errors")
    return frame.to_dict()


@router.get("/image.png")
async def render_image(
    width: Optional[int] = Query(None, gt=0, le=4096),
    height: Optional[int] = Query(None, gt=0, le=4096),
):
    """Render the scene to a PNG image."""
    frame = get_session().render(_surface_size(width, height))
    return Response(content=rasterize(frame), media_type="image/png")
