"""View (rotation and zoom) routes."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from ..state import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


class DragRequest(BaseModel):
    """Mouse drag delta in pixels."""

    dx: float = 0.0
    dy: float = 0.0


class ZoomRequest(BaseModel):
    """Either a direct zoom delta or a number of wheel notches."""

    delta: float = 0.0
    wheel_notches: float = 0.0


class AutoRotateRequest(BaseModel):
    """Turntable direction: 1 (right) or -1 (left)."""

    direction: int = 1

    @field_validator('direction')
    @classmethod
    def direction_must_be_unit(cls, v: int) -> int:
        """Validate the rotation direction."""
        if v not in (1, -1):
            raise ValueError('Direction must be 1 or -1')
        return v


def _view_response():
    session = get_session()
    return {**session.view.to_dict(), "auto_rotating": session.auto_rotator.is_running}


@router.get("")
async def get_view():
    """Get the current view state."""
    return _view_response()


@router.post("/rotate")
async def rotate_view(drag: DragRequest):
    """Yaw and pitch by a drag delta."""
    try:
        get_session().rotate(drag.dx, drag.dy)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _view_response()


@router.post("/roll")
async def roll_view(drag: DragRequest):
    """Roll around the viewing axis by a horizontal drag delta."""
    try:
        get_session().rotate_roll(drag.dx)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _view_response()


@router.post("/zoom")
async def zoom_view(request: ZoomRequest):
    """Change zoom; the result is clamped to the allowed range."""
    session = get_session()
    try:
        delta = request.delta - session.view.WHEEL_ZOOM_STEP * request.wheel_notches
        session.zoom(delta)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _view_response()


@router.post("/reset")
async def reset_view():
    """Restore the default view."""
    get_session().reset_view()
    return _view_response()


@router.post("/auto-rotate/start")
async def start_auto_rotate(request: AutoRotateRequest):
    """Start turntable rotation on the server's event loop."""
    get_session().start_auto_rotate(request.direction)
    return _view_response()


@router.post("/auto-rotate/stop")
async def stop_auto_rotate():
    """Stop turntable rotation."""
    was_running = get_session().stop_auto_rotate()
    return {**_view_response(), "stopped": was_running}
