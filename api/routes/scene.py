"""Room and furniture routes."""

import logging
import math
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from room3d.colors import coerce_color
from room3d.errors import InvalidRangeInput
from room3d.scene import FURNITURE_DEFAULTS, apply_room_form
from room3d.types import FurnitureItem, FurnitureKind, RoomShape

from ..state import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


class RoomUpdate(BaseModel):
    """Request model for a structured room update."""

    width: int
    length: int
    height: int
    shape: str = "Rectangle"
    color: Optional[Any] = None

    @field_validator('width', 'length', 'height')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        """Validate that room dimensions are positive."""
        if v <= 0:
            raise ValueError('Room dimensions must be positive')
        return v

    @field_validator('shape')
    @classmethod
    def shape_must_be_known(cls, v: str) -> str:
        """Validate the room shape name."""
        return RoomShape.parse(v).value

    @field_validator('color')
    @classmethod
    def color_must_be_valid(cls, v):
        """Accept "#RRGGBB" or [r, g, b]."""
        return None if v is None else coerce_color(v)


class RoomForm(BaseModel):
    """Raw text fields from the room configuration form."""

    width: str
    length: str
    height: str
    shape: str = "Rectangle"
    color_scheme: Optional[str] = "White"
    custom_color: Optional[str] = None


class FurnitureCreate(BaseModel):
    """Request model for adding a furniture item."""

    name: str
    position: List[int] = [0, 0, 0]
    size: List[int] = [50, 50, 50]
    color: Any = [139, 69, 19]
    scale: float = 1.0

    @field_validator('position', 'size')
    @classmethod
    def must_have_three_values(cls, v: List[int]) -> List[int]:
        """Validate that position and size are 3-vectors."""
        if len(v) != 3:
            raise ValueError('Expected three values')
        return v

    @field_validator('color')
    @classmethod
    def color_must_be_valid(cls, v):
        """Accept "#RRGGBB" or [r, g, b]."""
        return coerce_color(v)

    @field_validator('scale')
    @classmethod
    def scale_must_be_positive(cls, v: float) -> float:
        """Validate that scale is positive."""
        # NaN and infinity are rejected by FurnitureItem so the 422 body stays valid JSON
        if v <= 0:
            raise ValueError('Scale must be positive')
        return v


class PlanPlacement(BaseModel):
    """Item dropped on the 2D floor plan at (px, py)."""

    name: str
    px: int
    py: int
    width: Optional[int] = None
    height: Optional[int] = None
    color: Any = [139, 69, 19]

    @field_validator('color')
    @classmethod
    def color_must_be_valid(cls, v):
        """Accept "#RRGGBB" or [r, g, b]."""
        return coerce_color(v)


class FurnitureUpdate(BaseModel):
    """Partial update of a furniture item."""

    name: Optional[str] = None
    position: Optional[List[int]] = None
    size: Optional[List[int]] = None
    color: Optional[Any] = None
    scale: Optional[float] = None

    @field_validator('color')
    @classmethod
    def color_must_be_valid(cls, v):
        """Accept "#RRGGBB" or [r, g, b]."""
        return None if v is None else coerce_color(v)

    def to_changes(self) -> dict:
        """Map set fields onto FurnitureItem attributes."""
        changes = {}
        if self.name is not None:
            changes["name"] = self.name
            changes["kind"] = FurnitureKind.parse(self.name)
        if self.position is not None:
            if len(self.position) != 3:
                raise ValueError("Position needs three values")
            changes["x"], changes["y"], changes["z"] = self.position
        if self.size is not None:
            if len(self.size) != 3:
                raise ValueError("Size needs three values")
            changes["width"], changes["height"], changes["depth"] = self.size
        if self.color is not None:
            changes["color"] = self.color
        if self.scale is not None:
            if not math.isfinite(self.scale) or self.scale <= 0:
                raise ValueError("Scale must be a finite positive number")
            changes["scale"] = self.scale
        return changes


@router.get("/room")
async def get_room():
    """Get the room configuration."""
    return get_session().scene.room.to_dict()


@router.put("/room")
async def update_room(update: RoomUpdate):
    """Replace room dimensions, shape and (optionally) color."""
    scene = get_session().scene
    scene.set_room_dimensions(update.width, update.length, update.height)
    scene.set_room_shape(update.shape)
    if update.color is not None:
        scene.set_room_color(update.color)
    return scene.room.to_dict()


@router.post("/room/form")
async def submit_room_form(form: RoomForm):
    """Apply the room configuration form; invalid input leaves the room unchanged."""
    scene = get_session().scene
    try:
        apply_room_form(
            scene,
            form.width,
            form.length,
            form.height,
            shape=form.shape,
            color_scheme=form.color_scheme,
            custom_color=form.custom_color,
        )
    except InvalidRangeInput as e:
        logger.info(f"Rejected room form field {e.field}: {e}")
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
    return {"message": "Room configuration updated", "room": scene.room.to_dict()}


@router.get("/catalog")
async def get_catalog():
    """List furniture types with their default plan footprint."""
    catalog = get_session().catalog
    return {
        "furniture": [
            {"name": name, "kind": FurnitureKind.parse(name).value, **catalog.get_dimensions(name)}
            for name in catalog.list_types()
        ]
    }


@router.get("/furniture")
async def list_furniture():
    """List furniture items in insertion order."""
    return [item.to_dict() for item in get_session().scene.items()]


@router.post("/furniture")
async def add_furniture(request: FurnitureCreate):
    """Add a furniture item in scene coordinates."""
    x, y, z = request.position
    width, height, depth = request.size
    try:
        item = FurnitureItem(
            kind=FurnitureKind.parse(request.name),
            name=request.name,
            x=x,
            y=y,
            z=z,
            width=width,
            height=height,
            depth=depth,
            color=request.color,
            scale=request.scale,
        )
    except InvalidRangeInput as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
    get_session().scene.add_item(item)
    return item.to_dict()


@router.post("/furniture/from-plan")
async def add_furniture_from_plan(placement: PlanPlacement):
    """Add an item placed on the 2D plan; plan coordinates are mapped to the scene."""
    session = get_session()
    if placement.name not in FURNITURE_DEFAULTS and (placement.width is None or placement.height is None):
        raise HTTPException(status_code=400, detail=f"Width and height are required for {placement.name}")
    item = session.catalog.from_plan(
        placement.name,
        placement.px,
        placement.py,
        width=placement.width,
        height=placement.height,
        color=placement.color,
    )
    session.scene.add_item(item)
    return item.to_dict()


@router.patch("/furniture/{item_id}")
async def update_furniture(item_id: str, update: FurnitureUpdate):
    """Update fields of a furniture item."""
    scene = get_session().scene
    if scene.get_item(item_id) is None:
        raise HTTPException(status_code=404, detail="Furniture item not found")
    try:
        changes = update.to_changes()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        scene.update_item(item_id, **changes)
    except InvalidRangeInput as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
    return scene.get_item(item_id).to_dict()


@router.delete("/furniture/{item_id}")
async def delete_furniture(item_id: str):
    """Remove a furniture item."""
    scene = get_session().scene
    if scene.get_item(item_id) is None:
        raise HTTPException(status_code=404, detail="Furniture item not found")
    scene.remove_item(item_id)
    return {"message": "Furniture item deleted"}
