"""Lighting routes."""

import logging
from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, field_validator

from room3d.colors import coerce_color

from ..state import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


class LightingUpdate(BaseModel):
    """Partial lighting update. Values outside their range are clamped."""

    light_intensity: Optional[float] = None
    shadow_intensity: Optional[float] = None
    contrast: Optional[float] = None
    ambient_color: Optional[Any] = None

    @field_validator('ambient_color')
    @classmethod
    def color_must_be_valid(cls, v):
        """Accept "#RRGGBB" or [r, g, b]."""
        return None if v is None else coerce_color(v)


@router.get("")
async def get_lighting():
    """Get lighting settings."""
    return get_session().lighting.to_dict()


@router.put("")
async def update_lighting(update: LightingUpdate):
    """Update lighting settings."""
    lighting = get_session().lighting
    if update.light_intensity is not None:
        lighting.set_light_intensity(update.light_intensity)
    if update.shadow_intensity is not None:
        lighting.set_shadow_intensity(update.shadow_intensity)
    if update.contrast is not None:
        lighting.set_contrast(update.contrast)
    if update.ambient_color is not None:
        lighting.set_ambient_color(update.ambient_color)
    logger.debug(f"Lighting updated: {lighting.to_dict()}")
    return lighting.to_dict()
