"""Validation for the room configuration form.

Form fields arrive as text. A bad field rejects the whole form and leaves the
model untouched.
"""

import logging
from typing import List, Optional

from room3d.colors import ROOM_COLOR_SCHEMES, parse_hex_color
from room3d.errors import InvalidRangeInput
from room3d.types import Color, RoomShape

from .events import ChangeEvent
from .model import SceneModel

logger = logging.getLogger(__name__)


def parse_dimension(field: str, text) -> int:
    """Parse a positive integer centimeter value."""
    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        raise InvalidRangeInput(field, text, "Please enter valid numbers for room dimensions")
    if value <= 0:
        raise InvalidRangeInput(field, text, f"Room {field} must be a positive number")
    return value


def resolve_room_color(scheme: Optional[str], custom: Optional[str] = None) -> Color:
    """Color for a scheme name ("Beige") or a custom "#RRGGBB" value."""
    if custom:
        color = parse_hex_color(custom)
        if color is None:
            raise InvalidRangeInput("color", custom, f"Invalid color: {custom}")
        return color
    if scheme is None:
        return ROOM_COLOR_SCHEMES["White"]
    if scheme not in ROOM_COLOR_SCHEMES:
        raise InvalidRangeInput("color_scheme", scheme, f"Unknown color scheme: {scheme}")
    return ROOM_COLOR_SCHEMES[scheme]


def apply_room_form(
    model: SceneModel,
    width,
    length,
    height,
    shape="Rectangle",
    color_scheme: Optional[str] = "White",
    custom_color: Optional[str] = None,
) -> List[ChangeEvent]:
    """Validate every field, then commit dimensions, shape and color.

    Raises:
        InvalidRangeInput: on the first invalid field; nothing is committed.
    """
    new_width = parse_dimension("width", width)
    new_length = parse_dimension("length", length)
    new_height = parse_dimension("height", height)
    new_shape = RoomShape.parse(shape)
    new_color = resolve_room_color(color_scheme, custom_color)

    events = [
        model.set_room_dimensions(new_width, new_length, new_height),
        model.set_room_shape(new_shape),
        model.set_room_color(new_color),
    ]
    logger.info(
        f"Room configuration updated: {new_width}x{new_length}x{new_height} "
        f"{new_shape.value}"
    )
    return events
