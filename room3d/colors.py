"""Color helpers shared by the lighting model and the shape renderer."""

from typing import Optional

from .types import WHITE, Color

# Multiplicative step used for face shading
SHADE_FACTOR = 0.7

BLACK: Color = (0, 0, 0)
DARK_GRAY: Color = (64, 64, 64)
LIGHT_GRAY: Color = (192, 192, 192)

# Room color schemes offered by the room configuration form
ROOM_COLOR_SCHEMES = {
    "White": WHITE,
    "Beige": (245, 245, 220),
    "Grey": LIGHT_GRAY,
    "Blue": (173, 216, 230),
    "Green": (144, 238, 144),
}


def darker(color: Color) -> Color:
    """Move each channel toward 0 by the shade factor."""
    r, g, b = color
    return (
        max(int(r * SHADE_FACTOR), 0),
        max(int(g * SHADE_FACTOR), 0),
        max(int(b * SHADE_FACTOR), 0),
    )


def brighter(color: Color) -> Color:
    """Move each channel toward 255 by the shade factor.

    Pure black becomes a very dark gray, and tiny non-zero channels are
    lifted to the floor value so they can brighten at all.
    """
    r, g, b = color
    floor = int(1.0 / (1.0 - SHADE_FACTOR))
    if r == 0 and g == 0 and b == 0:
        return (floor, floor, floor)

    def _lift(c: int) -> int:
        if 0 < c < floor:
            c = floor
        return min(int(c / SHADE_FACTOR), 255)

    return (_lift(r), _lift(g), _lift(b))


def parse_hex_color(hex_str) -> Optional[Color]:
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        return None


def to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def clamp_channel(value) -> int:
    return max(0, min(255, int(value)))


def coerce_color(value) -> Color:
    """Accept "#RRGGBB" or an [r, g, b] sequence with 0-255 channels.

    Raises:
        ValueError: if the value is not a valid color.
    """
    if isinstance(value, str):
        color = parse_hex_color(value)
        if color is None:
            raise ValueError(f"Invalid hex color: {value!r}")
        return color
    try:
        channels = [int(c) for c in value]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid color: {value!r}")
    if len(channels) != 3 or any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"Color needs three channels in 0-255, got {value!r}")
    return (channels[0], channels[1], channels[2])
