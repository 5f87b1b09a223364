"""Color adjustment under the current lighting settings."""

from room3d.types import Color

from .state import LightingState


def _to_unit(color: Color) -> tuple:
    return tuple(c / 255.0 for c in color)


def _to_byte(value: float) -> int:
    return int(value * 255 + 0.5)


def adjust(color: Color, lighting: LightingState) -> Color:
    """Apply ambient light, intensity and contrast to a surface color.

    Channels are multiplied by the ambient color and the light intensity,
    then contrast is applied around the 0.5 midpoint, then clamped.
    """
    r, g, b = _to_unit(color)
    lr, lg, lb = _to_unit(lighting.ambient_color)
    intensity = lighting.light_intensity
    contrast = lighting.contrast

    channels = []
    for c, light in ((r, lr), (g, lg), (b, lb)):
        lit = c * light * intensity
        lit = 0.5 + (lit - 0.5) * contrast
        channels.append(_to_byte(max(0.0, min(1.0, lit))))
    return (channels[0], channels[1], channels[2])


class LightingModel:
    """Binds ``adjust`` to one lighting state for the duration of a frame."""

    def __init__(self, lighting: LightingState):
        self.lighting = lighting
        self._cache: dict = {}

    def adjust(self, color: Color) -> Color:
        color = tuple(color)
        if color not in self._cache:
            self._cache[color] = adjust(color, self.lighting)
        return self._cache[color]

    @property
    def shadows_enabled(self) -> bool:
        return self.lighting.shadow_intensity > 0.2
