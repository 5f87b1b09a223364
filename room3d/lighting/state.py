"""Lighting settings with clamping setters."""

from dataclasses import dataclass
from typing import Optional

from room3d.colors import clamp_channel
from room3d.scene.events import ChangeEvent, ChangeType, EventBus
from room3d.types import Color

WARM_LIGHT: Color = (255, 255, 220)


def _clamp(value: float, low: float, high: float) -> float:
    value = float(value)
    if value != value:  # NaN
        raise ValueError("Lighting value must be a number")
    return max(low, min(high, value))


@dataclass
class LightingState:
    """Ambient light, intensity, shadow and contrast.

    Setters and plain attribute assignment both clamp to range, so an
    out-of-range value is never observable.
    """

    light_intensity: float = 0.8
    shadow_intensity: float = 0.5
    contrast: float = 1.0
    ambient_color: Color = WARM_LIGHT

    LIGHT_RANGE = (0.0, 1.0)
    SHADOW_RANGE = (0.0, 1.0)
    CONTRAST_RANGE = (0.5, 1.5)

    def __post_init__(self):
        self._bus: Optional[EventBus] = None

    def __setattr__(self, name, value):
        if name == "light_intensity":
            value = _clamp(value, *self.LIGHT_RANGE)
        elif name == "shadow_intensity":
            value = _clamp(value, *self.SHADOW_RANGE)
        elif name == "contrast":
            value = _clamp(value, *self.CONTRAST_RANGE)
        elif name == "ambient_color":
            value = tuple(clamp_channel(c) for c in value)
        super().__setattr__(name, value)

    @classmethod
    def identity(cls) -> "LightingState":
        """Full white light at normal contrast; ``adjust`` leaves colors unchanged."""
        return cls(light_intensity=1.0, shadow_intensity=0.0, contrast=1.0, ambient_color=(255, 255, 255))

    def bind(self, bus: EventBus) -> None:
        """Publish LIGHTING_CHANGED on ``bus`` from now on."""
        self._bus = bus

    def _changed(self, field: str) -> ChangeEvent:
        event = ChangeEvent(type=ChangeType.LIGHTING_CHANGED, details={"field": field})
        if self._bus is not None:
            self._bus.publish(event)
        return event

    def set_light_intensity(self, value: float) -> ChangeEvent:
        self.light_intensity = value
        return self._changed("light_intensity")

    def set_shadow_intensity(self, value: float) -> ChangeEvent:
        self.shadow_intensity = value
        return self._changed("shadow_intensity")

    def set_contrast(self, value: float) -> ChangeEvent:
        self.contrast = value
        return self._changed("contrast")

    def set_ambient_color(self, color: Color) -> ChangeEvent:
        self.ambient_color = color
        return self._changed("ambient_color")

    def copy(self) -> "LightingState":
        """Unbound copy for a frame snapshot."""
        return LightingState(
            light_intensity=self.light_intensity,
            shadow_intensity=self.shadow_intensity,
            contrast=self.contrast,
            ambient_color=self.ambient_color,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "light_intensity": self.light_intensity,
            "shadow_intensity": self.shadow_intensity,
            "contrast": self.contrast,
            "ambient_color": list(self.ambient_color),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LightingState":
        """Create LightingState from dictionary."""
        return cls(
            light_intensity=data.get("light_intensity", 0.8),
            shadow_intensity=data.get("shadow_intensity", 0.5),
            contrast=data.get("contrast", 1.0),
            ambient_color=tuple(data.get("ambient_color", WARM_LIGHT)),
        )
