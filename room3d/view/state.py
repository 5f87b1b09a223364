"""Camera-like view state: rotation angles and zoom."""

import math
from dataclasses import dataclass


def _require_finite(*values: float) -> None:
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"View input must be finite, got {value!r}")


def normalize_angle(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    value = math.fmod(degrees, 360.0)
    if value < 0:
        value += 360.0
    # fmod of a tiny negative number can round up to exactly 360
    if value >= 360.0:
        value = 0.0
    return value


@dataclass
class ViewState:
    """Rotation (degrees) and zoom applied to the whole scene.

    Invariants: rotation_x in [-90, 90], rotation_y in [0, 360),
    zoom in [0.2, 3.0]. Every mutator and direct field assignment
    validates before committing.
    """

    rotation_x: float = 20.0
    rotation_y: float = 30.0
    rotation_z: float = 0.0
    zoom: float = 1.0

    DEFAULT_ROTATION = (20.0, 30.0, 0.0)
    DEFAULT_ZOOM = 1.0
    MIN_PITCH = -90.0
    MAX_PITCH = 90.0
    MIN_ZOOM = 0.2
    MAX_ZOOM = 3.0
    WHEEL_ZOOM_STEP = 0.1

    def __setattr__(self, name, value):
        if name in ("rotation_x", "rotation_y", "rotation_z", "zoom"):
            _require_finite(value)
            if name == "rotation_x":
                value = self.clamp_pitch(value)
            elif name == "rotation_y":
                value = normalize_angle(value)
            elif name == "zoom":
                value = self.clamp_zoom(value)
        super().__setattr__(name, value)

    @classmethod
    def clamp_pitch(cls, degrees: float) -> float:
        return max(cls.MIN_PITCH, min(cls.MAX_PITCH, degrees))

    @classmethod
    def clamp_zoom(cls, zoom: float) -> float:
        return max(cls.MIN_ZOOM, min(cls.MAX_ZOOM, zoom))

    def rotate(self, dx: float, dy: float, sensitivity: float = 0.5) -> None:
        """Drag rotation: horizontal drag yaws, vertical drag tilts."""
        _require_finite(dx, dy, sensitivity)
        yaw = normalize_angle(self.rotation_y + dx * sensitivity)
        pitch = self.clamp_pitch(self.rotation_x + dy * sensitivity)
        _require_finite(yaw, pitch)
        self.rotation_y, self.rotation_x = yaw, pitch

    def rotate_roll(self, dx: float, sensitivity: float = 0.5) -> None:
        """Modifier-drag rotation around the viewing axis."""
        _require_finite(dx, sensitivity)
        self.rotation_z = self.rotation_z + dx * sensitivity

    def spin(self, degrees: float) -> None:
        """Add yaw directly (used by auto-rotation)."""
        _require_finite(degrees)
        self.rotation_y = self.rotation_y + degrees

    def zoom_by(self, delta: float) -> None:
        _require_finite(delta)
        self.zoom = self.clamp_zoom(self.zoom + delta)

    def zoom_wheel(self, notches: float) -> None:
        """Scroll-wheel zoom: scrolling away from the user (negative) zooms in."""
        self.zoom_by(-self.WHEEL_ZOOM_STEP * notches)

    def reset(self) -> None:
        self.rotation_x, self.rotation_y, self.rotation_z = self.DEFAULT_ROTATION
        self.zoom = self.DEFAULT_ZOOM

    def copy(self) -> "ViewState":
        return ViewState(self.rotation_x, self.rotation_y, self.rotation_z, self.zoom)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "rotation_x": self.rotation_x,
            "rotation_y": self.rotation_y,
            "rotation_z": self.rotation_z,
            "zoom": self.zoom,
        }
