"""Room3D configuration management."""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Room3DConfig:
    """Renderer and interaction settings."""

    # Drawing surface (pixels)
    surface_width: int = 800
    surface_height: int = 600

    # Cosmetic size attenuation by depth (never affects draw order)
    perspective_scaling: bool = False

    # Auto-rotation timer
    auto_rotate_interval: float = 0.05  # seconds per tick
    auto_rotate_step: float = 2.0  # degrees per tick

    # Degrees of rotation per pixel of drag
    drag_sensitivity: float = 0.5

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Room3DConfig":
        """Load configuration from environment variables."""
        return cls(
            surface_width=int(os.getenv("ROOM3D_SURFACE_WIDTH", "800")),
            surface_height=int(os.getenv("ROOM3D_SURFACE_HEIGHT", "600")),
            perspective_scaling=_env_bool("ROOM3D_PERSPECTIVE_SCALING", False),
            auto_rotate_interval=float(os.getenv("ROOM3D_AUTO_ROTATE_INTERVAL", "0.05")),
            auto_rotate_step=float(os.getenv("ROOM3D_AUTO_ROTATE_STEP", "2.0")),
            drag_sensitivity=float(os.getenv("ROOM3D_DRAG_SENSITIVITY", "0.5")),
            log_level=os.getenv("ROOM3D_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def surface_size(self) -> tuple[int, int]:
        return (self.surface_width, self.surface_height)
