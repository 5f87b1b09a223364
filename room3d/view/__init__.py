"""View state and auto-rotation."""

from .auto_rotate import AutoRotator
from .state import ViewState, normalize_angle

__all__ = ["ViewState", "AutoRotator", "normalize_angle"]
