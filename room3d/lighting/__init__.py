"""Lighting settings and color adjustment."""

from .model import LightingModel, adjust
from .state import WARM_LIGHT, LightingState

__all__ = ["LightingState", "LightingModel", "adjust", "WARM_LIGHT"]
