"""API Routes"""

from . import events, health, lighting, render, scene, view

__all__ = ["events", "health", "lighting", "render", "scene", "view"]
