# renderer/__init__.py
from renderer.raytracer import (
    Renderer,
    ray_color,
    ray_color_iterative,
    sky_background,
)
from renderer.settings import QUALITY_LEVELS, RenderSettings

__all__ = [
    "Renderer",
    "ray_color",
    "ray_color_iterative",
    "sky_background",
    "QUALITY_LEVELS",
    "RenderSettings",
]
