# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are shared by many primitives and hit records and are read
    from every render thread, so they keep no per-ray state.
    """
    def __init__(self):
        self.texture = None

    def emit(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Self-emitted radiance at a surface point. Black unless overridden.
        """
        return Vector3(0.0, 0.0, 0.0)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def sample_texture(self, rec: HitRecord) -> Vector3:
        return self.texture.sample(rec.uv)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    # Store either a solid color or a texture.
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value
