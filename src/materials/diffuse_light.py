# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Area light. Adds its radiance to any path that reaches it and ends the
    path there, so a bounce budget is never spent past a light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        return None

    def emit(self, u: float, v: float, p: Vector3) -> Vector3:
        # Same radiance from both sides and every viewing angle; only the
        # texture varies it over the surface.
        return self.texture.sample(UV(u, v))
