# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0, rng=None):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)
        self.rng = rng

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(self.rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.sample_texture(rec), scattered

        return None  # Absorb the ray if it does not scatter forward
