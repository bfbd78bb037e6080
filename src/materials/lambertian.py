# materials/lambertian.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture], rng=None):
        super().__init__()
        self.texture = as_texture(albedo)
        self.rng = rng

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(self.rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)

        # Cosine-weighted sampling cancels the 1/pi of the BRDF.
        return self.sample_texture(rec), scattered
