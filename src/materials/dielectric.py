# src/materials/dielectric.py
import math
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, resolve_rng
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    def __init__(self, ref_idx: float, rng=None):
        super().__init__()
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx
        self.rng = rng

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Vector3, Ray]]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection, or a Schlick-weighted coin flip
        if ni_over_nt * sin_theta > 1.0 or resolve_rng(self.rng).random() < schlick(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return attenuation, Ray(rec.p, direction, ray_in.time)

def schlick(cos_theta: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
