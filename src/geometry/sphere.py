# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.uv import sphere_uv
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

def hit_sphere(ray: Ray, center: Vector3, radius: float,
               t_min: float, t_max: float) -> Optional[Tuple[float, Vector3, Vector3]]:
    """
    Solves |origin + t*dir - center|^2 = radius^2 in half-b form.

    Returns (t, point, outward_normal) for the nearest root inside
    [t_min, t_max], falling back to the far root, or None.
    """
    oc = ray.origin - center
    a = ray.direction.length_squared()
    # A zero-length direction makes every root a division by zero.
    if not a > 1e-300 or not math.isfinite(a):
        return None
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if not discriminant >= 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    if not math.isfinite(root):
        return None

    p = ray.at(root)
    outward_normal = (p - center) / radius
    return root, p, outward_normal

def sphere_box(center: Vector3, radius: float) -> AABB:
    # The bounding box of a sphere is center ± radius
    offset = Vector3(radius, radius, radius)
    return AABB(center - offset, center + offset)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        found = hit_sphere(ray, self.center, self.radius, t_min, t_max)
        if found is None:
            return None
        t, p, outward_normal = found
        uv = sphere_uv(outward_normal)
        return HitRecord.from_outward_normal(
            ray, t, uv.u, uv.v, p, outward_normal, self.material)

    def bounding_box(self, start_time: float = 0.0, end_time: float = 0.0) -> AABB:
        return sphere_box(self.center, self.radius)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from `center0` at `time0` to
    `center1` at `time1`. Rays whose time falls outside that window never
    hit it.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        if time1 < time0:
            raise ValueError(f"Empty time window [{time0}, {time1}]")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        span = self.time1 - self.time0
        if span == 0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / span)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if ray.time < self.time0 or ray.time > self.time1:
            return None

        center = self.center(ray.time)
        found = hit_sphere(ray, center, self.radius, t_min, t_max)
        if found is None:
            return None
        t, p, outward_normal = found
        uv = sphere_uv(outward_normal)
        return HitRecord.from_outward_normal(
            ray, t, uv.u, uv.v, p, outward_normal, self.material)

    def bounding_box(self, start_time: float, end_time: float) -> AABB:
        # Motion is linear, so the boxes at the two ends bound the sweep.
        box0 = sphere_box(self.center(start_time), self.radius)
        box1 = sphere_box(self.center(end_time), self.radius)
        return box0.merge(box1)

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0!r} -> {self.center1!r}, "
                f"[{self.time0}, {self.time1}], {self.radius})")
