# geometry/plane.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

class XyPlane(Hittable):
    """
    Finite rectangle [x0, x1] x [y0, y1] lying in the plane z = k.

    The rectangle is two-sided: the stored normal always faces the incoming
    ray and `front_face` is always True.
    """
    THICKNESS = 1e-4

    def __init__(self, x0: float, y0: float, x1: float, y1: float, k: float, material):
        if not (x1 > x0 and y1 > y0):
            raise ValueError(f"Empty rectangle [{x0}, {x1}] x [{y0}, {y1}]")
        self.x0 = x0
        self.x1 = x1
        self.y0 = y0
        self.y1 = y1
        self.k = k
        self.material = material

    def normal(self) -> Vector3:
        """Unit normal spanned by the rectangle's two edges."""
        edge_u = Vector3(self.x1 - self.x0, 0.0, 0.0)
        edge_v = Vector3(0.0, self.y1 - self.y0, 0.0)
        return edge_u.cross(edge_v).normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        length = ray.direction.length()
        if not length > 0 or not math.isfinite(length):
            return None
        unit_dir = ray.direction / length

        corner = Vector3(self.x0, self.y0, self.k)
        to_corner = corner - ray.origin
        normal = self.normal()
        if normal.dot(to_corner) < 0:
            normal = -normal

        # Distance from the origin to the plane along the normal, divided by
        # the cosine between the ray and the normal.
        distance = to_corner.dot(normal)
        cos = unit_dir.dot(normal)
        if abs(cos) < 1e-12:
            return None
        t = distance / cos / length
        if not math.isfinite(t) or t < t_min or t > t_max:
            return None

        p = ray.at(t)
        if p.x < self.x0 or p.x > self.x1 or p.y < self.y0 or p.y > self.y1:
            return None

        facing = normal if normal.dot(ray.direction) < 0 else -normal
        return HitRecord(
            t,
            (p.x - self.x0) / (self.x1 - self.x0),
            (p.y - self.y0) / (self.y1 - self.y0),
            p,
            facing,
            True,
            self.material,
        )

    def bounding_box(self, start_time: float = 0.0, end_time: float = 0.0) -> AABB:
        return AABB(
            Vector3(self.x0, self.y0, self.k),
            Vector3(self.x1, self.y1, self.k),
        ).padded(self.THICKNESS)

    def __repr__(self) -> str:
        return f"XyPlane([{self.x0}, {self.x1}] x [{self.y0}, {self.y1}], z={self.k})"
