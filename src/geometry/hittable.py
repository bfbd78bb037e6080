# geometry/hittable.py
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional
from core.aabb import AABB
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3

if TYPE_CHECKING:
    from materials.material import Material

@dataclass(frozen=True)
class HitRecord:
    """
    Records details of a ray-object intersection. Built once per hit and
    never modified; the material is shared with the primitive, not copied.
    """
    t: float                # Ray parameter at intersection
    u: float
    v: float
    p: Vector3              # Intersection point
    normal: Vector3         # Unit normal, always facing the incoming ray
    front_face: bool        # Whether the ray arrived from the outward side
    material: Any = None    # Material

    @classmethod
    def from_outward_normal(cls, ray: Ray, t: float, u: float, v: float,
                            p: Vector3, outward_normal: Vector3,
                            material: "Optional[Material]") -> "HitRecord":
        """
        Ensures that the normal always points against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(t, u, v, p, normal, front_face, material)

    @property
    def hit_point(self) -> Vector3:
        return self.p

    @property
    def uv(self) -> UV:
        return UV(self.u, self.v)

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Implementations must not mutate themselves in `hit`, so one scene can be
    traced from several threads at once.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, start_time: float, end_time: float) -> Optional[AABB]:
        """
        Box covering every position the object takes over the time window,
        or None if the object has no finite bounds.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
