# src/core/aabb.py
from core.vector import Vector3

AXES = ("x", "y", "z")

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    A box may be flat along an axis; use `padded()` before handing such a
    box to anything that divides by its extent.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in AXES:
            d = getattr(ray.direction, a)
            o = getattr(ray.origin, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if d == 0.0:
                # Parallel to this slab: inside it or never.
                if o < lo or o > hi:
                    return False
                continue
            invD = 1.0 / d
            t0 = (lo - o) * invD
            t1 = (hi - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def merge(self, other: "AABB") -> "AABB":
        """Smallest box containing both boxes."""
        small = Vector3(
            min(self.minimum.x, other.minimum.x),
            min(self.minimum.y, other.minimum.y),
            min(self.minimum.z, other.minimum.z)
        )
        big = Vector3(
            max(self.maximum.x, other.maximum.x),
            max(self.maximum.y, other.maximum.y),
            max(self.maximum.z, other.maximum.z)
        )
        return AABB(small, big)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return box0.merge(box1)

    def padded(self, delta: float = 1e-4) -> "AABB":
        """
        Returns a copy where every axis thinner than `delta` is widened to
        extend `delta` either side of its midpoint.
        """
        lo = []
        hi = []
        for a in AXES:
            mn = getattr(self.minimum, a)
            mx = getattr(self.maximum, a)
            if mx - mn < delta:
                mid = 0.5 * (mn + mx)
                mn, mx = mid - delta, mid + delta
            lo.append(mn)
            hi.append(mx)
        return AABB(Vector3(*lo), Vector3(*hi))

    def contains(self, other: "AABB") -> bool:
        return all(
            getattr(self.minimum, a) <= getattr(other.minimum, a)
            and getattr(other.maximum, a) <= getattr(self.maximum, a)
            for a in AXES
        )

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def is_finite(self) -> bool:
        return self.minimum.is_finite() and self.maximum.is_finite()

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __hash__(self) -> int:
        return hash((self.minimum, self.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
