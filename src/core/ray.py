# core/ray.py
from dataclasses import dataclass
from core.vector import Vector3

@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin, direction and time.
    Time is only read by moving primitives (motion blur).
    """
    origin: Vector3
    direction: Vector3
    time: float = 0.0

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t
