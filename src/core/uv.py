# core/uv.py
import math
from core.vector import Vector3

class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __add__(self, other: "UV") -> "UV":
        return UV(self.u + other.u, self.v + other.v)

    def __sub__(self, other: "UV") -> "UV":
        return UV(self.u - other.u, self.v - other.v)

    def __mul__(self, t: float) -> "UV":
        return UV(self.u * t, self.v * t)

    def __truediv__(self, t: float) -> "UV":
        return UV(self.u / t, self.v / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"


def sphere_uv(p: Vector3) -> UV:
    """
    Equirectangular coordinates of a point on the unit sphere.

    theta = -acos(y), phi = -atan2(z, x) + pi, u = phi / 2pi, v = theta / pi.
    Texture-mapped materials depend on this exact mapping, so v lands in
    [-1, 0] rather than [0, 1].
    """
    # acos domain guard for normals that drift just past unit length
    y = max(-1.0, min(1.0, p.y))
    theta = -math.acos(y)
    phi = -math.atan2(p.z, p.x) + math.pi
    return UV(phi / (2.0 * math.pi), theta / math.pi)
