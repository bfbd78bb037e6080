# geometry/__init__.py
from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere, MovingSphere
from geometry.plane import XyPlane
from geometry.world import HittableList, World

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "MovingSphere",
    "XyPlane",
    "HittableList",
    "World",
]
