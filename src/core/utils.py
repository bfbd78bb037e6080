# core/utils.py
import math
import random
from typing import Optional
from core.vector import Vector3

def resolve_rng(rng: Optional[random.Random] = None):
    """The given generator, or the `random` module when none is given."""
    return rng if rng is not None else random

def random_in_unit_sphere(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    r = resolve_rng(rng)
    while True:
        p = Vector3(r.uniform(-1, 1),
                    r.uniform(-1, 1),
                    r.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the center normalize badly.
        if p.length_squared() > 1e-12:
            return p.normalize()

def random_in_hemisphere(normal: Vector3, rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point in the unit sphere on the same side as `normal`.
    """
    p = random_in_unit_sphere(rng)
    if p.dot(normal) > 0.0:
        return p
    return -p

def random_in_unit_disk(rng: Optional[random.Random] = None) -> Vector3:
    """Random point in the z=0 unit disk, used for defocus blur."""
    r = resolve_rng(rng)
    while True:
        p = Vector3(r.uniform(-1, 1), r.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x
