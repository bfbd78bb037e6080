"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded random generator and small deterministic
materials for driving the color recurrence without sampling noise.
"""

import random

import pytest

from core.ray import Ray
from core.vector import Vector3
from materials.material import Material


class ConstantMaterial(Material):
    """Emits a fixed color and always scatters with a fixed attenuation.

    The scattered ray is built by ``direction_fn(ray_in, rec)``; with no
    function the material absorbs every ray.
    """

    def __init__(self, emission=None, attenuation=None, direction_fn=None):
        super().__init__()
        self.emission = emission if emission is not None else Vector3(0.0, 0.0, 0.0)
        self.attenuation = attenuation if attenuation is not None else Vector3(1.0, 1.0, 1.0)
        self.direction_fn = direction_fn
        self.emit_calls = []

    def emit(self, u, v, p):
        self.emit_calls.append((u, v, p))
        return self.emission

    def scatter(self, ray_in, rec):
        if self.direction_fn is None:
            return None
        return self.attenuation, Ray(rec.p, self.direction_fn(ray_in, rec), ray_in.time)


@pytest.fixture
def rng():
    """Seeded generator so sampled tests are reproducible."""
    return random.Random(42)


@pytest.fixture
def absorbing():
    """Material that neither emits nor scatters."""
    return ConstantMaterial()


@pytest.fixture
def make_material():
    """Factory for ConstantMaterial instances."""
    return ConstantMaterial


def assert_vec_close(actual, expected, tol=1e-9):
    assert abs(actual.x - expected.x) < tol, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"{actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"{actual} != {expected}"


@pytest.fixture
def vec_close():
    """Component-wise approximate equality assertion for Vector3."""
    return assert_vec_close
