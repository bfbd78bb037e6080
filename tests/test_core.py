"""Unit tests for the core value types.

Tests cover:
- Vector3 arithmetic, products and normalization
- Ray evaluation and immutability
- Sampling helpers staying inside their domains
- reflect / refract
"""

import dataclasses
import math
import random

import pytest

from core.ray import Ray
from core.utils import (
    clamp,
    random_in_hemisphere,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    resolve_rng,
    reflect,
    refract,
)
from core.vector import Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_and_componentwise_mul(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0.5, -1) == Vector3(2, 1, -3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length_and_normalize(self):
        v = Vector3(3, 4, 0)
        assert v.length_squared() == 25
        assert v.length() == 5
        assert v.normalize() == Vector3(0.6, 0.8, 0.0)

    def test_normalize_zero_vector(self):
        """Zero vector normalizes to zero instead of dividing by zero."""
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero_and_finite(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()
        assert Vector3(1, 2, 3).is_finite()
        assert not Vector3(math.inf, 0, 0).is_finite()
        assert not Vector3(0, math.nan, 0).is_finite()

    def test_unpacking(self):
        x, y, z = Vector3(1, 2, 3)
        assert (x, y, z) == (1, 2, 3)


class TestRay:
    """Tests for the Ray value type."""

    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 1, 1)
        assert ray.at(1.5) == Vector3(1, 1, -2)

    def test_default_time_is_zero(self):
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0), 0.25).time == 0.25

    def test_ray_is_immutable(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            ray.time = 1.0


class TestSampling:
    """Sampling helpers must stay inside their domains."""

    def test_random_in_unit_sphere(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_unit_vector(self, rng):
        for _ in range(200):
            assert abs(random_unit_vector(rng).length() - 1.0) < 1e-9

    def test_random_in_hemisphere(self, rng):
        normal = Vector3(0, 0, 1)
        for _ in range(200):
            assert random_in_hemisphere(normal, rng).dot(normal) >= 0.0

    def test_random_in_unit_disk(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_seeded_sampling_is_reproducible(self):
        a = random_unit_vector(random.Random(7))
        b = random_unit_vector(random.Random(7))
        assert a == b

    def test_resolve_rng(self, rng):
        assert resolve_rng(rng) is rng
        assert resolve_rng(None) is random


class TestReflectRefract:
    """Tests for reflect and refract."""

    def test_reflect(self):
        r = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert r == Vector3(1, 1, 0)

    def test_refract_normal_incidence_passes_straight(self, vec_close):
        out = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        vec_close(out, Vector3(0, -1, 0))

    def test_refract_matching_index_is_identity(self, vec_close):
        d = Vector3(1, -1, 0).normalize()
        vec_close(refract(d, Vector3(0, 1, 0), 1.0), d)

    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.5, 0, 1) == 0.5
