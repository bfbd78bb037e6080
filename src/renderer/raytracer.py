# renderer/raytracer.py
import logging
import math
import random
import time
from typing import Callable, Optional, Union
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector, random_in_hemisphere, random_in_unit_sphere
from geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Lower bound of every bounce query, keeps a scattered ray from
# re-hitting the surface it just left.
T_MIN = 0.001

Background = Union[Vector3, Callable[[Ray], Vector3]]

def sky_background(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient used when a scene has no fixed background."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * Vector3(1.0, 1.0, 1.0) + t * Vector3(0.5, 0.7, 1.0)


def background_color(background: Background, ray: Ray) -> Vector3:
    """Color of `background` seen by a ray that escaped the scene."""
    if callable(background):
        return background(ray)
    return background


def ray_color(ray: Ray, world: Hittable, depth: int, background: Background) -> Vector3:
    """
    Returns the color seen along the ray.

    Every hit adds the material's emission plus its attenuation times the
    color seen along the scattered ray, one bounce less deep. Out of bounces
    the path is black. A miss sees `background`, which is either a fixed
    color or a function of the escaping ray.
    """
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background_color(background, ray)

    emitted = rec.material.emit(rec.u, rec.v, rec.p)
    scatter_result = rec.material.scatter(ray, rec)
    if scatter_result is None:
        return emitted
    attenuation, scattered = scatter_result
    return emitted + attenuation * ray_color(scattered, world, depth - 1, background)

def ray_color_iterative(ray: Ray, world: Hittable, depth: int, background: Background) -> Vector3:
    """
    Same recurrence as `ray_color`, unrolled into a loop that carries the
    running attenuation product instead of growing the stack.
    """
    color = Vector3(0.0, 0.0, 0.0)
    throughput = Vector3(1.0, 1.0, 1.0)
    for _ in range(depth):
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return color + throughput * background_color(background, ray)
        color = color + throughput * rec.material.emit(rec.u, rec.v, rec.p)
        scatter_result = rec.material.scatter(ray, rec)
        if scatter_result is None:
            return color
        attenuation, ray = scatter_result
        throughput = throughput * attenuation
    return color

###############################################################################
# Diffuse reference tracers
#
# Material-free variants that bounce off every surface with a fixed 50%
# albedo. Useful for checking geometry and normals without a material set.
###############################################################################
def ray_color_unit_vector(ray: Ray, world: Hittable, depth: int, rng=None) -> Vector3:
    """True Lambertian bounce: normal plus a random unit vector."""
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_background(ray)
    target = rec.p + rec.normal + random_unit_vector(rng)
    return 0.5 * ray_color_unit_vector(Ray(rec.p, target - rec.p, ray.time), world, depth - 1, rng)

def ray_color_hemisphere(ray: Ray, world: Hittable, depth: int, rng=None) -> Vector3:
    """Uniform bounce over the hemisphere around the normal."""
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_background(ray)
    target = rec.p + random_in_hemisphere(rec.normal, rng)
    return 0.5 * ray_color_hemisphere(Ray(rec.p, target - rec.p, ray.time), world, depth - 1, rng)

def ray_color_unit_sphere(ray: Ray, world: Hittable, depth: int, rng=None) -> Vector3:
    """Bounce toward a random point in the unit sphere tangent at the hit."""
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_background(ray)
    target = rec.p + rec.normal + random_in_unit_sphere(rng)
    return 0.5 * ray_color_unit_sphere(Ray(rec.p, target - rec.p, ray.time), world, depth - 1, rng)


class Renderer:
    """
    Progressive CPU renderer. Each `render_frame` call adds one jittered
    sample per pixel into a linear accumulation buffer of shape
    (height, width, 3); `get_image` returns the running average.

    The scene is only read, so several renderers may trace the same world.
    """
    def __init__(self, width: int, height: int, max_depth: int = 4,
                 background: Optional[Background] = None, seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.background = background if background is not None else sky_background
        self.rng = random.Random(seed)
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)
        self.samples = 0

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)
        self.samples = 0

    def trace(self, ray: Ray, world: Hittable) -> Vector3:
        return ray_color(ray, world, self.max_depth, self.background)

    def render_frame(self, world: Hittable, camera) -> np.ndarray:
        """Adds one sample per pixel and returns the accumulation buffer."""
        start = time.perf_counter()
        rng = self.rng
        for y in range(self.height):
            for x in range(self.width):
                # Row 0 is the top of the image.
                u = (x + rng.random()) / self.width
                v = (self.height - 1 - y + rng.random()) / self.height
                ray = camera.get_ray(u, v, rng)
                col = self.trace(ray, world)
                self.accumulation_buffer[y, x, 0] += col.x
                self.accumulation_buffer[y, x, 1] += col.y
                self.accumulation_buffer[y, x, 2] += col.z
        self.samples += 1
        logger.debug("Sample %d done in %.3fs", self.samples, time.perf_counter() - start)
        return self.accumulation_buffer

    def render(self, world: Hittable, camera, samples: int) -> np.ndarray:
        """Accumulates `samples` frames and returns the averaged image."""
        logger.info("Rendering %dx%d, %d samples, %d bounces",
                    self.width, self.height, samples, self.max_depth)
        start = time.perf_counter()
        for _ in range(samples):
            self.render_frame(world, camera)
        logger.info("Rendered %d samples in %.2fs", samples, time.perf_counter() - start)
        return self.get_image()

    def get_image(self) -> np.ndarray:
        """Linear radiance image averaged over all samples so far."""
        if self.samples == 0:
            return np.zeros_like(self.accumulation_buffer)
        return self.accumulation_buffer / self.samples
