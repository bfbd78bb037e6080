# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk, resolve_rng

class Camera:
    def __init__(self, position: Vector3, yaw: float, pitch: float,
                 fov: float, aspect_ratio: float, aperture: float = 0.0, focus_dist: float = 10.0,
                 time0: float = 0.0, time1: float = 0.0):
        if time1 < time0:
            raise ValueError(f"Shutter closes before it opens: [{time0}, {time1}]")
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0  # Shutter open
        self.time1 = time1  # Shutter close
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        global_up = Vector3(0, 1, 0)

        # Compute forward vector
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        # Compute right and up vectors
        self.right = self.forward.cross(global_up).normalize()
        self.up = self.right.cross(self.forward).normalize()

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(self.fov / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float, rng=None) -> Ray:
        """
        Ray through viewport coordinates (u, v) in [0, 1]^2, with lens
        offset for depth of field and a random shutter time.
        """
        rng = resolve_rng(rng)
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)

        origin = self.position
        if self.aperture > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = self.position + self.right * rd.x + self.up * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     origin)
        return Ray(origin, direction, time)
