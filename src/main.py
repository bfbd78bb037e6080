# main.py
import argparse
import logging
import math
import random
import sys
from typing import List, Optional
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere, MovingSphere
from geometry.plane import XyPlane
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture, ImageTexture
from renderer.raytracer import Renderer
from renderer.export import save_png
from renderer.settings import DEFAULT_QUALITY, QUALITY_LEVELS, RenderSettings

logger = logging.getLogger(__name__)

def create_world(texture_path: Optional[str] = None,
                 rng: Optional[random.Random] = None) -> HittableList:
    """
    Demo scene using every primitive and material. Every sampling material
    draws from `rng`, so a seeded generator makes the render repeatable.
    """
    world = HittableList()

    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9), scale=20.0)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker, rng=rng)))

    if texture_path is not None:
        globe = Lambertian(ImageTexture.from_file(texture_path), rng=rng)
        logger.info("Loaded texture %s", texture_path)
    else:
        globe = Lambertian(Vector3(0.7, 0.3, 0.3), rng=rng)
    world.add(Sphere(Vector3(0, 1, 0), 1.0, globe))
    world.add(Sphere(Vector3(2, 1, 0), 1.0, Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1, rng=rng)))
    world.add(Sphere(Vector3(-2, 1, 0), 1.0, Dielectric(1.52, rng=rng)))
    world.add(MovingSphere(Vector3(0, 0.4, 2), Vector3(0, 0.7, 2), 0.0, 1.0, 0.4,
                           Lambertian(Vector3(0.1, 0.2, 0.5), rng=rng)))
    # Area light facing the camera from behind the spheres.
    world.add(XyPlane(-1.5, 2.5, 1.5, 3.5, -3, DiffuseLight(Vector3(4, 4, 4))))

    logger.info("Created world with %d objects", len(world))
    box = world.bounding_box(0.0, 1.0)
    logger.debug("World bounds: %r", box)
    return world

def create_camera(aspect_ratio: float) -> Camera:
    return Camera(
        position=Vector3(0, 2, 9),
        yaw=0.0,
        pitch=-0.12,
        fov=math.radians(40),
        aspect_ratio=aspect_ratio,
        aperture=0.05,
        focus_dist=9.0,
        time0=0.0,
        time1=1.0,
    )

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo scene to a PNG.")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--height", type=int, default=225, help="Image height in pixels (default: 225)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help=f"Quality preset (default: {DEFAULT_QUALITY})")
    parser.add_argument("--samples", type=int, default=None, help="Override samples per pixel")
    parser.add_argument("--bounces", type=int, default=None, help="Override bounce budget")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible renders")
    parser.add_argument("--texture", type=str, default=None, help="Image texture for the center sphere")
    parser.add_argument("--output", type=str, default="render.png", help="Output file (default: render.png)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every sample")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = RenderSettings.from_quality(args.quality, args.width, args.height, args.seed)
        settings = settings.with_overrides(samples=args.samples, bounces=args.bounces)
        world = create_world(args.texture, random.Random(settings.seed))
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    logger.info("Quality %s: %dx%d, %d samples, %d bounces",
                args.quality, settings.render_width, settings.render_height,
                settings.samples, settings.bounces)

    camera = create_camera(settings.aspect_ratio)
    renderer = Renderer(settings.render_width, settings.render_height,
                        max_depth=settings.bounces, seed=settings.seed)
    image = renderer.render(world, camera, settings.samples)
    save_png(image, args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
