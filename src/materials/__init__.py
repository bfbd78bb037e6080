# materials/__init__.py
from materials.material import Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import Texture, SolidTexture, CheckerTexture, ImageTexture

__all__ = [
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Texture",
    "SolidTexture",
    "CheckerTexture",
    "ImageTexture",
]
