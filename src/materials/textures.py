# materials/textures.py
import math
import os
import numpy as np
from PIL import Image
from core.vector import Vector3
from core.uv import UV

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV) -> Vector3:
        """Sample the texture at given UV coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """A checker pattern in UV space."""
    def __init__(self, color1: Vector3, color2: Vector3, scale: float = 1.0):
        self.color1 = color1
        self.color2 = color2
        self.scale = scale

    def sample(self, uv: UV) -> Vector3:
        # floor, not int(): sphere v runs through negative values
        x = math.floor(uv.u * self.scale)
        y = math.floor(uv.v * self.scale)
        is_even = (x + y) % 2 == 0
        return self.color1 if is_even else self.color2

class ImageTexture(Texture):
    """A texture from an image file, or from an (H, W, 3) array in [0, 1]."""
    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Expected an (H, W, 3) image, got shape {data.shape}")
        self.data = data
        self.height, self.width = data.shape[:2]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        """
        Load an image file as a texture.

        Raises:
            FileNotFoundError: If the image file doesn't exist
            ValueError: If the image can't be decoded
        """
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        try:
            with Image.open(image_path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                return cls(np.array(img) / 255.0)  # Normalize to [0,1]
        except OSError as e:
            raise ValueError(f"Error loading texture {image_path}: {e}") from e

    def sample(self, uv: UV) -> Vector3:
        # Handle texture wrapping
        u = uv.u % 1.0
        v = 1.0 - (uv.v % 1.0)  # Flip V: row 0 is the top of the image

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
