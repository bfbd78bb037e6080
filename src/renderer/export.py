"""Image export for rendered frames.

Linear radiance buffers are tone mapped to 8-bit sRGB before saving.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from renderer.tone_mapping import auto_exposure_tone_mapping, tone_map_image

logger = logging.getLogger(__name__)


def save_png(
    image: np.ndarray,
    filepath: Union[str, Path],
    *,
    exposure: float = 1.0,
    gamma: float = 2.2,
    auto_exposure: bool = False,
) -> Path:
    """Tone map a linear (H, W, 3) image and write it as an RGB PNG.

    Args:
        image: Linear radiance, row 0 at the top.
        filepath: Output path. Parent directories are created.
        exposure: Exposure multiplier, ignored with ``auto_exposure``.
        gamma: Display gamma.
        auto_exposure: Pick the exposure from the mean luminance.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    if auto_exposure:
        image_uint8 = auto_exposure_tone_mapping(np.asarray(image, dtype=np.float64), gamma=gamma)
    else:
        image_uint8 = tone_map_image(image, exposure=exposure, gamma=gamma)

    Image.fromarray(image_uint8).save(path)
    logger.info("Saved %dx%d image to %s", image_uint8.shape[1], image_uint8.shape[0], path)
    return path
