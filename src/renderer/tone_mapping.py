# renderer/tone_mapping.py
import numpy as np
from numba import njit

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(accumulated, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

def auto_exposure_tone_mapping(accumulated, gamma=2.2, target_midgray=0.18):
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    # Compute per-pixel luminance using standard coefficients.
    luminance = 0.2126 * accumulated[:,:,0] + 0.7152 * accumulated[:,:,1] + 0.0722 * accumulated[:,:,2]
    avg_lum = luminance.mean() + 1e-5  # avoid division by zero
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(accumulated, exposure=exposure, white_point=1.0, gamma=gamma)

@njit(cache=False)
def tone_mapping_kernel(linear_image, output_image, exposure, white_point, gamma):
    for y in range(output_image.shape[0]):
        for x in range(output_image.shape[1]):
            for c in range(3):
                # Reinhard, then gamma
                v = max(linear_image[y, x, c], 0.0) * exposure
                v = v / (1.0 + v / white_point)
                v = v ** (1.0 / gamma)
                output_image[y, x, c] = min(255, max(0, int(v * 255)))

def tone_map_image(linear_image, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Compiled per-pixel equivalent of `reinhard_tone_mapping` for large
    images. Returns a uint8 array with the same shape as the input.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {linear_image.shape}")
    output = np.zeros(linear_image.shape, dtype=np.uint8)
    tone_mapping_kernel(linear_image, output, float(exposure), float(white_point), float(gamma))
    return output
