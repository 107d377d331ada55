"""
Salt-and-pepper noise generation.

This module corrupts grayscale uint8 rasters with impulse noise: a fraction
of pixels is forced to 0 (pepper) or 255 (salt).
"""

import numpy as np
from typing import Optional


def _check_raster(img: np.ndarray, name: str) -> None:
    if img.dtype != np.uint8:
        raise ValueError(f"{name} expects uint8 image.")
    if img.ndim != 2:
        raise ValueError("Unsupported image shape, expected 2D grayscale array.")


def add_salt_pepper_noise(
    img: np.ndarray,
    density: float = 0.1,
    rng: Optional[np.random.Generator] = None
) -> None:
    """
    Add salt-and-pepper noise to a uint8 image in place.

    One uniform value r in [0, 1) is drawn per pixel, in row-major order.
    Pixels with r < density / 2 become 0, pixels with
    density / 2 <= r < density become 255, the rest are left untouched.

    The density is not range-checked: values outside [0, 1] only shift
    the thresholds.

    Args:
        img: uint8 image, shape (H, W). Modified in place, so pass a copy
             if the original must be kept.
        density: total fraction of corrupted pixels.
        rng: optional numpy Generator for reproducibility. A freshly
             entropy-seeded generator is used when omitted.
    """
    _check_raster(img, "add_salt_pepper_noise")

    if rng is None:
        rng = np.random.default_rng()

    mask = rng.random(img.shape)
    pepper = mask < density / 2.0
    salt = ~pepper & (mask < density)
    img[pepper] = 0
    img[salt] = 255


def salt_pepper_noise(
    img: np.ndarray,
    density: float = 0.1,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Return a salt-and-pepper corrupted copy of ``img``.

    Convenience wrapper around add_salt_pepper_noise that leaves the input
    untouched.
    """
    noisy = img.copy()
    add_salt_pepper_noise(noisy, density=density, rng=rng)
    return noisy


__all__ = [
    "add_salt_pepper_noise",
    "salt_pepper_noise",
]
