"""
Utilities module for noise generation, image quality metrics and raster I/O.

This package contains functions for:
- Generating salt-and-pepper impulse noise
- Computing image quality metrics (PSNR, SSIM)
- Loading and saving grayscale rasters
"""

from .random_noise_generation import (
    add_salt_pepper_noise,
    salt_pepper_noise,
)
from .image_metrics import (
    QualityReport,
    compute_mse,
    compute_psnr,
    compute_ssim,
    compute_quality,
)
from .image_io import (
    load_grayscale,
    save_png,
)

__all__ = [
    "add_salt_pepper_noise",
    "salt_pepper_noise",
    "QualityReport",
    "compute_mse",
    "compute_psnr",
    "compute_ssim",
    "compute_quality",
    "load_grayscale",
    "save_png",
]
