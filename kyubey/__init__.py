"""
kyubey: salt-and-pepper noise, spatial filtering and Sobel edge analysis
for grayscale images.
"""

from .filters import (
    EdgeMap,
    FilterVariant,
    create_triangular_kernel,
    extract_edges,
    run_filter_bank,
)
from .pipeline import ImageReport, process_image, run
from .utils import (
    QualityReport,
    add_salt_pepper_noise,
    compute_psnr,
    compute_ssim,
)

__version__ = "0.1.0"

__all__ = [
    "EdgeMap",
    "FilterVariant",
    "ImageReport",
    "QualityReport",
    "add_salt_pepper_noise",
    "compute_psnr",
    "compute_ssim",
    "create_triangular_kernel",
    "extract_edges",
    "process_image",
    "run",
    "run_filter_bank",
]
