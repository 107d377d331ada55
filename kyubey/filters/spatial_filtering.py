"""
Spatial smoothing filters for impulse noise removal.

This module contains the mean (box), median and triangular (pyramid kernel)
filters applied to salt-and-pepper corrupted grayscale images, and the
filter bank that runs all of them over a set of window sizes.
"""

import cv2
import numpy as np
from typing import Iterable, List, NamedTuple

FILTER_TYPES = ("mean", "median", "triangular")
WINDOW_SIZES = (3, 5, 7)

# Border extension used by the mean and triangular filters (gfedcb|abcdefgh|gfedcba).
# cv2.medianBlur always replicates the edge pixel and takes no border argument.
BORDER_MODE = cv2.BORDER_REFLECT_101


class FilterVariant(NamedTuple):
    filter_type: str
    size: int
    image: np.ndarray

    @property
    def name(self) -> str:
        return f"{self.filter_type}_{self.size}"

    @property
    def label(self) -> str:
        return f"{self.filter_type} {self.size}x{self.size}"


def _check_window(size: int) -> None:
    if size < 1 or size % 2 == 0:
        raise ValueError(f"window size must be an odd integer >= 1, got {size}.")


def _check_raster(img: np.ndarray, name: str) -> None:
    if img.dtype != np.uint8:
        raise ValueError(f"{name} expects uint8 image.")
    if img.ndim != 2:
        raise ValueError("Unsupported image shape, expected 2D grayscale array.")


def create_triangular_kernel(size: int) -> np.ndarray:
    """
    Build a normalized square pyramid kernel.

    Each weight is (center + 1) minus the Chebyshev distance to the center
    cell, so the kernel peaks at center + 1 and falls by one per ring. This
    is not the outer product of two 1-D triangles.

    Args:
        size: odd side length >= 1.

    Returns:
        float32 kernel of shape (size, size) summing to 1.
    """
    _check_window(size)
    center = size // 2
    idx = np.abs(np.arange(size) - center)
    chebyshev = np.maximum(idx[:, None], idx[None, :])
    kernel = ((center + 1) - chebyshev).astype(np.float32)

    total = kernel.sum()
    if total > 0:
        kernel /= total
    return kernel


def mean_filter(img: np.ndarray, size: int = 3) -> np.ndarray:
    """Box average over a size x size neighbourhood."""
    _check_raster(img, "mean_filter")
    _check_window(size)
    return cv2.blur(img, (size, size), borderType=BORDER_MODE)


def median_filter(img: np.ndarray, size: int = 3) -> np.ndarray:
    """
    Median over a size x size neighbourhood.

    Robust to impulse noise: isolated 0/255 pixels never reach the median
    while they are a minority of the window.
    """
    _check_raster(img, "median_filter")
    _check_window(size)
    return cv2.medianBlur(img, size)


def triangular_filter(img: np.ndarray, size: int = 3) -> np.ndarray:
    """
    Convolve with the triangular pyramid kernel.

    The output keeps the input depth, so OpenCV rounds and saturates the
    weighted sums to [0, 255].
    """
    _check_raster(img, "triangular_filter")
    kernel = create_triangular_kernel(size)
    return cv2.filter2D(img, -1, kernel, borderType=BORDER_MODE)


_FILTERS = {
    "mean": mean_filter,
    "median": median_filter,
    "triangular": triangular_filter,
}


def apply_filter(img: np.ndarray, filter_type: str, size: int) -> np.ndarray:
    try:
        fn = _FILTERS[filter_type]
    except KeyError:
        raise ValueError(f"filter_type must be one of {FILTER_TYPES}, got '{filter_type}'") from None
    return fn(img, size)


def run_filter_bank(
    img: np.ndarray,
    sizes: Iterable[int] = WINDOW_SIZES,
    filter_types: Iterable[str] = FILTER_TYPES,
) -> List[FilterVariant]:
    """
    Run every filter type at every window size.

    Sizes form the outer loop, so the default bank yields
    mean 3, median 3, triangular 3, mean 5, ... triangular 7.
    Each variant holds a newly allocated image; ``img`` is only read.
    """
    filter_types = tuple(filter_types)
    variants = []
    for size in sizes:
        for filter_type in filter_types:
            variants.append(FilterVariant(filter_type, size, apply_filter(img, filter_type, size)))
    return variants


__all__ = [
    "FILTER_TYPES",
    "WINDOW_SIZES",
    "BORDER_MODE",
    "FilterVariant",
    "create_triangular_kernel",
    "mean_filter",
    "median_filter",
    "triangular_filter",
    "apply_filter",
    "run_filter_bank",
]
