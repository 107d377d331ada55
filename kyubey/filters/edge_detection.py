"""Sobel gradient edge maps."""

import cv2
import numpy as np
from typing import NamedTuple


class EdgeMap(NamedTuple):
    horizontal: np.ndarray
    vertical: np.ndarray
    magnitude: np.ndarray
    mean_magnitude: float


def extract_edges(img: np.ndarray) -> EdgeMap:
    """
    Compute Sobel edge maps of a grayscale image.

    Gradients are taken with the default 3x3 aperture into int16 so that
    negative slopes survive. The horizontal and vertical maps are the
    absolute gradients saturated to uint8. The magnitude is computed from
    the signed gradients in float32 and then saturated to uint8 the same
    way; ``mean_magnitude`` is the mean of that uint8 map, not of the raw
    float magnitude.
    """
    if img.size == 0:
        raise ValueError("extract_edges expects a non-empty image.")

    grad_x = cv2.Sobel(img, cv2.CV_16S, 1, 0)
    grad_y = cv2.Sobel(img, cv2.CV_16S, 0, 1)

    magnitude = cv2.magnitude(grad_x.astype(np.float32), grad_y.astype(np.float32))
    magnitude = cv2.convertScaleAbs(magnitude)

    return EdgeMap(
        horizontal=cv2.convertScaleAbs(grad_x),
        vertical=cv2.convertScaleAbs(grad_y),
        magnitude=magnitude,
        mean_magnitude=float(np.mean(magnitude)),
    )


__all__ = [
    "EdgeMap",
    "extract_edges",
]
