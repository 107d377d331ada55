"""Grayscale raster loading and PNG persistence."""

from pathlib import Path
from typing import Union

import cv2
import numpy as np

PathLike = Union[str, Path]


def load_grayscale(path: PathLike) -> np.ndarray:
    gray = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if gray is None or gray.size == 0:
        raise ValueError(f"Failed to read image: {path}")
    return gray


def save_png(image: np.ndarray, path: PathLike) -> None:
    """Write a uint8 raster losslessly. Raises IOError if OpenCV refuses."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if image.dtype != np.uint8:
        raise ValueError(f"save_png expects uint8 image, got {image.dtype}")
    if not cv2.imwrite(str(path), image):
        raise IOError(f"Failed to write image: {path}")
