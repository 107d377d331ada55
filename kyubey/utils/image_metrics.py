"""
Image quality metrics computation.

This module provides functions for computing image quality metrics
such as PSNR (Peak Signal-to-Noise Ratio) and SSIM (Structural Similarity Index)
between two grayscale uint8 images of identical shape.
"""

import cv2
import numpy as np
from typing import NamedTuple

# Peak value of 8-bit samples.
MAX_PIXEL_VALUE = 255.0

# Gaussian window used for local SSIM statistics.
SSIM_WINDOW = (11, 11)
SSIM_SIGMA = 1.5
SSIM_C1 = (0.01 * MAX_PIXEL_VALUE) ** 2
SSIM_C2 = (0.03 * MAX_PIXEL_VALUE) ** 2


class QualityReport(NamedTuple):
    psnr: float
    ssim: float


def _check_same_shape(img1: np.ndarray, img2: np.ndarray) -> None:
    if img1.shape != img2.shape:
        raise ValueError(f"Images must have the same shape. Got {img1.shape} and {img2.shape}")


def compute_mse(img1: np.ndarray, img2: np.ndarray) -> float:
    """Mean squared error over all pixels, computed in float64."""
    _check_same_shape(img1, img2)
    diff = img1.astype(np.float64) - img2.astype(np.float64)
    return float(np.mean(diff ** 2))


def compute_psnr(img1: np.ndarray, img2: np.ndarray) -> float:
    """
    Compute Peak Signal-to-Noise Ratio (PSNR) between two images.

    PSNR is defined as:
        PSNR = 10 * log10(MAX^2 / MSE)

    where MAX is 255 for uint8 images and MSE is the Mean Squared Error
    between the two images.

    Args:
        img1: First image, uint8 array, shape (H, W).
        img2: Second image, uint8 array, shape (H, W).

    Returns:
        PSNR value in dB. Returns inf if images are identical (MSE = 0).

    Raises:
        ValueError: If images have different shapes.
    """
    mse = compute_mse(img1, img2)

    # Handle perfect match
    if mse == 0:
        return float('inf')

    return float(10 * np.log10(MAX_PIXEL_VALUE ** 2 / mse))


def compute_ssim(img1: np.ndarray, img2: np.ndarray) -> float:
    """
    Compute Structural Similarity Index (SSIM) between two images.

    Local means, variances and covariance are estimated with an 11x11
    Gaussian window (sigma 1.5). The returned score is the mean of the
    full-size SSIM map, so images smaller than the window are supported.

    Args:
        img1: First image, uint8 array, shape (H, W).
        img2: Second image, uint8 array, shape (H, W).

    Returns:
        SSIM value, roughly in [-1, 1]. 1.0 means identical images.

    Raises:
        ValueError: If images have different shapes.
    """
    _check_same_shape(img1, img2)

    i1 = img1.astype(np.float64)
    i2 = img2.astype(np.float64)

    def blur(x: np.ndarray) -> np.ndarray:
        return cv2.GaussianBlur(x, SSIM_WINDOW, SSIM_SIGMA)

    mu1 = blur(i1)
    mu2 = blur(i2)
    mu1_sq = mu1 * mu1
    mu2_sq = mu2 * mu2
    mu1_mu2 = mu1 * mu2

    sigma1_sq = blur(i1 * i1) - mu1_sq
    sigma2_sq = blur(i2 * i2) - mu2_sq
    sigma12 = blur(i1 * i2) - mu1_mu2

    numerator = (2 * mu1_mu2 + SSIM_C1) * (2 * sigma12 + SSIM_C2)
    denominator = (mu1_sq + mu2_sq + SSIM_C1) * (sigma1_sq + sigma2_sq + SSIM_C2)
    ssim_map = numerator / denominator

    return float(np.mean(ssim_map))


def compute_quality(reference: np.ndarray, candidate: np.ndarray) -> QualityReport:
    """PSNR and SSIM of ``candidate`` against ``reference``."""
    return QualityReport(
        psnr=compute_psnr(reference, candidate),
        ssim=compute_ssim(reference, candidate),
    )


__all__ = [
    "QualityReport",
    "compute_mse",
    "compute_psnr",
    "compute_ssim",
    "compute_quality",
]
