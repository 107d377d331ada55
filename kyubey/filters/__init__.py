"""
Filtering module.

This package contains the smoothing filters used to recover images from
impulse noise and the Sobel edge extractor applied to every image variant.
"""

from .spatial_filtering import (
    FILTER_TYPES,
    WINDOW_SIZES,
    BORDER_MODE,
    FilterVariant,
    create_triangular_kernel,
    mean_filter,
    median_filter,
    triangular_filter,
    apply_filter,
    run_filter_bank,
)
from .edge_detection import (
    EdgeMap,
    extract_edges,
)

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
    "EdgeMap",
    "extract_edges",
]
