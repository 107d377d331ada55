"""
Noise, filter and edge-detection pipeline for grayscale images.

For each input image the pipeline:
1. Saves the original and a salt-and-pepper corrupted copy
2. Filters the noisy copy with mean, median and triangular filters (3x3, 5x5, 7x7)
3. Scores every variant against the original with PSNR and SSIM
4. Extracts Sobel edge maps from the original, the noisy copy and all filtered variants

All artifacts are written as PNG files named after the image label.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from .filters import extract_edges, run_filter_bank
from .utils import QualityReport, add_salt_pepper_noise, compute_quality, load_grayscale, save_png

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Reporter = Callable[[str, str, float], None]

EDGE_SUFFIXES = ("horizontal", "vertical", "magnitude")


class ImageReport(NamedTuple):
    label: str
    noisy: QualityReport
    filtered: List[Tuple[str, QualityReport]]
    edges: Dict[str, float]
    failed_artifacts: List[Path]


def _noop_reporter(label: str, metric_name: str, value: float) -> None:
    pass


class _ArtifactWriter:
    """Writes ``{label}_{suffix}.png`` files, remembering the ones that failed."""

    def __init__(self, output_dir: Path, label: str):
        self.output_dir = output_dir
        self.label = label
        self.failed: List[Path] = []

    def path(self, suffix: str) -> Path:
        return self.output_dir / f"{self.label}_{suffix}.png"

    def save(self, image: np.ndarray, suffix: str) -> None:
        path = self.path(suffix)
        try:
            save_png(image, path)
        except OSError as exc:
            logger.warning("Could not write %s: %s", path, exc)
            self.failed.append(path)


def process_image(
    path: PathLike,
    label: str,
    density: float,
    output_dir: PathLike,
    rng: Optional[np.random.Generator] = None,
    reporter: Optional[Reporter] = None,
) -> Optional[ImageReport]:
    """
    Run the full pipeline on one image.

    Args:
        path: input image, decoded as 8-bit grayscale.
        label: prefix for every artifact and report line (e.g. "image1").
        density: salt-and-pepper noise density.
        output_dir: directory receiving the 44 PNG artifacts.
        rng: numpy Generator used for the noise. Entropy-seeded if omitted.
        reporter: called with (label, metric name, value) for every metric.

    Returns:
        ImageReport, or None if the image could not be loaded.
    """
    if reporter is None:
        reporter = _noop_reporter

    try:
        original = load_grayscale(path)
    except ValueError as exc:
        logger.error("Skipping %s: %s", label, exc)
        return None

    logger.info("Processing %s (%s, %dx%d)", label, path, original.shape[1], original.shape[0])
    writer = _ArtifactWriter(Path(output_dir), label)
    writer.save(original, "original")

    noisy = original.copy()
    add_salt_pepper_noise(noisy, density, rng=rng)
    writer.save(noisy, "noisy")

    noisy_quality = compute_quality(original, noisy)
    reporter(label, "Noisy PSNR", noisy_quality.psnr)
    reporter(label, "Noisy SSIM", noisy_quality.ssim)

    variants = run_filter_bank(noisy)
    filtered = []
    for variant in variants:
        writer.save(variant.image, variant.name)
        quality = compute_quality(original, variant.image)
        reporter(label, f"{variant.label} PSNR", quality.psnr)
        reporter(label, f"{variant.label} SSIM", quality.ssim)
        filtered.append((variant.name, quality))

    sources = [("original", original), ("noisy", noisy)]
    sources.extend((variant.name, variant.image) for variant in variants)

    edges = {}
    for name, image in sources:
        edge_map = extract_edges(image)
        for suffix in EDGE_SUFFIXES:
            writer.save(getattr(edge_map, suffix), f"sobel_{name}_{suffix}")
        reporter(label, f"Sobel magnitude mean ({name})", edge_map.mean_magnitude)
        edges[name] = edge_map.mean_magnitude

    if writer.failed:
        logger.warning("%s: %d artifact(s) could not be written", label, len(writer.failed))

    return ImageReport(
        label=label,
        noisy=noisy_quality,
        filtered=filtered,
        edges=edges,
        failed_artifacts=writer.failed,
    )


def run(
    image_paths: Sequence[PathLike],
    density: float,
    output_dir: PathLike,
    rng: Optional[np.random.Generator] = None,
    reporter: Optional[Reporter] = None,
) -> List[ImageReport]:
    """
    Process several images, labelled image1, image2, ...

    A failing image is logged and skipped; the others are still processed.
    One generator is shared by all images.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if rng is None:
        rng = np.random.default_rng()

    reports = []
    for i, path in enumerate(image_paths, 1):
        report = process_image(path, f"image{i}", density, output_dir, rng=rng, reporter=reporter)
        if report is not None:
            reports.append(report)
    return reports


__all__ = [
    "ImageReport",
    "EDGE_SUFFIXES",
    "process_image",
    "run",
]
