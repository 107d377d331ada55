"""Console output, CSV table and bar chart for pipeline metrics."""

import csv
import math
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .pipeline import ImageReport

CSV_HEADER = ["image", "variant", "psnr", "ssim", "sobel_magnitude_mean"]


def print_metric(label: str, metric_name: str, value: float) -> None:
    print(f"{label} | {metric_name}: {value:.4f}")


def _format(value: float) -> str:
    if math.isinf(value):
        return "inf"
    return f"{value:.6f}"


def _rows(report: ImageReport) -> List[Tuple[str, str, str, str, str]]:
    rows = [(
        report.label,
        "original",
        "",
        "",
        _format(report.edges["original"]),
    ), (
        report.label,
        "noisy",
        _format(report.noisy.psnr),
        _format(report.noisy.ssim),
        _format(report.edges["noisy"]),
    )]
    for name, quality in report.filtered:
        rows.append((
            report.label,
            name,
            _format(quality.psnr),
            _format(quality.ssim),
            _format(report.edges[name]),
        ))
    return rows


def write_metrics_csv(reports: Iterable[ImageReport], out_csv: Path) -> Path:
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for report in reports:
            writer.writerows(_rows(report))
    return out_csv


def plot_metrics(reports: Sequence[ImageReport], fig_path: Path) -> Path:
    """
    Grouped bar chart of PSNR and SSIM per variant, one bar per image.

    Infinite PSNR (identical images) has no bar height and is left empty.
    """
    if not reports:
        raise RuntimeError("No reports to plot.")
    fig_path = Path(fig_path)
    fig_path.parent.mkdir(parents=True, exist_ok=True)

    variants = ["noisy"] + [name for name, _ in reports[0].filtered]
    x = np.arange(len(variants))
    width = 0.8 / len(reports)

    fig, (ax_psnr, ax_ssim) = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    for i, report in enumerate(reports):
        qualities = dict(report.filtered)
        qualities["noisy"] = report.noisy
        psnr = [qualities[v].psnr if math.isfinite(qualities[v].psnr) else np.nan for v in variants]
        ssim = [qualities[v].ssim for v in variants]
        offset = (i - len(reports) / 2) * width + width / 2
        ax_psnr.bar(x + offset, psnr, width=width, label=report.label)
        ax_ssim.bar(x + offset, ssim, width=width, label=report.label)

    ax_psnr.set_ylabel("PSNR (dB)")
    ax_psnr.set_title("Quality against the original image")
    ax_psnr.legend()
    ax_ssim.set_ylabel("SSIM")
    ax_ssim.set_xticks(x)
    ax_ssim.set_xticklabels(variants, rotation=30)
    fig.tight_layout()
    fig.savefig(fig_path, dpi=150)
    plt.close(fig)
    return fig_path


__all__ = [
    "CSV_HEADER",
    "print_metric",
    "write_metrics_csv",
    "plot_metrics",
]
