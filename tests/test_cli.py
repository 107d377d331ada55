import csv

import pytest

from kyubey.cli import main, parse_args
from kyubey.reporting import CSV_HEADER, print_metric

from conftest import checkerboard, synthetic_scene


def test_defaults():
    args = parse_args(["-1", "a.png", "-2", "b.png"])
    assert args.density == pytest.approx(0.10)
    assert args.output_dir == "output"
    assert args.seed is None


def test_density_out_of_range():
    with pytest.raises(SystemExit):
        parse_args(["-1", "a.png", "-2", "b.png", "-d", "1.5"])


def test_missing_required_image():
    with pytest.raises(SystemExit):
        parse_args(["--image1", "a.png"])


def test_end_to_end(tmp_path, write_image, capsys):
    a = write_image(synthetic_scene(), "a.png")
    b = write_image(checkerboard(32, 32, block=4), "b.png")
    out = tmp_path / "out"

    code = main(["-1", str(a), "-2", str(b), "-d", "0.15", "-o", str(out), "--seed", "3", "--plot"])

    assert code == 0
    assert len(list(out.glob("image1_*.png"))) == 44
    assert len(list(out.glob("image2_*.png"))) == 44
    assert (out / "metrics.png").is_file()

    with (out / "metrics.csv").open(newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_HEADER
    assert len(rows) == 1 + 2 * 11
    assert rows[1][:2] == ["image1", "original"]

    printed = capsys.readouterr().out
    assert "image1 | Noisy PSNR:" in printed
    assert "image2 | median 5x5 SSIM:" in printed


def test_seed_makes_runs_reproducible(tmp_path, write_image):
    a = write_image(synthetic_scene(), "a.png")
    for name in ("run1", "run2"):
        main(["-1", str(a), "-2", str(a), "-o", str(tmp_path / name), "--seed", "21"])
    first = (tmp_path / "run1" / "metrics.csv").read_text()
    second = (tmp_path / "run2" / "metrics.csv").read_text()
    assert first == second


def test_no_readable_image(tmp_path):
    code = main(["-1", str(tmp_path / "x.png"), "-2", str(tmp_path / "y.png"), "-o", str(tmp_path / "out")])
    assert code == 1
    assert not (tmp_path / "out" / "metrics.csv").exists()


def test_print_metric(capsys):
    print_metric("image1", "Noisy PSNR", float("inf"))
    print_metric("image1", "mean 3x3 SSIM", 0.5)
    assert capsys.readouterr().out == "image1 | Noisy PSNR: inf\nimage1 | mean 3x3 SSIM: 0.5000\n"
