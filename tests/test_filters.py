import numpy as np
import pytest

from kyubey.filters import (
    apply_filter,
    create_triangular_kernel,
    mean_filter,
    median_filter,
    run_filter_bank,
    triangular_filter,
)
from kyubey.utils import compute_psnr, salt_pepper_noise

from conftest import synthetic_scene


@pytest.mark.parametrize("size", [1, 3, 5, 7, 9])
def test_kernel_normalized_with_unique_center_peak(size):
    kernel = create_triangular_kernel(size)
    assert kernel.shape == (size, size)
    assert kernel.sum() == pytest.approx(1.0, abs=1e-6)
    c = size // 2
    peak = kernel[c, c]
    assert np.sum(kernel == peak) == 1
    assert np.all(kernel <= peak)


def test_kernel_is_chebyshev_pyramid():
    kernel = create_triangular_kernel(5)
    raw = np.array([
        [1, 1, 1, 1, 1],
        [1, 2, 2, 2, 1],
        [1, 2, 3, 2, 1],
        [1, 2, 2, 2, 1],
        [1, 1, 1, 1, 1],
    ], dtype=np.float32)
    np.testing.assert_allclose(kernel, raw / 35.0, rtol=1e-6)


@pytest.mark.parametrize("size", [0, -3, 4])
def test_kernel_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        create_triangular_kernel(size)


def test_filter_bank_order_shape_and_input_untouched():
    noisy = salt_pepper_noise(synthetic_scene(), 0.2, rng=np.random.default_rng(2))
    before = noisy.copy()

    variants = run_filter_bank(noisy)

    assert [v.name for v in variants] == [
        "mean_3", "median_3", "triangular_3",
        "mean_5", "median_5", "triangular_5",
        "mean_7", "median_7", "triangular_7",
    ]
    for v in variants:
        assert v.image.shape == noisy.shape
        assert v.image.dtype == np.uint8
        assert v.image is not noisy
    assert np.array_equal(noisy, before)
    assert variants[0].label == "mean 3x3"


@pytest.mark.parametrize("size", [3, 5, 7])
def test_median_keeps_piecewise_constant_interior(size):
    img = np.full((20, 20), 50, dtype=np.uint8)
    img[:, 10:] = 200
    out = median_filter(img, size)
    assert np.array_equal(out[3:-3, 3:-3], img[3:-3, 3:-3])


def test_median_removes_isolated_impulse():
    img = np.full((9, 9), 100, dtype=np.uint8)
    img[4, 4] = 255
    img[2, 6] = 0
    assert np.all(median_filter(img, 3) == 100)


def test_mean_of_impulse():
    img = np.zeros((7, 7), dtype=np.uint8)
    img[3, 3] = 90
    out = mean_filter(img, 3)
    assert np.all(out[2:5, 2:5] == 10)
    assert out[0, 0] == 0


def test_triangular_of_impulse_follows_kernel():
    img = np.zeros((7, 7), dtype=np.uint8)
    img[3, 3] = 100
    out = triangular_filter(img, 3)
    expected = np.array([[10, 10, 10], [10, 20, 10], [10, 10, 10]], dtype=np.uint8)
    assert np.array_equal(out[2:5, 2:5], expected)
    assert out[0, 0] == 0


@pytest.mark.parametrize("filter_type", ["mean", "median", "triangular"])
def test_uniform_image_is_fixed_point(filter_type):
    img = np.full((12, 12), 128, dtype=np.uint8)
    for size in (3, 5, 7):
        assert np.array_equal(apply_filter(img, filter_type, size), img)


def test_unknown_filter_type():
    with pytest.raises(ValueError):
        apply_filter(np.zeros((4, 4), dtype=np.uint8), "gaussian", 3)


def test_median_beats_noise_on_impulses():
    clean = synthetic_scene()
    noisy = salt_pepper_noise(clean, 0.1, rng=np.random.default_rng(42))
    assert compute_psnr(clean, median_filter(noisy, 3)) > compute_psnr(clean, noisy)
