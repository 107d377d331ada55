import cv2
import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


def checkerboard(rows=8, cols=8, block=2):
    """0/255 checkerboard made of block x block squares."""
    r = (np.arange(rows) // block)[:, None]
    c = (np.arange(cols) // block)[None, :]
    return np.where((r + c) % 2 == 0, 0, 255).astype(np.uint8)


def synthetic_scene(size=64):
    # horizontal gradient with a bright square, so filters and edges have work to do
    x = np.linspace(30, 200, size)
    img = np.tile(x, (size, 1))
    img[size // 4:size // 2, size // 4:size // 2] = 240
    return img.astype(np.uint8)


@pytest.fixture
def write_image(tmp_path):
    def _write(img, name="input.png"):
        path = tmp_path / name
        assert cv2.imwrite(str(path), img)
        return path
    return _write
