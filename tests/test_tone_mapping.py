import logging
import math

import numpy as np
import pytest

from core.vector import Vec3, ONES, ZERO
from renderer.image_io import load_image, save_image
from renderer.tone_mapping import grid_to_array, pack_rgb, to_rgb8


def test_to_rgb8_quantizes_with_floor():
    grid = [
        [ONES, ZERO, Vec3(0.5, 0.5, 0.5)],
        [Vec3(0.25, 0.75, 1.0), Vec3(0.999, 0.001, 0.1), Vec3(0.0, 1.0, 0.0)],
    ]
    rgb8 = to_rgb8(grid)

    assert rgb8.dtype == np.uint8
    assert rgb8.shape == (2, 3, 3)
    assert rgb8[0].tolist() == [[255, 255, 255], [0, 0, 0], [127, 127, 127]]
    assert rgb8[1].tolist() == [[63, 191, 255], [255, 0, 25], [0, 255, 0]]


def test_to_rgb8_handles_out_of_range_and_nan(caplog):
    grid = [[Vec3(math.nan, 0.5, math.inf), Vec3(1.5, -0.2, 0.999)]]

    with caplog.at_level(logging.WARNING, logger="renderer.tone_mapping"):
        rgb8 = to_rgb8(grid)

    assert rgb8.tolist() == [[[0, 127, 0], [255, 0, 255]]]
    assert "2 non-finite" in caplog.text
    assert "2 color channels outside [0, 1] clipped" in caplog.text


def test_to_rgb8_in_range_is_quiet(caplog):
    with caplog.at_level(logging.WARNING, logger="renderer.tone_mapping"):
        to_rgb8([[ONES, ZERO, Vec3(0.5, 0.999, 0.001)]])
    assert caplog.text == ""


def test_grid_to_array():
    array = grid_to_array([[Vec3(1, 2, 3)], [Vec3(4, 5, 6)]])
    assert array.shape == (2, 1, 3)
    assert array[1, 0].tolist() == [4.0, 5.0, 6.0]


def test_pack_rgb():
    rgb8 = np.array([[[255, 0, 0], [0, 255, 0]],
                     [[0, 0, 255], [1, 2, 3]]], dtype=np.uint8)
    packed = pack_rgb(rgb8)

    assert packed.dtype == np.uint32
    assert packed.tolist() == [[0xFF0000, 0x00FF00], [0x0000FF, 0x010203]]


def test_save_and_load_png(tmp_path):
    rgb8 = np.zeros((4, 6, 3), dtype=np.uint8)
    rgb8[0, :, 2] = 255
    rgb8[3, 5] = (10, 20, 30)
    path = str(tmp_path / "image.png")

    assert save_image(rgb8, path) == path
    np.testing.assert_array_equal(load_image(path), rgb8)


def test_save_jpeg(tmp_path):
    rgb8 = np.full((10, 20, 3), 128, dtype=np.uint8)
    path = str(tmp_path / "image.jpg")

    save_image(rgb8, path)
    assert load_image(path).shape == (10, 20, 3)


def test_save_into_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_image(np.zeros((2, 2, 3), dtype=np.uint8), str(tmp_path / "missing" / "out.png"))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(str(tmp_path / "nothing.png"))
