# renderer/tone_mapping.py
import logging
from typing import List

import numpy as np
from numba import njit

from core.vector import Vec3

logger = logging.getLogger(__name__)


def grid_to_array(grid: List[List[Vec3]]) -> np.ndarray:
    """
    Convert a grid of colors (rows of Vec3) into a (height x width x 3) float array.
    """
    return np.array([[tuple(c) for c in row] for row in grid], dtype=np.float64)


def to_rgb8(grid: List[List[Vec3]]) -> np.ndarray:
    """
    Quantize linear colors in [0, 1] to 8 bits per channel with floor(255.99 * c).

    NaN or infinite channels are written as 0, and channels outside [0, 1] are
    clipped so one channel cannot bleed into another. Both are reported.
    """
    colors = grid_to_array(grid)
    finite = np.isfinite(colors)
    bad = colors.size - int(np.count_nonzero(finite))
    if bad:
        logger.warning("%d non-finite color channels written as 0", bad)
    scaled = np.floor(255.99 * np.where(finite, colors, 0.0))
    clipped = int(np.count_nonzero((scaled < 0) | (scaled > 255)))
    if clipped:
        logger.warning("%d color channels outside [0, 1] clipped", clipped)
    return np.clip(scaled, 0, 255).astype(np.uint8)


@njit
def _pack_kernel(rgb8, out):
    for y in range(rgb8.shape[0]):
        for x in range(rgb8.shape[1]):
            r = np.uint32(rgb8[y, x, 0])
            g = np.uint32(rgb8[y, x, 1])
            b = np.uint32(rgb8[y, x, 2])
            out[y, x] = (r << np.uint32(16)) | (g << np.uint32(8)) | b


def pack_rgb(rgb8: np.ndarray) -> np.ndarray:
    """
    Pack an 8-bit (height x width x 3) image into 0xRRGGBB integers.
    """
    rgb8 = np.ascontiguousarray(rgb8, dtype=np.uint8)
    out = np.zeros(rgb8.shape[:2], dtype=np.uint32)
    _pack_kernel(rgb8, out)
    return out
