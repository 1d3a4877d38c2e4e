# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def save_image(rgb8: np.ndarray, path: str) -> str:
    """
    Write an 8-bit (height x width x 3) image. The format follows the file
    extension (jpg, png, bmp, ppm, ...).

    Raises:
        FileNotFoundError: If the target directory doesn't exist
        ValueError: If Pillow doesn't know the extension
    """
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")

    image = Image.fromarray(np.ascontiguousarray(rgb8, dtype=np.uint8))
    image.save(path)
    logger.info("Wrote %dx%d image to %s", image.width, image.height, path)
    return path


def load_image(path: str) -> np.ndarray:
    """
    Read an image file back as an 8-bit (height x width x 3) RGB array.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    with Image.open(path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return np.array(img)
