"""
Module used to read images into sample grids
"""

import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import InputError
from utils.grid import Grid

logger = logging.getLogger(__name__)


def load_grid(path: str | os.PathLike) -> Grid:
    """Decodes an image file into a grid of 8-bit greyscale samples."""
    try:
        with Image.open(path) as image:
            image.load()
            logger.debug(f"Decoded {path}: {image.size[0]}x{image.size[1]} {image.mode}")
            if image.mode.startswith("I"):
                # integer modes hold 16-bit samples; keep their high byte
                wide = np.clip(np.asarray(image, dtype=np.int64), 0, 0xFFFF)
                samples = (wide >> 8).astype(np.uint8)
            else:
                samples = np.asarray(image.convert("L"), dtype=np.uint8)
    except FileNotFoundError as error:
        raise InputError(f"No such image: {path}") from error
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as error:
        raise InputError(f"Cannot decode {path}: {error}") from error

    if samples.size == 0:
        raise InputError(f"Image {path} is empty")
    return Grid.from_array(samples)


__all__ = ["load_grid"]
