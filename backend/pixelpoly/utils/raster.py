"""Decode raster images into cell grids with Pillow.

Pixels are laid out as columns of rows: x is the outer index, y the inner.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from pixelpoly.engine.grid import Grid

logger = logging.getLogger(__name__)


def image_to_columns(image: Image.Image, keep_alpha: bool = False) -> NDArray[np.uint8]:
    """RGBA array of shape (width, height, 4).

    Alpha is forced opaque unless ``keep_alpha``, so cells that differ only in
    transparency still match.
    """
    rgba = np.array(image.convert("RGBA"), dtype=np.uint8)  # (height, width, 4)
    columns = np.ascontiguousarray(rgba.transpose(1, 0, 2))
    if not keep_alpha:
        columns[:, :, 3] = 255
    return columns


def grid_from_image(image: Image.Image, keep_alpha: bool = False) -> Grid:
    return Grid(image_to_columns(image, keep_alpha=keep_alpha))


def decode_grid(data: bytes, keep_alpha: bool = False) -> Grid:
    """Decode encoded image bytes (PNG, GIF, ...) into a grid."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            grid = grid_from_image(image, keep_alpha=keep_alpha)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"could not decode image: {e}") from e
    logger.debug("Decoded %dx%d image", grid.column_count, grid.row_count)
    return grid


def load_grid(path: str | Path, keep_alpha: bool = False) -> Grid:
    """Read an image file into a grid."""
    path = Path(path)
    return decode_grid(path.read_bytes(), keep_alpha=keep_alpha)


def grid_to_image(grid: Grid) -> Image.Image:
    """Inverse of :func:`grid_from_image`, ignoring consumption."""
    return Image.fromarray(np.ascontiguousarray(grid.colors.transpose(1, 0, 2)))
