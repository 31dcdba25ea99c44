from pathlib import Path

import numpy as np
from PIL import Image

from ansiflip.errors import LoadError
from ansiflip.grid import Grid

# 6x6x6 colour cube of the 256-colour palette starts at index 16
CUBE_OFFSET = 16
CUBE_STEPS = 6
RED_MULTIPLIER = 36
GREEN_MULTIPLIER = 6
# Fully transparent pixels are painted with the base palette's white
TRANSPARENT_CODE = 15
ALPHA_THRESHOLD = 128


def _level(channel):
    return np.clip(channel * CUBE_STEPS // 256, 0, CUBE_STEPS - 1)


def quantize_rgb(r: int, g: int, b: int) -> int:
    """Map an 8-bit RGB triple to its 256-colour cube index."""
    return int(CUBE_OFFSET + RED_MULTIPLIER * _level(r) + GREEN_MULTIPLIER * _level(g) + _level(b))


def quantize_image(image: Image.Image) -> Grid:
    """Convert every pixel of an image to a palette code."""
    arr = np.asarray(image.convert("RGBA"), dtype=np.int64)
    levels = _level(arr[:, :, :3])
    codes = CUBE_OFFSET + RED_MULTIPLIER * levels[:, :, 0] + GREEN_MULTIPLIER * levels[:, :, 1] + levels[:, :, 2]
    codes = np.where(arr[:, :, 3] < ALPHA_THRESHOLD, TRANSPARENT_CODE, codes)
    return Grid(codes)


def image_to_grid(image: Image.Image | str | Path, width: int | None = None) -> Grid:
    if not isinstance(image, Image.Image):
        with Image.open(image) as opened:
            return image_to_grid(opened, width=width)

    if width is not None and image.width > width:
        scale = width / image.width
        height = max(1, int(image.height * scale))
        image = image.convert("RGBA").resize((width, height), Image.LANCZOS)

    return quantize_image(image)


def load_image_as_grid(path: str | Path, width: int | None = None) -> Grid:
    """Read an image file and quantize it, raising LoadError if it can't be decoded."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image_to_grid(image, width=width)
    except (OSError, Image.DecompressionBombError) as e:
        raise LoadError(f"Could not load image {path}: {e}") from e
