#!/usr/bin/env python3
# ascii_forge/rendering/sampler.py
"""
Down-sample a raster image onto the character cell grid.

Glyph cells are roughly twice as tall as wide, so the grid height is squeezed
by a height factor: 0.55 for plain text output, 0.60 for colored output which
is shown with tighter line spacing.
"""

from __future__ import annotations

import io
import math
import os
from typing import BinaryIO, Optional, Union

import numpy as np
from PIL import Image

from ascii_forge.errors import ImageDecodeError

__all__ = [
    "sample_image",
    "decode_image",
    "grid_height",
    "MONO_HEIGHT_FACTOR",
    "COLOR_HEIGHT_FACTOR",
    "RESAMPLE",
]

MONO_HEIGHT_FACTOR = 0.55
COLOR_HEIGHT_FACTOR = 0.60

RESAMPLE = {
    "nearest": Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic": Image.BICUBIC,
    "lanczos": Image.LANCZOS,
}

ImageSource = Union[Image.Image, bytes, str, os.PathLike, BinaryIO]


def decode_image(source: ImageSource) -> Image.Image:
    """Open and fully decode an image. Pillow images are loaded in place."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        img = source if isinstance(source, Image.Image) else Image.open(source)
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Cannot decode image: {e}") from e
    return img


def grid_height(src_w: int, src_h: int, width: int, height_factor: float) -> int:
    return math.floor(width * (src_h / src_w) * height_factor)


def sample_image(
    image: ImageSource,
    width: int,
    color_mode: bool = False,
    height_factor: Optional[float] = None,
    resample: str = "bilinear",
) -> np.ndarray:
    """
    Resample image to width x height RGBA samples.
    Returns a uint8 array shaped (height, width, 4); height may be 0 for
    very wide images.
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(f"width must be a positive integer, got {width!r}")
    if resample not in RESAMPLE:
        raise ValueError(f"Unknown resample filter {resample!r}")

    img = decode_image(image)
    if img.width < 1 or img.height < 1:
        raise ImageDecodeError("Image has no pixels")

    if height_factor is None:
        height_factor = COLOR_HEIGHT_FACTOR if color_mode else MONO_HEIGHT_FACTOR
    height = grid_height(img.width, img.height, width, height_factor)
    if height < 1:
        return np.zeros((0, width, 4), dtype=np.uint8)

    if img.mode != "RGBA":
        img = img.convert("RGBA")
    if img.width != width or img.height != height:
        img = img.resize((width, height), RESAMPLE[resample])
    return np.asarray(img, dtype=np.uint8)
