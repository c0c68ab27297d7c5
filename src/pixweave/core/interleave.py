"""Pixel interleaving of two equally sized RGBA images.

Pixels are taken alternately from each source in row-major order: pixel 0
from the first image, pixel 1 from the second, pixel 2 from the first, and
so on. In terms of a flat RGBA buffer, the 4-byte group starting at byte
offset ``i`` comes from the first buffer when ``i % 8 == 0`` and from the
second otherwise.

The combine pipeline works on pixel grids through ``interleave_grids``.
``alternate_pixels`` is the byte-level equivalent for callers holding raw
RGBA buffers; both share the same alternation and must agree byte for byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from numpy.typing import NDArray

CHANNELS = 4


def _alternate(
    pixels1: NDArray[np.uint8], pixels2: NDArray[np.uint8]
) -> NDArray[np.uint8]:
    """Interleave two (N, 4) pixel arrays by row parity."""
    combined = np.empty_like(pixels1)
    combined[0::2] = pixels1[0::2]
    combined[1::2] = pixels2[1::2]
    return combined


def alternate_pixels(buf1: bytes, buf2: bytes) -> bytes:
    """Interleave two flat RGBA buffers pixel by pixel.

    Args:
        buf1: RGBA bytes supplying even-indexed pixels
        buf2: RGBA bytes supplying odd-indexed pixels

    Returns:
        Buffer of the same length as the inputs

    Raises:
        IndexError: If the buffers differ in length or are not made of
            whole pixels
    """
    if len(buf1) != len(buf2):
        raise IndexError(
            f"Pixel buffers differ in length: {len(buf1)} != {len(buf2)}"
        )
    if len(buf1) % CHANNELS:
        raise IndexError(f"Buffer length {len(buf1)} is not a multiple of {CHANNELS}")

    pixels1 = np.frombuffer(buf1, dtype=np.uint8).reshape(-1, CHANNELS)
    pixels2 = np.frombuffer(buf2, dtype=np.uint8).reshape(-1, CHANNELS)
    return _alternate(pixels1, pixels2).tobytes()


def interleave_grids(
    grid1: NDArray[np.uint8], grid2: NDArray[np.uint8]
) -> NDArray[np.uint8]:
    """Interleave two (height, width, 4) pixel grids.

    The pixel at row ``y``, column ``x`` has row-major index
    ``p = y * width + x``; it is taken from ``grid1`` when ``p`` is even and
    from ``grid2`` when ``p`` is odd. With an odd width the pattern therefore
    shifts by one column on every row.

    Raises:
        IndexError: If the grids differ in shape or are not RGBA
    """
    if grid1.shape != grid2.shape:
        raise IndexError(f"Pixel grids differ in shape: {grid1.shape} != {grid2.shape}")
    if grid1.ndim != 3 or grid1.shape[2] != CHANNELS:
        raise IndexError(f"Expected (height, width, {CHANNELS}) grids, got {grid1.shape}")

    height, width, _ = grid1.shape
    combined = _alternate(
        grid1.reshape(-1, CHANNELS), grid2.reshape(-1, CHANNELS)
    )
    return combined.reshape(height, width, CHANNELS)


def to_rgba_grid(image: Image.Image) -> NDArray[np.uint8]:
    """Convert a Pillow image to a (height, width, 4) uint8 array."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8)


def combine_images(image1: Image.Image, image2: Image.Image) -> bytes:
    """Interleave two equally sized images into flat RGBA bytes."""
    grid = interleave_grids(to_rgba_grid(image1), to_rgba_grid(image2))
    return grid.tobytes()
