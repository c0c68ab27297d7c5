"""Bring two images to common dimensions."""

from __future__ import annotations

import logging
from typing import Literal

from PIL import Image

logger = logging.getLogger(__name__)

# Triangle filter; not configurable.
RESAMPLE_FILTER = Image.Resampling.BILINEAR

Dimensions = tuple[int, int]


def smallest_dimensions(dim1: Dimensions, dim2: Dimensions) -> Dimensions:
    """Pick the (width, height) pair with fewer pixels.

    Equal pixel counts resolve to the second pair.
    """
    pix1 = dim1[0] * dim1[1]
    pix2 = dim2[0] * dim2[1]

    if pix1 < pix2:
        return dim1
    return dim2


def resize_to(image: Image.Image, dimensions: Dimensions) -> Image.Image:
    """Resize an image to exact dimensions with the fixed filter.

    The image is converted to RGBA first so palette and bilevel images are
    filtered rather than sampled.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return image.resize(dimensions, RESAMPLE_FILTER)


def standardize_size(
    image1: Image.Image,
    image2: Image.Image,
) -> tuple[Image.Image, Image.Image, Literal["image1", "image2"] | None]:
    """Resize one image so both share the smaller dimensions.

    Args:
        image1: First image
        image2: Second image

    Returns:
        Tuple of (image1, image2, resized) where resized names the input
        that was resampled, or is None when both already matched. Images
        that were not resized are returned as the same objects.
    """
    target = smallest_dimensions(image1.size, image2.size)
    logger.info("Width: %d, Height: %d", *target)

    if image1.size == target and image2.size == target:
        return image1, image2, None

    if image2.size == target:
        return resize_to(image1, target), image2, "image1"

    return image1, resize_to(image2, target), "image2"
