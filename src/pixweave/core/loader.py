"""Load images from disk together with their format tag."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from pixweave.core.errors import (
    DecodeFailureError,
    DifferentImageFormatsError,
    UnreadablePathError,
    UnrecognizedFormatError,
)

logger = logging.getLogger(__name__)


@dataclass
class LoadedImage:
    """A decoded image and the format it was stored in."""

    path: Path
    image: Image.Image
    format: str

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.image.size


def format_from_extension(path: str | Path) -> str | None:
    """Look up the Pillow format registered for a path's extension.

    Args:
        path: Image file path

    Returns:
        Pillow format identifier (e.g. "PNG"), or None if the extension is
        missing or unknown
    """
    suffix = Path(path).suffix.lower()
    if not suffix:
        return None
    return Image.registered_extensions().get(suffix)


def load_image(path: str | Path) -> LoadedImage:
    """Read and decode an image file.

    The format is chosen from the file extension and decoding is restricted
    to that format, so a file whose contents disagree with its name fails
    to decode.

    Args:
        path: Image file path

    Returns:
        LoadedImage with pixel data fully loaded

    Raises:
        UnreadablePathError: If the file cannot be opened
        UnrecognizedFormatError: If no format is registered for the extension
        DecodeFailureError: If the contents cannot be decoded
    """
    path = Path(path)

    try:
        fp = open(path, "rb")
    except OSError as e:
        raise UnreadablePathError(path, e) from e

    with fp:
        image_format = format_from_extension(path)
        if image_format is None:
            raise UnrecognizedFormatError(path)

        try:
            image = Image.open(fp, formats=[image_format])
            image.load()
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeFailureError(path, e) from e

    logger.debug(
        "Loaded %s (%s, %dx%d, mode %s)",
        path, image_format, image.width, image.height, image.mode,
    )
    return LoadedImage(path=path, image=image, format=image_format)


def check_formats(first: LoadedImage, second: LoadedImage) -> str:
    """Ensure both images share a format.

    Returns:
        The common format identifier

    Raises:
        DifferentImageFormatsError: If the formats differ
    """
    if first.format != second.format:
        raise DifferentImageFormatsError(first.format, second.format)
    return first.format
