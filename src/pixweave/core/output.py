"""Fixed-capacity output image and persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from pixweave.core.errors import (
    BufferTooSmallError,
    IncompleteBufferError,
    SaveFailureError,
)

logger = logging.getLogger(__name__)

# Encoders that cannot store an alpha channel; alpha is dropped for these.
OPAQUE_FORMATS = frozenset({"JPEG", "MPO", "EPS", "PCX"})


@dataclass
class OutputImage:
    """Destination image whose buffer size is fixed at creation."""

    width: int
    height: int
    name: str
    data: bytes = field(default=b"", repr=False)

    @property
    def capacity(self) -> int:
        """Number of RGBA bytes the image holds."""
        return self.width * self.height * 4

    @property
    def is_complete(self) -> bool:
        """Check whether the buffer has been fully populated."""
        return len(self.data) == self.capacity

    def set_data(self, data: bytes) -> None:
        """Replace the buffer contents.

        Raises:
            BufferTooSmallError: If data exceeds the capacity; the current
                buffer is left unchanged
        """
        if len(data) > self.capacity:
            raise BufferTooSmallError(len(data), self.capacity)

        self.data = bytes(data)


def save_output(output: OutputImage, image_format: str) -> Path:
    """Encode an output image and write it to its destination.

    Args:
        output: Fully populated output image
        image_format: Pillow format identifier to encode with

    Returns:
        Path the image was written to

    Raises:
        IncompleteBufferError: If the buffer is not fully populated
        SaveFailureError: If encoding or writing fails
    """
    if not output.is_complete:
        raise IncompleteBufferError(len(output.data), output.capacity)

    path = Path(output.name)

    image = Image.frombytes("RGBA", (output.width, output.height), output.data)

    if image_format in OPAQUE_FORMATS:
        image = image.convert("RGB")

    try:
        image.save(path, format=image_format)
    except (OSError, ValueError, KeyError) as e:
        raise SaveFailureError(path, e) from e

    logger.info("Saved %dx%d %s image to %s", output.width, output.height, image_format, path)
    return path
