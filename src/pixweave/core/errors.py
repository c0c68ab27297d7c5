"""Error taxonomy for the combine pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pixweave.schemas.status import PipelineStage


class ImageDataError(Exception):
    """Base class for every terminal failure of a combine run.

    Attributes:
        step: Short name of the failing step, shown to the user
        exit_code: Process exit code the CLI uses for this failure
        cause: Underlying I/O or codec error, when there is one
        stage: Last pipeline stage reached before the failure, filled in
            by the pipeline
    """

    step = "combine"
    exit_code = 1

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.stage: PipelineStage | None = None


class UnreadablePathError(ImageDataError):
    """Input file could not be opened."""

    step = "read"
    exit_code = 2

    def __init__(self, path: str | Path, cause: BaseException | None = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Unable to read image from {path}{detail}", cause)
        self.path = Path(path)


class DifferentImageFormatsError(ImageDataError):
    """The two inputs are encoded in different formats."""

    step = "format mismatch"
    exit_code = 3

    def __init__(self, first: str, second: str):
        super().__init__(f"Images have different formats: {first} and {second}")
        self.formats = (first, second)


class DecodeFailureError(ImageDataError):
    """Input file could not be decoded."""

    step = "decode"
    exit_code = 4

    def __init__(self, path: str | Path, cause: BaseException | None = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Unable to decode image {path}{detail}", cause)
        self.path = Path(path)


class BufferTooSmallError(ImageDataError):
    """Output data exceeds the capacity of the output image."""

    step = "buffer-size"
    exit_code = 5

    def __init__(self, size: int, capacity: int):
        super().__init__(
            f"Output buffer too small: {size} bytes exceed capacity of {capacity}"
        )
        self.size = size
        self.capacity = capacity


class IncompleteBufferError(ImageDataError):
    """Output data was not fully populated before saving."""

    step = "buffer-size"
    exit_code = 5

    def __init__(self, size: int, capacity: int):
        super().__init__(
            f"Output buffer incomplete: {size} of {capacity} bytes populated"
        )
        self.size = size
        self.capacity = capacity


class SaveFailureError(ImageDataError):
    """Combined image could not be encoded or written."""

    step = "save"
    exit_code = 6

    def __init__(self, path: str | Path, cause: BaseException | None = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Unable to save image to {path}{detail}", cause)
        self.path = Path(path)


class UnrecognizedFormatError(ImageDataError):
    """No image format is registered for the file's extension."""

    step = "format detection"
    exit_code = 7

    def __init__(self, path: str | Path):
        super().__init__(f"Unable to determine image format of {path}")
        self.path = Path(path)


class StateTransitionError(Exception):
    """Error raised when an invalid pipeline transition is attempted."""

    pass
